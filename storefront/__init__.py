"""Storefront side of MVP Auctions: cards, countdowns and data overlays."""
