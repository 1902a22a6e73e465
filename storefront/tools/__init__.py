from storefront.tools.auction_feed import AuctionFeed, ListingRejected

__all__ = ["AuctionFeed", "ListingRejected"]
