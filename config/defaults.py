"""Listings every fresh server process and storefront view starts from."""

from __future__ import annotations

from typing import Dict, List


DEFAULT_LISTINGS: Dict[str, List[Dict[str, str]]] = {
    "trending": [
        {"title": "Basketball Rookie Card", "bid": "$2,750", "deadline": "2025-08-01T20:00:00"},
        {"title": "Sports Card Collection Lot", "bid": "$1,150", "deadline": "2025-08-03T14:30:00"},
        {"title": "Memorabilia Bundle", "bid": "$3,600", "deadline": "2025-08-05T09:00:00"},
    ],
    "featured": [
        {"title": "Vintage Auctioneer Gavel", "bid": "$1,350", "deadline": "2025-08-10T12:00:00"},
        {"title": "Signed Basketball", "bid": "$2,900", "deadline": "2025-08-12T17:30:00"},
        {"title": "Autographed Baseball Collection", "bid": "$3,250", "deadline": "2025-08-14T15:45:00"},
    ],
}
