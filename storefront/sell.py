from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from storefront.core.local_store import LocalStore
from storefront.core.models import SOLD_BEFORE_KEY
from storefront.tools.auction_feed import AuctionFeed


GIVEAWAY_MESSAGE = "Thank you for your first listing! You have been entered into our giveaway."


@dataclass
class SellResult:
    auction: Dict[str, Any]
    message: str
    giveaway_message: Optional[str] = None


def register_first_listing(local_store: LocalStore) -> bool:
    """Flag the seller on their first submission; True only that first time."""
    if local_store.get_item(SOLD_BEFORE_KEY):
        return False
    local_store.set_item(SOLD_BEFORE_KEY, "true")
    return True


async def submit_listing(
    feed: AuctionFeed,
    local_store: LocalStore,
    section: str,
    title: str,
    bid: str,
    deadline: str,
) -> SellResult:
    """Post a new listing. Raises ListingRejected if the server refuses it.

    The giveaway entry is recorded on submission, before the server answers.
    """
    first = register_first_listing(local_store)
    body = await feed.create_auction(section, title, bid, deadline)
    return SellResult(
        auction=body.get("auction", {}),
        message=body.get("message", ""),
        giveaway_message=GIVEAWAY_MESSAGE if first else None,
    )
