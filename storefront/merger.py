from __future__ import annotations

import asyncio
import json
import logging
from typing import Dict, List, Sequence

from storefront.board import AuctionBoard
from storefront.core.local_store import LocalStore
from storefront.core.models import SECTIONS, ListingOverlay, parse_overlays
from storefront.core.results import LoadResult, Outcome, SectionLoad, Source
from storefront.tools.auction_feed import AuctionFeed


logger = logging.getLogger("mvp_auctions.storefront")


def apply_auction_data(
    board: AuctionBoard, container_id: str, overlays: Sequence[ListingOverlay]
) -> int:
    """Copy overlay fields onto the cards of one container, by position.

    Overlay *i* updates card *i*; overlays beyond the rendered cards are
    dropped and nothing is inserted or reordered. Returns the number of cards
    touched.
    """
    cards = board.cards(container_id)
    touched = 0
    for idx, overlay in enumerate(overlays):
        if idx >= len(cards):
            break
        card = cards[idx]
        if overlay.title is not None:
            card.title = overlay.title
        if overlay.bid is not None:
            card.bid = overlay.bid
        if overlay.deadline:
            card.deadline = overlay.deadline
        touched += 1
    return touched


def read_local_overlay(local_store: LocalStore, section: str) -> LoadResult:
    raw = local_store.get_item(SECTIONS[section].storage_key)
    if raw is None:
        return LoadResult(Source.LOCAL, Outcome.MISSING)
    try:
        decoded = json.loads(raw)
    except ValueError as exc:
        return LoadResult(Source.LOCAL, Outcome.FALLBACK, error=str(exc))
    overlays = parse_overlays(decoded)
    if overlays is None:
        return LoadResult(Source.LOCAL, Outcome.FALLBACK, error="expected a JSON array")
    return LoadResult(Source.LOCAL, Outcome.APPLIED, listings=overlays)


def save_local_overlay(
    local_store: LocalStore, section: str, overlays: Sequence[ListingOverlay]
) -> None:
    payload: List[dict] = [overlay.model_dump(exclude_none=True) for overlay in overlays]
    local_store.set_item(SECTIONS[section].storage_key, json.dumps(payload))


def clear_local_overlay(local_store: LocalStore, section: str) -> None:
    """Drop a section's cached edits so the next load shows remote data only."""
    local_store.remove_item(SECTIONS[section].storage_key)


async def load_section(
    board: AuctionBoard, section: str, feed: AuctionFeed, local_store: LocalStore
) -> SectionLoad:
    """Remote data over the defaults, then cached edits over both."""
    container_id = SECTIONS[section].container_id

    remote = await feed.fetch_section(section)
    if remote.outcome is Outcome.APPLIED:
        apply_auction_data(board, container_id, remote.listings)

    local = read_local_overlay(local_store, section)
    if local.outcome is Outcome.APPLIED:
        apply_auction_data(board, container_id, local.listings)
    elif local.outcome is Outcome.FALLBACK:
        logger.warning("Ignoring cached %s overlay: %s", section, local.error)

    logger.info(
        "Loaded %s: remote=%s local=%s",
        section,
        remote.outcome.value,
        local.outcome.value,
    )
    return SectionLoad(section=section, remote=remote, local=local)


async def load_board(
    board: AuctionBoard, feed: AuctionFeed, local_store: LocalStore
) -> Dict[str, SectionLoad]:
    results = await asyncio.gather(
        *(load_section(board, section, feed, local_store) for section in SECTIONS)
    )
    return {result.section: result for result in results}
