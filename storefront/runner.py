from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from config.settings import get_settings
from storefront.board import AuctionBoard
from storefront.core.local_store import LocalStore
from storefront.merger import load_board
from storefront.ticker import CountdownTicker
from storefront.tools.auction_feed import AuctionFeed


logger = logging.getLogger("mvp_auctions.storefront")


async def run_storefront(
    board: Optional[AuctionBoard] = None,
    feed: Optional[AuctionFeed] = None,
    local_store: Optional[LocalStore] = None,
) -> None:
    """Keep one storefront view alive until the task is cancelled."""
    settings = get_settings()
    board = board or AuctionBoard.default()
    feed = feed or AuctionFeed(settings.api_base_url)
    local_store = local_store or LocalStore(settings.local_store_path)

    ticker = CountdownTicker(board, interval=settings.countdown_interval)
    ticking = asyncio.create_task(ticker.run())
    try:
        await load_board(board, feed, local_store)
        for section, cards in board.snapshot().items():
            for card in cards:
                logger.info("%s | %s | %s | %s", section, card["title"], card["bid"], card["countdown"])
        await ticking
    finally:
        ticking.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await ticking
        await feed.close()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
    try:
        asyncio.run(run_storefront())
    except KeyboardInterrupt:
        logger.info("Storefront stopped")


if __name__ == "__main__":
    main()
