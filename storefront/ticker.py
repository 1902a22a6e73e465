from __future__ import annotations

import asyncio
import time
from typing import Callable

from storefront.board import AuctionBoard, AuctionCard
from storefront.core.countdown import CLOSED, render_countdown


class CountdownTicker:
    """Rewrites every card's countdown text from a fresh clock read.

    ``clock`` returns epoch seconds. Elapsed time is never accumulated, so a
    late tick simply lands on the right value the next time round.
    """

    def __init__(
        self,
        board: AuctionBoard,
        clock: Callable[[], float] = time.time,
        interval: float = 1.0,
    ) -> None:
        self.board = board
        self.clock = clock
        self.interval = interval

    def _update(self, card: AuctionCard, now_ms: int) -> None:
        if not card.deadline:
            return
        # Closed is terminal until the deadline attribute itself changes.
        if card.closed_deadline == card.deadline:
            card.countdown = CLOSED
            return
        card.countdown = render_countdown(card.deadline, now_ms)
        if card.countdown == CLOSED:
            card.closed_deadline = card.deadline

    def tick(self) -> None:
        now_ms = int(self.clock() * 1000)
        for card in self.board.all_cards():
            self._update(card, now_ms)

    async def run(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self.interval)
