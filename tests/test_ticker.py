from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from storefront.board import AuctionBoard, AuctionCard
from storefront.core.countdown import CLOSED
from storefront.ticker import CountdownTicker


START = datetime(2030, 1, 1, 12, 0, 0).timestamp()


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now
        self.reads = 0

    def __call__(self) -> float:
        self.reads += 1
        return self.now


def make_board(*deadlines) -> AuctionBoard:
    return AuctionBoard(
        containers={"trending-cards": [AuctionCard(title="Lot", deadline=d) for d in deadlines]}
    )


def test_tick_rereads_clock_each_time() -> None:
    board = make_board("2030-01-01T12:00:10")
    clock = FakeClock(START)
    ticker = CountdownTicker(board, clock=clock)

    ticker.tick()
    assert board.cards("trending-cards")[0].countdown == "00:00:10"
    clock.now += 1
    ticker.tick()
    assert board.cards("trending-cards")[0].countdown == "00:00:09"
    assert clock.reads == 2


def test_closed_stays_closed_when_clock_moves_back() -> None:
    board = make_board("2030-01-01T12:00:10")
    clock = FakeClock(START + 60)
    ticker = CountdownTicker(board, clock=clock)

    ticker.tick()
    assert board.cards("trending-cards")[0].countdown == CLOSED
    clock.now = START
    ticker.tick()
    assert board.cards("trending-cards")[0].countdown == CLOSED


def test_new_deadline_reopens_countdown() -> None:
    board = make_board("2030-01-01T11:00:00")
    ticker = CountdownTicker(board, clock=FakeClock(START))
    ticker.tick()
    card = board.cards("trending-cards")[0]
    assert card.countdown == CLOSED

    card.deadline = "2030-01-01T13:00:00"
    ticker.tick()
    assert card.countdown == "01:00:00"


def test_cards_without_deadline_are_skipped() -> None:
    board = make_board(None, "garbage")
    board.cards("trending-cards")[0].countdown = "untouched"
    CountdownTicker(board, clock=FakeClock(START)).tick()
    first, second = board.cards("trending-cards")
    assert first.countdown == "untouched"
    assert second.countdown == CLOSED


@pytest.mark.asyncio
async def test_run_ticks_until_cancelled() -> None:
    board = make_board("2030-01-01T12:00:05")
    clock = FakeClock(START)
    task = asyncio.create_task(CountdownTicker(board, clock=clock, interval=0.01).run())
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert board.cards("trending-cards")[0].countdown == "00:00:05"
    assert clock.reads >= 2
