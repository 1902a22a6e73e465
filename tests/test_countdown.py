from __future__ import annotations

import re
import time
from datetime import datetime, timezone

import pytest

from storefront.core.countdown import (
    CLOSED,
    format_countdown,
    parse_deadline,
    render_countdown,
)


NOW_MS = int(datetime(2030, 1, 1, 12, 0, 0).timestamp() * 1000)


def test_far_deadline_has_day_prefix() -> None:
    text = render_countdown("2099-01-01T00:00:00", int(time.time() * 1000))
    assert re.fullmatch(r"\d+:\d{2}:\d{2}:\d{2}", text)


def test_past_deadline_is_closed() -> None:
    assert render_countdown("2000-01-01T00:00:00", int(time.time() * 1000)) == CLOSED


def test_exact_decomposition_with_days() -> None:
    assert render_countdown("2030-01-02T13:04:05", NOW_MS) == "1:01:04:05"


def test_under_a_day_drops_day_field() -> None:
    assert render_countdown("2030-01-01T13:04:05", NOW_MS) == "01:04:05"


def test_one_second_later_is_smaller() -> None:
    assert render_countdown("2030-01-01T13:04:05", NOW_MS + 1000) == "01:04:04"


def test_deadline_equal_to_now_is_closed() -> None:
    assert render_countdown("2030-01-01T12:00:00", NOW_MS) == CLOSED


def test_explicit_offset_is_honored() -> None:
    now_ms = int(datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp() * 1000)
    assert render_countdown("2030-01-01T12:00:10+00:00", now_ms) == "00:00:10"


def test_zulu_suffix_is_utc() -> None:
    now_ms = int(datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp() * 1000)
    assert render_countdown("2030-01-01T12:00:10Z", now_ms) == "00:00:10"


def test_bare_date_is_utc_midnight() -> None:
    expected = int(datetime(2099, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
    assert parse_deadline("2099-01-01") == expected


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2030-13-45T99:00:00", None, 12345])
def test_unparsable_deadline_is_closed(value) -> None:
    assert parse_deadline(value) is None
    assert render_countdown(value, NOW_MS) == CLOSED


@pytest.mark.parametrize(
    "distance_ms, expected",
    [
        (-5, CLOSED),
        (0, CLOSED),
        (999, "00:00:00"),
        (59_000, "00:00:59"),
        (3_600_000, "01:00:00"),
        (86_400_000, "1:00:00:00"),
        (12 * 86_400_000 + 5_000, "12:00:00:05"),
    ],
)
def test_format_countdown(distance_ms: int, expected: str) -> None:
    assert format_countdown(distance_ms) == expected
