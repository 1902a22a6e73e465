from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional


CLOSED = "Closed"

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_deadline(value: Any) -> Optional[int]:
    """Return the deadline as epoch milliseconds, or ``None`` if unparsable.

    A timestamp without an offset is read in the local timezone; one with an
    explicit offset (or ``Z``) is honored as given. A bare date means midnight
    UTC, the way browsers read it.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return None
    if DATE_ONLY.fullmatch(text):
        moment = moment.replace(tzinfo=timezone.utc)
    try:
        # Naive datetimes resolve against local time here, DST included.
        return int(moment.timestamp() * 1000)
    except (OverflowError, OSError, ValueError):
        return None


def format_countdown(distance_ms: int) -> str:
    if distance_ms <= 0:
        return CLOSED
    days = distance_ms // MS_PER_DAY
    hours = (distance_ms % MS_PER_DAY) // MS_PER_HOUR
    minutes = (distance_ms % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (distance_ms % MS_PER_MINUTE) // MS_PER_SECOND

    clock = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if days > 0:
        return f"{days}:{clock}"
    return clock


def render_countdown(deadline: Any, now_ms: int) -> str:
    deadline_ms = parse_deadline(deadline)
    if deadline_ms is None:
        return CLOSED
    return format_countdown(deadline_ms - now_ms)
