"""Utility constants and helpers for timerange.

Time unit constants represent durations as ``timedelta`` values.
Epoch conversions work in whole milliseconds.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

# Time unit constants
MILLISECOND = timedelta(milliseconds=1)
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_millis(instant: datetime) -> int:
    """Whole milliseconds between the Unix epoch and ``instant``."""
    return (instant - EPOCH) // MILLISECOND


def require_instant(value: Any, what: str) -> datetime:
    """Validate an endpoint and normalize it to UTC.

    Raises:
        TypeError: If ``value`` is not a datetime or is a naive datetime
    """
    if not isinstance(value, datetime):
        raise TypeError(
            f"Interval {what} must be a timezone-aware datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: convert other shapes first:\n"
            f"  from timerange import from_millis, from_timestamps, from_iso\n"
            f"  from_millis(0, 10_000)  # epoch milliseconds"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise TypeError(
            f"Interval {what} must be a timezone-aware datetime.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    return value.astimezone(timezone.utc)
