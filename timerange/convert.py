"""Named constructors, one per supported input shape.

``Interval`` itself only accepts timezone-aware datetimes. Callers holding
epoch numbers, calendar dates, ISO strings or serialized dicts pick the
matching function here instead of relying on runtime type sniffing.
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta, timezone
from numbers import Real
from typing import Any, Literal

from dateutil.parser import isoparse

from timerange.formatting import resolve_zone
from timerange.interval import Interval
from timerange.util import EPOCH

logger = logging.getLogger(__name__)


def from_interval(other: Interval) -> Interval:
    """Copy an existing interval."""
    if not isinstance(other, Interval):
        raise TypeError(
            f"from_interval() expects an Interval, got {type(other).__name__!r}"
        )
    return Interval.from_interval(other)


def from_datetimes(begin: datetime, end: datetime) -> Interval:
    """Build from aware datetimes in any zone; endpoints are stored as UTC."""
    return Interval(begin=begin, end=end)


def _epoch_offset(
    value: Any, edge: str, unit: Literal["milliseconds", "seconds"]
) -> datetime:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"Interval {edge} must be a number of {unit} since the Unix epoch.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    return EPOCH + timedelta(**{unit: float(value)})


def from_millis(begin: float, end: float) -> Interval:
    """Build from epoch milliseconds.

    Example:
        >>> from_millis(0, 10_000)
    """
    return Interval(
        begin=_epoch_offset(begin, "begin", "milliseconds"),
        end=_epoch_offset(end, "end", "milliseconds"),
    )


def from_timestamps(begin: float, end: float) -> Interval:
    """Build from epoch seconds (Unix timestamps)."""
    return Interval(
        begin=_epoch_offset(begin, "begin", "seconds"),
        end=_epoch_offset(end, "end", "seconds"),
    )


def _calendar_day(value: Any, edge: Literal["begin", "end"], tz: str) -> datetime:
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(
            f"from_dates() {edge} must be a date.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use from_datetimes() for datetime values"
        )
    # begin covers the whole first day, end the whole last day
    clock = time.min if edge == "begin" else time.max
    return datetime.combine(value, clock, tzinfo=resolve_zone(tz))


def from_dates(begin: date, end: date, tz: str = "UTC") -> Interval:
    """Build an interval covering whole calendar days in ``tz``.

    Args:
        begin: First day, included from midnight
        end: Last day, included up to its final microsecond
        tz: IANA timezone name (e.g., "UTC", "US/Pacific")

    Example:
        >>> from_dates(date(2025, 1, 1), date(2025, 1, 31), tz="Europe/London")
    """
    return Interval(
        begin=_calendar_day(begin, "begin", tz), end=_calendar_day(end, "end", tz)
    )


def _parse_iso(value: Any, edge: str) -> datetime:
    if not isinstance(value, str):
        raise TypeError(
            f"Interval {edge} must be an ISO-8601 string.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    try:
        parsed = isoparse(value)
    except ValueError as e:
        raise ValueError(
            f"Interval {edge} is not a valid ISO-8601 timestamp: {value!r}\n"
            f"Example: '2025-01-01T00:00:00.000Z'"
        ) from e
    if parsed.tzinfo is None:
        logger.debug("No offset in %r, assuming UTC", value)
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def from_iso(begin: str, end: str) -> Interval:
    """Build from ISO-8601 strings; strings without an offset are read as UTC."""
    return Interval(begin=_parse_iso(begin, "begin"), end=_parse_iso(end, "end"))


def from_dict(data: Mapping[str, Any]) -> Interval:
    """Rebuild an interval from ``Interval.to_dict()`` output.

    Each endpoint may be an ISO-8601 string or a number of epoch milliseconds.
    """
    if not isinstance(data, Mapping):
        raise TypeError(
            f"from_dict() expects a mapping with 'begin' and 'end' keys.\n"
            f"Got {type(data).__name__!r}: {data!r}"
        )
    missing = [key for key in ("begin", "end") if key not in data]
    if missing:
        raise ValueError(
            f"from_dict() is missing {', '.join(repr(k) for k in missing)}.\n"
            f"Got keys: {list(data)!r}\n"
            f"Example: {{'begin': '2025-01-01T00:00:00.000Z', 'end': 1735776000000}}"
        )

    def endpoint(edge: str) -> datetime:
        value = data[edge]
        if isinstance(value, str):
            return _parse_iso(value, edge)
        return _epoch_offset(value, edge, "milliseconds")

    return Interval(begin=endpoint("begin"), end=endpoint("end"))
