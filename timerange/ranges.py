"""Intervals ending at a given instant and reaching back a fixed span.

Every helper takes the anchor ``now`` explicitly so results are reproducible;
when it is omitted the current UTC time is used. The returned interval always
runs forward: ``begin = now - span`` and ``end = now``.
"""

import logging
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from timerange.interval import Interval
from timerange.util import DAY, require_instant, utcnow

logger = logging.getLogger(__name__)

# relativedelta fields that shift an instant; the singular ones replace it
OFFSET_FIELDS = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "microseconds",
)


def _anchor(now: datetime | None) -> datetime:
    if now is None:
        now = utcnow()
        logger.debug("No anchor given, using current time %s", now)
    return require_instant(now, "anchor")


def ending_at(now: datetime | None, span: timedelta) -> Interval:
    """Return the interval of length ``span`` that ends at ``now``."""
    end = _anchor(now)
    return Interval(begin=end - span, end=end)


def last(now: datetime | None = None, **offset: int) -> Interval:
    """Return the interval reaching back a calendar offset from ``now``.

    Keyword arguments are relative ``dateutil.relativedelta`` offsets
    (``years`` through ``microseconds``), so month and year lengths follow
    the calendar.

    Raises:
        ValueError: If no offset is given, a field outside ``OFFSET_FIELDS``
            is passed, or the offset would put ``begin`` after ``now``

    Example:
        >>> last(months=3)
        >>> last(years=1, now=datetime(2025, 3, 1, tzinfo=timezone.utc))
    """
    if not offset:
        raise ValueError(
            f"last() requires at least one offset.\n"
            f"Example: last(months=3) or last(days=7, now=anchor)"
        )
    unknown = sorted(set(offset) - set(OFFSET_FIELDS))
    if unknown:
        raise ValueError(
            f"last() got unsupported offset {', '.join(unknown)}.\n"
            f"Valid offsets: {', '.join(OFFSET_FIELDS)}\n"
            f"Hint: use from_datetimes() to pin an absolute begin"
        )
    end = _anchor(now)
    begin = end - relativedelta(**offset)
    if begin > end:
        raise ValueError(
            f"last() offset must reach back in time, got {offset!r}.\n"
            f"Example: last(months=3), not last(months=-3)"
        )
    return Interval(begin=begin, end=end)


def last_day(now: datetime | None = None) -> Interval:
    return ending_at(now, DAY)


def last_seven_days(now: datetime | None = None) -> Interval:
    return ending_at(now, 7 * DAY)


def last_thirty_days(now: datetime | None = None) -> Interval:
    return ending_at(now, 30 * DAY)


def last_ninety_days(now: datetime | None = None) -> Interval:
    return ending_at(now, 90 * DAY)
