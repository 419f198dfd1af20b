import json
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any

from typing_extensions import override

from timerange import formatting
from timerange.util import MILLISECOND, require_instant, to_millis

logger = logging.getLogger(__name__)


def require_interval(value: Any, operation: str) -> "Interval":
    """Reject arguments that are not intervals before comparing endpoints."""
    if not isinstance(value, Interval):
        raise TypeError(
            f"Interval.{operation}() expects an Interval.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use contains() to test a single instant"
        )
    return value


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A closed span of time, ``begin`` and ``end`` both included.

    Endpoints are timezone-aware datetimes, stored in UTC. ``begin <= end`` is
    assumed by every predicate but not enforced: an inverted interval can be
    built, and ``extents``/``intersection`` are the only operations that come
    out well-formed regardless.
    """

    begin: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "begin", require_instant(self.begin, "begin"))
        object.__setattr__(self, "end", require_instant(self.end, "end"))
        if self.begin > self.end:
            logger.debug(
                "Inverted interval: begin %s is after end %s", self.begin, self.end
            )

    @classmethod
    def from_interval(cls, other: "Interval") -> "Interval":
        """Copy constructor."""
        return cls(begin=other.begin, end=other.end)

    # -- accessors --

    def duration(self) -> timedelta:
        """Signed length ``end - begin``."""
        return self.end - self.begin

    def duration_millis(self) -> int:
        return self.duration() // MILLISECOND

    def to_millis(self) -> tuple[int, int]:
        return to_millis(self.begin), to_millis(self.end)

    def set_begin(self, begin: datetime) -> "Interval":
        """Return a copy with ``begin`` replaced. ``self`` is unchanged."""
        return replace(self, begin=begin)

    def set_end(self, end: datetime) -> "Interval":
        """Return a copy with ``end`` replaced. ``self`` is unchanged."""
        return replace(self, end=end)

    # -- relations --

    def equals(self, other: "Interval") -> bool:
        return self == other

    def contains(self, other: "Interval | datetime") -> bool:
        """True if ``other`` lies entirely inside this interval.

        ``other`` may be a single instant or another interval. Both boundaries
        are inclusive.

        Raises:
            TypeError: If ``other`` is neither an Interval nor an aware datetime
        """
        if isinstance(other, Interval):
            return self.begin <= other.begin and self.end >= other.end
        instant = require_instant(other, "contains() argument")
        return self.begin <= instant <= self.end

    def within(self, other: "Interval") -> bool:
        """True if this interval lies entirely inside ``other``."""
        other = require_interval(other, "within")
        return self.begin >= other.begin and self.end <= other.end

    def overlaps(self, other: "Interval") -> bool:
        """True if exactly one endpoint of ``other`` falls inside this interval.

        Note: this is not set overlap. When one interval fully contains the
        other, both endpoints (or neither) fall inside, so the result is
        False. Use ``intersects`` to ask whether any instant is shared.

        Example:
            >>> a = from_millis(0, 10)
            >>> a.overlaps(from_millis(5, 15))
            True
            >>> a.overlaps(from_millis(2, 8))
            False
        """
        other = require_interval(other, "overlaps")
        return self.contains(other.begin) != self.contains(other.end)

    def intersects(self, other: "Interval") -> bool:
        """True if the two intervals share at least one instant."""
        other = require_interval(other, "intersects")
        return not self.disjoint(other)

    def disjoint(self, other: "Interval") -> bool:
        """True if no instant is shared. Touching at one boundary is not disjoint."""
        other = require_interval(other, "disjoint")
        return self.end < other.begin or self.begin > other.end

    # -- combinators --

    def extents(self, other: "Interval") -> "Interval":
        """Smallest interval covering both ``self`` and ``other``, gaps included."""
        other = require_interval(other, "extents")
        return Interval(
            begin=min(self.begin, other.begin), end=max(self.end, other.end)
        )

    def intersection(self, other: "Interval") -> "Interval | None":
        """The span shared by both intervals, or None if they are disjoint."""
        other = require_interval(other, "intersection")
        if self.disjoint(other):
            return None
        return Interval(
            begin=max(self.begin, other.begin), end=min(self.end, other.end)
        )

    # -- serialization --

    def to_dict(self) -> dict[str, str]:
        return {"begin": formatting.iso(self.begin), "end": formatting.iso(self.end)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @override
    def __str__(self) -> str:
        return self.to_json()

    def to_local_string(self, tz: str | None = None) -> str:
        """Both endpoints in ``tz`` (IANA name), or the process local zone."""
        return formatting.bracketed(
            formatting.local_string(self.begin, tz),
            formatting.local_string(self.end, tz),
        )

    def to_utc_string(self) -> str:
        return formatting.bracketed(
            formatting.utc_string(self.begin), formatting.utc_string(self.end)
        )

    def humanize(self, tz: str | None = None) -> str:
        """Absolute range, e.g. ``Jan 1, 2015 12:00:00 am to Jan 2, 2015 12:00:00 pm``.

        Endpoints are rendered in ``tz`` (IANA name), or the process local zone.
        """
        return formatting.absolute_range(self.begin, self.end, tz)

    def relative_string(self, now: datetime | None = None) -> str:
        return formatting.relative_range(self.begin, self.end, now)

    def humanize_duration(self) -> str:
        return formatting.duration(self.duration())

    # -- factories anchored at now --

    @classmethod
    def last_day(cls, now: datetime | None = None) -> "Interval":
        from timerange.ranges import last_day

        return last_day(now)

    @classmethod
    def last_seven_days(cls, now: datetime | None = None) -> "Interval":
        from timerange.ranges import last_seven_days

        return last_seven_days(now)

    @classmethod
    def last_thirty_days(cls, now: datetime | None = None) -> "Interval":
        from timerange.ranges import last_thirty_days

        return last_thirty_days(now)

    @classmethod
    def last_ninety_days(cls, now: datetime | None = None) -> "Interval":
        from timerange.ranges import last_ninety_days

        return last_ninety_days(now)
