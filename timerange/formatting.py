"""String renderings for interval endpoints.

These helpers work on plain ``(begin, end)`` datetime pairs so they can be
used without an ``Interval`` in hand. Relative and duration phrasing is
delegated to the ``humanize`` library.
"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import humanize as _humanize

from timerange.util import require_instant, utcnow

# Same shape as a JavaScript Date.toString(), minus the long zone name
LOCAL_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z (%Z)"


def resolve_zone(tz: str | None) -> ZoneInfo | None:
    """Look up an IANA zone name; ``None`` means the process local zone."""
    if tz is None:
        return None
    try:
        return ZoneInfo(tz)
    except ZoneInfoNotFoundError as e:
        raise ValueError(
            f"Unknown time zone {tz!r}.\n"
            f"Use an IANA zone name, e.g. tz='UTC' or tz='US/Pacific'."
        ) from e


def iso(instant: datetime) -> str:
    """UTC ISO-8601 with a ``Z`` suffix.

    Milliseconds are always written; microseconds only when the instant has a
    sub-millisecond part, so parsing the text back gives the same instant.
    """
    timespec = "milliseconds" if instant.microsecond % 1000 == 0 else "microseconds"
    text = instant.astimezone(timezone.utc).isoformat(timespec=timespec)
    return text.replace("+00:00", "Z")


def local_string(instant: datetime, tz: str | None = None) -> str:
    return instant.astimezone(resolve_zone(tz)).strftime(LOCAL_FORMAT)


def utc_string(instant: datetime) -> str:
    """RFC 1123 rendering, e.g. ``Thu, 01 Jan 2015 00:00:00 GMT``."""
    return format_datetime(instant.astimezone(timezone.utc), usegmt=True)


def absolute(instant: datetime, tz: str | None = None) -> str:
    """Render as ``Jan 1, 2015 09:30:00 am`` in the given zone."""
    dt = instant.astimezone(resolve_zone(tz))
    meridiem = dt.strftime("%p").lower()
    return f"{dt:%b} {dt.day}, {dt:%Y %I:%M:%S} {meridiem}"


def bracketed(begin: str, end: str) -> str:
    return f"[{begin}, {end}]"


def absolute_range(begin: datetime, end: datetime, tz: str | None = None) -> str:
    return f"{absolute(begin, tz)} to {absolute(end, tz)}"


def relative_range(
    begin: datetime, end: datetime, now: datetime | None = None
) -> str:
    """Describe both endpoints relative to ``now``, e.g. ``2 days ago to a day ago``."""
    when = require_instant(now, "relative anchor") if now is not None else utcnow()
    return (
        f"{_humanize.naturaltime(begin, when=when)} to "
        f"{_humanize.naturaltime(end, when=when)}"
    )


def duration(delta: timedelta) -> str:
    """Natural-language length of ``delta``, e.g. ``a day`` or ``3 months``."""
    return _humanize.naturaldelta(delta)
