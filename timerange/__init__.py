from .convert import (
    from_dates,
    from_datetimes,
    from_dict,
    from_interval,
    from_iso,
    from_millis,
    from_timestamps,
)
from .interval import Interval
from .ranges import last, last_day, last_ninety_days, last_seven_days, last_thirty_days
from .util import DAY, HOUR, MILLISECOND, MINUTE, SECOND, WEEK

__all__ = [
    "Interval",
    "from_interval",
    "from_datetimes",
    "from_millis",
    "from_timestamps",
    "from_dates",
    "from_iso",
    "from_dict",
    "last",
    "last_day",
    "last_seven_days",
    "last_thirty_days",
    "last_ninety_days",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
