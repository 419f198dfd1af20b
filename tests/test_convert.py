"""Tests for the named constructors in timerange.convert."""

import logging
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from timerange import (
    Interval,
    from_dates,
    from_datetimes,
    from_dict,
    from_interval,
    from_iso,
    from_millis,
    from_timestamps,
)

NEW_YEAR = datetime(2025, 1, 1, tzinfo=timezone.utc)
NEW_YEAR_MS = 1735689600000


def test_from_millis():
    ivl = from_millis(NEW_YEAR_MS, NEW_YEAR_MS + 1500)
    assert ivl.begin == NEW_YEAR
    assert ivl.end == NEW_YEAR + timedelta(milliseconds=1500)


def test_from_millis_accepts_floats():
    assert from_millis(0.0, 10.0) == from_millis(0, 10)


@pytest.mark.parametrize("bad", ["0", None, True, [0]])
def test_from_millis_rejects_non_numbers(bad):
    with pytest.raises(TypeError, match="milliseconds since the Unix epoch"):
        from_millis(bad, 10)


def test_from_timestamps_uses_seconds():
    ivl = from_timestamps(NEW_YEAR_MS // 1000, NEW_YEAR_MS // 1000 + 60)
    assert ivl == from_millis(NEW_YEAR_MS, NEW_YEAR_MS + 60_000)


def test_from_datetimes_any_zone():
    tokyo = datetime(2025, 1, 1, 9, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
    ivl = from_datetimes(tokyo, tokyo + timedelta(hours=1))
    assert ivl.begin == NEW_YEAR
    assert ivl.begin.tzinfo is timezone.utc


def test_from_interval_copies():
    original = from_millis(0, 10)
    copy = from_interval(original)
    assert copy == original
    assert copy is not original


def test_from_interval_rejects_other_shapes():
    with pytest.raises(TypeError, match="expects an Interval"):
        from_interval((0, 10))  # type: ignore[arg-type]


class TestFromDates:
    def test_covers_whole_days_in_utc(self):
        ivl = from_dates(date(2025, 1, 1), date(2025, 1, 2))
        assert ivl.begin == NEW_YEAR
        assert ivl.end == datetime(2025, 1, 2, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_single_day(self):
        ivl = from_dates(date(2025, 1, 1), date(2025, 1, 1))
        assert ivl.contains(datetime(2025, 1, 1, 12, tzinfo=timezone.utc))
        assert not ivl.contains(datetime(2025, 1, 2, tzinfo=timezone.utc))

    def test_respects_timezone(self):
        ivl = from_dates(date(2025, 1, 1), date(2025, 1, 1), tz="US/Pacific")
        assert ivl.begin == datetime(2025, 1, 1, 8, tzinfo=timezone.utc)

    def test_rejects_datetimes(self):
        with pytest.raises(TypeError, match="from_datetimes"):
            from_dates(NEW_YEAR, date(2025, 1, 2))

    def test_unknown_zone(self):
        with pytest.raises(ValueError, match="Unknown time zone"):
            from_dates(date(2025, 1, 1), date(2025, 1, 2), tz="Mars/Olympus_Mons")


class TestFromIso:
    def test_zulu_suffix(self):
        ivl = from_iso("2025-01-01T00:00:00.000Z", "2025-01-01T00:00:01.500Z")
        assert ivl == from_millis(NEW_YEAR_MS, NEW_YEAR_MS + 1500)

    def test_explicit_offset(self):
        ivl = from_iso("2025-01-01T01:00:00+01:00", "2025-01-01T02:00:00+01:00")
        assert ivl.begin == NEW_YEAR

    def test_missing_offset_assumed_utc(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="timerange.convert"):
            ivl = from_iso("2025-01-01T00:00:00", "2025-01-02")

        assert ivl.begin == NEW_YEAR
        assert ivl.end == NEW_YEAR + timedelta(days=1)
        assert "assuming UTC" in caplog.text

    def test_unparsable(self):
        with pytest.raises(ValueError, match="not a valid ISO-8601"):
            from_iso("yesterday", "2025-01-02T00:00:00Z")

    def test_rejects_non_strings(self):
        with pytest.raises(TypeError, match="ISO-8601 string"):
            from_iso(NEW_YEAR, "2025-01-02T00:00:00Z")  # type: ignore[arg-type]


class TestFromDict:
    def test_inverts_to_dict(self):
        ivl = from_millis(NEW_YEAR_MS, NEW_YEAR_MS + 86_400_000)
        assert from_dict(ivl.to_dict()) == ivl

    def test_inverts_to_dict_below_a_millisecond(self):
        ivl = Interval(
            begin=NEW_YEAR + timedelta(microseconds=1500),
            end=NEW_YEAR + timedelta(seconds=1, microseconds=7),
        )
        assert ivl.to_dict()["begin"] == "2025-01-01T00:00:00.001500Z"
        assert from_dict(ivl.to_dict()) == ivl

    def test_accepts_millis(self):
        ivl = from_dict({"begin": NEW_YEAR_MS, "end": "2025-01-02T00:00:00.000Z"})
        assert ivl == Interval(begin=NEW_YEAR, end=NEW_YEAR + timedelta(days=1))

    def test_missing_key(self):
        with pytest.raises(ValueError, match="missing 'end'"):
            from_dict({"begin": 0})

    def test_rejects_non_mapping(self):
        with pytest.raises(TypeError, match="expects a mapping"):
            from_dict([0, 10])  # type: ignore[arg-type]
