"""
Tests for departure time utilities.
"""

import pytest
from datetime import datetime, timedelta, timezone
from departure_board.utils.time_format import (
    format_short_time,
    make_departure_time,
    parse_departure_time
)


class TestFormatShortTime:
    """Test cases for short time formatting."""

    def test_afternoon_and_evening(self):
        assert format_short_time(datetime(2019, 5, 30, 17, 30)) == "5:30 PM"
        assert format_short_time(datetime(2019, 5, 30, 20, 0)) == "8:00 PM"
        assert format_short_time(datetime(2019, 5, 30, 13, 26)) == "1:26 PM"

    def test_midnight_and_noon(self):
        """Test that hour 0 and 12 are shown as 12."""
        assert format_short_time(datetime(2019, 5, 30, 0, 5)) == "12:05 AM"
        assert format_short_time(datetime(2019, 5, 30, 12, 0)) == "12:00 PM"

    def test_morning(self):
        assert format_short_time(datetime(2019, 5, 30, 9, 5)) == "9:05 AM"
        assert format_short_time(datetime(2019, 5, 30, 11, 59)) == "11:59 AM"


class TestParseDepartureTime:
    """Test cases for parsing departure times."""

    def test_none_and_empty(self):
        assert parse_departure_time(None) is None
        assert parse_departure_time("") is None
        assert parse_departure_time("   ") is None

    def test_datetime_passthrough(self):
        dt = datetime(2019, 5, 30, 17, 30)
        assert parse_departure_time(dt) is dt

    def test_iso_format(self):
        assert parse_departure_time("2019-05-30T17:30:00") == datetime(2019, 5, 30, 17, 30)

    def test_human_format(self):
        assert parse_departure_time("May 30 2019 5:30 PM") == datetime(2019, 5, 30, 17, 30)

    def test_utc_offset_is_dropped(self):
        """Test that times with an offset keep their wall-clock time and become naive."""
        for text in ["2019-05-30T17:30:00Z", "2019-05-30T17:30:00+09:00"]:
            parsed = parse_departure_time(text)
            assert parsed == datetime(2019, 5, 30, 17, 30)
            assert parsed.tzinfo is None

        aware = datetime(2019, 5, 30, 17, 30, tzinfo=timezone(timedelta(hours=-4)))
        assert parse_departure_time(aware) == datetime(2019, 5, 30, 17, 30)

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid departure time"):
            parse_departure_time("not a time")
        with pytest.raises(ValueError, match="Invalid departure time"):
            parse_departure_time(1730)


def test_make_departure_time():
    assert make_departure_time(2019, 5, 30, 17, 30) == datetime(2019, 5, 30, 17, 30)
    assert make_departure_time(2019, 5, 30) == datetime(2019, 5, 30)
