# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Tests for clock and timezone helpers."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from tod import time
from tod.config import Config
from tod.errors import ParseError, TimezoneError
from tod.time import FixedClock, SystemClock


class TestTimezoneFromStr:
    """Test timezone identifier resolution."""

    def test_iana_name(self):
        """IANA identifiers load as ZoneInfo."""
        assert time.timezone_from_str("America/Vancouver") == ZoneInfo("America/Vancouver")

    def test_none_and_empty_are_utc(self):
        """Missing timezone means UTC."""
        assert time.timezone_from_str(None) is UTC
        assert time.timezone_from_str("") is UTC

    def test_gmt_negative_offset_inverts_sign(self):
        """West of UTC maps to Etc/GMT+N."""
        assert time.timezone_from_str("GMT -7:00") == ZoneInfo("Etc/GMT+7")

    def test_gmt_positive_offset_inverts_sign(self):
        """East of UTC maps to Etc/GMT-N."""
        assert time.timezone_from_str("GMT +5:00") == ZoneInfo("Etc/GMT-5")

    def test_gmt_offset_without_minutes(self):
        """Offset without minutes is accepted."""
        assert time.timezone_from_str("GMT -3") == ZoneInfo("Etc/GMT+3")

    def test_gmt_offset_has_expected_utcoffset(self):
        """Resolved GMT zone has the offset it was named for."""
        tz = time.timezone_from_str("GMT -7:00")
        assert datetime(2025, 1, 1, tzinfo=tz).utcoffset() == timedelta(hours=-7)

    def test_gmt_half_hour_offset_rejected(self):
        """Offsets with minutes have no Etc/GMT zone."""
        with pytest.raises(TimezoneError):
            time.timezone_from_str("GMT +5:30")

    def test_unknown_name_raises(self):
        """Unknown identifier raises TimezoneError naming it."""
        with pytest.raises(TimezoneError) as exc_info:
            time.timezone_from_str("Mars/Olympus_Mons")
        assert exc_info.value.name == "Mars/Olympus_Mons"


class TestDatetimeFromStr:
    """Test timestamp parsing by length."""

    def test_naive_timestamp_is_local(self):
        """Naive timestamp is wall time in the given zone."""
        tz = ZoneInfo("America/Vancouver")
        result = time.datetime_from_str("2025-05-10T03:05:00", tz)
        assert result == datetime(2025, 5, 10, 10, 5, tzinfo=UTC)
        assert result.tzinfo == tz

    def test_zulu_timestamp_ignores_zone(self):
        """Zulu timestamp keeps its instant and takes the zone for display."""
        tz = ZoneInfo("America/Vancouver")
        result = time.datetime_from_str("2025-04-26T22:00:00Z", tz)
        assert result == datetime(2025, 4, 26, 22, 0, tzinfo=UTC)
        assert result.utcoffset() == timedelta(hours=-7)

    def test_zulu_timestamp_with_micros(self):
        """Fractional seconds are kept."""
        result = time.datetime_from_str("2025-04-26T22:00:00.123456Z", UTC)
        assert result == datetime(2025, 4, 26, 22, 0, 0, 123456, tzinfo=UTC)

    @pytest.mark.parametrize("raw", ["2025-05-10 10:00", "2025-05-10T10:00", "2025-05-10T10:00:00+00:00"])
    def test_unsupported_length_raises(self, raw):
        """Timestamps of other lengths are rejected."""
        with pytest.raises(ParseError) as exc_info:
            time.datetime_from_str(raw, UTC)
        assert "unsupported timestamp length" in str(exc_info.value)

    def test_malformed_content_raises(self):
        """Right length but invalid month raises ParseError."""
        with pytest.raises(ParseError):
            time.datetime_from_str("2025-13-10T10:00:00", UTC)

    def test_date_from_str_malformed(self):
        """Nonexistent calendar day raises ParseError."""
        with pytest.raises(ParseError):
            time.date_from_str("2025-02-30")


class TestClocks:
    """Test time providers."""

    def test_fixed_clock_converts_zone(self):
        """Fixed instant is expressed in the requested zone."""
        clock = FixedClock(datetime(2025, 5, 10, 10, 0, tzinfo=UTC))
        tokyo = ZoneInfo("Asia/Tokyo")
        assert clock.now(tokyo).hour == 19
        assert clock.today(ZoneInfo("Pacific/Kiritimati")) == date(2025, 5, 11)

    def test_fixed_clock_requires_aware_datetime(self):
        """Naive instant is rejected."""
        with pytest.raises(ValueError):
            FixedClock(datetime(2025, 5, 10, 10, 0))

    def test_system_clock_is_aware(self):
        """System clock returns aware datetimes."""
        assert SystemClock().now(UTC).tzinfo is not None


class TestDateToString:
    """Test relative day rendering."""

    def test_relative_days(self, config: Config):
        """Nearby days render as words, others as ISO dates."""
        assert time.date_to_string(date(2025, 5, 10), config) == "Today"
        assert time.date_to_string(date(2025, 5, 11), config) == "Tomorrow"
        assert time.date_to_string(date(2025, 5, 9), config) == "Yesterday"
        assert time.date_to_string(date(2025, 6, 1), config) == "2025-06-01"

    def test_datetime_includes_time(self, config: Config):
        """Datetimes render with the day and HH:MM."""
        value = datetime(2025, 5, 10, 15, 30, tzinfo=UTC)
        assert time.datetime_to_string(value, config) == "Today 15:30"

    def test_days_in_future(self, config: Config):
        """Day difference is signed."""
        assert time.days_in_future(date(2025, 5, 13), config) == 3
        assert time.days_in_future(date(2025, 5, 8), config) == -2
