# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Clock and timezone helpers.

All "now" and "today" lookups go through a TimeProvider so tests can pin
the wall clock. Dates and times from Todoist are parsed here.
"""

import re
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tod.errors import ParseError, TimezoneError

if TYPE_CHECKING:
    from tod.config import Config

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M"
FORMAT_DATETIME = "%Y-%m-%dT%H:%M:%S"
FORMAT_DATETIME_ZULU = "%Y-%m-%dT%H:%M:%SZ"
FORMAT_DATETIME_ZULU_MICROS = "%Y-%m-%dT%H:%M:%S.%fZ"

# Raw Todoist date length -> (strptime format, value is always UTC)
DATETIME_FORMATS = {
    19: (FORMAT_DATETIME, False),
    20: (FORMAT_DATETIME_ZULU, True),
    27: (FORMAT_DATETIME_ZULU_MICROS, True),
}

GMT_OFFSET = re.compile(r"^GMT\s*([+-])(\d{1,2})(?::(\d{2}))?$")


class TimeProvider(Protocol):
    """Source of the current time."""

    def now(self, tz: tzinfo) -> datetime: ...

    def today(self, tz: tzinfo) -> date: ...


class SystemClock:
    """Real UTC time converted to the requested zone."""

    def now(self, tz: tzinfo) -> datetime:
        return datetime.now(UTC).astimezone(tz)

    def today(self, tz: tzinfo) -> date:
        return self.now(tz).date()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Always returns the same instant. Used by tests."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware datetime")
        self.instant = instant

    def now(self, tz: tzinfo) -> datetime:
        return self.instant.astimezone(tz)

    def today(self, tz: tzinfo) -> date:
        return self.now(tz).date()

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


def timezone_from_str(name: str | None) -> tzinfo:
    """Resolve a timezone identifier.

    Accepts IANA names ("America/Vancouver") and the "GMT -7:00" form
    Todoist reports for users without a named zone. GMT offsets map to
    the Etc/GMT zones, which use the inverted POSIX sign.

    Args:
        name: Zone identifier, or None/empty for UTC

    Returns:
        A tzinfo for the zone

    Raises:
        TimezoneError: If the name is not a known zone or GMT offset
    """
    if not name:
        return UTC

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        pass

    match = GMT_OFFSET.match(name.strip())
    if not match:
        raise TimezoneError(name)

    sign, hours, minutes = match.groups()
    if minutes not in (None, "00"):
        raise TimezoneError(name)

    posix_sign = "+" if sign == "-" else "-"
    try:
        return ZoneInfo(f"Etc/GMT{posix_sign}{int(hours)}")
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneError(name) from e


def is_date(raw: str) -> bool:
    """Return True if a raw Todoist date has no time component."""
    return len(raw) == 10


def date_from_str(raw: str) -> date:
    """Parse a YYYY-MM-DD string."""
    try:
        return datetime.strptime(raw, FORMAT_DATE).date()
    except ValueError as e:
        raise ParseError(raw, str(e)) from e


def datetime_from_str(raw: str, tz: tzinfo) -> datetime:
    """Parse a Todoist timestamp into an aware datetime in tz.

    Naive timestamps (19 chars) are local to tz. Zulu timestamps
    (20 or 27 chars) are UTC and converted to tz.

    Raises:
        ParseError: On an unsupported length or malformed content
    """
    if len(raw) not in DATETIME_FORMATS:
        raise ParseError(raw, f"unsupported timestamp length {len(raw)}")

    fmt, is_utc = DATETIME_FORMATS[len(raw)]
    try:
        naive = datetime.strptime(raw, fmt)
    except ValueError as e:
        raise ParseError(raw, str(e)) from e

    if is_utc:
        return naive.replace(tzinfo=UTC).astimezone(tz)
    return naive.replace(tzinfo=tz)


def config_timezone(config: "Config") -> tzinfo:
    """Timezone from config, UTC if unset."""
    return timezone_from_str(config.timezone)


def now(config: "Config", tz: tzinfo | None = None) -> datetime:
    return config.time_provider.now(tz or config_timezone(config))


def today(config: "Config", tz: tzinfo | None = None) -> date:
    return config.time_provider.today(tz or config_timezone(config))


def is_date_in_past(value: date, config: "Config", tz: tzinfo | None = None) -> bool:
    return value < today(config, tz)


def days_in_future(value: date, config: "Config", tz: tzinfo | None = None) -> int:
    """Whole days from today until value, negative if in the past."""
    return (value - today(config, tz)).days


def date_to_string(value: date, config: "Config", tz: tzinfo | None = None) -> str:
    """Render a date relative to today where possible."""
    current = today(config, tz)
    if value == current:
        return "Today"
    if value == current + timedelta(days=1):
        return "Tomorrow"
    if value == current - timedelta(days=1):
        return "Yesterday"
    return value.strftime(FORMAT_DATE)


def datetime_to_string(value: datetime, config: "Config") -> str:
    day = date_to_string(value.date(), config, value.tzinfo)
    return f"{day} {value.strftime(FORMAT_TIME)}"
