# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Resolve raw due info into a date or an aware datetime."""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from tod import time
from tod.tasks.model import DueInfo


@dataclass(frozen=True)
class NoDateTime:
    """Task has no due date."""


@dataclass(frozen=True)
class DateOnly:
    """Due on a calendar day, no time."""

    date: date
    is_recurring: bool
    timezone: tzinfo
    string: str = ""


@dataclass(frozen=True)
class DateTime:
    """Due at an instant."""

    datetime: datetime
    is_recurring: bool
    string: str = ""


ResolvedDueInfo = NoDateTime | DateOnly | DateTime


def due_timezone(due: DueInfo | None, fallback_timezone: str | None) -> tzinfo:
    """Pick the zone for a due date.

    The due's own timezone wins, then the fallback, then UTC.

    Raises:
        TimezoneError: If the chosen identifier is unknown
    """
    if due is not None and due.timezone:
        return time.timezone_from_str(due.timezone)
    return time.timezone_from_str(fallback_timezone)


def resolve(due: DueInfo | None, fallback_timezone: str | None = None) -> ResolvedDueInfo:
    """Convert the API's due object into a comparable value.

    A 10 character date is always date-only. Anything else must be one
    of the timestamp forms Todoist sends.

    Args:
        due: Due info from the task, or None
        fallback_timezone: Zone used when the due info carries none

    Returns:
        NoDateTime, DateOnly or DateTime

    Raises:
        ParseError: If the date string can't be parsed
        TimezoneError: If the timezone is unknown
    """
    if due is None:
        return NoDateTime()

    tz = due_timezone(due, fallback_timezone)

    if time.is_date(due.date):
        return DateOnly(
            date=time.date_from_str(due.date),
            is_recurring=due.is_recurring,
            timezone=tz,
            string=due.string,
        )

    return DateTime(
        datetime=time.datetime_from_str(due.date, tz),
        is_recurring=due.is_recurring,
        string=due.string,
    )
