# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Task valuation, sorting and date filters.

Every task gets an integer value from its due date, priority and
deadline. Higher values come first when sorting by value. Errors from
resolving a due date never abort a listing here; the task is scored as
if undated-but-not-recurring and a warning is logged.
"""

import logging
from datetime import UTC, datetime, timedelta
from enum import Enum

from tod import time
from tod.config import Config
from tod.errors import TodError
from tod.tasks.due import DateOnly, DateTime, NoDateTime, ResolvedDueInfo, resolve
from tod.tasks.model import Priority, Task

logger = logging.getLogger(__name__)

NOW_WINDOW = timedelta(minutes=15)


class SortOrder(Enum):
    """How to order a task listing."""

    # Tod's configurable sort value
    VALUE = "value"
    # Due datetime only
    DATETIME = "datetime"
    # Leave Todoist's order in place
    TODOIST = "todoist"


class TaskFilter(Enum):
    UNSCHEDULED = "unscheduled"
    OVERDUE = "overdue"
    RECURRING = "recurring"


def datetimeinfo(task: Task, config: Config) -> ResolvedDueInfo:
    """Resolve a task's due info using the config timezone as fallback."""
    return resolve(task.due, config.timezone)


def _try_datetimeinfo(task: Task, config: Config) -> ResolvedDueInfo | None:
    try:
        return datetimeinfo(task, config)
    except TodError as e:
        logger.warning(f"Could not resolve due date for '{task.content}' ({task.id}): {e}")
        return None


def date_value(task: Task, config: Config) -> int:
    """Value contributed by the due field."""
    weights = config.sort_value
    info = _try_datetimeinfo(task, config)

    if info is None:
        return weights.not_recurring
    if isinstance(info, NoDateTime):
        return weights.no_due_date

    recurring_value = 0 if info.is_recurring else weights.not_recurring

    if isinstance(info, DateOnly):
        current = time.today(config, info.timezone)
        today_value = weights.due_today if info.date == current else 0
        overdue_value = weights.overdue if info.date < current else 0
        return today_value + overdue_value + recurring_value

    # Same-zone subtraction ignores DST offsets, so compare in UTC
    current = time.now(config, UTC)
    if abs(info.datetime.astimezone(UTC) - current) <= NOW_WINDOW:
        return weights.due_within_window + recurring_value
    return recurring_value


def priority_value(task: Task, config: Config) -> int:
    weights = config.sort_value
    return {
        Priority.NONE: weights.priority_none,
        Priority.LOW: weights.priority_low,
        Priority.MEDIUM: weights.priority_medium,
        Priority.HIGH: weights.priority_high,
    }[task.priority]


def deadline_value(task: Task, config: Config) -> int:
    """Value contributed by the deadline.

    Each day the deadline sits inside the horizon adds the deadline
    weight, so overdue deadlines keep climbing.

    Raises:
        TodError: If the deadline date or config timezone is invalid
    """
    if task.deadline is None:
        return 0

    weights = config.sort_value
    deadline = time.date_from_str(task.deadline.date)
    days_from_today = time.days_in_future(deadline, config)
    return max(weights.deadline_days - days_from_today, 0) * weights.deadline


def value(task: Task, config: Config) -> int:
    """Determine the numeric value of a task for sorting."""
    try:
        deadline = deadline_value(task, config)
    except TodError as e:
        logger.warning(f"Could not value deadline for '{task.content}' ({task.id}): {e}")
        deadline = 0

    result = date_value(task, config) + priority_value(task, config) + deadline
    logger.debug(f"Value: {result}, Content: {task.content}")
    return result


def due_datetime(task: Task, config: Config) -> datetime | None:
    """The due instant, or None for undated and date-only tasks."""
    info = _try_datetimeinfo(task, config)
    if isinstance(info, DateTime):
        return info.datetime
    return None


def sort_by_value(tasks: list[Task], config: Config) -> list[Task]:
    """Highest value first. Ties keep their input order."""
    return sorted(tasks, key=lambda task: value(task, config), reverse=True)


def sort_by_datetime(tasks: list[Task], config: Config) -> list[Task]:
    """Earliest due instant first.

    Tasks without a due time (no due date, date-only, or unparseable)
    come before all timed tasks, in their input order.
    """

    def key(task: Task) -> tuple[int, float]:
        due = due_datetime(task, config)
        if due is None:
            return (0, 0.0)
        return (1, due.timestamp())

    return sorted(tasks, key=key)


def sort(tasks: list[Task], config: Config, order: SortOrder) -> list[Task]:
    if order == SortOrder.VALUE:
        return sort_by_value(tasks, config)
    if order == SortOrder.DATETIME:
        return sort_by_datetime(tasks, config)
    return list(tasks)


def has_no_date(task: Task) -> bool:
    return task.due is None


def is_recurring(task: Task) -> bool:
    return task.due is not None and task.due.is_recurring


def is_today(task: Task, config: Config) -> bool:
    """True if the task is due today, with or without a time."""
    info = _try_datetimeinfo(task, config)
    if isinstance(info, DateOnly):
        return info.date == time.today(config, info.timezone)
    if isinstance(info, DateTime):
        return info.datetime.date() == time.today(config, info.datetime.tzinfo)
    return False


def is_overdue(task: Task, config: Config) -> bool:
    """True if the due day is before today. Today's missed times don't count."""
    info = _try_datetimeinfo(task, config)
    if isinstance(info, DateOnly):
        return time.is_date_in_past(info.date, config, info.timezone)
    if isinstance(info, DateTime):
        return time.is_date_in_past(info.datetime.date(), config, info.datetime.tzinfo)
    return False


def matches_filter(task: Task, config: Config, task_filter: TaskFilter) -> bool:
    if task_filter == TaskFilter.UNSCHEDULED:
        return has_no_date(task) or is_overdue(task, config)
    if task_filter == TaskFilter.OVERDUE:
        return is_overdue(task, config)
    return is_recurring(task)


def filter_not_in_future(tasks: list[Task], config: Config) -> list[Task]:
    """Keep tasks that are due today, overdue or undated."""
    return [
        task
        for task in tasks
        if is_today(task, config) or has_no_date(task) or is_overdue(task, config)
    ]
