# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Task model, due date resolution and ordering."""

from tod.tasks.due import DateOnly, DateTime, NoDateTime, ResolvedDueInfo, resolve
from tod.tasks.model import Deadline, DueInfo, Duration, Priority, Task, Unit
from tod.tasks.value import (
    SortOrder,
    TaskFilter,
    date_value,
    deadline_value,
    filter_not_in_future,
    is_overdue,
    is_today,
    matches_filter,
    priority_value,
    sort,
    sort_by_datetime,
    sort_by_value,
    value,
)

__all__ = [
    "DateOnly",
    "DateTime",
    "Deadline",
    "DueInfo",
    "Duration",
    "NoDateTime",
    "Priority",
    "ResolvedDueInfo",
    "SortOrder",
    "Task",
    "TaskFilter",
    "Unit",
    "date_value",
    "deadline_value",
    "filter_not_in_future",
    "is_overdue",
    "is_today",
    "matches_filter",
    "priority_value",
    "resolve",
    "sort",
    "sort_by_datetime",
    "sort_by_value",
    "value",
]
