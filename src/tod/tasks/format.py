# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Plain text rendering of tasks."""

from tod import time
from tod.config import Config
from tod.errors import TodError
from tod.tasks.due import DateOnly, DateTime
from tod.tasks.model import Task
from tod.tasks.value import datetimeinfo, value

DUE_ICON = "!"
RECURRING_ICON = "↻"
DEADLINE_ICON = "⚑"
LABEL_ICON = "@"


def due(task: Task, config: Config, buffer: str = "") -> str:
    """Due line, e.g. "! Today 15:00 for 15 min ↻ every day".

    Resolution errors are shown in place of the date.
    """
    try:
        info = datetimeinfo(task, config)
    except TodError as e:
        return f"\n{buffer}{DUE_ICON} {e}"

    if isinstance(info, DateOnly):
        text = time.date_to_string(info.date, config, info.timezone)
    elif isinstance(info, DateTime):
        text = time.datetime_to_string(info.datetime, config)
        if task.duration:
            text += f" for {task.duration}"
    else:
        return ""

    if info.is_recurring:
        text += f" {RECURRING_ICON} {info.string}"
    return f"\n{buffer}{DUE_ICON} {text}"


def deadline(task: Task, config: Config, buffer: str = "") -> str:
    if task.deadline is None:
        return ""
    try:
        text = time.date_to_string(time.date_from_str(task.deadline.date), config)
    except TodError as e:
        text = str(e)
    return f"\n{buffer}{DEADLINE_ICON} {text}"


def labels(task: Task) -> str:
    if not task.labels:
        return ""
    return f" {LABEL_ICON} {' '.join(task.labels)}"


def format_task(task: Task, config: Config, with_value: bool = False) -> str:
    """Render a task as a list entry."""
    buffer = "  "
    description = f"\n{buffer}{task.description}" if task.description else ""
    score = f"\n{buffer}value: {value(task, config)}" if with_value else ""
    return (
        f"- {task.content}{description}{due(task, config, buffer)}"
        f"{deadline(task, config, buffer)}{labels(task)}{score}\n"
    )
