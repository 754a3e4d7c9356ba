# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Shared fixtures."""

from datetime import UTC, datetime

import pytest

from tod.config import Config
from tod.tasks import DueInfo, Priority, Task
from tod.time import FixedClock

# 2025-05-10 10:00 UTC, a Saturday
FIXED_NOW = datetime(2025, 5, 10, 10, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def config(clock):
    """Config with UTC as the default zone and a pinned clock."""
    return Config(time_provider=clock)


def _make_task(
    task_id: str = "1",
    date: str | None = None,
    is_recurring: bool = False,
    timezone: str | None = None,
    priority: Priority = Priority.NONE,
    **kwargs,
) -> Task:
    """Build a task with an optional due date."""
    due = None
    if date is not None:
        due = DueInfo(date=date, is_recurring=is_recurring, string="every day", timezone=timezone)
    return Task(id=task_id, content=kwargs.pop("content", f"Task {task_id}"), due=due, priority=priority, **kwargs)


@pytest.fixture
def make_task():
    """Factory for tasks with an optional due date."""
    return _make_task

