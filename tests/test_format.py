# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Tests for task text rendering."""

from tod.tasks import Deadline, Duration, Priority, Unit
from tod.tasks.format import format_task


class TestFormatTask:
    """Test plain text task output."""

    def test_date_today(self, config, make_task):
        """Task due today shows content, Today and labels."""
        task = make_task(date="2025-05-10", content="Get gifts for the twins", labels=("computer",))
        text = format_task(task, config)

        assert text.startswith("- Get gifts for the twins")
        assert "! Today" in text
        assert "@ computer" in text

    def test_other_date(self, config, make_task):
        """Distant dates show as ISO."""
        text = format_task(make_task(date="2021-08-13"), config)
        assert "2021-08-13" in text

    def test_recurring_shows_string(self, config, make_task):
        """Recurring task shows its natural language schedule."""
        text = format_task(make_task(date="2025-05-11", is_recurring=True), config)
        assert "Tomorrow ↻ every day" in text

    def test_datetime_with_duration(self, config, make_task):
        """Timed task shows time and duration."""
        task = make_task(date="2025-05-10T15:00:00Z", duration=Duration(amount=15, unit=Unit.MINUTE))
        text = format_task(task, config)
        assert "! Today 15:00 for 15 min" in text

    def test_description_and_deadline(self, config, make_task):
        """Description and deadline get their own lines."""
        task = make_task(description="Ask about sizes", deadline=Deadline(date="2025-05-09"))
        text = format_task(task, config)
        assert "\n  Ask about sizes" in text
        assert "⚑ Yesterday" in text

    def test_no_due_line_without_date(self, config, make_task):
        """Undated task has no due line."""
        assert "!" not in format_task(make_task(), config)

    def test_bad_date_shows_error(self, config, make_task):
        """Unparseable due date shows the error instead."""
        text = format_task(make_task(date="2025-05-10 10:00"), config)
        assert "unsupported timestamp length" in text

    def test_with_value(self, config, make_task):
        """Value line is added on request."""
        text = format_task(make_task(priority=Priority.HIGH), config, with_value=True)
        assert "value: 84" in text
