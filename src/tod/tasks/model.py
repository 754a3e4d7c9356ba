# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Task records as returned by the Todoist API."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Priority(IntEnum):
    """Todoist priority. The API's 4 is what the app shows as P1."""

    NONE = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4

    def __str__(self) -> str:
        return f"{self.name} (P{self.to_integer()})"

    def to_integer(self) -> int:
        """The P-number shown in the Todoist app."""
        return 5 - self.value


class Unit(Enum):
    MINUTE = "minute"
    DAY = "day"


@dataclass(frozen=True)
class DueInfo:
    """The `due` object on a task.

    `date` is either YYYY-MM-DD or a timestamp such as
    2025-04-26T22:00:00Z. `string` is the natural language form,
    e.g. "every monday".
    """

    date: str
    is_recurring: bool = False
    string: str = ""
    timezone: str | None = None
    lang: str = "en"

    @classmethod
    def from_dict(cls, data: dict) -> "DueInfo":
        return cls(
            date=data["date"],
            is_recurring=bool(data.get("is_recurring", False)),
            string=data.get("string") or "",
            timezone=data.get("timezone"),
            lang=data.get("lang") or "en",
        )


@dataclass(frozen=True)
class Deadline:
    date: str
    lang: str = "en"

    @classmethod
    def from_dict(cls, data: dict) -> "Deadline":
        return cls(date=data["date"], lang=data.get("lang") or "en")


@dataclass(frozen=True)
class Duration:
    amount: int
    unit: Unit

    @classmethod
    def from_dict(cls, data: dict) -> "Duration":
        return cls(amount=int(data["amount"]), unit=Unit(data["unit"]))

    def __str__(self) -> str:
        if self.unit == Unit.DAY:
            return "1 day" if self.amount == 1 else f"{self.amount} days"
        return f"{self.amount} min"


@dataclass(frozen=True)
class Task:
    """A Todoist task. Only the fields Tod uses are kept."""

    id: str
    content: str
    description: str = ""
    project_id: str = ""
    section_id: str | None = None
    parent_id: str | None = None
    labels: tuple[str, ...] = field(default_factory=tuple)
    priority: Priority = Priority.NONE
    due: DueInfo | None = None
    deadline: Deadline | None = None
    duration: Duration | None = None
    checked: bool = False
    is_deleted: bool = False

    def __str__(self) -> str:
        return self.content

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Build a Task from API JSON. Unknown keys are ignored."""
        due = data.get("due")
        deadline = data.get("deadline")
        duration = data.get("duration")
        return cls(
            id=str(data["id"]),
            content=data.get("content", ""),
            description=data.get("description") or "",
            project_id=str(data.get("project_id") or ""),
            section_id=data.get("section_id"),
            parent_id=data.get("parent_id"),
            labels=tuple(data.get("labels") or ()),
            priority=Priority(data.get("priority", Priority.NONE)),
            due=DueInfo.from_dict(due) if due else None,
            deadline=Deadline.from_dict(deadline) if deadline else None,
            duration=Duration.from_dict(duration) if duration else None,
            checked=bool(data.get("checked", False)),
            is_deleted=bool(data.get("is_deleted", False)),
        )
