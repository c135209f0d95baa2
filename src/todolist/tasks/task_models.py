# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort rank: high first, low last."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class StatusFilter(StrEnum):
    """Exclusive-select status filter."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortMode(StrEnum):
    """
    Display ordering of the derived task list.

    Values are the stored wire values, hence the camelCase "dateCreated".
    """

    CUSTOM = "custom"
    DATE_CREATED = "dateCreated"
    PRIORITY = "priority"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    completed: bool
    priority: Priority
    due_date: str
    date_created: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "priority": self.priority.value,
            "dueDate": self.due_date,
            "dateCreated": self.date_created,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        # Stored snapshots are our own prior writes and are trusted as-is.
        return cls(
            id=int(raw["id"]),
            title=str(raw["title"]),
            completed=bool(raw.get("completed", False)),
            priority=Priority(raw.get("priority") or Priority.MEDIUM),
            due_date=str(raw.get("dueDate") or ""),
            date_created=int(raw.get("dateCreated") or 0),
        )


@dataclass(slots=True)
class Filters:
    status: StatusFilter = StatusFilter.ALL
    priority: Priority | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "priority": self.priority.value if self.priority is not None else None,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Filters:
        priority = raw.get("priority")
        return cls(
            status=StatusFilter(raw.get("status") or StatusFilter.ALL),
            priority=Priority(priority) if priority else None,
        )


@dataclass(frozen=True, slots=True)
class AddResult:
    success: bool
    error: str | None = None


@dataclass(slots=True)
class Snapshot:
    """Tasks + filters + sort mode, persisted together under one key."""

    tasks: list[Task] = field(default_factory=list)
    filters: Filters = field(default_factory=Filters)
    sort_by: SortMode = SortMode.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "filters": self.filters.to_dict(),
            "sortBy": self.sort_by.value,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> Snapshot:
        """Each missing (or empty) field falls back to its default."""
        raw = raw or {}
        filters = raw.get("filters")
        return cls(
            tasks=[Task.from_dict(t) for t in raw.get("tasks") or []],
            filters=Filters.from_dict(filters) if filters else Filters(),
            sort_by=SortMode(raw.get("sortBy") or SortMode.CUSTOM),
        )
