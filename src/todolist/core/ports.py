# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task manager depends on a Protocol instead of the concrete SQLite store.
This keeps storage swappable and lets tests count writes with an in-memory fake.
"""

from typing import Any, Callable, Protocol

Clock = Callable[[], int]
# Returns the current time in milliseconds.


class SnapshotRepo(Protocol):
    """Reads and writes the tasks/filters/sort snapshot as one unit."""

    def load_data(self) -> dict[str, Any] | None: ...
    def save_data(self, data: dict[str, Any]) -> None: ...

