# src/todolist/tasks/task_manager.py

from __future__ import annotations

import logging
from typing import Any

from ..core.ports import Clock, SnapshotRepo
from .task_models import AddResult, Filters, Priority, Snapshot, SortMode, StatusFilter, Task
from .task_store import now_ms

logger = logging.getLogger(__name__)

EMPTY_TITLE_ERROR = "Task title cannot be empty"


class TaskManager:
    """
    Owns the task collection and the view state (filters, sort mode, search).

    Every mutation persists the full snapshot through the store, so nothing
    else should modify `_tasks` directly. The search query is transient and
    never persisted.
    """

    def __init__(self, store: SnapshotRepo, *, clock: Clock = now_ms) -> None:
        self._store = store
        self._clock = clock

        snapshot = Snapshot.from_dict(store.load_data())
        self._tasks: list[Task] = snapshot.tasks
        self.filters: Filters = snapshot.filters
        self.sort_by: SortMode = snapshot.sort_by
        self.search_query: str = ""

        logger.debug(
            "TaskManager loaded tasks=%d filters=%s sort=%s",
            len(self._tasks),
            self.filters.to_dict(),
            self.sort_by.value,
        )

    # ---- persistence ----

    def snapshot(self) -> dict[str, Any]:
        return Snapshot(tasks=self._tasks, filters=self.filters, sort_by=self.sort_by).to_dict()

    def save(self) -> None:
        self._store.save_data(self.snapshot())

    # ---- queries ----

    @property
    def tasks(self) -> list[Task]:
        """Stored order; a copy, so callers cannot bypass persistence."""
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def counts(self) -> dict[str, int]:
        done = sum(1 for t in self._tasks if t.completed)
        return {"total": len(self._tasks), "active": len(self._tasks) - done, "completed": done}

    def get_filtered_tasks(self) -> list[Task]:
        """Derived view: search -> status -> priority -> sort. Stored order is untouched."""
        items = list(self._tasks)

        if self.search_query:
            needle = self.search_query.lower()
            items = [t for t in items if needle in t.title.lower()]

        if self.filters.status == StatusFilter.ACTIVE:
            items = [t for t in items if not t.completed]
        elif self.filters.status == StatusFilter.COMPLETED:
            items = [t for t in items if t.completed]

        if self.filters.priority is not None:
            items = [t for t in items if t.priority == self.filters.priority]

        if self.sort_by == SortMode.DATE_CREATED:
            items.sort(key=lambda t: t.date_created, reverse=True)
        elif self.sort_by == SortMode.PRIORITY:
            items.sort(key=lambda t: t.priority.rank)

        return items

    # ---- mutations ----

    def _next_id(self, now: int) -> int:
        # Ids are creation timestamps; bump past the newest id on a same-millisecond add.
        if not self._tasks:
            return now
        return max(now, max(t.id for t in self._tasks) + 1)

    def add_task(
        self,
        title: str,
        due_date: str = "",
        priority: Priority | str = Priority.MEDIUM,
    ) -> AddResult:
        clean = (title or "").strip()
        if not clean:
            return AddResult(success=False, error=EMPTY_TITLE_ERROR)

        prio = Priority(priority)
        now = self._clock()
        task = Task(
            id=self._next_id(now),
            title=clean,
            completed=False,
            priority=prio,
            due_date=(due_date or "").strip(),
            date_created=now,
        )
        self._tasks.append(task)
        self.save()
        logger.debug("Task added id=%s priority=%s due=%r", task.id, prio.value, task.due_date)
        return AddResult(success=True)

    def remove_task(self, task_id: int) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        self.save()
        logger.debug("Task remove id=%s removed=%s", task_id, before != len(self._tasks))

    def toggle_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        if task is not None:
            task.completed = not task.completed
        # Persist even when nothing matched.
        self.save()
        logger.debug("Task toggle id=%s found=%s", task_id, task is not None)

    def set_search_query(self, query: str) -> None:
        self.search_query = query or ""

    def set_sort_by(self, sort_by: SortMode | str) -> None:
        self.sort_by = SortMode(sort_by)
        self.save()

    def set_filter(self, kind: str, value: str | None) -> None:
        """
        status   -> exclusive select (always takes the new value)
        priority -> toggle select (selecting the active value clears it)
        Other kinds change nothing but are still persisted.
        """
        if kind == "status":
            self.filters.status = StatusFilter(value)
        elif kind == "priority":
            prio = Priority(value) if value else None
            self.filters.priority = None if self.filters.priority == prio else prio
        else:
            logger.debug("Ignoring unknown filter kind=%r", kind)
        self.save()
