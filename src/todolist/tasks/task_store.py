# src/todolist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from .task_models import Filters, Priority, Snapshot, SortMode, Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "todoAppData"
THEME_KEY = "todoAppTheme"
DEFAULT_THEME = "light"


def now_ms() -> int:
    return int(time.time() * 1000)


class TaskStore:
    """
    SQLite key/value store for the task snapshot and the theme preference.

    Values are stored as JSON text under a string key, one row per key.
    Storage faults (locked/unwritable DB, unserializable values, corrupt JSON)
    are not handled here and propagate to the caller.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "storage.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s keys=%s", self._db_path, self.count_keys())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Shutdown hook (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- key/value API ----

    def save(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, payload, time.time()),
            )
            conn.commit()
            logger.debug("Saved key=%s bytes=%d", key, len(payload))
        finally:
            conn.close()

    def load(self, key: str) -> Any | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return json.loads(row["value"])

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def count_keys(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
            return int(n)
        finally:
            conn.close()

    # ---- snapshot / theme ----

    def save_data(self, data: dict[str, Any]) -> None:
        self.save(STORAGE_KEY, data)

    def load_data(self) -> dict[str, Any] | None:
        return self.load(STORAGE_KEY)

    def save_theme(self, theme: str) -> None:
        self.save(THEME_KEY, theme)

    def load_theme(self) -> str:
        return self.load(THEME_KEY) or DEFAULT_THEME

    def initialize_sample_data(self, now: int | None = None) -> bool:
        """
        Seed two sample tasks on first run.

        Never overwrites an existing snapshot. Returns True if it seeded.
        """
        if self.load_data() is not None:
            return False

        if now is None:
            now = now_ms()

        snapshot = Snapshot(
            tasks=[
                Task(
                    id=now + 1,
                    title="Welcome to your task list!",
                    completed=False,
                    priority=Priority.HIGH,
                    due_date="",
                    date_created=now,
                ),
                Task(
                    id=now + 2,
                    title="Double-click a task to edit",
                    completed=False,
                    priority=Priority.MEDIUM,
                    due_date="",
                    date_created=now + 1,
                ),
            ],
            filters=Filters(),
            sort_by=SortMode.CUSTOM,
        )
        self.save_data(snapshot.to_dict())
        logger.info("Seeded sample data (%d tasks)", len(snapshot.tasks))
        return True
