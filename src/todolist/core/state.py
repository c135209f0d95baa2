# src/todolist/core/state.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_manager import TaskManager
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class ErrorBanner:
    """
    Transient error message with a fire-and-forget auto-dismiss timer.

    A second show() while a timer is pending does not cancel the earlier timer;
    whichever fires first hides the banner.
    """

    def __init__(self, display_seconds: float = 3.0) -> None:
        self.display_seconds = display_seconds
        self._message: str | None = None
        self._lock = threading.Lock()

    @property
    def message(self) -> str | None:
        with self._lock:
            return self._message

    def show(self, message: str) -> None:
        with self._lock:
            self._message = message
        timer = threading.Timer(self.display_seconds, self.hide)
        timer.daemon = True
        timer.start()

    def hide(self) -> None:
        with self._lock:
            self._message = None


@dataclass
class AppState:
    # Settings object (Settings or a SimpleNamespace in tests).
    settings: Any

    store: TaskStore
    manager: TaskManager
    theme: str = "light"
    errors: ErrorBanner = field(default_factory=ErrorBanner)

    # Rows as last rendered; console row numbers index into this.
    visible_ids: list[int] = field(default_factory=list)

    def toggle_theme(self) -> str:
        self.theme = "dark" if self.theme == "light" else "light"
        self.store.save_theme(self.theme)
        logger.debug("Theme switched to %s", self.theme)
        return self.theme
