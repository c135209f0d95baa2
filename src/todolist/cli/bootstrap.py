# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the store, seeds it on first run, builds the task manager,
- loads the theme before the first render and wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import THEMES, AppState, ErrorBanner
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import TaskStore, now_ms

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock = now_ms) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.storage_db_path)
    if getattr(settings, "seed_sample_data", True):
        store.initialize_sample_data(now=clock())

    manager = TaskManager(store, clock=clock)

    theme = store.load_theme()
    if theme not in THEMES:
        logger.warning("Unknown stored theme %r, using light.", theme)
        theme = "light"

    return AppState(
        settings=settings,
        store=store,
        manager=manager,
        theme=theme,
        errors=ErrorBanner(float(getattr(settings, "error_display_seconds", 3.0))),
    )
