# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.state import AppState, ErrorBanner
from todolist.tasks.task_manager import TaskManager
from todolist.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeSnapshotStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="todolist",
        log_level="WARNING",
        data_dir=tmp_path,
        storage_db_path=tmp_path / "storage.sqlite3",
        error_display_seconds=3.0,
        seed_sample_data=True,
        clear_screen=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def fake_store() -> FakeSnapshotStore:
    return FakeSnapshotStore()


@pytest.fixture()
def manager(fake_store: FakeSnapshotStore, clock: FakeClock) -> TaskManager:
    return TaskManager(fake_store, clock=clock)


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.storage_db_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FakeClock) -> AppState:
    """
    AppState on a real (empty, unseeded) SQLite store with a fixed clock.
    """
    return AppState(
        settings=settings,
        store=store,
        manager=TaskManager(store, clock=clock),
        theme=store.load_theme(),
        errors=ErrorBanner(settings.error_display_seconds),
    )
