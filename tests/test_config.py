# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TODO_APP_NAME",
        "TODO_LOG_LEVEL",
        "TODO_DATA_DIR",
        "TODO_STORAGE_DB_PATH",
        "TODO_ERROR_DISPLAY_SECONDS",
        "TODO_SEED_SAMPLE_DATA",
        "TODO_CLEAR_SCREEN",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "todolist"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/todolist")
    assert s.storage_db_path == Path(".local/todolist") / "storage.sqlite3"
    assert s.error_display_seconds == 3.0
    assert s.seed_sample_data is True
    assert s.clear_screen is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TODO_STORAGE_DB_PATH", raising=False)
    monkeypatch.setenv("TODO_ERROR_DISPLAY_SECONDS", "-2")
    monkeypatch.setenv("TODO_SEED_SAMPLE_DATA", "off")

    s = Settings.from_env()

    assert s.storage_db_path == tmp_path / "storage.sqlite3"
    assert s.error_display_seconds == 0.0
    assert s.seed_sample_data is False


def test_bad_number_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_ERROR_DISPLAY_SECONDS", "soon")
    assert Settings.from_env().error_display_seconds == 3.0
