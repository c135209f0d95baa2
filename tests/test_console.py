# tests/test_console.py

from __future__ import annotations

import time
from types import SimpleNamespace

import pytest

from todolist.cli.bootstrap import create_initial_state
from todolist.connectors import console_connector
from todolist.connectors.console_connector import EMPTY_STATE, handle_line, render
from todolist.connectors.console_theme import Palette
from todolist.core.state import AppState, ErrorBanner

from .fakes import FakeClock

PLAIN_LIGHT = Palette(theme="light", enabled=False)


def test_render_empty_state(state: AppState) -> None:
    text = render(state, PLAIN_LIGHT)

    assert EMPTY_STATE in text
    assert state.visible_ids == []


def test_render_rows_follow_derived_view(state: AppState, clock: FakeClock) -> None:
    state.manager.add_task("low one", "", "low")
    clock.advance()
    state.manager.add_task("high one", "2026-11-01", "high")
    state.manager.set_sort_by("priority")

    lines = render(state, PLAIN_LIGHT).splitlines()

    assert "  1. [ ] high one  (high)  due 2026-11-01" in lines
    assert "  2. [ ] low one  (low)" in lines
    assert state.visible_ids == [state.manager.tasks[1].id, state.manager.tasks[0].id]
    assert "sort=priority" in lines[1]


def test_render_shows_theme_icon(state: AppState) -> None:
    assert "🌙" in render(state, PLAIN_LIGHT).splitlines()[0]
    assert "☀️" in render(state, Palette(theme="dark", enabled=False)).splitlines()[0]


def test_colored_render_wraps_in_ansi(state: AppState) -> None:
    state.manager.add_task("x", "", "high")
    text = render(state, Palette(theme="dark", enabled=True, truecolor=True))

    assert "\033[38;2;" in text
    assert "\033[0m" in text


def test_plain_text_adds_task(state: AppState) -> None:
    assert handle_line(state, "Buy milk") == ""

    task = state.manager.tasks[0]
    assert task.title == "Buy milk"
    assert task.priority.value == "medium"


def test_handler_crash_is_isolated(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*_a, **_kw):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.manager, "set_sort_by", boom)

    assert handle_line(state, "/sort date") == "Internal error while handling a command."


def test_error_banner_is_rendered_then_auto_dismissed(state: AppState) -> None:
    state.errors = ErrorBanner(display_seconds=0.05)
    handle_line(state, "/add")

    assert "! Task title cannot be empty" in render(state, PLAIN_LIGHT)

    deadline = time.monotonic() + 2.0
    while state.errors.message is not None and time.monotonic() < deadline:
        time.sleep(0.01)

    assert state.errors.message is None
    assert "!" not in render(state, PLAIN_LIGHT)


def test_run_console_loop_drives_commands(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    lines = iter(["Buy milk", "", "/done 1", "/exit"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

    console_connector.run_console_loop(state)

    assert state.manager.tasks[0].completed is True
    assert "Buy milk" in capsys.readouterr().out


def test_run_console_loop_stops_on_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def eof(_prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    console_connector.run_console_loop(state)


def test_bootstrap_seeds_once_and_loads_theme(settings: SimpleNamespace, clock: FakeClock) -> None:
    first = create_initial_state(settings=settings, clock=clock)
    assert [t.title for t in first.manager.tasks] == [
        "Welcome to your task list!",
        "Double-click a task to edit",
    ]
    assert first.theme == "light"
    assert first.errors.display_seconds == 3.0

    first.manager.add_task("mine")
    first.toggle_theme()

    second = create_initial_state(settings=settings, clock=clock)
    assert [t.title for t in second.manager.tasks][-1] == "mine"
    assert len(second.manager.tasks) == 3
    assert second.theme == "dark"


def test_bootstrap_without_seeding(settings: SimpleNamespace, clock: FakeClock) -> None:
    settings.seed_sample_data = False

    state = create_initial_state(settings=settings, clock=clock)

    assert state.manager.tasks == []
    assert state.store.load_data() is None
