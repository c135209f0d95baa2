# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import add_task_from_input
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task
from .console_theme import Palette

logger = logging.getLogger(__name__)

EMPTY_STATE = "No tasks to show."


def _clear_screen() -> None:
    # ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _render_task(n: int, task: Task, palette: Palette) -> str:
    check = "[x]" if task.completed else "[ ]"
    title = palette.color(task.title, "done", strike=True) if task.completed else task.title
    prio = palette.color(f"({task.priority.value})", task.priority.value)
    line = f"{n:>3}. {check} {title}  {prio}"
    if task.due_date:
        line += "  " + palette.color(f"due {task.due_date}", "muted")
    return line


def _status_line(state: AppState, palette: Palette) -> str:
    manager = state.manager
    counts = manager.counts()
    parts = [
        f"{counts['active']} active / {counts['completed']} done",
        f"status={manager.filters.status.value}",
        f"priority={manager.filters.priority.value if manager.filters.priority else '-'}",
        f"sort={manager.sort_by.value}",
    ]
    if manager.search_query:
        parts.append(f"search={manager.search_query!r}")
    return palette.color(" | ".join(parts), "muted")


def render(state: AppState, palette: Palette | None = None) -> str:
    """
    Re-derive the visible list from the manager and return the full screen text.

    Also records the rendered task ids on the state so row numbers typed by the
    user map to the rows they see.
    """
    if palette is None:
        palette = Palette.for_theme(state.theme)

    app_name = str(getattr(state.settings, "app_name", "todolist"))
    tasks = state.manager.get_filtered_tasks()
    state.visible_ids = [t.id for t in tasks]

    lines = [
        palette.color(f"{app_name} {palette.icon}", "header", bold=True),
        _status_line(state, palette),
        "",
    ]
    if tasks:
        lines.extend(_render_task(n, t, palette) for n, t in enumerate(tasks, start=1))
    else:
        lines.append(palette.color(EMPTY_STATE, "muted"))

    error = state.errors.message
    if error:
        lines.append("")
        lines.append(palette.color(f"! {error}", "error", bold=True))

    return "\n".join(lines)


def handle_line(state: AppState, line: str) -> str:
    """Dispatch one line of input: slash commands go to the registry, plain text adds a task."""
    try:
        response = command_registry.handle(state, line)
        if response is None:
            response = add_task_from_input(state, line)
    except ValueError as e:
        logger.info("Rejected input %r: %s", line, e)
        response = str(e)
    except Exception:
        logger.exception("Command handler crashed.")
        response = "Internal error while handling a command."
    return response


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (theme=%s).", state.theme)

    clear = bool(getattr(state.settings, "clear_screen", True)) and sys.stdout.isatty()
    notice = "Type a task to add it. Use /help for commands, /exit to quit."

    while True:
        if clear:
            _clear_screen()
        print(render(state))
        if notice:
            print(f"\n{notice}")

        try:
            user_input = input("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            notice = ""
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        notice = handle_line(state, user_input)

    logger.info("Console connector finished.")
