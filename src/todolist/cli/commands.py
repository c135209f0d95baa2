# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Priority, SortMode, StatusFilter

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

SORT_ALIASES = {
    "custom": SortMode.CUSTOM,
    "date": SortMode.DATE_CREATED,
    "created": SortMode.DATE_CREATED,
    "datecreated": SortMode.DATE_CREATED,
    "priority": SortMode.PRIORITY,
    "prio": SortMode.PRIORITY,
}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" for nothing to say) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other text adds a task with medium priority.")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve_row(state: AppState, raw: str) -> int:
    """Map a 1-based row number of the last rendered list to a task id."""
    raw = raw.rstrip(".")
    if not raw.isdigit():
        raise ValueError(f"Invalid row number: {raw}")
    idx = int(raw) - 1
    if idx < 0 or idx >= len(state.visible_ids):
        raise ValueError(f"No task #{raw} in the current list.")
    return state.visible_ids[idx]


def add_task_from_input(
    state: AppState,
    title: str,
    due_date: str = "",
    priority: str = Priority.MEDIUM,
) -> str:
    """Add a task; a validation failure goes to the error banner, success clears it."""
    result = state.manager.add_task(title, due_date, priority)
    if not result.success:
        logger.debug("Add rejected: %s", result.error)
        state.errors.show(result.error or "Could not add task")
    else:
        state.errors.hide()
    return ""


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add buy milk                 -> medium priority, no due date
    /add buy milk p:high          -> explicit priority
    /add pay rent due:2026-11-01  -> due date (free text, stored as given)
    """
    priority = Priority.MEDIUM.value
    due_date = ""
    words: list[str] = []

    for token in args:
        low = token.lower()
        if low.startswith("p:"):
            priority = low[2:]
        elif low.startswith("due:"):
            due_date = token[4:]
        else:
            words.append(token)

    if priority not in {p.value for p in Priority}:
        return "Invalid priority. Use p:low, p:medium or p:high."

    return add_task_from_input(state, " ".join(words), due_date, priority)


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <n>"
    try:
        task_id = _resolve_row(state, args[0])
    except ValueError as e:
        return str(e)
    state.manager.toggle_task(task_id)
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <n>"
    try:
        task_id = _resolve_row(state, args[0])
    except ValueError as e:
        return str(e)
    state.manager.remove_task(task_id)
    return ""


def cmd_search(state: AppState, args: list[str]) -> str:
    state.manager.set_search_query(" ".join(args))
    return ""


def cmd_sort(state: AppState, args: list[str]) -> str:
    mode = SORT_ALIASES.get(args[0].lower()) if len(args) == 1 else None
    if mode is None:
        return "Usage: /sort custom | date | priority"
    state.manager.set_sort_by(mode)
    return ""


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter all|active|completed  -> status (exclusive)
    /filter low|medium|high       -> priority (select again to clear)
    """
    if len(args) != 1:
        return "Usage: /filter all | active | completed | low | medium | high"

    value = args[0].lower()
    if value in {s.value for s in StatusFilter}:
        state.manager.set_filter("status", value)
        return ""
    if value in {p.value for p in Priority}:
        state.manager.set_filter("priority", value)
        return ""
    return "Usage: /filter all | active | completed | low | medium | high"


def cmd_theme(state: AppState, args: list[str]) -> str:
    theme = state.toggle_theme()
    return f"Theme: {theme}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title> [p:low|medium|high] [due:YYYY-MM-DD]."
)
registry.register("done", cmd_done, help_text="Toggle completion of row n: /done <n>.", aliases=["x"])
registry.register("rm", cmd_rm, help_text="Delete row n: /rm <n>.", aliases=["del"])
registry.register("search", cmd_search, help_text="Filter by title text; /search alone clears.")
registry.register("sort", cmd_sort, help_text="Sort: /sort custom | date | priority.")
registry.register(
    "filter",
    cmd_filter,
    help_text="Status: all|active|completed; priority: low|medium|high (toggle).",
)
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.")
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
