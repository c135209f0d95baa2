# src/todolist/connectors/console_theme.py

"""Light/dark ANSI palettes for the console view.

- Truecolor when COLORTERM advertises it; otherwise the xterm 256-color cube.
- Disabled when stdout is not a TTY unless FORCE_COLOR is set.
- NO_COLOR disables colour completely.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

THEME_ICONS = {"light": "🌙", "dark": "☀️"}

_PALETTES: dict[str, dict[str, str]] = {
    "light": {
        "header": "#2F4E8C",
        "muted": "#6B7280",
        "high": "#C0392B",
        "medium": "#B7791F",
        "low": "#2E7D32",
        "done": "#9CA3AF",
        "error": "#B00020",
    },
    "dark": {
        "header": "#8AB4F8",
        "muted": "#9AA0A6",
        "high": "#F28B82",
        "medium": "#FDD663",
        "low": "#81C995",
        "done": "#5F6368",
        "error": "#FF6E6E",
    },
}


def colors_enabled() -> bool:
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    if os.environ.get("NO_COLOR") is not None:
        return False
    return force or sys.stdout.isatty()


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg(hex_code: str, truecolor: bool) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if truecolor:
        return f"\033[38;2;{r};{g};{b}m"

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    return f"\033[38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}m"


@dataclass(frozen=True, slots=True)
class Palette:
    theme: str
    enabled: bool
    truecolor: bool = False

    @classmethod
    def for_theme(cls, theme: str, enabled: bool | None = None) -> Palette:
        if enabled is None:
            enabled = colors_enabled()
        colorterm = os.environ.get("COLORTERM", "").lower()
        truecolor = any(tok in colorterm for tok in ("truecolor", "24bit"))
        return cls(theme=theme if theme in _PALETTES else "light", enabled=enabled, truecolor=truecolor)

    @property
    def icon(self) -> str:
        return THEME_ICONS.get(self.theme, THEME_ICONS["light"])

    def color(self, text: str, role: str, *, bold: bool = False, strike: bool = False) -> str:
        if not self.enabled:
            return text
        hex_code = _PALETTES[self.theme].get(role)
        prefix = _fg(hex_code, self.truecolor) if hex_code else ""
        if bold:
            prefix += "\033[1m"
        if strike:
            prefix += "\033[9m"
        return f"{prefix}{text}\033[0m"
