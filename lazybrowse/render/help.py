"""Help pane content.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("-", "Move up to parent directory"),
    ("Enter", "Open the entry under the cursor"),
    ("H", "Toggle hidden files"),
    ("h/j/k/l", "Move the cursor"),
    ("arrows", "Move the cursor"),
    ("0/$", "Jump to line start/end"),
    ("w", "Jump to the next word"),
    ("?", "Toggle this help pane"),
    ("q", "Quit lazybrowse"),
)


def help_panel_row_count() -> int:
    """Rows used by the help pane: one border row plus one row per entry."""
    return 1 + len(HELP_ENTRIES)


def help_panel_lines(width: int, theme: UITheme | None = None) -> list[str]:
    """Return styled help pane rows clipped to ``width`` columns."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    key_width = max(len(key) for key, _ in HELP_ENTRIES) + 2
    rows = [f"{active_theme.help_border}{'─' * max(0, width)}{reset}"]
    for key, description in HELP_ENTRIES:
        row = (
            f" {active_theme.help_key}{key.ljust(key_width)}{reset}"
            f"{active_theme.help_text}{description}{reset}"
        )
        rows.append(clip_ansi_line(row, width))
    return rows


__all__ = [
    "HELP_ENTRIES",
    "help_panel_lines",
    "help_panel_row_count",
]
