"""Mutable runtime state shared by the main loop, key handlers and renderer."""

from __future__ import annotations

from dataclasses import dataclass

from ..session import BrowserSession
from ..ui_theme import DEFAULT_THEME, UITheme

STATUS_MESSAGE_SECONDS = 3.0


@dataclass
class AppState:
    session: BrowserSession
    theme: UITheme = DEFAULT_THEME
    show_help: bool = False
    show_line_numbers: bool = True
    show_size_labels: bool = False
    list_start: int = 0
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True
    skip_next_lf: bool = False
