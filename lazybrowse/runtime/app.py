"""Runtime composition layer for lazybrowse.

Builds the session and initial state, wires key handling and rendering, and
starts the loop. Falls back to plain listing output when not on a TTY.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..commands import build_keymap
from ..input import KeyContext, KeyHandler
from ..render import format_listing_text, render_frame
from ..session import BrowserSession
from ..ui_theme import PLAIN_THEME, resolve_theme
from .config import BrowserConfig
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def print_listing(session: BrowserSession, config: BrowserConfig, no_color: bool) -> None:
    """Write the ordered listing of the session's directory to stdout."""
    if no_color or not sys.stdout.isatty():
        theme = PLAIN_THEME
    else:
        theme = resolve_theme(config.theme)
    sys.stdout.write(format_listing_text(session.lines, theme, config.show_size_labels))


def run_browser(
    path: Path,
    config: BrowserConfig,
    *,
    no_color: bool = False,
    print_only: bool = False,
) -> None:
    """Open ``path`` and run the interactive browser until the user quits.

    Raises ``ScanFailed`` when the starting directory can't be listed.
    """
    session = BrowserSession.open(path, show_hidden=config.show_hidden, mode=config.view_mode)
    logger.info("browsing %s in %s mode", session.current_dir, config.view_mode)

    if print_only or not (sys.stdin.isatty() and sys.stdout.isatty()):
        print_listing(session, config, no_color)
        return

    state = AppState(
        session=session,
        theme=resolve_theme(config.theme, no_color=no_color),
        show_line_numbers=config.show_line_numbers,
        show_size_labels=config.show_size_labels,
    )
    key_handler = KeyHandler(KeyContext(state=state, keymap=build_keymap(config.keys)))
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_main_loop(
        state,
        terminal,
        stdin_fd,
        RuntimeLoopTiming(tick_ms=config.tick_ms),
        RuntimeLoopCallbacks(handle_key=key_handler.handle, render=render_frame),
    )


__all__ = ["print_listing", "run_browser"]
