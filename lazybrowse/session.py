"""Browsing session: the active view, the cursor, and directory transitions.

The session is driven from a single thread. Views are replaced whole on
every transition, so a failed scan leaves the previous view and cursor
exactly as they were.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .commands import Command
from .cursor_list import (
    VIEW_MODE_LIST,
    BrowserView,
    CursorPosition,
    CursorState,
    DisplayLine,
    ViewTransition,
    open_view,
)
from .cursor_list.views import Scanner
from .file_model import scan_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of ``BrowserSession.execute``.

    ``transition`` is set only when the view was replaced.
    """

    handled: bool
    transition: ViewTransition | None = None

    @property
    def view_changed(self) -> bool:
        return self.transition is not None

    @property
    def cursor_reset(self) -> bool:
        return self.transition is not None and self.transition.reset_cursor


class BrowserSession:
    """Own one browsing view plus the cursor moving over its lines."""

    def __init__(self, view: BrowserView, show_hidden: bool = False) -> None:
        self.view = view
        self.show_hidden = show_hidden
        self.cursor = CursorState(self.labels)
        self._motions: dict[Command, Callable[[], None]] = {
            Command.MOVE_LEFT: self.cursor.left,
            Command.MOVE_DOWN: self.cursor.down,
            Command.MOVE_UP: self.cursor.up,
            Command.MOVE_RIGHT: self.cursor.right,
            Command.LINE_START: self.cursor.line_start,
            Command.LINE_END: self.cursor.line_end,
            Command.NEXT_WORD: self.cursor.next_word,
        }

    @classmethod
    def open(
        cls,
        path: Path | str,
        show_hidden: bool = False,
        mode: str = VIEW_MODE_LIST,
        scanner: Scanner = scan_directory,
    ) -> BrowserSession:
        """Scan ``path`` and start a session on it. Raises ``ScanFailed``."""
        return cls(open_view(path, show_hidden, mode, scanner), show_hidden)

    @property
    def current_dir(self) -> Path:
        return self.view.current_dir

    @property
    def lines(self) -> tuple[DisplayLine, ...]:
        return self.view.lines

    @property
    def position(self) -> CursorPosition:
        return self.cursor.position

    def labels(self) -> list[str]:
        return self.view.labels()

    def line_under_cursor(self) -> DisplayLine | None:
        lines = self.view.lines
        if not lines:
            return None
        return lines[self.cursor.row]

    def _apply(self, transition: ViewTransition) -> None:
        self.view = transition.view
        if transition.reset_cursor:
            self.cursor.reset()
        else:
            self.cursor.reclamp()

    def move(self, command: Command) -> bool:
        """Apply one cursor motion; return ``False`` for non-motion commands."""
        motion = self._motions.get(command)
        if motion is None:
            return False
        motion()
        return True

    def _select(self) -> ViewTransition | None:
        transition = self.view.select(self.cursor.row, self.show_hidden)
        if transition is not None:
            self._apply(transition)
            logger.debug("selected row %d, now in %s", self.cursor.row, self.current_dir)
        return transition

    def _ascend(self) -> ViewTransition | None:
        transition = self.view.ascend(self.show_hidden)
        if transition is not None:
            self._apply(transition)
            logger.debug("ascended to %s", self.current_dir)
        return transition

    def _toggle_hidden(self) -> ViewTransition:
        show_hidden = not self.show_hidden
        transition = ViewTransition(self.view.rescan(show_hidden))
        self.show_hidden = show_hidden
        self._apply(transition)
        return transition

    def select(self) -> bool:
        """Open the directory under the cursor.

        Returns ``False`` when there is nothing to open. Raises ``ScanFailed``
        with the session unchanged when the directory can't be listed.
        """
        return self._select() is not None

    def ascend(self) -> bool:
        """Move to the parent directory; a no-op returning ``False`` at a root."""
        return self._ascend() is not None

    def toggle_hidden(self) -> None:
        """Flip hidden-entry visibility by rescanning the current directory."""
        self._toggle_hidden()

    def execute(self, command: Command) -> CommandResult:
        """Run a browser command and report what it changed.

        ``ScanFailed`` from transitions propagates to the caller.
        """
        if self.move(command):
            return CommandResult(handled=True)
        if command is Command.SELECT:
            transition = self._select()
        elif command is Command.ASCEND:
            transition = self._ascend()
        elif command is Command.TOGGLE_HIDDEN:
            transition = self._toggle_hidden()
        else:
            return CommandResult(handled=False)
        return CommandResult(handled=True, transition=transition)


__all__ = ["BrowserSession", "CommandResult"]
