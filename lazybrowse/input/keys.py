"""Keyboard dispatch from key tokens to browser commands."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from ..commands import DEFAULT_KEYMAP, NAVIGATION_COMMANDS, Command
from ..file_model import ScanFailed
from ..runtime.state import STATUS_MESSAGE_SECONDS, AppState
from .key_registry import CommandRegistry

logger = logging.getLogger(__name__)


def set_status_message(state: AppState, message: str, now: float, seconds: float = STATUS_MESSAGE_SECONDS) -> None:
    """Show ``message`` in the header until ``now + seconds``."""
    state.status_message = message
    state.status_message_until = now + seconds
    state.dirty = True


@dataclass(frozen=True)
class KeyContext:
    """State and key bindings required for key handling."""

    state: AppState
    keymap: Mapping[str, Command] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
    clock: Callable[[], float] = time.monotonic


class KeyHandler:
    """Key handler with a registry built once from the context keymap."""

    def __init__(self, context: KeyContext) -> None:
        self.context = context
        self.registry = self._build_registry()

    def _command_action(self, command: Command) -> Callable[[], bool]:
        state = self.context.state

        def run() -> bool:
            if command is Command.QUIT:
                return True
            if command is Command.TOGGLE_HELP:
                state.show_help = not state.show_help
                state.dirty = True
                return False
            if command in NAVIGATION_COMMANDS:
                state.session.move(command)
                state.dirty = True
                return False
            try:
                result = state.session.execute(command)
            except ScanFailed as exc:
                logger.warning("rejected %s: %s", command.value, exc)
                set_status_message(state, str(exc), self.context.clock())
                return False
            if result.cursor_reset:
                state.list_start = 0
            if result.view_changed:
                state.dirty = True
            return False

        return run

    def _build_registry(self) -> CommandRegistry:
        return CommandRegistry.from_keymap(self.context.keymap, self._command_action)

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit.

        Unbound keys are ignored.
        """
        return bool(self.registry.dispatch(key))


def handle_key(key: str, context: KeyContext) -> bool:
    """Handle one key and return ``True`` when the app should quit."""
    return KeyHandler(context).handle(key)


__all__ = [
    "KeyContext",
    "KeyHandler",
    "handle_key",
    "set_status_message",
]
