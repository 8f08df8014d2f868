"""Browser commands and their default single-key bindings.

Key tokens follow ``lazybrowse.input.read_key``: printable characters map to
themselves, special keys to upper-case names such as ``ENTER`` or ``LEFT``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    MOVE_RIGHT = "move_right"
    LINE_START = "line_start"
    LINE_END = "line_end"
    NEXT_WORD = "next_word"
    SELECT = "select"
    ASCEND = "ascend"
    TOGGLE_HIDDEN = "toggle_hidden"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"


NAVIGATION_COMMANDS = frozenset(
    {
        Command.MOVE_LEFT,
        Command.MOVE_DOWN,
        Command.MOVE_UP,
        Command.MOVE_RIGHT,
        Command.LINE_START,
        Command.LINE_END,
        Command.NEXT_WORD,
    }
)

DEFAULT_KEYMAP: dict[str, Command] = {
    "h": Command.MOVE_LEFT,
    "LEFT": Command.MOVE_LEFT,
    "j": Command.MOVE_DOWN,
    "DOWN": Command.MOVE_DOWN,
    "k": Command.MOVE_UP,
    "UP": Command.MOVE_UP,
    "l": Command.MOVE_RIGHT,
    "RIGHT": Command.MOVE_RIGHT,
    "0": Command.LINE_START,
    "HOME": Command.LINE_START,
    "$": Command.LINE_END,
    "END": Command.LINE_END,
    "w": Command.NEXT_WORD,
    "ENTER": Command.SELECT,
    "-": Command.ASCEND,
    "H": Command.TOGGLE_HIDDEN,
    "?": Command.TOGGLE_HELP,
    "q": Command.QUIT,
}


def parse_command(name: str) -> Command | None:
    """Return the command called ``name`` (case-insensitive, ``-`` or ``_``)."""
    normalized = name.strip().lower().replace("-", "_")
    try:
        return Command(normalized)
    except ValueError:
        return None


def build_keymap(overrides: Mapping[str, str] | None = None) -> dict[str, Command]:
    """Return default bindings updated with ``{key: command_name}`` overrides.

    Overrides naming an unknown command are ignored.
    """
    keymap = dict(DEFAULT_KEYMAP)
    for key, name in (overrides or {}).items():
        command = parse_command(name)
        if command is None or not key:
            continue
        keymap[key] = command
    return keymap


__all__ = [
    "Command",
    "DEFAULT_KEYMAP",
    "NAVIGATION_COMMANDS",
    "build_keymap",
    "parse_command",
]
