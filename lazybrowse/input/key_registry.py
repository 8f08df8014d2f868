"""Key-to-command binding table used by the key handler."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from ..commands import Command


@dataclass(frozen=True)
class CommandBinding:
    """All key tokens that trigger ``command``, plus the action to run."""

    command: Command
    keys: tuple[str, ...]
    action: Callable[[], bool]


class CommandRegistry:
    """Resolve key tokens to commands and run the bound action.

    Binding a key that is already taken moves it to the new command.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._actions: dict[Command, Callable[[], bool]] = {}

    @classmethod
    def from_keymap(
        cls,
        keymap: Mapping[str, Command],
        action_for: Callable[[Command], Callable[[], bool]],
    ) -> CommandRegistry:
        """Group ``keymap`` by command and bind each group to ``action_for(command)``."""
        keys_by_command: dict[Command, list[str]] = {}
        for key, command in keymap.items():
            keys_by_command.setdefault(command, []).append(key)
        registry = cls()
        registry.bind_all(
            CommandBinding(command=command, keys=tuple(keys), action=action_for(command))
            for command, keys in keys_by_command.items()
        )
        return registry

    def bind(self, binding: CommandBinding) -> None:
        for key in binding.keys:
            self._commands[key] = binding.command
        self._actions[binding.command] = binding.action

    def bind_all(self, bindings: Iterable[CommandBinding]) -> None:
        for binding in bindings:
            self.bind(binding)

    def command_for(self, key: str) -> Command | None:
        return self._commands.get(key)

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when the key is unbound."""
        command = self._commands.get(key)
        if command is None:
            return None
        return self._actions[command]()


__all__ = [
    "CommandBinding",
    "CommandRegistry",
]
