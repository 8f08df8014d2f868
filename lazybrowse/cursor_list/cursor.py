"""Cursor state machine over a listing of variable-width lines.

Every operation is a pure state transition on ``CursorPosition``: nothing
here talks to the terminal. Operations saturate at the listing bounds and
never raise for a well-formed listing.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

WORD_SEPARATORS = frozenset("-_. ")


def is_separator(ch: str) -> bool:
    """Return whether ``ch`` splits words for ``next_word`` motion."""
    return ch in WORD_SEPARATORS


@dataclass(frozen=True)
class CursorPosition:
    """Cursor cell relative to the listing's render origin."""

    column: int = 0
    row: int = 0


class CursorState:
    """Mutable cursor bound to a provider of the current listing labels.

    ``labels`` is called on every operation so the cursor always reads the
    listing that is active right now.
    """

    def __init__(self, labels: Callable[[], Sequence[str]]) -> None:
        self._labels = labels
        self.position = CursorPosition()

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def column(self) -> int:
        return self.position.column

    def _move_to(self, column: int, row: int) -> None:
        self.position = CursorPosition(column=column, row=row)

    def _last_row(self, labels: Sequence[str]) -> int:
        return max(0, len(labels) - 1)

    def _clamped_column(self, labels: Sequence[str], column: int, row: int) -> int:
        line_len = len(labels[row])
        return max(0, min(column, line_len - 1))

    def reset(self) -> None:
        """Park the cursor at the listing origin."""
        self._move_to(0, 0)

    def reclamp(self) -> None:
        """Pull the cursor back inside the listing after it changed."""
        labels = self._labels()
        if not labels:
            self.reset()
            return
        row = max(0, min(self.row, self._last_row(labels)))
        self._move_to(self._clamped_column(labels, self.column, row), row)

    def current_label(self) -> str | None:
        labels = self._labels()
        if not labels:
            return None
        return labels[self.row]

    def left(self) -> None:
        labels = self._labels()
        if not labels:
            return
        column = max(self.column - 1, 0)
        self._move_to(self._clamped_column(labels, column, self.row), self.row)

    def right(self) -> None:
        labels = self._labels()
        if not labels:
            return
        self._move_to(self._clamped_column(labels, self.column + 1, self.row), self.row)

    def down(self) -> None:
        labels = self._labels()
        if not labels:
            return
        row = min(self.row + 1, self._last_row(labels))
        self._move_to(self._clamped_column(labels, self.column, row), row)

    def up(self) -> None:
        labels = self._labels()
        if not labels:
            return
        row = max(self.row - 1, 0)
        self._move_to(self._clamped_column(labels, self.column, row), row)

    def line_start(self) -> None:
        if not self._labels():
            return
        self._move_to(0, self.row)

    def line_end(self) -> None:
        labels = self._labels()
        if not labels:
            return
        self._move_to(max(0, len(labels[self.row]) - 1), self.row)

    def next_word(self) -> None:
        """Jump to the next word/separator boundary, wrapping to the next line at line end."""
        labels = self._labels()
        if not labels:
            return
        label = labels[self.row]
        if self.column >= len(label) - 1:
            if self.row < self._last_row(labels):
                self._move_to(0, self.row + 1)
            return

        start_is_separator = is_separator(label[self.column])
        column = self.column
        while column < len(label) and is_separator(label[column]) == start_is_separator:
            column += 1
        self._move_to(self._clamped_column(labels, column, self.row), self.row)


__all__ = [
    "WORD_SEPARATORS",
    "CursorPosition",
    "CursorState",
    "is_separator",
]
