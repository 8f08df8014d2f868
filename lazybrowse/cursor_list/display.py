"""Display ordering and labels for listing rows."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..file_model import Entry, EntryKind

INDENT_WIDTH = 2


@dataclass(frozen=True)
class DisplayLine:
    """One listing row: the text the cursor moves over plus its entry."""

    label: str
    entry: Entry
    depth: int = 0


def entry_label(entry: Entry) -> str:
    """Return ``entry.name`` with a trailing ``/`` for directories."""
    if entry.kind is EntryKind.DIRECTORY:
        return entry.name + "/"
    return entry.name


def display_sort_key(entry: Entry) -> tuple[bool, str]:
    """Directories first, then case-sensitive name order."""
    return (entry.kind is not EntryKind.DIRECTORY, entry.name)


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=display_sort_key)


def order_entries(entries: Iterable[Entry], depth: int = 0) -> tuple[DisplayLine, ...]:
    """Sort entries for display and wrap each in a ``DisplayLine``.

    Rows nested at ``depth`` get ``INDENT_WIDTH`` spaces per level in front of
    their label.
    """
    indent = " " * (INDENT_WIDTH * max(0, depth))
    return tuple(
        DisplayLine(label=indent + entry_label(entry), entry=entry, depth=depth)
        for entry in sort_entries(entries)
    )


__all__ = [
    "DisplayLine",
    "INDENT_WIDTH",
    "display_sort_key",
    "entry_label",
    "order_entries",
    "sort_entries",
]
