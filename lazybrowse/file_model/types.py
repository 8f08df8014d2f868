"""Domain datatypes for scanned directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Classification of one directory child."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class Entry:
    """One classified filesystem child observed during a scan.

    ``extension`` is only ever set for ``EntryKind.FILE`` entries.
    """

    name: str
    path: Path
    kind: EntryKind
    extension: str | None = None
    hidden: bool = False
    size: int | None = None

    def __post_init__(self) -> None:
        if self.kind is not EntryKind.FILE and self.extension is not None:
            raise ValueError(f"{self.kind.value} entry {self.name!r} cannot carry an extension")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Snapshot:
    """All visible entries of one directory level, in filesystem order."""

    current_dir: Path
    entries: tuple[Entry, ...] = ()
    show_hidden: bool = False

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "EntryKind",
    "Entry",
    "Snapshot",
]
