"""Filesystem scanning for one-level directory snapshots."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import ScanFailed
from .types import Entry, EntryKind, Snapshot

logger = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` follows the dot-prefix hidden convention."""
    return name.startswith(".")


def entry_extension(name: str) -> str | None:
    """Return the text after the last ``.`` of ``name``.

    Leading-dot names such as ``.bashrc`` and names ending in a dot have no
    extension.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem or not extension:
        return None
    return extension


def _resolve_directory(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


def _file_size(child: os.DirEntry[str]) -> int | None:
    try:
        return int(child.stat(follow_symlinks=False).st_size)
    except OSError as exc:
        logger.debug("no size for %s: %s", child.path, exc)
        return None


def _classify_child(child: os.DirEntry[str]) -> Entry | None:
    """Build an ``Entry`` for one scandir child, or ``None`` when its type can't be read.

    Symlinks are checked before directories so a link to a directory stays
    ``SYMLINK``. A file whose size can't be read is kept with ``size=None``.
    """
    name = child.name
    try:
        if child.is_symlink():
            kind = EntryKind.SYMLINK
        elif child.is_dir():
            kind = EntryKind.DIRECTORY
        else:
            kind = EntryKind.FILE
    except OSError as exc:
        logger.debug("skipping unreadable entry %s: %s", child.path, exc)
        return None

    is_file = kind is EntryKind.FILE
    return Entry(
        name=name,
        path=Path(child.path),
        kind=kind,
        extension=entry_extension(name) if is_file else None,
        hidden=is_hidden_name(name),
        size=_file_size(child) if is_file else None,
    )


def scan_directory(path: Path | str, show_hidden: bool) -> Snapshot:
    """List the immediate children of ``path`` as a ``Snapshot``.

    Hidden entries are dropped here when ``show_hidden`` is false; they are
    not kept anywhere else. Children whose type can't be read while
    scanning are skipped. Raises ``ScanFailed`` when ``path`` itself cannot
    be listed.
    """
    directory = _resolve_directory(Path(path))
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                if not show_hidden and is_hidden_name(child.name):
                    continue
                entry = _classify_child(child)
                if entry is not None:
                    entries.append(entry)
    except OSError as exc:
        logger.debug("scan of %s failed: %s", directory, exc)
        raise ScanFailed.from_os_error(directory, exc) from exc

    logger.debug("scanned %s: %d entries (show_hidden=%s)", directory, len(entries), show_hidden)
    return Snapshot(current_dir=directory, entries=tuple(entries), show_hidden=show_hidden)


__all__ = [
    "is_hidden_name",
    "entry_extension",
    "scan_directory",
]
