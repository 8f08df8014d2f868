"""Interchangeable browsing views: a flat directory list and an expandable tree.

Both views expose the same capability (the current display lines and their
lengths) and are immutable: every transition returns a replacement view.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..file_model import ScanFailed, Snapshot, scan_directory
from .display import DisplayLine, order_entries

logger = logging.getLogger(__name__)

Scanner = Callable[[Path, bool], Snapshot]

VIEW_MODE_LIST = "list"
VIEW_MODE_TREE = "tree"
VIEW_MODES: tuple[str, ...] = (VIEW_MODE_LIST, VIEW_MODE_TREE)


class BrowserView(Protocol):
    """Capability shared by list and tree browsing."""

    @property
    def current_dir(self) -> Path: ...

    @property
    def lines(self) -> tuple[DisplayLine, ...]: ...

    def labels(self) -> list[str]: ...

    def line_lengths(self) -> list[int]: ...

    def select(self, row: int, show_hidden: bool) -> ViewTransition | None: ...

    def ascend(self, show_hidden: bool) -> ViewTransition | None: ...

    def rescan(self, show_hidden: bool) -> BrowserView: ...


@dataclass(frozen=True)
class ViewTransition:
    """Replacement view plus whether the cursor goes back to the origin."""

    view: BrowserView
    reset_cursor: bool = True


def parent_directory(path: Path) -> Path | None:
    """Return the parent of ``path``, or ``None`` at a filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


class _LinesMixin:
    _lines: tuple[DisplayLine, ...]

    @property
    def lines(self) -> tuple[DisplayLine, ...]:
        return self._lines

    def labels(self) -> list[str]:
        return [line.label for line in self._lines]

    def line_lengths(self) -> list[int]:
        return [len(line.label) for line in self._lines]


class ListView(_LinesMixin):
    """Flat listing of one directory snapshot."""

    def __init__(self, snapshot: Snapshot, scanner: Scanner = scan_directory) -> None:
        self.snapshot = snapshot
        self.scanner = scanner
        self._lines = order_entries(snapshot.entries)

    @property
    def current_dir(self) -> Path:
        return self.snapshot.current_dir

    def _open(self, path: Path, show_hidden: bool) -> ViewTransition:
        return ViewTransition(ListView(self.scanner(path, show_hidden), self.scanner))

    def select(self, row: int, show_hidden: bool) -> ViewTransition | None:
        """Descend into the directory at ``row``; other kinds are ignored."""
        if not 0 <= row < len(self._lines):
            return None
        entry = self._lines[row].entry
        if not entry.is_dir:
            return None
        return self._open(entry.path, show_hidden)

    def ascend(self, show_hidden: bool) -> ViewTransition | None:
        parent = parent_directory(self.current_dir)
        if parent is None:
            return None
        return self._open(parent, show_hidden)

    def rescan(self, show_hidden: bool) -> ListView:
        return ListView(self.scanner(self.current_dir, show_hidden), self.scanner)


class TreeView(_LinesMixin):
    """Root snapshot plus snapshots of expanded directories, flattened depth-first.

    Selecting a directory toggles its expansion and keeps the cursor where it
    is. Ascending re-roots the tree at the parent with the old root expanded.
    """

    def __init__(
        self,
        root: Snapshot,
        expanded: Mapping[Path, Snapshot] | None = None,
        scanner: Scanner = scan_directory,
    ) -> None:
        self.root = root
        self.scanner = scanner
        self.expanded: dict[Path, Snapshot] = dict(expanded or {})
        self._lines = self._flatten()

    @property
    def current_dir(self) -> Path:
        return self.root.current_dir

    def _flatten(self) -> tuple[DisplayLine, ...]:
        out: list[DisplayLine] = []

        def walk(snapshot: Snapshot, depth: int) -> None:
            for line in order_entries(snapshot.entries, depth):
                out.append(line)
                child = self.expanded.get(line.entry.path)
                if line.entry.is_dir and child is not None:
                    walk(child, depth + 1)

        walk(self.root, 0)
        return tuple(out)

    def is_expanded(self, path: Path) -> bool:
        return path in self.expanded

    def select(self, row: int, show_hidden: bool) -> ViewTransition | None:
        if not 0 <= row < len(self._lines):
            return None
        entry = self._lines[row].entry
        if not entry.is_dir:
            return None
        if entry.path in self.expanded:
            remaining = {
                path: snapshot
                for path, snapshot in self.expanded.items()
                if path != entry.path and not path.is_relative_to(entry.path)
            }
            return ViewTransition(TreeView(self.root, remaining, self.scanner), reset_cursor=False)
        expanded = dict(self.expanded)
        expanded[entry.path] = self.scanner(entry.path, show_hidden)
        return ViewTransition(TreeView(self.root, expanded, self.scanner), reset_cursor=False)

    def ascend(self, show_hidden: bool) -> ViewTransition | None:
        parent = parent_directory(self.current_dir)
        if parent is None:
            return None
        new_root = self.scanner(parent, show_hidden)
        expanded = dict(self.expanded)
        expanded[self.root.current_dir] = self.root
        return ViewTransition(TreeView(new_root, expanded, self.scanner))

    def rescan(self, show_hidden: bool) -> TreeView:
        """Rescan the root and every reachable expanded directory.

        Expanded directories that can no longer be listed are collapsed.
        """
        root = self.scanner(self.current_dir, show_hidden)
        refreshed: dict[Path, Snapshot] = {}

        def walk(snapshot: Snapshot) -> None:
            for entry in snapshot.entries:
                if not entry.is_dir or entry.path not in self.expanded:
                    continue
                try:
                    child = self.scanner(entry.path, show_hidden)
                except ScanFailed as exc:
                    logger.warning("collapsing %s: %s", entry.path, exc.reason)
                    continue
                refreshed[entry.path] = child
                walk(child)

        walk(root)
        return TreeView(root, refreshed, self.scanner)


def open_view(
    path: Path | str,
    show_hidden: bool,
    mode: str = VIEW_MODE_LIST,
    scanner: Scanner = scan_directory,
) -> BrowserView:
    """Scan ``path`` and wrap it in the view for ``mode``."""
    snapshot = scanner(Path(path), show_hidden)
    if mode == VIEW_MODE_TREE:
        return TreeView(snapshot, scanner=scanner)
    if mode != VIEW_MODE_LIST:
        raise ValueError(f"unknown view mode: {mode!r}")
    return ListView(snapshot, scanner)


__all__ = [
    "BrowserView",
    "ListView",
    "Scanner",
    "TreeView",
    "VIEW_MODES",
    "VIEW_MODE_LIST",
    "VIEW_MODE_TREE",
    "ViewTransition",
    "open_view",
    "parent_directory",
]
