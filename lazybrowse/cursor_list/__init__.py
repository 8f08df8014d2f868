"""Listing rows, cursor motion, and browsing views.

This package is UI-agnostic: it turns scanned entries into ordered display
lines and keeps a 2-D cursor over them. Placing the cursor on screen is the
renderer's job.
"""

from __future__ import annotations

from .cursor import WORD_SEPARATORS, CursorPosition, CursorState, is_separator
from .display import DisplayLine, entry_label, order_entries, sort_entries
from .views import (
    VIEW_MODE_LIST,
    VIEW_MODE_TREE,
    VIEW_MODES,
    BrowserView,
    ListView,
    TreeView,
    ViewTransition,
    open_view,
    parent_directory,
)

__all__ = [
    "WORD_SEPARATORS",
    "CursorPosition",
    "CursorState",
    "is_separator",
    "DisplayLine",
    "entry_label",
    "order_entries",
    "sort_entries",
    "VIEW_MODE_LIST",
    "VIEW_MODE_TREE",
    "VIEW_MODES",
    "BrowserView",
    "ListView",
    "TreeView",
    "ViewTransition",
    "open_view",
    "parent_directory",
]
