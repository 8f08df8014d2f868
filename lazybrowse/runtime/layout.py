"""Screen geometry for the listing: render origin, visible rows, scrolling.

All coordinates here are 0-based; ``cursor_screen_cell`` converts to the
1-based cells used by CSI cursor positioning.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width
from ..cursor_list import CursorPosition

HEADER_ROWS = 1
GUTTER_WIDTH = 4


@dataclass(frozen=True)
class ListLayout:
    """Where the listing sits on screen for one frame."""

    width: int
    height: int
    origin_x: int
    origin_y: int
    list_rows: int
    help_rows: int


def compute_layout(columns: int, lines: int, *, show_line_numbers: bool = True, help_rows: int = 0) -> ListLayout:
    """Split the terminal into header, gutter + listing, and optional help pane."""
    width = max(1, columns)
    height = max(1, lines)
    help_rows = max(0, min(help_rows, height - HEADER_ROWS - 1))
    list_rows = max(1, height - HEADER_ROWS - help_rows)
    origin_x = GUTTER_WIDTH if show_line_numbers and width > GUTTER_WIDTH else 0
    return ListLayout(
        width=width,
        height=height,
        origin_x=origin_x,
        origin_y=HEADER_ROWS,
        list_rows=list_rows,
        help_rows=help_rows,
    )


def scroll_start_for_cursor(row: int, list_start: int, visible_rows: int, total_rows: int) -> int:
    """Return a scroll offset that keeps ``row`` inside the visible window."""
    visible_rows = max(1, visible_rows)
    if row < list_start:
        list_start = row
    elif row >= list_start + visible_rows:
        list_start = row - visible_rows + 1
    return max(0, min(list_start, max(0, total_rows - visible_rows)))


def cursor_screen_cell(
    layout: ListLayout,
    position: CursorPosition,
    list_start: int,
    label: str | None,
) -> tuple[int, int]:
    """Translate a listing cursor into a 1-based ``(col, row)`` terminal cell."""
    prefix = label[: position.column] if label else ""
    col = layout.origin_x + display_width(prefix)
    row = layout.origin_y + max(0, position.row - list_start)
    col = max(0, min(col, layout.width - 1))
    row = max(0, min(row, layout.origin_y + layout.list_rows - 1))
    return col + 1, row + 1


__all__ = [
    "GUTTER_WIDTH",
    "HEADER_ROWS",
    "ListLayout",
    "compute_layout",
    "cursor_screen_cell",
    "scroll_start_for_cursor",
]
