"""Rendering for the directory listing view.

Defines the render context and composes full ANSI frames: header, line-number
gutter, listing rows and the optional help pane. The terminal cursor is
placed once, at the end of each frame.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import clip_ansi_line
from ..cursor_list import CursorPosition, DisplayLine
from ..file_model import EntryKind
from ..runtime.layout import ListLayout, cursor_screen_cell
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import help_panel_lines, help_panel_row_count

SIZE_LABEL_MIN_BYTES = 10 * 1024


@dataclass
class RenderContext:
    lines: tuple[DisplayLine, ...]
    cursor: CursorPosition
    list_start: int
    layout: ListLayout
    current_dir: Path
    show_hidden: bool = False
    show_help: bool = False
    show_line_numbers: bool = True
    show_size_labels: bool = False
    status_message: str = ""
    theme: UITheme = DEFAULT_THEME


def color_for_line(line: DisplayLine, theme: UITheme) -> str:
    """Return the ANSI color for a listing row based on its entry kind."""
    kind = line.entry.kind
    if kind is EntryKind.DIRECTORY:
        return theme.tree_dir
    if kind is EntryKind.SYMLINK:
        return theme.tree_symlink
    return theme.tree_file_default


def format_listing_row(line: DisplayLine, theme: UITheme, show_size_labels: bool = False) -> str:
    """Render one listing row as ANSI-styled text."""
    reset = theme.reset
    size_label = ""
    size = line.entry.size
    if show_size_labels and size is not None and size >= SIZE_LABEL_MIN_BYTES:
        size_label = f"{theme.tree_size} [{size // 1024} KB]{reset}"
    return f"{color_for_line(line, theme)}{line.label}{reset}{size_label}"


def format_header(context: RenderContext) -> str:
    theme = context.theme
    reset = theme.reset
    header = f"{theme.header_path}{context.current_dir}{reset}"
    if context.show_hidden:
        header += " [hidden shown]"
    if context.status_message:
        header += f"  {theme.status_error}{context.status_message}{reset}"
    return header


def format_gutter(index: int, total: int, theme: UITheme) -> str:
    """Return the line-number cell for listing ``index`` (``~`` past the end)."""
    if index < total:
        return f"{theme.line_number}{index + 1:>3}{theme.reset} "
    return f"{theme.line_filler}  ~{theme.reset} "


def build_frame(context: RenderContext) -> str:
    """Compose one complete frame, ending with the cursor placement."""
    layout = context.layout
    theme = context.theme
    width = layout.width
    list_width = max(0, width - layout.origin_x)
    row_reset = "\033[0m" if theme.reset else ""
    total = len(context.lines)

    out: list[str] = ["\033[?25l\033[H\033[J"]
    out.append(clip_ansi_line(format_header(context), width))
    out.append(row_reset)

    for offset in range(layout.list_rows):
        index = context.list_start + offset
        out.append(f"\033[{layout.origin_y + offset + 1};1H")
        if layout.origin_x > 0:
            out.append(format_gutter(index, total, theme))
        if index < total:
            row = format_listing_row(context.lines[index], theme, context.show_size_labels)
            out.append(clip_ansi_line(row, list_width))
            out.append(row_reset)

    if context.show_help and layout.help_rows > 0:
        help_top = layout.origin_y + layout.list_rows
        for offset, row in enumerate(help_panel_lines(width, theme)[: layout.help_rows]):
            out.append(f"\033[{help_top + offset + 1};1H")
            out.append(row)
            out.append(row_reset)

    label = None
    if total:
        label = context.lines[min(context.cursor.row, total - 1)].label
    col, row = cursor_screen_cell(layout, context.cursor, context.list_start, label)
    out.append(f"\033[{row};{col}H\033[?25h")
    return "".join(out)


def format_listing_text(lines: tuple[DisplayLine, ...], theme: UITheme, show_size_labels: bool = False) -> str:
    """Return the listing as newline-terminated rows for non-interactive output."""
    return "".join(format_listing_row(line, theme, show_size_labels) + "\n" for line in lines)


def render_frame(context: RenderContext) -> None:
    """Write one composed frame to stdout."""
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "SIZE_LABEL_MIN_BYTES",
    "build_frame",
    "color_for_line",
    "format_gutter",
    "format_header",
    "format_listing_row",
    "format_listing_text",
    "help_panel_row_count",
    "render_frame",
]
