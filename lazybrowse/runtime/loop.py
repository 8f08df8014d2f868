"""Main interactive event loop for the terminal UI.

Each iteration recomputes layout and scroll, renders when dirty, then waits
for one key or one tick. Feature logic lives in injected callbacks.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..render import RenderContext
from ..render.help import help_panel_row_count
from .layout import ListLayout, compute_layout, scroll_start_for_cursor
from .state import AppState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    tick_ms: int


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    handle_key: Callable[[str], bool]
    render: Callable[[RenderContext], None]


def expire_status_message(state: AppState, now: float) -> None:
    if state.status_message and now >= state.status_message_until:
        state.status_message = ""
        state.status_message_until = 0.0
        state.dirty = True


def build_render_context(state: AppState, layout: ListLayout) -> RenderContext:
    session = state.session
    return RenderContext(
        lines=session.lines,
        cursor=session.position,
        list_start=state.list_start,
        layout=layout,
        current_dir=session.current_dir,
        show_hidden=session.show_hidden,
        show_help=state.show_help,
        show_line_numbers=state.show_line_numbers,
        show_size_labels=state.show_size_labels,
        status_message=state.status_message,
        theme=state.theme,
    )


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Run the main interactive TUI loop until a quit action occurs.

    A read timeout is a tick: it only lets status messages expire. Every
    key is handed to ``callbacks.handle_key``.
    """
    last_layout: ListLayout | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            expire_status_message(state, clock())

            layout = compute_layout(
                term.columns,
                term.lines,
                show_line_numbers=state.show_line_numbers,
                help_rows=help_panel_row_count() if state.show_help else 0,
            )
            if layout != last_layout:
                last_layout = layout
                state.dirty = True

            session = state.session
            prev_list_start = state.list_start
            state.list_start = scroll_start_for_cursor(
                session.position.row,
                state.list_start,
                layout.list_rows,
                len(session.lines),
            )
            if state.list_start != prev_list_start:
                state.dirty = True

            if state.dirty:
                callbacks.render(build_render_context(state, layout))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.tick_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if state.skip_next_lf and key == "ENTER_LF":
                state.skip_next_lf = False
                continue

            if key == "ENTER_CR":
                key = "ENTER"
                state.skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                state.skip_next_lf = False
            else:
                state.skip_next_lf = False

            if callbacks.handle_key(key):
                break
