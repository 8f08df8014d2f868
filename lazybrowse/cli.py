"""Command-line front door for lazybrowse.

Parses CLI options, merges them over the config file, sets up logging and
dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from .cursor_list import VIEW_MODE_TREE
from .file_model import ScanFailed
from .runtime import run_browser
from .runtime.config import load_browser_config
from .runtime.logs import configure_logging
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazybrowse",
        description="Browse directories in the terminal with vi-style cursor keys.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("--tree", action="store_true", help="Expand directories in place instead of descending.")
    parser.add_argument("--show-hidden", action="store_true", help="Start with dot-files visible.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the listing and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    parser.add_argument("--log-level", default=None, help="Log level name (default: WARNING).")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazybrowse on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file, args.log_level)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    config = load_browser_config()
    overrides: dict[str, object] = {}
    if args.show_hidden:
        overrides["show_hidden"] = True
    if args.tree:
        overrides["view_mode"] = VIEW_MODE_TREE
    if args.theme is not None:
        overrides["theme"] = args.theme
    config = replace(config, **overrides)

    try:
        run_browser(path, config, no_color=args.no_color, print_only=args.print_only)
    except ScanFailed as exc:
        raise SystemExit(f"Cannot open {exc.path}: {exc.reason}") from exc


if __name__ == "__main__":
    main()
