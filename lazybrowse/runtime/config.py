"""Read-only JSON config helpers.

Holds startup preferences: hidden-file visibility, view mode, theme, tick
rate, gutter/size-label toggles and key overrides. Nothing is written back.
Malformed or missing values fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..commands import parse_command
from ..cursor_list import VIEW_MODE_LIST, VIEW_MODES

logger = logging.getLogger(__name__)

APP_NAME = "lazybrowse"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_TICK_MS = 250
MIN_TICK_MS = 10


@dataclass(frozen=True)
class BrowserConfig:
    """Validated startup preferences."""

    show_hidden: bool = False
    view_mode: str = VIEW_MODE_LIST
    theme: str | None = None
    tick_ms: int = DEFAULT_TICK_MS
    show_line_numbers: bool = True
    show_size_labels: bool = False
    keys: dict[str, str] = field(default_factory=dict)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else keeps ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_tick_ms(data: dict[str, object]) -> int:
    value = data.get("tick_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_TICK_MS
    return max(MIN_TICK_MS, value)


def _load_view_mode(data: dict[str, object]) -> str:
    value = data.get("view_mode")
    if isinstance(value, str) and value.strip().lower() in VIEW_MODES:
        return value.strip().lower()
    return VIEW_MODE_LIST


def _load_keys(data: dict[str, object]) -> dict[str, str]:
    """Keep ``{key: command}`` pairs naming a known command."""
    value = data.get("keys")
    if not isinstance(value, dict):
        return {}
    keys: dict[str, str] = {}
    for key, name in value.items():
        if not isinstance(key, str) or not key or not isinstance(name, str):
            continue
        if parse_command(name) is None:
            logger.warning("ignoring key binding %r: unknown command %r", key, name)
            continue
        keys[key] = name
    return keys


def load_browser_config() -> BrowserConfig:
    """Load and validate startup preferences from ``CONFIG_PATH``."""
    data = load_config()
    theme = data.get("theme")
    return BrowserConfig(
        show_hidden=_load_bool(data, "show_hidden", False),
        view_mode=_load_view_mode(data),
        theme=theme if isinstance(theme, str) and theme else None,
        tick_ms=_load_tick_ms(data),
        show_line_numbers=_load_bool(data, "show_line_numbers", True),
        show_size_labels=_load_bool(data, "show_size_labels", False),
        keys=_load_keys(data),
    )


__all__ = [
    "APP_NAME",
    "BrowserConfig",
    "CONFIG_PATH",
    "DEFAULT_TICK_MS",
    "load_browser_config",
    "load_config",
]
