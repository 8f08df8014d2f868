"""Interactive runtime: config, logging, terminal control and the event loop.

Public names resolve lazily because ``lazybrowse.input`` imports
``lazybrowse.runtime.state`` while ``lazybrowse.runtime.app`` imports
``lazybrowse.input``.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import run_browser
    from .config import BrowserConfig, load_browser_config
    from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

_LAZY_EXPORTS = {
    "run_browser": ".app",
    "BrowserConfig": ".config",
    "load_browser_config": ".config",
    "RuntimeLoopCallbacks": ".loop",
    "RuntimeLoopTiming": ".loop",
    "run_main_loop": ".loop",
}


def __getattr__(name: str):
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(importlib.import_module(module_name, __name__), name)


__all__ = sorted(_LAZY_EXPORTS)
