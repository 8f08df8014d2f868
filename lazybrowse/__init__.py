"""lazybrowse: a terminal directory browser with vi-style cursor motion.

``main`` runs the command line front end; the browsing model lives in
``lazybrowse.file_model``, ``lazybrowse.cursor_list`` and ``lazybrowse.session``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Run the CLI, importing it on first use."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["__version__", "main"]
