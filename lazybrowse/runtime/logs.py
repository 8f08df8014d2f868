"""Logging setup for the interactive session.

The TUI owns the terminal, so records only ever go to a file. Without a log
file the package logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOGGER_NAME = "lazybrowse"
LOG_FILE_ENV = "LAZYBROWSE_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def parse_log_level(name: str | None) -> int:
    """Map a level name to its ``logging`` constant, defaulting to WARNING."""
    level = getattr(logging, (name or DEFAULT_LOG_LEVEL).upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_file: Path | None = None, level: str | None = None) -> logging.Logger:
    """Route ``lazybrowse`` records to ``log_file`` (or ``$LAZYBROWSE_LOG_FILE``).

    Replaces handlers from earlier calls so repeated setup does not duplicate
    output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file is None and os.environ.get(LOG_FILE_ENV):
        log_file = Path(os.environ[LOG_FILE_ENV])

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    logger.setLevel(parse_log_level(level))
    logger.propagate = False
    return logger


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOGGER_NAME",
    "LOG_FILE_ENV",
    "configure_logging",
    "parse_log_level",
]
