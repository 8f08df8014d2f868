"""Domain model for one-level directory snapshots.

This package contains non-UI primitives:
- classified entry datatypes (directory / file / symlink)
- the scan error raised when a directory cannot be listed
- the one-level directory scanner
"""

from __future__ import annotations

from .errors import LazybrowseError, ScanFailed
from .fs import entry_extension, is_hidden_name, scan_directory
from .types import Entry, EntryKind, Snapshot

__all__ = [
    "Entry",
    "EntryKind",
    "Snapshot",
    "LazybrowseError",
    "ScanFailed",
    "entry_extension",
    "is_hidden_name",
    "scan_directory",
]
