"""Error types raised by directory scanning."""

from __future__ import annotations

from pathlib import Path


class LazybrowseError(Exception):
    """Base class for errors surfaced by lazybrowse."""


class ScanFailed(LazybrowseError):
    """A directory could not be listed (missing, not a directory, or unreadable)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot open {path}: {reason}")
        self.path = path
        self.reason = reason

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> ScanFailed:
        """Build a scan error using the OS error text as the reason."""
        reason = exc.strerror or exc.__class__.__name__
        return cls(path, reason)


__all__ = [
    "LazybrowseError",
    "ScanFailed",
]
