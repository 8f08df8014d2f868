"""Tests for one-level directory scanning.

Covers classification order, hidden filtering, extensions and scan failures.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazybrowse.file_model import (
    Entry,
    EntryKind,
    ScanFailed,
    entry_extension,
    is_hidden_name,
    scan_directory,
)


def _by_name(entries: tuple[Entry, ...]) -> dict[str, Entry]:
    return {entry.name: entry for entry in entries}


class ScanDirectoryTests(unittest.TestCase):
    def test_scan_lists_one_level_with_kinds_and_extensions(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            nested = root / "nested"
            nested.mkdir()
            (nested / "nested_file.txt").write_text("Hello, Nested!\n", encoding="utf-8")
            (root / "root_file.txt").write_text("Hello, World!\n", encoding="utf-8")

            snapshot = scan_directory(root, show_hidden=False)

            self.assertEqual(snapshot.current_dir, root)
            entries = _by_name(snapshot.entries)
            self.assertEqual(set(entries), {"nested", "root_file.txt"})
            self.assertEqual(entries["nested"].kind, EntryKind.DIRECTORY)
            self.assertIsNone(entries["nested"].extension)
            self.assertIsNone(entries["nested"].size)
            self.assertEqual(entries["root_file.txt"].kind, EntryKind.FILE)
            self.assertEqual(entries["root_file.txt"].extension, "txt")
            self.assertEqual(entries["root_file.txt"].size, len("Hello, World!\n"))
            self.assertEqual(entries["root_file.txt"].path, root / "root_file.txt")

    def test_empty_directory_yields_no_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            snapshot = scan_directory(Path(tmp), show_hidden=True)

            self.assertEqual(snapshot.entries, ())
            self.assertEqual(len(snapshot), 0)

    def test_symlink_to_directory_is_classified_as_symlink(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real_dir").mkdir()
            (root / "real_file.py").write_text("x = 1\n", encoding="utf-8")
            os.symlink(root / "real_dir", root / "dir_link")
            os.symlink(root / "real_file.py", root / "file_link.py")

            entries = _by_name(scan_directory(root, show_hidden=False).entries)

            self.assertEqual(entries["dir_link"].kind, EntryKind.SYMLINK)
            self.assertEqual(entries["file_link.py"].kind, EntryKind.SYMLINK)
            self.assertIsNone(entries["file_link.py"].extension)
            self.assertEqual(entries["real_dir"].kind, EntryKind.DIRECTORY)

    def test_dangling_symlink_is_listed_as_symlink(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.symlink(root / "missing", root / "broken")

            entries = _by_name(scan_directory(root, show_hidden=False).entries)

            self.assertEqual(entries["broken"].kind, EntryKind.SYMLINK)

    def test_non_file_entries_never_carry_extensions(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "archive.d").mkdir()
            (root / "notes.md").write_text("", encoding="utf-8")
            os.symlink(root / "notes.md", root / "link.md")

            for entry in scan_directory(root, show_hidden=True).entries:
                if entry.kind is not EntryKind.FILE:
                    self.assertIsNone(entry.extension, entry.name)

    def test_hidden_entries_are_filtered_at_scan_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".hidden_file").write_text("", encoding="utf-8")
            (root / ".config").mkdir()
            (root / "visible.txt").write_text("", encoding="utf-8")

            without_hidden = scan_directory(root, show_hidden=False)
            with_hidden = scan_directory(root, show_hidden=True)

            self.assertEqual([entry.name for entry in without_hidden.entries], ["visible.txt"])
            self.assertFalse(any(entry.name.startswith(".") for entry in without_hidden.entries))
            visible_names = {entry.name for entry in without_hidden.entries}
            all_names = {entry.name for entry in with_hidden.entries}
            self.assertTrue(visible_names < all_names)
            hidden = _by_name(with_hidden.entries)[".hidden_file"]
            self.assertTrue(hidden.hidden)
            self.assertIsNone(hidden.extension)

    def test_missing_path_raises_scan_failed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"

            with self.assertRaises(ScanFailed) as ctx:
                scan_directory(missing, show_hidden=False)

            self.assertEqual(ctx.exception.path, missing.resolve())
            self.assertTrue(ctx.exception.reason)

    def test_regular_file_path_raises_scan_failed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")

            with self.assertRaises(ScanFailed):
                scan_directory(target, show_hidden=False)

    def test_unreadable_directory_raises_scan_failed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazybrowse.file_model.fs.os.scandir", side_effect=PermissionError(13, "Permission denied")):
                with self.assertRaises(ScanFailed) as ctx:
                    scan_directory(Path(tmp), show_hidden=False)

            self.assertEqual(ctx.exception.reason, "Permission denied")

    def _scan_with_failures(
        self,
        root: Path,
        *,
        type_errors: frozenset[str] = frozenset(),
        stat_errors: frozenset[str] = frozenset(),
    ):
        real_scandir = os.scandir

        class _FlakyEntry:
            def __init__(self, inner: os.DirEntry[str]) -> None:
                self._inner = inner
                self.name = inner.name
                self.path = inner.path

            def is_symlink(self) -> bool:
                if self.name in type_errors:
                    raise FileNotFoundError(2, "No such file or directory")
                return self._inner.is_symlink()

            def is_dir(self) -> bool:
                return self._inner.is_dir()

            def stat(self, follow_symlinks: bool = True) -> os.stat_result:
                if self.name in stat_errors:
                    raise PermissionError(13, "Permission denied")
                return self._inner.stat(follow_symlinks=follow_symlinks)

        class _Iterator:
            def __init__(self, path: Path) -> None:
                self._inner = real_scandir(path)

            def __enter__(self) -> _Iterator:
                return self

            def __exit__(self, *exc_info: object) -> None:
                self._inner.close()

            def __iter__(self):
                return (_FlakyEntry(entry) for entry in self._inner)

        with mock.patch("lazybrowse.file_model.fs.os.scandir", side_effect=_Iterator):
            return scan_directory(root, show_hidden=False)

    def test_child_that_vanishes_mid_scan_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "keep.txt").write_text("", encoding="utf-8")
            (root / "gone.txt").write_text("", encoding="utf-8")

            snapshot = self._scan_with_failures(root, type_errors=frozenset({"gone.txt"}))

            self.assertEqual([entry.name for entry in snapshot.entries], ["keep.txt"])

    def test_file_without_readable_size_is_kept(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "locked.txt").write_text("data", encoding="utf-8")
            (root / "open.txt").write_text("data", encoding="utf-8")
            (root / "sub").mkdir()

            snapshot = self._scan_with_failures(root, stat_errors=frozenset({"locked.txt", "sub"}))

            entries = _by_name(snapshot.entries)
            self.assertEqual(set(entries), {"locked.txt", "open.txt", "sub"})
            self.assertEqual(entries["locked.txt"].kind, EntryKind.FILE)
            self.assertEqual(entries["locked.txt"].extension, "txt")
            self.assertIsNone(entries["locked.txt"].size)
            self.assertEqual(entries["open.txt"].size, 4)
            self.assertEqual(entries["sub"].kind, EntryKind.DIRECTORY)


class EntryHelpersTests(unittest.TestCase):
    def test_entry_extension_rules(self) -> None:
        self.assertEqual(entry_extension("main.rs"), "rs")
        self.assertEqual(entry_extension("archive.tar.gz"), "gz")
        self.assertIsNone(entry_extension("Makefile"))
        self.assertIsNone(entry_extension(".bashrc"))
        self.assertIsNone(entry_extension("trailing."))
        self.assertEqual(entry_extension(".config.json"), "json")

    def test_is_hidden_name_uses_dot_prefix(self) -> None:
        self.assertTrue(is_hidden_name(".git"))
        self.assertFalse(is_hidden_name("git."))

    def test_entry_rejects_extension_on_non_file(self) -> None:
        with self.assertRaises(ValueError):
            Entry(name="dir.d", path=Path("/tmp/dir.d"), kind=EntryKind.DIRECTORY, extension="d")


if __name__ == "__main__":
    unittest.main()
