"""Tests for loading startup preferences from the JSON config file.

Malformed or out-of-range values fall back to defaults instead of failing.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazybrowse.runtime import config


def _write(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


class BrowserConfigTests(unittest.TestCase):
    def test_missing_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazybrowse.runtime.config.CONFIG_PATH", config_path):
                loaded = config.load_browser_config()

        self.assertEqual(loaded, config.BrowserConfig())
        self.assertEqual(loaded.tick_ms, config.DEFAULT_TICK_MS)

    def test_valid_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(
                config_path,
                {
                    "show_hidden": True,
                    "view_mode": "Tree",
                    "theme": "ocean",
                    "tick_ms": 100,
                    "show_line_numbers": False,
                    "show_size_labels": True,
                    "keys": {"x": "quit"},
                },
            )
            with mock.patch("lazybrowse.runtime.config.CONFIG_PATH", config_path):
                loaded = config.load_browser_config()

        self.assertTrue(loaded.show_hidden)
        self.assertEqual(loaded.view_mode, "tree")
        self.assertEqual(loaded.theme, "ocean")
        self.assertEqual(loaded.tick_ms, 100)
        self.assertFalse(loaded.show_line_numbers)
        self.assertTrue(loaded.show_size_labels)
        self.assertEqual(loaded.keys, {"x": "quit"})

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(
                config_path,
                {
                    "show_hidden": "yes",
                    "view_mode": "grid",
                    "theme": 7,
                    "tick_ms": True,
                    "keys": {"x": "explode", "y": 3, "n": "move_down"},
                },
            )
            with mock.patch("lazybrowse.runtime.config.CONFIG_PATH", config_path):
                with self.assertLogs("lazybrowse.runtime.config", level="WARNING"):
                    loaded = config.load_browser_config()

        self.assertFalse(loaded.show_hidden)
        self.assertEqual(loaded.view_mode, "list")
        self.assertIsNone(loaded.theme)
        self.assertEqual(loaded.tick_ms, config.DEFAULT_TICK_MS)
        self.assertEqual(loaded.keys, {"n": "move_down"})

    def test_tick_ms_has_a_floor(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(config_path, {"tick_ms": 1})
            with mock.patch("lazybrowse.runtime.config.CONFIG_PATH", config_path):
                loaded = config.load_browser_config()

        self.assertEqual(loaded.tick_ms, config.MIN_TICK_MS)

    def test_malformed_json_and_non_object_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazybrowse.runtime.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                with self.assertLogs("lazybrowse.runtime.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})

                _write(config_path, ["show_hidden"])
                with self.assertLogs("lazybrowse.runtime.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
