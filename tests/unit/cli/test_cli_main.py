"""CLI argument and default-path behavior tests.

Verifies how ``lazybrowse.cli.main`` picks the start directory, merges flags
over the config file and reports startup failures.
"""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import lazybrowse
from lazybrowse import cli
from lazybrowse.file_model import ScanFailed
from lazybrowse.runtime.config import BrowserConfig


class CliMainTests(unittest.TestCase):
    def _main(self, argv: list[str], config: BrowserConfig | None = None, default_path: Path | None = None):
        with mock.patch.object(sys, "argv", ["lazybrowse", *argv]), mock.patch(
            "lazybrowse.cli.run_browser"
        ) as run_browser, mock.patch(
            "lazybrowse.cli.load_browser_config", return_value=config or BrowserConfig()
        ), mock.patch("lazybrowse.cli.configure_logging") as configure_logging:
            cli.main(default_path=default_path)
        return run_browser, configure_logging

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                run_browser, _configure = self._main([])
            finally:
                os.chdir(previous_cwd)

            run_browser.assert_called_once()
            path, config = run_browser.call_args.args
            self.assertEqual(path.resolve(), root)
            self.assertEqual(config, BrowserConfig())
            self.assertEqual(run_browser.call_args.kwargs, {"no_color": False, "print_only": False})

    def test_flags_override_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            run_browser, _configure = self._main(
                [tmp, "--tree", "--show-hidden", "--theme", "ocean", "--no-color", "--print"],
                config=BrowserConfig(tick_ms=90),
            )

            path, config = run_browser.call_args.args
            self.assertEqual(path, Path(tmp))
            self.assertTrue(config.show_hidden)
            self.assertEqual(config.view_mode, "tree")
            self.assertEqual(config.theme, "ocean")
            self.assertEqual(config.tick_ms, 90)
            self.assertEqual(run_browser.call_args.kwargs, {"no_color": True, "print_only": True})

    def test_log_options_are_passed_to_logging_setup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "browse.log"

            _run_browser, configure_logging = self._main([tmp, "--log-file", str(log_path), "--log-level", "debug"])

            configure_logging.assert_called_once_with(log_path, "debug")

    def test_missing_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            with self.assertRaises(SystemExit) as ctx:
                self._main([str(missing)])

            self.assertEqual(str(ctx.exception), f"Path not found: {missing}")

    def test_file_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")

            with self.assertRaises(SystemExit) as ctx:
                self._main([str(target)])

            self.assertEqual(str(ctx.exception), f"Not a directory: {target}")

    def test_scan_failure_becomes_exit_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            failure = ScanFailed(Path(tmp), "Permission denied")
            with mock.patch.object(sys, "argv", ["lazybrowse", tmp]), mock.patch(
                "lazybrowse.cli.run_browser", side_effect=failure
            ), mock.patch("lazybrowse.cli.load_browser_config", return_value=BrowserConfig()), mock.patch(
                "lazybrowse.cli.configure_logging"
            ):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            self.assertEqual(str(ctx.exception), f"Cannot open {tmp}: Permission denied")

    def test_package_main_forwards_to_cli(self) -> None:
        with mock.patch("lazybrowse.cli.main") as cli_main:
            lazybrowse.main(default_path=Path("/tmp"))

        cli_main.assert_called_once_with(default_path=Path("/tmp"))


if __name__ == "__main__":
    unittest.main()
