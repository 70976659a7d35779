"""CLI argument validation and settings-override tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treegrow import cli
from treegrow.config import Settings


class ValidateRootTests(unittest.TestCase):
    def test_missing_argument_prints_usage(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.validate_root(None)

        self.assertEqual(str(ctx.exception), "Usage: treegrow <directory_path>")

    def test_nonexistent_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            with self.assertRaises(SystemExit) as ctx:
                cli.validate_root(str(missing))

        self.assertEqual(str(ctx.exception), f"Error: Path '{missing}' does not exist")

    def test_regular_file_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                cli.validate_root(str(target))

        self.assertEqual(str(ctx.exception), f"Error: Path '{target}' is not a directory")

    def test_directory_is_accepted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(cli.validate_root(tmp), Path(tmp))


class MainTests(unittest.TestCase):
    def test_main_merges_flags_over_settings_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            file_settings = Settings(theme="ocean", glyphs="box", tick_ms=25)
            with mock.patch("treegrow.cli.load_settings", return_value=file_settings), mock.patch(
                "treegrow.cli.setup_logging"
            ) as setup_logging, mock.patch("treegrow.cli.run_app") as run_app:
                cli.main([tmp, "--glyphs", "ascii", "--tick-ms", "5", "--no-color", "--log-file", "/tmp/tg.log"])

        setup_logging.assert_called_once_with(Path("/tmp/tg.log"))
        run_app.assert_called_once()
        root, settings = run_app.call_args.args
        self.assertEqual(root, Path(tmp))
        self.assertEqual(settings.theme, "ocean")
        self.assertEqual(settings.glyphs, "ascii")
        self.assertEqual(settings.tick_ms, 5)
        self.assertTrue(run_app.call_args.kwargs["no_color"])

    def test_main_uses_settings_file_when_no_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            file_settings = Settings(theme="plain", tick_ms=30)
            with mock.patch("treegrow.cli.load_settings", return_value=file_settings), mock.patch(
                "treegrow.cli.setup_logging"
            ) as setup_logging, mock.patch("treegrow.cli.run_app") as run_app:
                cli.main([tmp])

        setup_logging.assert_called_once_with(None)
        _root, settings = run_app.call_args.args
        self.assertEqual(settings, file_settings)
        self.assertFalse(run_app.call_args.kwargs["no_color"])

    def test_invalid_path_exits_before_logging_or_walking(self) -> None:
        with mock.patch("treegrow.cli.setup_logging") as setup_logging, mock.patch("treegrow.cli.run_app") as run_app:
            with self.assertRaises(SystemExit):
                cli.main(["/definitely/not/here"])

        setup_logging.assert_not_called()
        run_app.assert_not_called()

    def test_tick_ms_must_be_positive(self) -> None:
        with mock.patch("treegrow.cli.run_app") as run_app, mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([".", "--tick-ms", "0"])

        self.assertEqual(ctx.exception.code, 2)
        run_app.assert_not_called()

    def test_unknown_glyph_style_is_rejected(self) -> None:
        with mock.patch("treegrow.cli.run_app") as run_app, mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([".", "--glyphs", "emoji"])

        self.assertEqual(ctx.exception.code, 2)
        run_app.assert_not_called()


if __name__ == "__main__":
    unittest.main()
