"""Command-line front door for treegrow.

Parses CLI options, validates the target directory, and merges flags over the
user settings file. Then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from .config import load_settings
from .log import setup_logging
from .runtime import run_app
from .ui_theme import available_glyph_names, available_theme_names

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treegrow",
        description="Watch a directory tree grow in the terminal, then browse and preview its folders.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to visualize.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--glyphs",
        default=None,
        choices=available_glyph_names(),
        help="Tree connector style.",
    )
    parser.add_argument("--tick-ms", type=_positive_int, default=None, help="Milliseconds per reveal step.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write the debug log to this file.")
    return parser


def validate_root(raw_path: str | None) -> Path:
    """Return the directory to walk or exit with a distinct message per failure."""
    if raw_path is None:
        raise SystemExit("Usage: treegrow <directory_path>")
    path = Path(raw_path)
    if not path.exists():
        raise SystemExit(f"Error: Path '{path}' does not exist")
    if not path.is_dir():
        raise SystemExit(f"Error: Path '{path}' is not a directory")
    return path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the visualizer on a directory."""
    args = build_parser().parse_args(argv)
    root = validate_root(args.path)
    setup_logging(args.log_file)

    settings = load_settings()
    if args.theme is not None:
        settings = replace(settings, theme=args.theme)
    if args.glyphs is not None:
        settings = replace(settings, glyphs=args.glyphs)
    if args.tick_ms is not None:
        settings = replace(settings, tick_ms=args.tick_ms)

    logger.debug("settings: %s", settings)
    run_app(root, settings, no_color=args.no_color)


if __name__ == "__main__":
    main()
