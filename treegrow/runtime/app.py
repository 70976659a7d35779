"""Session bootstrap: build the index once, wire components, run the loop."""

from __future__ import annotations

import logging
import sys
import termios
from collections.abc import Callable
from pathlib import Path

from ..animation import RevealAnimator
from ..config import Settings
from ..opener import open_in_application
from ..preview import PreviewLoader
from ..render import FrameRenderer
from ..terminal import TerminalController
from ..tree_index import TreeIndex
from ..ui_theme import resolve_glyphs, resolve_theme
from ..viewport import ViewportController
from .loop import RuntimeLoopTiming, run_main_loop
from .state import AppState

logger = logging.getLogger(__name__)


def build_app_state(
    root: Path,
    settings: Settings,
    no_color: bool = False,
    open_path: Callable[[Path], str | None] = open_in_application,
) -> AppState:
    """Walk ``root`` and assemble a ready-to-run session."""
    index = TreeIndex.build(root)
    animator = RevealAnimator(index.max_node_depth, tick_interval=settings.tick_seconds)
    preview = PreviewLoader()
    viewport = ViewportController(
        index,
        animator,
        preview,
        open_path,
        double_click_seconds=settings.double_click_seconds,
    )
    return AppState(
        index=index,
        animator=animator,
        viewport=viewport,
        preview=preview,
        renderer=FrameRenderer(index),
        theme=resolve_theme(settings.theme, no_color=no_color),
        glyphs=resolve_glyphs(settings.glyphs),
        left_pane_percent=settings.left_pane_percent,
    )


def run_app(root: Path, settings: Settings, no_color: bool = False) -> None:
    state = build_app_state(root, settings, no_color=no_color)
    try:
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    except termios.error as exc:
        raise SystemExit("treegrow needs an interactive terminal.") from exc
    logger.info("starting session for %s", root)
    run_main_loop(state, terminal, sys.stdin.fileno(), RuntimeLoopTiming())
