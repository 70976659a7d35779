"""Main interactive event loop for the terminal UI.

Each iteration redraws when needed, waits for at most one input event (never
longer than the next animation tick), dispatches it, then feeds elapsed time to
the animator. Input handling and animation ticks are strictly interleaved.
"""

from __future__ import annotations

import logging
import os
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from .keys import handle_key
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    idle_poll_seconds: float = 0.25


def _poll_timeout_ms(state: AppState, timing: RuntimeLoopTiming) -> int:
    wait = timing.idle_poll_seconds
    until_tick = state.animator.seconds_until_tick()
    if until_tick is not None:
        wait = min(wait, until_tick)
    return max(0, int(wait * 1000))


def run_main_loop(
    state: AppState,
    terminal,
    stdin_fd: int,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    read_key: Callable[..., str] = read_key,
    terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
    monotonic: Callable[[], float] = time.monotonic,
) -> None:
    """Run the interactive loop until a quit key arrives."""
    last_tick_check = monotonic()
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            term = terminal_size((80, 24))
            now = monotonic()
            state.expire_status(now)
            layout = state.layout_for(term.columns, term.lines)
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                state.viewport.clamp_scroll(layout.tree_rows)
                state.dirty = True

            if state.dirty:
                state.renderer.render(state.render_context(layout), terminal.write)
                state.dirty = False

            key = read_key(stdin_fd, timeout_ms=_poll_timeout_ms(state, timing))
            if key:
                if handle_key(state, key, layout, monotonic()):
                    logger.info("quit requested")
                    return

            now = monotonic()
            was_complete = state.animator.complete
            if state.animator.advance(now - last_tick_check):
                state.dirty = True
                if state.animator.complete and not was_complete:
                    logger.info("reveal animation complete at depth %d", state.animator.max_depth)
            last_tick_check = now
