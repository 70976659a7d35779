from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from pathlib import Path

from treegrow.animation import RevealAnimator
from treegrow.preview import PreviewLoader
from treegrow.render import FrameRenderer
from treegrow.runtime import AppState, RuntimeLoopTiming, run_main_loop
from treegrow.tree_index import TreeIndex, WalkEntry, build_nodes
from treegrow.ui_theme import PLAIN_THEME
from treegrow.viewport import ViewportController

ROOT = Path("/virtual/root")


def _make_state(depths: list[int], tick_interval: float = 0.1, complete: bool = False) -> AppState:
    entries = [WalkEntry(ROOT, 0, True)]
    for i, depth in enumerate(depths):
        path = ROOT.joinpath(*[f"n{i}"] * depth)
        entries.append(WalkEntry(path, depth, True))
    nodes, stats = build_nodes(entries)
    index = TreeIndex(ROOT, nodes, stats)
    animator = RevealAnimator(index.max_node_depth, tick_interval=tick_interval)
    if complete:
        animator.finish()
    preview = PreviewLoader()
    viewport = ViewportController(index, animator, preview, lambda _path: None)
    return AppState(
        index=index,
        animator=animator,
        viewport=viewport,
        preview=preview,
        renderer=FrameRenderer(index),
        theme=PLAIN_THEME,
    )


class _FakeTerminal:
    def __init__(self) -> None:
        self.frames: list[str] = []
        self.raw_mode_entered = 0
        self.raw_mode_exited = 0

    @contextmanager
    def raw_mode(self):
        self.raw_mode_entered += 1
        try:
            yield
        finally:
            self.raw_mode_exited += 1

    def write(self, data: str) -> None:
        self.frames.append(data)


class _ScriptedKeys:
    def __init__(self, keys: list[str]) -> None:
        self._keys = list(keys)
        self.timeouts: list[int | None] = []

    def __call__(self, fd: int, timeout_ms: int | None = None) -> str:
        self.timeouts.append(timeout_ms)
        if not self._keys:
            return "q"
        return self._keys.pop(0)


class _Clock:
    def __init__(self, step: float = 0.0) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


def _fixed_size(columns: int = 80, lines: int = 24):
    def terminal_size(_fallback=(80, 24)) -> os.terminal_size:
        return os.terminal_size((columns, lines))

    return terminal_size


class MainLoopTests(unittest.TestCase):
    def test_quit_key_returns_inside_raw_mode(self) -> None:
        state = _make_state([1, 2])
        terminal = _FakeTerminal()

        run_main_loop(
            state,
            terminal,
            0,
            read_key=_ScriptedKeys(["q"]),
            terminal_size=_fixed_size(),
            monotonic=_Clock(),
        )

        self.assertEqual(terminal.raw_mode_entered, 1)
        self.assertEqual(terminal.raw_mode_exited, 1)
        self.assertEqual(len(terminal.frames), 1)
        self.assertTrue(terminal.frames[0].startswith("\033[H\033[J"))

    def test_elapsed_time_drives_the_reveal_until_complete(self) -> None:
        state = _make_state([1, 2, 3], tick_interval=0.1)
        keys = _ScriptedKeys(["", "", "", "", "", "", "q"])

        run_main_loop(
            state,
            _FakeTerminal(),
            0,
            read_key=keys,
            terminal_size=_fixed_size(),
            monotonic=_Clock(step=0.05),
        )

        self.assertTrue(state.animator.complete)

    def test_poll_timeout_never_exceeds_next_tick(self) -> None:
        growing = _make_state([1], tick_interval=0.1)
        growing_keys = _ScriptedKeys(["q"])
        run_main_loop(growing, _FakeTerminal(), 0, read_key=growing_keys, terminal_size=_fixed_size(), monotonic=_Clock())

        done = _make_state([1], complete=True)
        done_keys = _ScriptedKeys(["q"])
        timing = RuntimeLoopTiming(idle_poll_seconds=0.5)
        run_main_loop(done, _FakeTerminal(), 0, timing=timing, read_key=done_keys, terminal_size=_fixed_size(), monotonic=_Clock())

        self.assertEqual(growing_keys.timeouts, [100])
        self.assertEqual(done_keys.timeouts, [500])

    def test_idle_iterations_do_not_redraw(self) -> None:
        state = _make_state([1], complete=True)
        terminal = _FakeTerminal()

        run_main_loop(
            state,
            terminal,
            0,
            read_key=_ScriptedKeys(["", "", "", "q"]),
            terminal_size=_fixed_size(),
            monotonic=_Clock(step=1.0),
        )

        self.assertEqual(len(terminal.frames), 1)

    def test_key_change_redraws_once(self) -> None:
        state = _make_state([1] * 40, complete=True)
        terminal = _FakeTerminal()

        run_main_loop(
            state,
            terminal,
            0,
            read_key=_ScriptedKeys(["DOWN", "", "q"]),
            terminal_size=_fixed_size(),
            monotonic=_Clock(),
        )

        self.assertEqual(state.viewport.scroll_offset, 1)
        self.assertEqual(len(terminal.frames), 2)

    def test_resize_clamps_scroll_and_redraws(self) -> None:
        state = _make_state([1] * 30, complete=True)
        sizes = iter([(80, 12), (80, 12), (80, 40)])
        terminal = _FakeTerminal()

        def terminal_size(_fallback=(80, 24)) -> os.terminal_size:
            return os.terminal_size(next(sizes, (80, 40)))

        run_main_loop(
            state,
            terminal,
            0,
            read_key=_ScriptedKeys(["PAGE_DOWN", "", "q"]),
            terminal_size=terminal_size,
            monotonic=_Clock(),
        )

        self.assertEqual(state.viewport.scroll_offset, 0)
        self.assertEqual(len(terminal.frames), 3)


if __name__ == "__main__":
    unittest.main()
