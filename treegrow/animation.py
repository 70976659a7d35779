"""Depth-by-depth reveal animation for the tree pane.

The animator is a two-state machine (growing, complete) advanced explicitly by
the runtime loop. Time is fed in as elapsed seconds so tests never sleep.
"""

from __future__ import annotations

from dataclasses import dataclass

from .tree_index import Node

FRAME_PHASES = 3
DEFAULT_TICK_SECONDS = 0.01


@dataclass
class AnimationState:
    revealed_depth: int = 0
    complete: bool = False
    frame_counter: int = 0


class RevealAnimator:
    """Expose tree levels one depth at a time until ``max_depth`` is passed."""

    def __init__(self, max_depth: int, tick_interval: float = DEFAULT_TICK_SECONDS) -> None:
        self.max_depth = max(0, max_depth)
        self.tick_interval = max(0.0, tick_interval)
        self.state = AnimationState()
        self._pending = 0.0

    @property
    def revealed_depth(self) -> int:
        return self.state.revealed_depth

    @property
    def complete(self) -> bool:
        return self.state.complete

    @property
    def frame_counter(self) -> int:
        return self.state.frame_counter

    @property
    def frontier_depth(self) -> int | None:
        """Depth currently drawing partial connectors, or ``None`` once complete."""
        if self.state.complete:
            return None
        return self.state.revealed_depth

    def is_visible(self, node: Node) -> bool:
        return node.depth <= self.state.revealed_depth

    def tick(self) -> bool:
        """Advance one step. Returns ``False`` when already complete."""
        state = self.state
        if state.complete:
            return False
        if state.revealed_depth + 1 > self.max_depth:
            state.revealed_depth += 1
            state.complete = True
            return True
        state.revealed_depth += 1
        state.frame_counter = (state.frame_counter + 1) % FRAME_PHASES
        return True

    def advance(self, elapsed: float) -> int:
        """Feed ``elapsed`` seconds and run one tick per whole interval."""
        if self.state.complete:
            self._pending = 0.0
            return 0
        if self.tick_interval <= 0:
            return 1 if self.tick() else 0
        self._pending += max(0.0, elapsed)
        ticks = 0
        while self._pending >= self.tick_interval and not self.state.complete:
            self._pending -= self.tick_interval
            if self.tick():
                ticks += 1
        return ticks

    def seconds_until_tick(self) -> float | None:
        """Remaining time before the next tick is due, ``None`` when complete."""
        if self.state.complete:
            return None
        return max(0.0, self.tick_interval - self._pending)

    def finish(self) -> None:
        """Skip the rest of the animation."""
        while self.tick():
            pass
