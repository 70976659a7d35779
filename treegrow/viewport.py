"""Scroll, selection, and pointer mapping for the tree pane.

All positions are integer indices into the ``TreeIndex`` sequence. Visibility
is always resolved through ``RevealAnimator.is_visible``; this module keeps no
visibility state of its own beyond a cache keyed by the revealed depth.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .animation import RevealAnimator
from .preview import PreviewLoader
from .tree_index import Node, TreeIndex

DOUBLE_CLICK_SECONDS = 0.5
PAGE_SCROLL_LINES = 10

ACTION_IGNORED = "ignored"
ACTION_SELECT = "select"
ACTION_OPEN = "open"


@dataclass
class ViewState:
    scroll_offset: int = 0
    selected_index: int | None = None
    last_click: tuple[int, float] | None = None


@dataclass(frozen=True)
class ClickAction:
    """Outcome of one pointer click or open request."""

    kind: str
    index: int | None = None
    error: str | None = None


IGNORED = ClickAction(ACTION_IGNORED)


class ViewportController:
    def __init__(
        self,
        index: TreeIndex,
        animator: RevealAnimator,
        preview: PreviewLoader,
        open_path: Callable[[Path], str | None],
        double_click_seconds: float = DOUBLE_CLICK_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.index = index
        self.animator = animator
        self.preview = preview
        self.open_path = open_path
        self.double_click_seconds = double_click_seconds
        self.monotonic = monotonic
        self.state = ViewState()
        self._visible_cache: tuple[int, list[int]] | None = None

    @property
    def scroll_offset(self) -> int:
        return self.state.scroll_offset

    @property
    def selected_index(self) -> int | None:
        return self.state.selected_index

    @property
    def selected_node(self) -> Node | None:
        if self.state.selected_index is None:
            return None
        return self.index[self.state.selected_index]

    def visible_indices(self) -> list[int]:
        depth = self.animator.revealed_depth
        if self._visible_cache is None or self._visible_cache[0] != depth:
            visible = [idx for idx, node in enumerate(self.index.nodes) if self.animator.is_visible(node)]
            self._visible_cache = (depth, visible)
        return self._visible_cache[1]

    def selected_position(self) -> int | None:
        """Position of the selection within ``visible_indices()``."""
        selected = self.state.selected_index
        if selected is None:
            return None
        visible = self.visible_indices()
        try:
            return visible.index(selected)
        except ValueError:
            return None

    # Scrolling

    def _max_scroll(self, viewport_height: int) -> int:
        return max(0, len(self.visible_indices()) - max(0, viewport_height))

    def scroll_up(self) -> bool:
        if self.state.scroll_offset <= 0:
            return False
        self.state.scroll_offset -= 1
        return True

    def scroll_down(self, viewport_height: int) -> bool:
        if self.state.scroll_offset >= self._max_scroll(viewport_height):
            return False
        self.state.scroll_offset += 1
        return True

    def page_up(self) -> bool:
        moved = False
        for _ in range(PAGE_SCROLL_LINES):
            moved = self.scroll_up() or moved
        return moved

    def page_down(self, viewport_height: int) -> bool:
        moved = False
        for _ in range(PAGE_SCROLL_LINES):
            moved = self.scroll_down(viewport_height) or moved
        return moved

    def clamp_scroll(self, viewport_height: int) -> bool:
        """Pull the offset back into range, e.g. after the terminal grew."""
        clamped = max(0, min(self.state.scroll_offset, self._max_scroll(viewport_height)))
        if clamped == self.state.scroll_offset:
            return False
        self.state.scroll_offset = clamped
        return True

    # Selection

    def _select(self, node_index: int) -> None:
        self.state.selected_index = node_index
        self.preview.refresh(self.index[node_index])

    def _step_selection(self, direction: int) -> bool:
        visible = self.visible_indices()
        if not visible:
            return False
        position = self.selected_position()
        if position is None:
            target = 0
        else:
            target = position + direction
            if target < 0 or target >= len(visible):
                return False
        self._select(visible[target])
        return True

    def select_previous(self) -> bool:
        return self._step_selection(-1)

    def select_next(self) -> bool:
        return self._step_selection(1)

    def ensure_selected_visible(self, viewport_height: int) -> bool:
        position = self.selected_position()
        if position is None or viewport_height <= 0:
            return False
        offset = self.state.scroll_offset
        if position < offset:
            offset = position
        elif position >= offset + viewport_height:
            offset = position - viewport_height + 1
        if offset == self.state.scroll_offset:
            return False
        self.state.scroll_offset = offset
        return True

    # Pointer and open actions

    def _open(self, node_index: int) -> ClickAction:
        node = self.index[node_index]
        error = None
        if node.is_directory:
            error = self.open_path(node.path)
        return ClickAction(ACTION_OPEN, node_index, error)

    def open_selected(self) -> ClickAction:
        if self.state.selected_index is None or not self.animator.complete:
            return IGNORED
        return self._open(self.state.selected_index)

    def handle_click(
        self,
        row: int,
        viewport_top: int,
        viewport_height: int,
        now: float | None = None,
    ) -> ClickAction:
        """Map a pointer row to a node and apply select/double-click rules.

        ``viewport_top`` is the pane's top border row; ``viewport_height``
        counts content rows between the borders.
        """
        if not self.animator.complete:
            return IGNORED
        if row <= viewport_top or row > viewport_top + viewport_height:
            return IGNORED
        visible = self.visible_indices()
        clicked = row - viewport_top - 1 + self.state.scroll_offset
        if clicked < 0 or clicked >= len(visible):
            return IGNORED

        node_index = visible[clicked]
        now = self.monotonic() if now is None else now
        last_click = self.state.last_click
        if (
            last_click is not None
            and last_click[0] == node_index
            and now - last_click[1] <= self.double_click_seconds
        ):
            self.state.last_click = None
            return self._open(node_index)

        self.state.last_click = (node_index, now)
        self._select(node_index)
        return ClickAction(ACTION_SELECT, node_index)
