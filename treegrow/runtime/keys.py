"""Key and mouse dispatch for the interactive session.

Each handler returns ``True`` when the session should quit.
"""

from __future__ import annotations

from ..input import parse_mouse_event
from ..layout import ScreenLayout
from ..viewport import ACTION_IGNORED, ClickAction
from .state import AppState

QUIT_KEYS = frozenset({"q", "Q", "ESC", "CTRL_C"})
WHEEL_SCROLL_LINES = 3


def _apply_action(state: AppState, action: ClickAction, now: float) -> None:
    if action.kind == ACTION_IGNORED:
        return
    state.dirty = True
    if action.error:
        state.show_status(action.error, now)


def handle_mouse(state: AppState, key: str, layout: ScreenLayout, now: float) -> None:
    event = parse_mouse_event(key)
    if event is None:
        return
    kind, col, row = event
    # SGR reports are 1-based; layouts are 0-based.
    col -= 1
    row -= 1
    in_tree_pane = 0 <= col < layout.left_width

    if kind == "MOUSE_LEFT_DOWN":
        if not in_tree_pane:
            return
        action = state.viewport.handle_click(row, layout.tree_top, layout.tree_rows, now=now)
        _apply_action(state, action, now)
        return

    if kind in {"MOUSE_WHEEL_UP", "MOUSE_WHEEL_DOWN"}:
        up = kind == "MOUSE_WHEEL_UP"
        moved = False
        if in_tree_pane:
            for _ in range(WHEEL_SCROLL_LINES):
                step = state.viewport.scroll_up() if up else state.viewport.scroll_down(layout.tree_rows)
                moved = step or moved
        elif row >= layout.preview_top:
            if up:
                moved = state.preview.scroll_preview_up(WHEEL_SCROLL_LINES)
            else:
                moved = state.preview.scroll_preview_down(WHEEL_SCROLL_LINES)
        if moved:
            state.dirty = True


def handle_key(state: AppState, key: str, layout: ScreenLayout, now: float) -> bool:
    if key in QUIT_KEYS:
        return True

    viewport = state.viewport
    tree_rows = layout.tree_rows
    changed = False
    if key == "UP":
        changed = viewport.scroll_up()
    elif key == "DOWN":
        changed = viewport.scroll_down(tree_rows)
    elif key == "PAGE_UP":
        changed = viewport.page_up()
    elif key == "PAGE_DOWN":
        changed = viewport.page_down(tree_rows)
    elif key == "LEFT":
        changed = state.preview.scroll_preview_up()
    elif key == "RIGHT":
        changed = state.preview.scroll_preview_down()
    elif key in {"k", "j"}:
        changed = viewport.select_previous() if key == "k" else viewport.select_next()
        if changed:
            viewport.ensure_selected_visible(tree_rows)
    elif key == "ENTER":
        _apply_action(state, viewport.open_selected(), now)
    elif key == "SPACE":
        if not state.animator.complete:
            state.animator.finish()
            changed = True
    elif key.startswith("MOUSE_"):
        handle_mouse(state, key, layout, now)

    if changed:
        state.dirty = True
    return False
