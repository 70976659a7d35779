from __future__ import annotations

from dataclasses import dataclass

from ..animation import RevealAnimator
from ..layout import ScreenLayout, compute_layout
from ..preview import PreviewLoader
from ..render import FrameRenderer, RenderContext, stats_lines
from ..tree_index import TreeIndex
from ..ui_theme import BOX_GLYPHS, DEFAULT_THEME, TreeGlyphs, UITheme
from ..viewport import ViewportController

STATUS_MESSAGE_SECONDS = 3.0


@dataclass
class AppState:
    """Everything the loop wires together for one session.

    The tree index is shared read-only; the animator, viewport, and preview
    each own their mutable state.
    """

    index: TreeIndex
    animator: RevealAnimator
    viewport: ViewportController
    preview: PreviewLoader
    renderer: FrameRenderer
    theme: UITheme = DEFAULT_THEME
    glyphs: TreeGlyphs = BOX_GLYPHS
    left_pane_percent: float = 70.0
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True

    def show_status(self, message: str, now: float) -> None:
        self.status_message = message
        self.status_message_until = now + STATUS_MESSAGE_SECONDS
        self.dirty = True

    def expire_status(self, now: float) -> None:
        if self.status_message and now >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0
            self.dirty = True

    def layout_for(self, columns: int, lines: int) -> ScreenLayout:
        stats_count = len(stats_lines(self.index, self.animator, self.theme, self.status_message))
        return compute_layout(columns, lines, self.left_pane_percent, stats_count)

    def render_context(self, layout: ScreenLayout) -> RenderContext:
        return RenderContext(
            index=self.index,
            animator=self.animator,
            viewport=self.viewport,
            preview=self.preview,
            layout=layout,
            theme=self.theme,
            glyphs=self.glyphs,
            status_message=self.status_message,
        )
