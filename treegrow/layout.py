"""Screen geometry for the tree pane and the stats/preview column."""

from __future__ import annotations

from dataclasses import dataclass

MIN_LEFT_WIDTH = 12
MIN_RIGHT_WIDTH = 12
BORDER_ROWS = 2


@dataclass(frozen=True)
class ScreenLayout:
    """Pane sizes for one frame; all rows are 0-based from the screen top.

    Each pane is a bordered box, so content rows exclude the two border rows.
    """

    width: int
    height: int
    left_width: int
    right_width: int
    stats_height: int
    preview_height: int

    @property
    def tree_top(self) -> int:
        return 0

    @property
    def tree_rows(self) -> int:
        return max(0, self.height - BORDER_ROWS)

    @property
    def preview_top(self) -> int:
        return self.stats_height

    @property
    def preview_rows(self) -> int:
        return max(0, self.preview_height - BORDER_ROWS)


def clamp_left_width(total_width: int, left_width: int) -> int:
    """Keep both columns at least minimally usable on narrow terminals."""
    max_left = max(1, total_width - MIN_RIGHT_WIDTH)
    return max(min(MIN_LEFT_WIDTH, max_left), min(left_width, max_left))


def compute_layout(width: int, height: int, left_pane_percent: float, stats_lines: int) -> ScreenLayout:
    """Split the screen into tree (left) and stats-over-preview (right)."""
    width = max(1, width)
    height = max(1, height)
    left_width = clamp_left_width(width, int(width * left_pane_percent / 100.0))
    right_width = max(0, width - left_width)

    stats_height = min(height, stats_lines + BORDER_ROWS, max(BORDER_ROWS + 1, height // 2))
    preview_height = height - stats_height
    if preview_height < BORDER_ROWS + 1:
        stats_height = height
        preview_height = 0
    return ScreenLayout(
        width=width,
        height=height,
        left_width=left_width,
        right_width=right_width,
        stats_height=stats_height,
        preview_height=preview_height,
    )
