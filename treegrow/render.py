"""Rendering engine for the tree, stats, and preview panes.

Frames are composed as plain lists of screen rows from the public state of the
index, animator, viewport, and preview loader. Nothing here mutates that state.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .animation import RevealAnimator
from .ansi import clip_ansi_line, display_width, fit_ansi_line, sanitize_terminal_text
from .layout import ScreenLayout
from .preview import PreviewEntry, PreviewLoader
from .tree_index import Node, TreeIndex
from .ui_theme import BOX_GLYPHS, DEFAULT_THEME, TreeGlyphs, UITheme
from .viewport import ViewportController

_SIZE_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(size_bytes: int) -> str:
    """Human-readable binary size, e.g. ``"1.50 KiB"``."""
    if size_bytes < 1024:
        return f"{max(0, size_bytes)} B"
    value = float(size_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.2f} {unit}"


def ancestor_continuations(nodes: Sequence[Node]) -> list[tuple[bool, ...]]:
    """For each node, whether each ancestor at depth ``1..depth-1`` has a later sibling.

    A ``True`` entry means the ancestor's branch continues below this row and
    needs a vertical connector in that column.
    """
    out: list[tuple[bool, ...]] = []
    open_branches: list[bool] = []
    for node in nodes:
        depth = node.depth
        out.append(tuple(open_branches[1:depth]))
        del open_branches[depth:]
        while len(open_branches) < depth:
            open_branches.append(False)
        open_branches.append(not node.is_last_sibling)
    return out


def tree_connector(
    node: Node,
    continuations: tuple[bool, ...],
    glyphs: TreeGlyphs,
    frontier_depth: int | None,
    frame_counter: int,
) -> str:
    """Build the connector prefix drawn before a node's icon.

    Nodes on the animation frontier get a partial branch whose length follows
    the three-phase frame counter.
    """
    if node.depth == 0:
        return ""
    parts = [(glyphs.vertical + "   ") if has_more else "    " for has_more in continuations]
    head = glyphs.corner if node.is_last_sibling else glyphs.tee
    full = head + glyphs.horizontal * 2 + " "
    if frontier_depth is not None and node.depth == frontier_depth:
        phase = frame_counter % 3
        if phase == 0:
            parts.append(head + glyphs.horizontal)
        elif phase == 1:
            parts.append(head + glyphs.horizontal * 2)
        else:
            parts.append(full)
    else:
        parts.append(full)
    return "".join(parts)


def format_tree_row(
    node: Node,
    connector: str,
    selected: bool,
    theme: UITheme,
    glyphs: TreeGlyphs,
) -> str:
    icon = glyphs.root_icon if node.depth == 0 else glyphs.folder_icon
    label = f"{icon} {sanitize_terminal_text(node.name)}"
    name_style = theme.tree_selected if selected else theme.tree_dir
    return f"{theme.tree_connector}{connector}{theme.reset}{name_style}{label}{theme.reset}"


def tree_title(index: TreeIndex, animator: RevealAnimator, visible_count: int, glyphs: TreeGlyphs) -> str:
    icon = glyphs.complete_icon if animator.complete else glyphs.growing_icon
    shown_depth = min(animator.revealed_depth, index.stats.max_depth)
    return f" {icon} ({visible_count}/{len(index)}) - Depth {shown_depth}/{index.stats.max_depth} "


def stats_lines(
    index: TreeIndex,
    animator: RevealAnimator,
    theme: UITheme,
    status_message: str = "",
) -> list[str]:
    stats = index.stats
    label = theme.stats_label
    reset = theme.reset

    def row(name: str, value: str, color: str) -> str:
        return f" {label}{name}:{reset} {color}{value}{reset}"

    lines = [
        f" {theme.stats_heading}Statistics{reset}",
        "",
        row("Path", sanitize_terminal_text(str(index.root)), ""),
        "",
        row("Folders", str(stats.total_dirs), theme.stats_folders),
        row("Files", str(stats.total_files), theme.stats_files),
        row("Total Items", str(stats.total_items), theme.stats_items),
        row("Total Size", format_size(stats.total_size_bytes), theme.stats_size),
        row("Max Depth", str(stats.max_depth), theme.stats_depth),
        "",
        f" {label}Controls:{reset}",
        " ↑/↓ - Scroll, PgUp/PgDn - Fast scroll",
        " ←/→ - Scroll preview",
        " j/k - Select, Enter - Open",
    ]
    if animator.complete:
        lines.append(f" {theme.hint_active}Click folder - Select, double-click - Open{reset}")
    else:
        lines.append(f" {theme.hint_dim}Wait for animation... (Space to skip){reset}")
    lines.append(" Q/Esc - Quit")
    if status_message:
        lines.append("")
        lines.append(f" {theme.status_message}{sanitize_terminal_text(status_message)}{reset}")
    return lines


def preview_title(preview: PreviewLoader) -> str:
    if preview.path is None:
        return " Preview "
    name = sanitize_terminal_text(preview.path.name or str(preview.path))
    if not preview.entries:
        return f" Preview: {name} "
    return f" Preview: {name} ({preview.scroll_offset + 1}/{len(preview.entries)}) "


def format_preview_entry(entry: PreviewEntry, width: int, theme: UITheme, glyphs: TreeGlyphs) -> str:
    name = sanitize_terminal_text(entry.name)
    if entry.is_directory:
        return f" {theme.preview_dir}{glyphs.folder_icon} {name}/{theme.reset}"
    size = format_size(entry.size_bytes)
    name_room = max(1, width - len(size) - 4)
    if display_width(name) > name_room:
        name = clip_ansi_line(name, max(0, name_room - 1)) + "…"
    gap = max(1, width - 3 - display_width(name) - len(size))
    return f"   {theme.preview_file}{name}{theme.reset}{' ' * gap}{theme.preview_size}{size}{theme.reset}"


def preview_lines(preview: PreviewLoader, rows: int, width: int, theme: UITheme, glyphs: TreeGlyphs) -> list[str]:
    if preview.path is None:
        return [f" {theme.hint_dim}Select a folder to list its contents{theme.reset}"]
    if not preview.entries:
        return [f" {theme.hint_dim}(empty){theme.reset}"]
    return [format_preview_entry(entry, width, theme, glyphs) for entry in preview.visible_entries(rows)]


def draw_box(
    title: str,
    lines: Sequence[str],
    width: int,
    height: int,
    theme: UITheme,
    glyphs: TreeGlyphs,
) -> list[str]:
    """Frame ``lines`` in a bordered box of exactly ``width`` x ``height`` cells."""
    if height <= 0:
        return []
    if width < 2:
        return [" " * max(0, width)] * height
    inner = width - 2
    border = theme.border
    reset = theme.reset
    title_width = min(inner, display_width(title))
    title_text = fit_ansi_line(f"{theme.title}{title}{reset}", title_width)
    top_fill = glyphs.border_horizontal * (inner - title_width)
    top = f"{border}{glyphs.border_top_left}{reset}{title_text}{border}{top_fill}{glyphs.border_top_right}{reset}"
    if height == 1:
        return [top]
    out = [top]
    side = f"{border}{glyphs.border_vertical}{reset}"
    for row in range(height - 2):
        text = lines[row] if row < len(lines) else ""
        out.append(f"{side}{fit_ansi_line(text, inner)}{side}")
    bottom = f"{border}{glyphs.border_bottom_left}{glyphs.border_horizontal * inner}{glyphs.border_bottom_right}{reset}"
    out.append(bottom)
    return out


@dataclass
class RenderContext:
    index: TreeIndex
    animator: RevealAnimator
    viewport: ViewportController
    preview: PreviewLoader
    layout: ScreenLayout
    theme: UITheme = DEFAULT_THEME
    glyphs: TreeGlyphs = BOX_GLYPHS
    status_message: str = ""


class FrameRenderer:
    """Compose full frames; caches per-node connector columns across frames."""

    def __init__(self, index: TreeIndex) -> None:
        self.index = index
        self._continuations = ancestor_continuations(index.nodes)

    def tree_lines(self, context: RenderContext) -> list[str]:
        animator = context.animator
        viewport = context.viewport
        visible = viewport.visible_indices()
        start = viewport.scroll_offset
        rows = visible[start : start + context.layout.tree_rows]
        lines: list[str] = []
        for node_index in rows:
            node = self.index[node_index]
            connector = tree_connector(
                node,
                self._continuations[node_index],
                context.glyphs,
                animator.frontier_depth,
                animator.frame_counter,
            )
            lines.append(
                format_tree_row(
                    node,
                    connector,
                    node_index == viewport.selected_index,
                    context.theme,
                    context.glyphs,
                )
            )
        return lines

    def build_frame(self, context: RenderContext) -> list[str]:
        layout = context.layout
        theme = context.theme
        glyphs = context.glyphs
        visible_count = len(context.viewport.visible_indices())

        left = draw_box(
            tree_title(self.index, context.animator, visible_count, glyphs),
            self.tree_lines(context),
            layout.left_width,
            layout.height,
            theme,
            glyphs,
        )
        right = draw_box(
            " Info ",
            stats_lines(self.index, context.animator, theme, context.status_message),
            layout.right_width,
            layout.stats_height,
            theme,
            glyphs,
        )
        right += draw_box(
            preview_title(context.preview),
            preview_lines(context.preview, layout.preview_rows, max(0, layout.right_width - 2), theme, glyphs),
            layout.right_width,
            layout.preview_height,
            theme,
            glyphs,
        )
        blank_right = " " * layout.right_width
        return [
            left[row] + (right[row] if row < len(right) else blank_right)
            for row in range(layout.height)
        ]

    def render(self, context: RenderContext, write: Callable[[str], None]) -> None:
        """Write one full frame with ``write`` (cursor home, then rows)."""
        rows = self.build_frame(context)
        write("\033[H\033[J" + "\r\n".join(rows))
