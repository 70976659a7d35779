"""UI theme and connector-glyph definitions plus selection helpers.

Themes are ANSI palettes for the tree, stats, and preview panes. Glyph sets
choose between box-drawing and plain ASCII tree connectors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    tree_connector: str
    tree_dir: str
    tree_selected: str
    stats_heading: str
    stats_label: str
    stats_folders: str
    stats_files: str
    stats_items: str
    stats_size: str
    stats_depth: str
    hint_active: str
    hint_dim: str
    preview_dir: str
    preview_file: str
    preview_size: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[32m",
    title="\033[1;32m",
    tree_connector="\033[32m",
    tree_dir="\033[1;36m",
    tree_selected="\033[1;36;100m",
    stats_heading="\033[1;33m",
    stats_label="\033[1m",
    stats_folders="\033[36m",
    stats_files="\033[32m",
    stats_items="\033[35m",
    stats_size="\033[33m",
    stats_depth="\033[34m",
    hint_active="\033[32m",
    hint_dim="\033[2;37m",
    preview_dir="\033[1;36m",
    preview_file="\033[38;5;252m",
    preview_size="\033[38;5;109m",
    status_message="\033[1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    tree_connector="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_selected="\033[1;38;5;45;48;5;24m",
    stats_heading="\033[1;38;5;45m",
    stats_label="\033[1m",
    stats_folders="\033[38;5;45m",
    stats_files="\033[38;5;117m",
    stats_items="\033[38;5;153m",
    stats_size="\033[38;5;73m",
    stats_depth="\033[38;5;39m",
    hint_active="\033[38;5;45m",
    hint_dim="\033[2;38;5;110m",
    preview_dir="\033[1;38;5;45m",
    preview_file="\033[38;5;252m",
    preview_size="\033[38;5;73m",
    status_message="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    border="",
    title="",
    tree_connector="",
    tree_dir="",
    tree_selected="\033[7m",
    stats_heading="",
    stats_label="",
    stats_folders="",
    stats_files="",
    stats_items="",
    stats_size="",
    stats_depth="",
    hint_active="",
    hint_dim="",
    preview_dir="",
    preview_file="",
    preview_size="",
    status_message="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


@dataclass(frozen=True)
class TreeGlyphs:
    """Connector pieces for one tree row.

    ``tee``/``corner`` start a branch, ``horizontal`` extends it, ``vertical``
    continues an ancestor's branch, and the folder icons prefix names. The
    ``border_*`` pieces frame each pane.
    """

    name: str
    tee: str
    corner: str
    horizontal: str
    vertical: str
    root_icon: str
    folder_icon: str
    growing_icon: str
    complete_icon: str
    border_horizontal: str
    border_vertical: str
    border_top_left: str
    border_top_right: str
    border_bottom_left: str
    border_bottom_right: str


BOX_GLYPHS = TreeGlyphs(
    name="box",
    tee="├",
    corner="╰",
    horizontal="─",
    vertical="│",
    root_icon="",
    folder_icon="",
    growing_icon="",
    complete_icon="",
    border_horizontal="─",
    border_vertical="│",
    border_top_left="┌",
    border_top_right="┐",
    border_bottom_left="└",
    border_bottom_right="┘",
)

ASCII_GLYPHS = TreeGlyphs(
    name="ascii",
    tee="|",
    corner="`",
    horizontal="-",
    vertical="|",
    root_icon="*",
    folder_icon="+",
    growing_icon="~",
    complete_icon="#",
    border_horizontal="-",
    border_vertical="|",
    border_top_left="+",
    border_top_right="+",
    border_bottom_left="+",
    border_bottom_right="+",
)

_GLYPHS: dict[str, TreeGlyphs] = {
    BOX_GLYPHS.name: BOX_GLYPHS,
    ASCII_GLYPHS.name: ASCII_GLYPHS,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES.keys()))


def available_glyph_names() -> tuple[str, ...]:
    return tuple(sorted(_GLYPHS.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def resolve_glyphs(name: str | None) -> TreeGlyphs:
    if not name:
        return BOX_GLYPHS
    return _GLYPHS.get(str(name).strip().lower(), BOX_GLYPHS)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "TreeGlyphs",
    "BOX_GLYPHS",
    "ASCII_GLYPHS",
    "available_theme_names",
    "available_glyph_names",
    "normalize_theme_name",
    "resolve_theme",
    "resolve_glyphs",
]
