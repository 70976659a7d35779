"""Side-panel listing of the selected directory's immediate children.

The listing is rebuilt from scratch on every selection change and scrolled
independently of the tree pane.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .tree_index import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewEntry:
    """One child row shown in the preview pane."""

    name: str
    is_directory: bool
    size_bytes: int = 0


def preview_sort_key(entry: PreviewEntry) -> tuple[bool, str]:
    """Directories first, then files, each group ordered by name."""
    return (not entry.is_directory, entry.name)


def list_preview_entries(directory: Path) -> list[PreviewEntry]:
    """List ``directory`` one level deep in preview order.

    Children whose metadata cannot be read are kept with size ``0``. An
    unreadable directory yields an empty list.
    """
    entries: list[PreviewEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                size_bytes = 0
                if not is_dir:
                    try:
                        size_bytes = int(child.stat(follow_symlinks=False).st_size)
                    except OSError:
                        size_bytes = 0
                entries.append(PreviewEntry(child.name, is_dir, size_bytes))
    except OSError as exc:
        logger.debug("preview listing failed for %s: %s", directory, exc)
        return []

    entries.sort(key=preview_sort_key)
    return entries


class PreviewLoader:
    """Own the current preview listing and its scroll offset."""

    def __init__(self) -> None:
        self.path: Path | None = None
        self.entries: list[PreviewEntry] = []
        self.scroll_offset = 0

    def load(self, node: Node) -> list[PreviewEntry]:
        return list_preview_entries(node.path)

    def refresh(self, node: Node | None) -> None:
        """Replace the listing with the children of ``node``."""
        self.scroll_offset = 0
        if node is None:
            self.path = None
            self.entries = []
            return
        self.path = node.path
        self.entries = self.load(node)

    def _max_offset(self) -> int:
        return max(0, len(self.entries) - 1)

    def scroll_preview_up(self, lines: int = 1) -> bool:
        previous = self.scroll_offset
        self.scroll_offset = max(0, min(self.scroll_offset - max(0, lines), self._max_offset()))
        return self.scroll_offset != previous

    def scroll_preview_down(self, lines: int = 1) -> bool:
        previous = self.scroll_offset
        self.scroll_offset = max(0, min(self.scroll_offset + max(0, lines), self._max_offset()))
        return self.scroll_offset != previous

    def visible_entries(self, height: int) -> list[PreviewEntry]:
        if height <= 0:
            return []
        return self.entries[self.scroll_offset : self.scroll_offset + height]
