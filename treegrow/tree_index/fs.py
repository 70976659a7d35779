"""Filesystem walk primitive and best-effort metadata helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .types import WalkEntry

logger = logging.getLogger(__name__)


def safe_file_size(path: Path) -> int:
    """Return the size of ``path`` without following symlinks, or ``0`` on stat failure."""
    try:
        return int(path.stat(follow_symlinks=False).st_size)
    except (OSError, ValueError):
        return 0


def _scan_children(directory: Path) -> list[tuple[str, Path, bool, bool]]:
    """Return ``(name, path, is_dir, descend)`` for every child, sorted by name.

    ``is_dir`` follows symbolic links; ``descend`` is false for links.
    Raises ``OSError`` when the directory itself cannot be listed.
    """
    children: list[tuple[str, Path, bool, bool]] = []
    with os.scandir(directory) as entries:
        for child in entries:
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            try:
                is_link = child.is_symlink()
            except OSError:
                is_link = False
            children.append((child.name, Path(child.path), is_dir, is_dir and not is_link))
    children.sort(key=lambda item: item[0])
    return children


def walk_entries(root: Path) -> Iterator[WalkEntry]:
    """Yield ``root`` and everything below it in pre-order.

    A symbolic link to a directory is reported as a directory but never
    descended. A directory that cannot be listed is still yielded; its
    children are skipped.
    """
    # Pending entries, nearest sibling on top.
    stack: list[tuple[Path, int, bool, bool]] = [(root, 0, True, True)]
    while stack:
        path, depth, is_dir, descend = stack.pop()
        yield WalkEntry(path, depth, is_dir)
        if not descend:
            continue
        try:
            children = _scan_children(path)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", path, exc)
            continue
        for _name, child_path, child_is_dir, child_descend in reversed(children):
            stack.append((child_path, depth + 1, child_is_dir, child_descend))


__all__ = [
    "safe_file_size",
    "walk_entries",
]
