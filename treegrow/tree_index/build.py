"""Tree-index construction from a raw pre-order filesystem walk.

Only directories become nodes. Files are folded into ``Stats`` so the tree
stays proportional to the directory count even for very large checkouts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import replace
from pathlib import Path

from .fs import safe_file_size, walk_entries
from .types import Node, Stats, WalkEntry

logger = logging.getLogger(__name__)


def node_name(path: Path) -> str:
    """Display label for ``path``; filesystem roots fall back to the full path."""
    return path.name or str(path)


def compute_last_sibling_flags(nodes: Sequence[Node]) -> list[bool]:
    """Return one last-sibling flag per node.

    Scans forward from each node until the subtree of its parent is left (a
    node of lesser depth). Quadratic in the directory count.
    """
    flags: list[bool] = []
    for idx, node in enumerate(nodes):
        parent = node.path.parent
        is_last = True
        for later in nodes[idx + 1 :]:
            if later.depth < node.depth:
                break
            if later.depth == node.depth and later.path.parent == parent:
                is_last = False
                break
        flags.append(is_last)
    return flags


def apply_last_sibling_flags(nodes: Sequence[Node]) -> tuple[Node, ...]:
    """Return copies of ``nodes`` with ``is_last_sibling`` recomputed."""
    flags = compute_last_sibling_flags(nodes)
    return tuple(replace(node, is_last_sibling=flag) for node, flag in zip(nodes, flags))


def build_nodes(
    entries: Iterable[WalkEntry],
    size_of: Callable[[Path], int] = safe_file_size,
) -> tuple[tuple[Node, ...], Stats]:
    """Fold walk entries into directory nodes and aggregate stats."""
    nodes: list[Node] = []
    total_files = 0
    total_dirs = 0
    total_size = 0
    max_depth = 0

    for entry in entries:
        max_depth = max(max_depth, entry.depth)
        if not entry.is_directory:
            total_files += 1
            total_size += size_of(entry.path)
            continue
        total_dirs += 1
        nodes.append(
            Node(
                path=entry.path,
                name=node_name(entry.path),
                is_directory=True,
                depth=entry.depth,
            )
        )

    stats = Stats(
        total_files=total_files,
        total_dirs=total_dirs,
        total_size_bytes=total_size,
        max_depth=max_depth,
    )
    return apply_last_sibling_flags(nodes), stats


def build(
    root: Path,
    walker: Callable[[Path], Iterable[WalkEntry]] = walk_entries,
) -> tuple[tuple[Node, ...], Stats]:
    """Walk ``root`` and return ``(nodes, stats)``."""
    nodes, stats = build_nodes(walker(root))
    logger.info(
        "indexed %s: %d folders, %d files, %d bytes, max depth %d",
        root,
        stats.total_dirs,
        stats.total_files,
        stats.total_size_bytes,
        stats.max_depth,
    )
    return nodes, stats


class TreeIndex:
    """Immutable, index-addressed sequence of directory nodes plus stats.

    Other components hold integer positions into this sequence rather than
    node references.
    """

    def __init__(self, root: Path, nodes: Sequence[Node], stats: Stats) -> None:
        self.root = root
        self._nodes = tuple(nodes)
        self.stats = stats
        self.max_node_depth = max((node.depth for node in self._nodes), default=0)

    @classmethod
    def build(
        cls,
        root: Path,
        walker: Callable[[Path], Iterable[WalkEntry]] = walk_entries,
    ) -> "TreeIndex":
        nodes, stats = build(root, walker)
        return cls(root, nodes, stats)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)


__all__ = [
    "node_name",
    "compute_last_sibling_flags",
    "apply_last_sibling_flags",
    "build_nodes",
    "build",
    "TreeIndex",
]
