"""Domain datatypes for the directory tree index."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WalkEntry:
    """One raw filesystem entry reported by a walker."""

    path: Path
    depth: int
    is_directory: bool


@dataclass(frozen=True)
class Node:
    """One directory retained in the visualized tree."""

    path: Path
    name: str
    is_directory: bool
    depth: int
    is_last_sibling: bool = False


@dataclass(frozen=True)
class Stats:
    """Aggregate counts gathered while walking the tree."""

    total_files: int = 0
    total_dirs: int = 0
    total_size_bytes: int = 0
    max_depth: int = 0

    @property
    def total_items(self) -> int:
        return self.total_files + self.total_dirs


__all__ = [
    "WalkEntry",
    "Node",
    "Stats",
]
