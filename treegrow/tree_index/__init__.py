"""Directory tree index built once from a filesystem walk.

This package contains the non-UI tree primitives:
- node/stats datatypes
- the pre-order filesystem walker
- index construction and last-sibling computation
"""

from __future__ import annotations

from .types import Node, Stats, WalkEntry
from .fs import safe_file_size, walk_entries
from .build import (
    TreeIndex,
    apply_last_sibling_flags,
    build,
    build_nodes,
    compute_last_sibling_flags,
    node_name,
)

__all__ = [
    "Node",
    "Stats",
    "WalkEntry",
    "safe_file_size",
    "walk_entries",
    "TreeIndex",
    "apply_last_sibling_flags",
    "build",
    "build_nodes",
    "compute_last_sibling_flags",
    "node_name",
]
