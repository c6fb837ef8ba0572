"""Domain model for measured file/directory trees.

This package contains non-UI primitives:
- measurement and report datatypes
- directory listing and per-file line/byte measurement
- sequential and concurrent subtree aggregation
"""

from __future__ import annotations

from .walk import aggregate, default_worker_count, walk_tree
from .fs import (
    DirectoryChild,
    display_name,
    list_directory_children,
    maybe_gitignore_matcher,
    measure_file,
)
from .types import DirectoryReport, FileReport, Measurement

__all__ = [
    "Measurement",
    "FileReport",
    "DirectoryReport",
    "DirectoryChild",
    "display_name",
    "list_directory_children",
    "maybe_gitignore_matcher",
    "measure_file",
    "aggregate",
    "default_worker_count",
    "walk_tree",
]
