"""Tree-row construction and formatting for the display mode.

Defines ``TraversalNode`` and turns a measured ``DirectoryReport`` into
ordered, indented rows with connector glyphs and line/byte annotations.
"""

from __future__ import annotations

from .rendering import (
    DEPTH_STEP,
    FILENAME_RENDER_LIMIT,
    NAME_COLUMN_WIDTH,
    build_tree_lines,
    format_traversal_node,
    iter_traversal_nodes,
    render,
    truncate_name,
)
from .types import TraversalNode

__all__ = [
    "TraversalNode",
    "DEPTH_STEP",
    "FILENAME_RENDER_LIMIT",
    "NAME_COLUMN_WIDTH",
    "build_tree_lines",
    "format_traversal_node",
    "iter_traversal_nodes",
    "render",
    "truncate_name",
]
