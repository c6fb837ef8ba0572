"""Tree row datatypes produced by one rendering pass."""

from __future__ import annotations

from dataclasses import dataclass

from ..content_types import ContentCategory
from ..file_tree_model.types import Measurement


@dataclass(frozen=True)
class TraversalNode:
    """One printable tree row (directory header or measured file)."""

    name: str
    depth: int
    is_dir: bool
    measurement: Measurement
    category: ContentCategory | None = None
    is_last_sibling: bool = False
