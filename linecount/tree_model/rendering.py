"""Ordered tree rows and their text formatting.

Rendering is a second, sequential pass over a finished ``DirectoryReport``,
so line order is deterministic even when the walk ran concurrently: files
first, then directories, each group sorted by name, depth first.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from ..content_types import is_visible
from ..file_tree_model import DirectoryReport, Measurement, display_name, walk_tree
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import TraversalNode

NAME_COLUMN_WIDTH = 20
FILENAME_RENDER_LIMIT = 60
DEPTH_STEP = 2


def truncate_name(name: str, limit: int = FILENAME_RENDER_LIMIT) -> str:
    """Cut ``name`` to ``limit`` characters, marking the cut with ``...``."""
    if len(name) > limit:
        return name[:limit] + "..."
    return name


def iter_traversal_nodes(
    report: DirectoryReport,
    *,
    depth: int = 0,
    show_hidden: bool = False,
) -> Iterator[TraversalNode]:
    """Yield display rows for ``report`` and its visible descendants in order.

    Hidden entries (and everything under a hidden directory) are skipped
    unless ``show_hidden`` is set; they still count in every total. Uses an
    explicit stack so arbitrarily deep trees render.
    """
    stack: list[tuple[DirectoryReport, int]] = [(report, depth)]
    while stack:
        current, current_depth = stack.pop()
        yield TraversalNode(
            name=display_name(current.name),
            depth=current_depth,
            is_dir=True,
            measurement=current.measurement,
        )

        files = [item for item in current.files if show_hidden or is_visible(item.name)]
        for idx, file_report in enumerate(files):
            yield TraversalNode(
                name=display_name(file_report.name),
                depth=current_depth,
                is_dir=False,
                measurement=file_report.measurement,
                category=file_report.category,
                is_last_sibling=idx == len(files) - 1,
            )

        directories = [item for item in current.directories if show_hidden or is_visible(item.name)]
        for directory in reversed(directories):
            stack.append((directory, current_depth + DEPTH_STEP))


def format_traversal_node(
    node: TraversalNode,
    *,
    show_bytes: bool = True,
    theme: UITheme | None = None,
) -> str:
    """Render one row as connector prefix plus (optionally coloured) text.

    Directories print as ``name/`` behind ``├`` and ``depth`` dashes (no
    connector at depth 0). Files sit under their directory with ``├──`` or,
    for the last file, ``└──``, followed by ``(<lines>L, <bytes>B)``.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    branch = active_theme.tree_branch

    if node.is_dir:
        name = f"{active_theme.tree_dir}{node.name}{reset}/"
        if node.depth == 0:
            return name
        return f"{branch}├{'─' * node.depth}{reset}{name}"

    filler = " " * (node.depth + 1 if node.depth > 0 else 0)
    connector = "└" if node.is_last_sibling else "├"
    rail = "│" if node.depth > 0 else ""
    prefix = f"{branch}{rail}{filler}{connector}──{reset}"

    name = truncate_name(node.name)
    color = active_theme.file_color(node.category) if node.category is not None else ""
    styled_name = f"{color}{name}{reset}" if color else name
    padding = " " * max(0, NAME_COLUMN_WIDTH - len(name))

    if show_bytes:
        counts = f"({node.measurement.lines}L, {node.measurement.bytes}B)"
    else:
        counts = f"({node.measurement.lines}L)"
    if active_theme.tree_counts:
        counts = f"{active_theme.tree_counts}{counts}{reset}"
    return f"{prefix}{styled_name}{padding} {counts}"


def build_tree_lines(
    report: DirectoryReport,
    *,
    depth: int = 0,
    show_hidden: bool = False,
    show_bytes: bool = True,
    theme: UITheme | None = None,
) -> list[str]:
    """Return every formatted row for ``report`` in display order."""
    return [
        format_traversal_node(node, show_bytes=show_bytes, theme=theme)
        for node in iter_traversal_nodes(report, depth=depth, show_hidden=show_hidden)
    ]


def render(
    root: Path | None = None,
    depth: int = 0,
    *,
    out: TextIO | None = None,
    show_hidden: bool = False,
    show_bytes: bool = True,
    theme: UITheme | None = None,
    skip_gitignored: bool = False,
    sequential: bool = False,
    max_workers: int | None = None,
) -> Measurement:
    """Walk ``root``, write its tree to ``out`` and return the subtree total.

    Raises ``OSError`` when ``root`` cannot be listed; unreadable
    descendants are logged and absent from both the tree and the total.
    """
    report = walk_tree(
        root,
        skip_gitignored=skip_gitignored,
        sequential=sequential,
        max_workers=max_workers,
    )
    stream = out if out is not None else sys.stdout
    lines = build_tree_lines(
        report,
        depth=depth,
        show_hidden=show_hidden,
        show_bytes=show_bytes,
        theme=theme,
    )
    if lines:
        stream.write("\n".join(lines) + "\n")
    return report.measurement


__all__ = [
    "DEPTH_STEP",
    "FILENAME_RENDER_LIMIT",
    "NAME_COLUMN_WIDTH",
    "build_tree_lines",
    "format_traversal_node",
    "iter_traversal_nodes",
    "render",
    "truncate_name",
]
