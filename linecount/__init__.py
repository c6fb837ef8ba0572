"""Public package surface for linecount.

Exports ``main`` for programmatic CLI invocation plus the counting and
rendering entry points. Most implementation lives in submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def aggregate(*args, **kwargs):
    """Return the total ``Measurement`` for a directory subtree."""
    from .file_tree_model import aggregate as _aggregate

    return _aggregate(*args, **kwargs)


def render(*args, **kwargs):
    """Print a directory's measured tree and return its ``Measurement``."""
    from .tree_model import render as _render

    return _render(*args, **kwargs)


__all__ = ["main", "aggregate", "render"]
