"""Per-directory ``.gitignore`` name filtering.

Each directory's own ``.gitignore`` is read independently; patterns from
ancestor directories are not inherited. Matching is by exact entry name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GITIGNORE_FILENAME = ".gitignore"


def fetch_gitignore(directory: Path) -> list[str]:
    """Return the ignore names listed in ``directory/.gitignore``.

    A leading ``/`` is stripped from each line (and a trailing one, so
    ``build/`` names the ``build`` directory). Blank lines are dropped.
    Returns an empty list when the file does not exist.
    """
    gitignore = directory / GITIGNORE_FILENAME
    if not gitignore.is_file():
        return []

    contents = gitignore.read_bytes().decode("utf-8", errors="replace")
    names: list[str] = []
    for line in contents.splitlines():
        value = line.strip()
        if value.startswith("/"):
            value = value[1:]
        value = value.rstrip("/")
        if value:
            names.append(value)
    return names


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Exact-name matcher for the entries of one directory."""

    directory: Path
    ignored_names: frozenset[str]

    def is_ignored(self, name: str) -> bool:
        """Return whether the entry called ``name`` is listed."""
        return name in self.ignored_names


def get_gitignore_matcher(directory: Path) -> GitIgnoreMatcher | None:
    """Build a matcher for ``directory`` or ``None`` when nothing is ignored.

    An unreadable ``.gitignore`` is logged and treated as empty.
    """
    try:
        names = fetch_gitignore(directory)
    except OSError as exc:
        logger.warning("Skipping unreadable %s: %s", directory / GITIGNORE_FILENAME, exc)
        return None
    if not names:
        return None
    return GitIgnoreMatcher(directory=directory, ignored_names=frozenset(names))


__all__ = [
    "GITIGNORE_FILENAME",
    "GitIgnoreMatcher",
    "fetch_gitignore",
    "get_gitignore_matcher",
]
