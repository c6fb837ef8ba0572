"""Filesystem listing and per-file measurement helpers."""

from __future__ import annotations

import codecs
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..gitignore import GitIgnoreMatcher, get_gitignore_matcher
from .types import Measurement

logger = logging.getLogger(__name__)

READ_CHUNK_BYTES = 1024 * 1024


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child that is a regular file or a directory."""

    name: str
    path: Path
    is_dir: bool
    mode: int


def sort_key(name: str) -> bytes:
    """Order names by their raw filesystem bytes."""
    return os.fsencode(name)


def display_name(name: str) -> str:
    """Return ``name`` with undecodable bytes replaced for terminal output."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def maybe_gitignore_matcher(directory: Path, skip_gitignored: bool) -> GitIgnoreMatcher | None:
    """Return the ``.gitignore`` matcher for ``directory`` when enabled."""
    if not skip_gitignored:
        return None
    return get_gitignore_matcher(directory)


def list_directory_children(
    directory: Path,
    ignore_matcher: GitIgnoreMatcher | None = None,
) -> list[DirectoryChild]:
    """List files then directories of ``directory``, each group sorted by name.

    Symlinks are classified by their target. Entries whose metadata cannot be
    read are logged and skipped, as are entries that are neither regular files
    nor directories. Raises ``OSError`` when ``directory`` cannot be listed.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            name = entry.name
            if ignore_matcher is not None and ignore_matcher.is_ignored(name):
                continue
            try:
                mode = entry.stat(follow_symlinks=True).st_mode
            except OSError as exc:
                logger.warning("Skipping %s: %s", entry.path, exc)
                continue
            if stat.S_ISDIR(mode):
                is_dir = True
            elif stat.S_ISREG(mode):
                is_dir = False
            else:
                continue
            children.append(DirectoryChild(name=name, path=Path(entry.path), is_dir=is_dir, mode=mode))

    children.sort(key=lambda item: (item.is_dir, sort_key(item.name)))
    return children


def measure_file(path: Path) -> Measurement:
    """Read ``path`` once and return its line count and raw byte length.

    Lines are ``\\n``-terminated segments of the UTF-8 text (invalid bytes
    replaced); a final segment without a terminator still counts as a line.
    Content is decoded incrementally so invalid UTF-8 never raises and large
    files are not held in memory. Raises ``OSError`` when the file is
    unreadable.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    newlines = 0
    size = 0
    last_char = ""
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(READ_CHUNK_BYTES)
            if not chunk:
                break
            size += len(chunk)
            text = decoder.decode(chunk)
            if text:
                newlines += text.count("\n")
                last_char = text[-1]
    tail = decoder.decode(b"", final=True)
    if tail:
        newlines += tail.count("\n")
        last_char = tail[-1]

    lines = newlines
    if size and last_char != "\n":
        lines += 1
    return Measurement(lines=lines, bytes=size)


__all__ = [
    "DirectoryChild",
    "READ_CHUNK_BYTES",
    "display_name",
    "list_directory_children",
    "maybe_gitignore_matcher",
    "measure_file",
    "sort_key",
]
