"""Domain datatypes for measured file/directory trees."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..content_types import ContentCategory


@dataclass(frozen=True)
class Measurement:
    """Line and byte totals for one file or an aggregated subtree."""

    lines: int = 0
    bytes: int = 0

    def __add__(self, other: "Measurement") -> "Measurement":
        if not isinstance(other, Measurement):
            return NotImplemented
        return Measurement(lines=self.lines + other.lines, bytes=self.bytes + other.bytes)

    def __radd__(self, other: object) -> "Measurement":
        # lets builtin sum() start from 0
        if other == 0:
            return self
        return NotImplemented


@dataclass(frozen=True)
class FileReport:
    """One measured file as observed during a walk."""

    path: Path
    name: str
    category: ContentCategory
    measurement: Measurement


@dataclass(frozen=True)
class DirectoryReport:
    """Directory with its measured files and subdirectories in display order.

    ``files`` and ``directories`` are each sorted by name bytes. Descendants
    that failed to read are absent.
    """

    path: Path
    name: str
    measurement: Measurement
    files: tuple[FileReport, ...] = ()
    directories: tuple["DirectoryReport", ...] = ()


__all__ = [
    "Measurement",
    "FileReport",
    "DirectoryReport",
]
