"""Recursive line/byte aggregation over a directory subtree.

Two walkers share one scanning step:

- a sequential depth-first walk in the calling thread
- a concurrent walk that submits one task per subdirectory to a bounded
  thread pool

Concurrent tasks never wait on each other. Each in-flight directory holds a
``_PendingSubtree`` that counts outstanding children under a lock; the last
child to settle finalises the directory and merges its total into the parent.
A directory's total is therefore never read before every child has merged.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..content_types import classify
from .fs import DirectoryChild, list_directory_children, maybe_gitignore_matcher, measure_file
from .types import DirectoryReport, FileReport, Measurement

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    """Return the pool size used when none is configured."""
    return min(32, (os.cpu_count() or 1) + 4)


def _root_name(root: Path) -> str:
    """Return the header name for ``root``; the filesystem root yields ``""``."""
    try:
        resolved = root.resolve()
    except OSError:
        resolved = root
    return resolved.name or str(resolved).rstrip("/\\")


def _scan_directory(directory: Path, skip_gitignored: bool) -> tuple[list[FileReport], list[DirectoryChild]]:
    """Measure the files of ``directory`` and return them with its subdirectories.

    Unreadable files are logged and left out. Raises ``OSError`` when the
    directory itself cannot be listed.
    """
    matcher = maybe_gitignore_matcher(directory, skip_gitignored)
    files: list[FileReport] = []
    subdirectories: list[DirectoryChild] = []
    for child in list_directory_children(directory, ignore_matcher=matcher):
        if child.is_dir:
            subdirectories.append(child)
            continue
        try:
            measurement = measure_file(child.path)
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", child.path, exc)
            continue
        files.append(
            FileReport(
                path=child.path,
                name=child.name,
                category=classify(child.name, child.mode),
                measurement=measurement,
            )
        )
    return files, subdirectories


class _SequentialFrame:
    """One directory on the sequential walk's explicit stack."""

    def __init__(self, path: Path, name: str, files: list[FileReport], subdirectories: list[DirectoryChild]) -> None:
        self.path = path
        self.name = name
        self.files = files
        self.remaining = iter(subdirectories)
        self.reports: list[DirectoryReport] = []

    def finish(self) -> DirectoryReport:
        measurement = sum((item.measurement for item in self.files), Measurement())
        measurement = sum((item.measurement for item in self.reports), measurement)
        return DirectoryReport(
            path=self.path,
            name=self.name,
            measurement=measurement,
            files=tuple(self.files),
            directories=tuple(self.reports),
        )


def _walk_sequential(root: Path, name: str, skip_gitignored: bool) -> DirectoryReport:
    """Depth-first post-order walk on an explicit stack, so depth is unbounded."""
    stack = [_SequentialFrame(root, name, *_scan_directory(root, skip_gitignored))]
    while True:
        frame = stack[-1]
        child = next(frame.remaining, None)
        if child is not None:
            try:
                files, subdirectories = _scan_directory(child.path, skip_gitignored)
            except OSError as exc:
                logger.warning("Skipping unreadable directory %s: %s", child.path, exc)
                continue
            stack.append(_SequentialFrame(child.path, child.name, files, subdirectories))
            continue

        stack.pop()
        report = frame.finish()
        if not stack:
            return report
        stack[-1].reports.append(report)


class _PendingSubtree:
    """Running total for one directory while its children are still in flight."""

    def __init__(self, path: Path, name: str, parent: "_PendingSubtree | None", slot: int) -> None:
        self.path = path
        self.name = name
        self.parent = parent
        self.slot = slot
        self._lock = threading.Lock()
        self._files: tuple[FileReport, ...] = ()
        self._directories: list[DirectoryReport | None] = []
        self._measurement = Measurement()
        # the directory's own scan counts as one outstanding unit
        self._outstanding = 1

    def expect(self, files: list[FileReport], child_count: int) -> None:
        """Record measured files and reserve one slot per subdirectory."""
        with self._lock:
            self._files = tuple(files)
            self._measurement = sum((item.measurement for item in files), self._measurement)
            self._directories = [None] * child_count
            self._outstanding += child_count

    def settle(self, slot: int | None = None, report: DirectoryReport | None = None) -> DirectoryReport | None:
        """Mark one unit done and return the final report once none remain.

        ``slot=None`` settles the directory's own scan. A child that failed
        settles its slot with ``report=None`` and contributes nothing.
        """
        with self._lock:
            if slot is not None and report is not None:
                self._directories[slot] = report
                self._measurement = self._measurement + report.measurement
            self._outstanding -= 1
            if self._outstanding > 0:
                return None
            return DirectoryReport(
                path=self.path,
                name=self.name,
                measurement=self._measurement,
                files=self._files,
                directories=tuple(item for item in self._directories if item is not None),
            )


class _ConcurrentWalk:
    """One concurrent traversal bound to an executor."""

    def __init__(self, executor: ThreadPoolExecutor, skip_gitignored: bool) -> None:
        self._executor = executor
        self._skip_gitignored = skip_gitignored
        self._done = threading.Event()
        self._error_lock = threading.Lock()
        self._error: BaseException | None = None
        self._result: DirectoryReport | None = None

    def run(self, root: Path, name: str) -> DirectoryReport:
        # The root is scanned in the caller so its failure propagates.
        files, subdirectories = _scan_directory(root, self._skip_gitignored)
        self._expand(_PendingSubtree(root, name, parent=None, slot=0), files, subdirectories)
        self._done.wait()
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result

    def _expand(self, node: _PendingSubtree, files: list[FileReport], subdirectories: list[DirectoryChild]) -> None:
        node.expect(files, len(subdirectories))
        for slot, child in enumerate(subdirectories):
            child_node = _PendingSubtree(child.path, child.name, parent=node, slot=slot)
            self._executor.submit(self._visit, child_node)
        finished = node.settle()
        if finished is not None:
            self._complete(node, finished)

    def _visit(self, node: _PendingSubtree) -> None:
        try:
            try:
                files, subdirectories = _scan_directory(node.path, self._skip_gitignored)
            except OSError as exc:
                logger.warning("Skipping unreadable directory %s: %s", node.path, exc)
                self._complete(node, None)
                return
            self._expand(node, files, subdirectories)
        except Exception as exc:
            self._fail(exc)

    def _complete(self, node: _PendingSubtree, report: DirectoryReport | None) -> None:
        """Merge a finished subtree upward until an ancestor still has work."""
        while True:
            parent = node.parent
            if parent is None:
                self._result = report
                self._done.set()
                return
            finished = parent.settle(node.slot, report)
            if finished is None:
                return
            node, report = parent, finished

    def _fail(self, exc: BaseException) -> None:
        with self._error_lock:
            if self._error is None:
                self._error = exc
        self._done.set()


def walk_tree(
    root: Path | None = None,
    *,
    skip_gitignored: bool = False,
    sequential: bool = False,
    max_workers: int | None = None,
) -> DirectoryReport:
    """Walk ``root`` (default: current directory) and return its measured report.

    Raises ``OSError`` when ``root`` cannot be listed. Unreadable descendants
    are logged as warnings and excluded from the totals.
    """
    if root is None:
        root = Path.cwd()
    name = _root_name(root)
    logger.debug("Walking %s (sequential=%s, gitignore=%s)", root, sequential, skip_gitignored)

    if sequential:
        report = _walk_sequential(root, name, skip_gitignored)
    else:
        workers = max_workers if max_workers is not None else default_worker_count()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="linecount-walk") as executor:
            report = _ConcurrentWalk(executor, skip_gitignored).run(root, name)

    logger.debug("Walked %s: %d lines, %d bytes", root, report.measurement.lines, report.measurement.bytes)
    return report


def aggregate(
    root: Path | None = None,
    *,
    skip_gitignored: bool = False,
    sequential: bool = False,
    max_workers: int | None = None,
) -> Measurement:
    """Return total lines and bytes of every regular file under ``root``."""
    return walk_tree(
        root,
        skip_gitignored=skip_gitignored,
        sequential=sequential,
        max_workers=max_workers,
    ).measurement


__all__ = [
    "aggregate",
    "default_worker_count",
    "walk_tree",
]
