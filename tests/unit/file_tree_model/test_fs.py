"""Tests for directory listing and per-file measurement."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from linecount.file_tree_model import (
    Measurement,
    display_name,
    list_directory_children,
    maybe_gitignore_matcher,
    measure_file,
)
from linecount.file_tree_model import fs


class MeasureFileTests(unittest.TestCase):
    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.txt"
            path.write_bytes(b"")
            self.assertEqual(measure_file(path), Measurement(lines=0, bytes=0))

    def test_counts_raw_bytes_not_decoded_length(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "binary.dat"
            # each invalid byte decodes to a 3-byte replacement character
            path.write_bytes(b"\xff\xff\nx")
            self.assertEqual(measure_file(path), Measurement(lines=2, bytes=4))

    def test_trailing_partial_line_counts(self) -> None:
        cases = {
            b"a\nb": Measurement(lines=2, bytes=3),
            b"a\nb\n": Measurement(lines=2, bytes=4),
            b"\n": Measurement(lines=1, bytes=1),
        }
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lines.txt"
            for data, expected in cases.items():
                path.write_bytes(data)
                self.assertEqual(measure_file(path), expected, data)

    def test_invalid_utf8_is_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mixed.bin"
            path.write_bytes(b"\xff\xfe\nok\n\x80")
            self.assertEqual(measure_file(path), Measurement(lines=3, bytes=7))

    def test_chunk_boundaries_do_not_change_counts(self) -> None:
        data = ("é\n" * 5 + "tail").encode("utf-8")
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chunks.txt"
            path.write_bytes(data)
            with mock.patch.object(fs, "READ_CHUNK_BYTES", 3):
                measured = measure_file(path)
        self.assertEqual(measured, Measurement(lines=6, bytes=len(data)))

    def test_unreadable_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                measure_file(Path(tmp) / "missing.txt")


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_files_precede_directories_each_sorted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta.txt", "Alpha.py", "beta.md"):
                (root / name).write_text("x\n", encoding="utf-8")
            for name in ("src", "Docs", "assets"):
                (root / name).mkdir()

            children = list_directory_children(root)

            self.assertEqual(
                [(child.name, child.is_dir) for child in children],
                [
                    ("Alpha.py", False),
                    ("beta.md", False),
                    ("zeta.txt", False),
                    ("Docs", True),
                    ("assets", True),
                    ("src", True),
                ],
            )

    def test_hidden_entries_are_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".env").write_text("A=1\n", encoding="utf-8")
            names = [child.name for child in list_directory_children(root)]
            self.assertEqual(names, [".env"])

    def test_symlinks_follow_target_kind_and_dangling_links_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target_dir = root / "real"
            target_dir.mkdir()
            (root / "file.txt").write_text("x\n", encoding="utf-8")
            os.symlink(target_dir, root / "link_dir")
            os.symlink(root / "file.txt", root / "link_file")
            os.symlink(root / "missing", root / "dangling")

            with self.assertLogs("linecount.file_tree_model.fs", level="WARNING") as logs:
                children = {child.name: child.is_dir for child in list_directory_children(root)}

            self.assertEqual(children, {"file.txt": False, "link_file": False, "link_dir": True, "real": True})
            self.assertTrue(any("dangling" in line for line in logs.output))

    def test_gitignore_matcher_filters_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".gitignore").write_text("/target\n", encoding="utf-8")
            (root / "target").mkdir()
            (root / "main.rs").write_text("fn main() {}\n", encoding="utf-8")

            self.assertIsNone(maybe_gitignore_matcher(root, False))
            matcher = maybe_gitignore_matcher(root, True)
            names = [child.name for child in list_directory_children(root, ignore_matcher=matcher)]

            self.assertEqual(names, [".gitignore", "main.rs"])

    def test_unlistable_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                list_directory_children(Path(tmp) / "missing")


class DisplayNameTests(unittest.TestCase):
    def test_undecodable_bytes_are_replaced(self) -> None:
        raw = os.fsdecode(b"bad\xffname")
        self.assertEqual(display_name(raw), "bad�name")
        self.assertEqual(display_name("plain"), "plain")


if __name__ == "__main__":
    unittest.main()
