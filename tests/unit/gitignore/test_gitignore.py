"""Tests for per-directory .gitignore name filtering."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from linecount.gitignore import fetch_gitignore, get_gitignore_matcher


class FetchGitignoreTests(unittest.TestCase):
    def test_missing_file_yields_no_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(fetch_gitignore(Path(tmp)), [])
            self.assertIsNone(get_gitignore_matcher(Path(tmp)))

    def test_strips_leading_slash_and_blank_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".gitignore").write_text("/target\n\nnode_modules\nbuild/\n", encoding="utf-8")

            self.assertEqual(fetch_gitignore(root), ["target", "node_modules", "build"])

    def test_matcher_matches_exact_names_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".gitignore").write_text("/target\n*.log\n", encoding="utf-8")

            matcher = get_gitignore_matcher(root)

            self.assertIsNotNone(matcher)
            assert matcher is not None
            self.assertTrue(matcher.is_ignored("target"))
            self.assertTrue(matcher.is_ignored("*.log"))
            self.assertFalse(matcher.is_ignored("debug.log"))
            self.assertFalse(matcher.is_ignored("targets"))

    def test_unreadable_gitignore_is_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".gitignore").write_text("target\n", encoding="utf-8")
            with mock.patch("linecount.gitignore.fetch_gitignore", side_effect=PermissionError("denied")):
                with self.assertLogs("linecount.gitignore", level="WARNING"):
                    self.assertIsNone(get_gitignore_matcher(root))


if __name__ == "__main__":
    unittest.main()
