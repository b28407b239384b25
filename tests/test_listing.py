"""Directory listing tests against real temporary directories."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from printtree.fs import DirectoryEntry, LocalFileSystem
from printtree.ignore_set import IgnoreSet
from printtree.listing import EMPTY_DIRECTORY_LABEL, LISTING_HEADING, DirectoryLister


def _ignore(ignore_set: IgnoreSet, *names: str) -> None:
    ignore_set.add(names, [DirectoryEntry(name, False, Path(name)) for name in names])


class LocalFileSystemTests(unittest.TestCase):
    def test_list_entries_classifies_and_orders_by_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b", encoding="utf-8")
            (root / "A").mkdir()
            (root / "c").mkdir()

            entries = LocalFileSystem().list_entries(root)

        self.assertEqual([(entry.name, entry.is_dir) for entry in entries], [("A", True), ("b.txt", False), ("c", True)])
        self.assertEqual(entries[0].path, root / "A")

    def test_list_entries_raises_for_file_and_missing_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "f.txt").write_text("x", encoding="utf-8")
            fs = LocalFileSystem()

            with self.assertRaises(NotADirectoryError):
                fs.list_entries(root / "f.txt")
            with self.assertRaises(FileNotFoundError):
                fs.list_entries(root / "missing")

    def test_parent_is_none_at_root(self) -> None:
        fs = LocalFileSystem()
        root = Path(Path.cwd().anchor)

        self.assertIsNone(fs.parent(root))
        self.assertEqual(fs.parent(root / "x"), root)


class DirectoryListerTests(unittest.TestCase):
    def test_list_drops_ignored_names_case_insensitively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("keep.txt", "Secret.txt", "other"):
                (root / name).write_text("x", encoding="utf-8")
            ignore_set = IgnoreSet()
            _ignore(ignore_set, "secret.TXT")

            names = [entry.name for entry in DirectoryLister(LocalFileSystem(), ignore_set).list(root)]

        self.assertEqual(sorted(names), ["keep.txt", "other"])
        self.assertEqual(len(names), len(set(names)))

    def test_render_lists_heading_then_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "readme.md").write_text("x", encoding="utf-8")

            rows = DirectoryLister(LocalFileSystem(), IgnoreSet()).render(root)

        self.assertEqual([row.text for row in rows], [LISTING_HEADING, "docs", "readme.md"])
        self.assertEqual([row.kind for row in rows], ["heading", "dir", "file"])

    def test_render_reports_empty_directory_the_same_whether_empty_or_all_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            empty = root / "empty"
            empty.mkdir()
            full = root / "full"
            full.mkdir()
            (full / "only.txt").write_text("x", encoding="utf-8")
            ignore_set = IgnoreSet()
            _ignore(ignore_set, "only.txt")
            lister = DirectoryLister(LocalFileSystem(), ignore_set)

            empty_rows = lister.render(empty)
            ignored_rows = lister.render(full)

        self.assertEqual([row.text for row in empty_rows], [EMPTY_DIRECTORY_LABEL])
        self.assertEqual([row.text for row in ignored_rows], [EMPTY_DIRECTORY_LABEL])

    def test_render_reports_scan_failure_as_error_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            rows = DirectoryLister(LocalFileSystem(), IgnoreSet()).render(Path(tmp) / "gone")

        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].kind, "error")
        self.assertTrue(rows[0].text.startswith("Error listing contents: "))

    def test_list_propagates_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lister = DirectoryLister(LocalFileSystem(), IgnoreSet())
            with self.assertRaises(OSError):
                lister.list(Path(tmp) / "gone")


if __name__ == "__main__":
    unittest.main()
