"""Tests for the pre-order filesystem walker."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treegrow.tree_index import TreeIndex, build, safe_file_size, walk_entries


class WalkEntriesTests(unittest.TestCase):
    def test_yields_root_then_children_in_name_order_depth_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "b").mkdir()
            (root / "a" / "inner").mkdir(parents=True)
            (root / "c.txt").write_text("c", encoding="utf-8")

            walked = [(entry.path.relative_to(root).as_posix(), entry.depth, entry.is_directory) for entry in walk_entries(root)]

            self.assertEqual(
                walked,
                [
                    (".", 0, True),
                    ("a", 1, True),
                    ("a/inner", 2, True),
                    ("b", 1, True),
                    ("c.txt", 1, False),
                ],
            )

    def test_symlinked_directory_is_a_childless_directory_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve() / "root"
            target = Path(tmp).resolve() / "elsewhere"
            (target / "hidden_child").mkdir(parents=True)
            root.mkdir()
            (root / "link").symlink_to(target, target_is_directory=True)

            entries = list(walk_entries(root))

            link_entries = [entry for entry in entries if entry.path.name == "link"]
            self.assertEqual(len(link_entries), 1)
            self.assertTrue(link_entries[0].is_directory)
            self.assertEqual(link_entries[0].depth, 1)
            self.assertFalse(any(entry.path.name == "hidden_child" for entry in entries))

            nodes, stats = build(root)
            self.assertEqual([node.name for node in nodes], ["root", "link"])
            self.assertEqual(stats.total_dirs, 2)
            self.assertEqual(stats.total_files, 0)
            self.assertEqual(stats.total_size_bytes, 0)

    def test_unreadable_directory_is_kept_but_not_descended(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "locked" / "secret").mkdir(parents=True)
            (root / "open" / "visible").mkdir(parents=True)
            real_scandir = os.scandir
            locked = root / "locked"

            def fake_scandir(path):
                if Path(path) == locked:
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            with mock.patch("treegrow.tree_index.fs.os.scandir", side_effect=fake_scandir):
                nodes, stats = build(root)

            names = [node.name for node in nodes]
            self.assertIn("locked", names)
            self.assertNotIn("secret", names)
            self.assertIn("visible", names)
            self.assertEqual(stats.total_dirs, 4)

    def test_unreadable_root_yields_only_root(self) -> None:
        with mock.patch("treegrow.tree_index.fs.os.scandir", side_effect=PermissionError("denied")):
            entries = list(walk_entries(Path("/nowhere")))

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].depth, 0)

    def test_very_deep_chain_is_walked_without_recursion_limits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            deepest = root
            try:
                for _ in range(1100):
                    child = deepest / "d"
                    os.mkdir(child)
                    deepest = child

                index = TreeIndex.build(root)

                self.assertEqual(len(index), 1101)
                self.assertEqual(index.max_node_depth, 1100)
                self.assertEqual(index.stats.max_depth, 1100)
                self.assertEqual([node.depth for node in index][:4], [0, 1, 2, 3])
            finally:
                while deepest != root:
                    os.rmdir(deepest)
                    deepest = deepest.parent

    def test_safe_file_size_reads_size_and_degrades_to_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "data.bin"
            target.write_bytes(b"12345")
            self.assertEqual(safe_file_size(target), 5)
            self.assertEqual(safe_file_size(Path(tmp) / "missing.bin"), 0)


if __name__ == "__main__":
    unittest.main()
