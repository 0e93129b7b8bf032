from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from filevault.resolver import PathResolver, ResolvedPath, is_within, neutralize


class ContainmentPredicateTests(unittest.TestCase):
    def test_root_itself_is_contained(self) -> None:
        self.assertTrue(is_within("/data", "/data"))

    def test_descendant_is_contained(self) -> None:
        self.assertTrue(is_within("/data", "/data/a.txt"))
        self.assertTrue(is_within("/data", "/data/sub/b.txt"))

    def test_sibling_with_shared_prefix_is_not_contained(self) -> None:
        self.assertFalse(is_within("/data", "/data-other/x"))
        self.assertFalse(is_within("/data", "/database"))

    def test_parent_and_unrelated_paths_are_not_contained(self) -> None:
        self.assertFalse(is_within("/data", "/"))
        self.assertFalse(is_within("/data", "/etc/passwd"))

    def test_filesystem_root(self) -> None:
        self.assertTrue(is_within("/", "/etc"))


class NeutralizeTests(unittest.TestCase):
    def test_leading_parents_are_stripped(self) -> None:
        self.assertEqual(neutralize("../../etc/passwd"), "etc/passwd")
        self.assertEqual(neutralize("../"), "")
        self.assertEqual(neutralize(".."), "")

    def test_inner_parents_are_collapsed_first(self) -> None:
        self.assertEqual(neutralize("a/../../b"), "b")
        self.assertEqual(neutralize("a/./b/../c.txt"), "a/c.txt")

    def test_backslashes_count_as_separators(self) -> None:
        self.assertEqual(neutralize("..\\..\\secret.txt"), "secret.txt")

    def test_absolute_input_is_made_relative(self) -> None:
        self.assertEqual(neutralize("/etc/passwd"), "etc/passwd")

    def test_names_starting_with_dots_are_kept(self) -> None:
        self.assertEqual(neutralize("..hidden"), "..hidden")
        self.assertEqual(neutralize(".profile"), ".profile")


class PathResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name) / "data"
        self.root.mkdir()
        self.resolver = PathResolver(self.root)
        self.root_str = os.path.normpath(os.path.abspath(self.root))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_empty_input_is_rejected(self) -> None:
        self.assertIsNone(self.resolver.resolve(""))
        self.assertIsNone(self.resolver.resolve(None))

    def test_plain_name_resolves_under_root(self) -> None:
        resolved = self.resolver.resolve("a.txt")
        self.assertIsNotNone(resolved)
        self.assertEqual(resolved.path, Path(self.root_str) / "a.txt")
        self.assertEqual(resolved.name, "a.txt")

    def test_leading_parent_segments_never_escape(self) -> None:
        for depth in range(0, 8):
            user_path = "../" * depth + "etc/passwd"
            resolved = self.resolver.resolve(user_path)
            if resolved is None:
                continue
            self.assertTrue(is_within(self.root_str, os.fspath(resolved)), user_path)
            self.assertEqual(resolved.name, "etc/passwd")

    def test_parent_only_input_maps_to_root(self) -> None:
        resolved = self.resolver.resolve("../..")
        self.assertEqual(resolved, self.resolver.root)
        self.assertEqual(resolved.name, ".")

    def test_sibling_directory_name_stays_inside(self) -> None:
        resolved = self.resolver.resolve("../data-other/x")
        self.assertEqual(resolved.path, Path(self.root_str) / "data-other" / "x")
        self.assertTrue(is_within(self.root_str, os.fspath(resolved)))

    def test_direct_construction_is_refused(self) -> None:
        with self.assertRaises(TypeError):
            ResolvedPath("/etc/passwd", "passwd")


if __name__ == "__main__":
    unittest.main()
