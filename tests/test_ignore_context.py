#!/usr/bin/env python3
"""
Test suite for cascading ignore contexts
"""

import unittest
import tempfile
from pathlib import Path

from barrelgen.ignore import IgnoreContext, IgnoreFileLoader, IGNORE_FILENAME


class TestIgnoreContext(unittest.TestCase):
    """Test rule loading and cascading resolution"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root_path = Path(self.temp_dir.name)
        (self.root_path / "sub" / "deep").mkdir(parents=True)

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_rules(self, relative: str, text: str):
        (self.root_path / relative / IGNORE_FILENAME).write_text(text)

    def make_chain(self):
        root = IgnoreContext.root(str(self.root_path))
        sub = root.child("sub")
        deep = sub.child("deep")
        for context in (root, sub, deep):
            context.load_rules()
        return root, sub, deep

    def test_paths(self):
        root, sub, deep = self.make_chain()

        self.assertEqual(root.full_path, str(self.root_path) + "/")
        self.assertEqual(sub.folder_name, "sub/")
        self.assertEqual(sub.full_path, str(self.root_path) + "/sub/")
        self.assertEqual(deep.full_path, str(self.root_path) + "/sub/deep/")
        self.assertIs(deep.parent, sub)
        self.assertIsNone(root.parent)

    def test_root_path_keeps_existing_separator(self):
        root = IgnoreContext.root(str(self.root_path) + "/")
        self.assertEqual(root.full_path, str(self.root_path) + "/")

    def test_children_share_loader_and_engine(self):
        loader = IgnoreFileLoader(".exportignore")
        root = IgnoreContext.root(str(self.root_path), loader=loader)
        sub = root.child("sub")

        self.assertIs(sub.loader, loader)
        self.assertIs(sub.engine, root.engine)

    def test_no_rules_nothing_ignored(self):
        root, sub, deep = self.make_chain()

        self.assertIsNone(root.rules)
        self.assertFalse(root.ignored("a.ts"))
        self.assertFalse(deep.ignored("a.ts"))

    def test_local_rule(self):
        self.write_rules("sub", "secret.ts\n")
        root, sub, deep = self.make_chain()

        self.assertTrue(sub.ignored("secret.ts"))
        self.assertFalse(sub.ignored("public.ts"))
        self.assertFalse(root.ignored("secret.ts"))

    def test_ancestor_rule_cascades(self):
        self.write_rules(".", "secret.ts\n")
        root, sub, deep = self.make_chain()

        self.assertTrue(root.ignored("secret.ts"))
        self.assertTrue(sub.ignored("secret.ts"))
        self.assertTrue(deep.ignored("secret.ts"))

    def test_anchored_ancestor_rule_uses_reconstructed_path(self):
        self.write_rules(".", "/sub/deep/only.ts\n")
        root, sub, deep = self.make_chain()

        self.assertTrue(deep.ignored("only.ts"))
        self.assertFalse(sub.ignored("only.ts"))
        self.assertFalse(root.ignored("only.ts"))

    def test_ancestor_directory_rule_covers_descendant_files(self):
        self.write_rules(".", "sub/\n")
        root, sub, deep = self.make_chain()

        self.assertTrue(sub.ignored("a.ts"))
        self.assertTrue(deep.ignored("a.ts"))
        self.assertFalse(root.ignored("a.ts"))

    def test_local_match_is_not_overridden_by_ancestor(self):
        """An ancestor negation cannot re-include a locally excluded file"""
        self.write_rules(".", "!keep.ts\n")
        self.write_rules("sub", "keep.ts\n")
        root, sub, deep = self.make_chain()

        self.assertTrue(sub.ignored("keep.ts"))

    def test_structural_names_never_ignored(self):
        self.write_rules(".", "*\n")
        self.write_rules("sub", ".git\nnode_modules\n")
        root, sub, deep = self.make_chain()

        for context in (root, sub, deep):
            self.assertFalse(context.ignored(".git"))
            self.assertFalse(context.ignored("node_modules"))
        self.assertTrue(root.ignored("anything.ts"))
        self.assertTrue(deep.ignored("anything.ts"))

    def test_rules_loaded_once(self):
        self.write_rules(".", "a.ts\n")
        root = IgnoreContext.root(str(self.root_path))

        first = root.load_rules()
        self.write_rules(".", "b.ts\n")
        second = root.load_rules()

        self.assertIs(first, second)
        self.assertTrue(root.ignored("a.ts"))
        self.assertFalse(root.ignored("b.ts"))

    def test_missing_rule_file_is_remembered(self):
        root = IgnoreContext.root(str(self.root_path))
        self.assertIsNone(root.load_rules())

        self.write_rules(".", "a.ts\n")
        self.assertIsNone(root.load_rules())
        self.assertFalse(root.ignored("a.ts"))

    def test_unreadable_rule_file_is_empty(self):
        (self.root_path / IGNORE_FILENAME).mkdir()
        root = IgnoreContext.root(str(self.root_path))

        self.assertIsNone(root.load_rules())
        self.assertFalse(root.ignored("a.ts"))

    def test_comment_only_rule_file(self):
        self.write_rules(".", "# nothing here\n")
        root = IgnoreContext.root(str(self.root_path))

        self.assertIsNone(root.load_rules())


if __name__ == "__main__":
    unittest.main()
