"""Tests for the indented text projection of a tree."""

from __future__ import annotations

import unittest

from treebrowser.listing import Entry
from treebrowser.policy import BrowserPolicy
from treebrowser.tree_model import DirectoryTree, format_entry, index_for_line, line_for_index, render_lines


class RenderingTests(unittest.TestCase):
    def _tree(self, policy: BrowserPolicy | None = None) -> DirectoryTree:
        entries = [
            Entry("docs/", True, 0, expanded=True),
            Entry("notes.txt", False, 1),
            Entry("src/", True, 0),
        ]
        return DirectoryTree("/home/u", policy=policy or BrowserPolicy(), entries=entries)

    def test_render_lines_indents_by_depth_below_root_label(self) -> None:
        self.assertEqual(
            render_lines(self._tree()),
            ["/home/u/", "  docs/", "    notes.txt", "  src/"],
        )

    def test_render_lines_uses_policy_indent_and_stripped_label(self) -> None:
        tree = self._tree(BrowserPolicy(indent_width=4, strip_leading_path=True))

        self.assertEqual(render_lines(tree), ["u/", "    docs/", "        notes.txt", "    src/"])

    def test_markers_distinguish_expanded_collapsed_and_files(self) -> None:
        self.assertEqual(
            render_lines(self._tree(), markers=True)[1:],
            ["  ▾ docs/", "      notes.txt", "  ▸ src/"],
        )

    def test_format_entry_for_single_row(self) -> None:
        self.assertEqual(format_entry(Entry("a.py", False, 2), 3), "         a.py")

    def test_line_index_mapping_skips_root_label(self) -> None:
        self.assertEqual(line_for_index(0), 1)
        self.assertEqual(index_for_line(3), 2)
        self.assertIsNone(index_for_line(0))


if __name__ == "__main__":
    unittest.main()
