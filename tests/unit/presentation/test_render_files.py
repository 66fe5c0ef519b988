"""Tree-row rendering tests for both listings.

Uses the plain theme so rows can be compared as text; colour assertions use
the default theme and only look at the arrow or status glyph.
"""

from __future__ import annotations

import unittest

from lazyboard.filetree import (
    CommitFile,
    File,
    PatchStatus,
    build_tree_from_commit_files,
    build_tree_from_files,
    parse_porcelain_line,
)
from lazyboard.presentation import (
    BLANK_CONNECTORS,
    connectors_for_style,
    render_commit_file_tree,
    render_file_tree,
)
from lazyboard.presentation.files import color_for_change_status
from lazyboard.presentation.tree import name_at_depth, renamed_name_at_depth
from lazyboard.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _working_tree():
    return build_tree_from_files(
        [
            File("a/b/c.txt", "M "),
            File("a/b/d.txt", " M"),
            File("z.txt", "??"),
        ]
    )


class FileTreeRenderingTests(unittest.TestCase):
    def test_rows_with_line_connectors(self) -> None:
        rows = render_file_tree(_working_tree(), theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ a/b", "├─ M  c.txt", "└─  M d.txt", "?? z.txt"])

    def test_collapsed_directory_keeps_its_own_row(self) -> None:
        rows = render_file_tree(_working_tree(), frozenset({"a/b"}), theme=PLAIN_THEME)
        self.assertEqual(rows, ["▶ a/b", "?? z.txt"])

    def test_nested_rows_continue_parent_connector(self) -> None:
        root = build_tree_from_files([File("m/n.txt", "M "), File("m/o/p.txt", "M ")])
        rows = render_file_tree(root, theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ m", "├─ ▼ o", "│  └─ M  p.txt", "└─ M  n.txt"])

    def test_blank_connectors_only_indent(self) -> None:
        root = build_tree_from_files([File("m/n.txt", "M "), File("m/o/p.txt", "M ")])
        rows = render_file_tree(root, theme=PLAIN_THEME, connectors=BLANK_CONNECTORS)
        self.assertEqual(rows, ["▼ m", "  ▼ o", "    M  p.txt", "  M  n.txt"])

    def test_rename_within_directory_shortens_both_names(self) -> None:
        root = build_tree_from_files(
            [File("src/a/new.txt", "R ", previous_path="src/a/old.txt"), File("src/b.txt", "M ")]
        )
        rows = render_file_tree(root, theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ src", "├─ ▼ a", "│  └─ R  old.txt → new.txt", "└─ M  b.txt"])

    def test_submodule_rows_are_suffixed(self) -> None:
        root = build_tree_from_files([File("vendor/lib", " M", is_submodule=True)])
        rows = render_file_tree(root, theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ vendor", "└─  M lib (submodule)"])

    def test_untracked_directory_renders_as_one_row(self) -> None:
        files = [parse_porcelain_line("?? newdir/"), parse_porcelain_line(" M a.txt")]
        rows = render_file_tree(build_tree_from_files(files), theme=PLAIN_THEME)
        self.assertEqual(rows, [" M a.txt", "?? newdir"])

    def test_control_characters_in_names_are_escaped(self) -> None:
        rows = render_file_tree(build_tree_from_files([File("bad\nname", "??")]), theme=PLAIN_THEME)
        self.assertEqual(rows, ["?? bad\\nname"])

    def test_icons_sit_between_glyph_and_label(self) -> None:
        seen: list[tuple[str, bool, bool, bool]] = []

        def icon_for(name: str, submodule: bool, worktree: bool, directory: bool) -> tuple[str, int]:
            seen.append((name, submodule, worktree, directory))
            return ("*", 33)

        rows = render_file_tree(_working_tree(), theme=PLAIN_THEME, icon_for=icon_for)
        self.assertEqual(rows[0], "▼ * a/b")
        self.assertEqual(rows[1], "├─ M  * c.txt")
        self.assertIn(("a/b", False, False, True), seen)
        self.assertIn(("z.txt", False, False, False), seen)

    def test_directory_arrow_reflects_staging(self) -> None:
        staged = build_tree_from_files([File("s/a", "M "), File("s/b", "A ")])
        mixed = build_tree_from_files([File("s/a", "M "), File("s/b", " M")])
        unstaged = build_tree_from_files([File("s/a", " M"), File("s/b", "??")])
        self.assertTrue(render_file_tree(staged)[0].startswith(DEFAULT_THEME.green + "▼"))
        self.assertTrue(render_file_tree(mixed)[0].startswith(DEFAULT_THEME.yellow + "▼"))
        self.assertTrue(render_file_tree(unstaged)[0].startswith(DEFAULT_THEME.red + "▼"))

    def test_empty_tree_renders_nothing(self) -> None:
        self.assertEqual(render_file_tree(build_tree_from_files([])), [])


class CommitFileTreeRenderingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = build_tree_from_commit_files(
            [CommitFile("src/a.py", "M"), CommitFile("src/b.py", "A"), CommitFile("docs/x.md", "D")]
        )

    def test_rows_show_change_letters(self) -> None:
        rows = render_commit_file_tree(self.root, theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ docs", "└─ D x.md", "▼ src", "├─ M a.py", "└─ A b.py"])

    def test_directory_arrow_reflects_patch_selection(self) -> None:
        statuses = {"src/a.py": PatchStatus.WHOLE, "src/b.py": PatchStatus.WHOLE, "docs/x.md": PatchStatus.PART}
        rows = render_commit_file_tree(self.root, status_of=lambda file: statuses[file.path])
        self.assertTrue(rows[0].startswith(DEFAULT_THEME.yellow + "▼"))
        self.assertTrue(rows[2].startswith(DEFAULT_THEME.green + "▼"))

    def test_unselected_directories_use_default_colour(self) -> None:
        rows = render_commit_file_tree(self.root)
        self.assertTrue(rows[2].startswith(DEFAULT_THEME.default_text + "▼"))

    def test_directory_matching_diff_target_is_highlighted(self) -> None:
        rows = render_commit_file_tree(self.root, diff_name="src")
        self.assertTrue(rows[2].startswith(DEFAULT_THEME.diff_terminal + "▼"))
        self.assertFalse(rows[0].startswith(DEFAULT_THEME.diff_terminal))

    def test_collapsed_commit_directory(self) -> None:
        rows = render_commit_file_tree(self.root, frozenset({"src"}), theme=PLAIN_THEME)
        self.assertEqual(rows, ["▼ docs", "└─ D x.md", "▶ src"])


class LabelTests(unittest.TestCase):
    def test_name_at_depth_drops_leading_segments(self) -> None:
        self.assertEqual(name_at_depth("a/b/c.txt", 2), "c.txt")
        self.assertEqual(name_at_depth("a/b", 0), "a/b")

    def test_cross_directory_rename_shows_full_old_path(self) -> None:
        self.assertEqual(renamed_name_at_depth("y/z/new.txt", "x/old.txt", 2), "x/old.txt → new.txt")

    def test_same_depth_but_different_parent_shows_full_old_path(self) -> None:
        self.assertEqual(renamed_name_at_depth("b/new.txt", "a/old.txt", 1), "a/old.txt → new.txt")

    def test_change_status_colours(self) -> None:
        theme = DEFAULT_THEME
        self.assertEqual(color_for_change_status("A", theme), theme.green)
        self.assertEqual(color_for_change_status("M", theme), theme.yellow)
        self.assertEqual(color_for_change_status("R", theme), theme.yellow)
        self.assertEqual(color_for_change_status("D", theme), theme.unstaged_changes)
        self.assertEqual(color_for_change_status("C", theme), theme.cyan)
        self.assertEqual(color_for_change_status("T", theme), theme.magenta)
        self.assertEqual(color_for_change_status("X", theme), theme.default_text)

    def test_connector_style_lookup(self) -> None:
        self.assertIs(connectors_for_style("blank"), BLANK_CONNECTORS)
        self.assertEqual(connectors_for_style("lines").last, "└─ ")


if __name__ == "__main__":
    unittest.main()
