"""Row composition for the working-tree and commit-file listings.

Each row is ``arrow-or-status glyph`` + optional icon + escaped label, fully
styled and ready to paint.
"""

from __future__ import annotations

from collections.abc import Callable, Set

from ..ansi import escape_special_chars
from ..filetree import CommitFile, File, Node, PatchStatus, StagingStatus
from ..ui_theme import DEFAULT_THEME, UITheme
from .status import aggregate_patch_status, aggregate_staging_status
from .tree import LINE_CONNECTORS, Connectors, name_at_depth, render_tree, renamed_name_at_depth

EXPANDED_ARROW = "▼"
COLLAPSED_ARROW = "▶"
SUBMODULE_SUFFIX = " (submodule)"

# (name, is_submodule, is_linked_worktree, is_directory) -> (glyph, 256-colour index)
IconFor = Callable[[str, bool, bool, bool], tuple[str, int]]


def _arrow(node: Node, collapsed: Set[str]) -> str:
    return COLLAPSED_ARROW if node.path in collapsed else EXPANDED_ARROW


def _icon(icon_for: IconFor | None, name: str, theme: UITheme, *, submodule: bool, worktree: bool, directory: bool) -> str:
    if icon_for is None:
        return ""
    glyph, color_index = icon_for(name, submodule, worktree, directory)
    return theme.paint_256(color_index, glyph) + " "


def file_name_at_depth(node: Node[File], depth: int) -> str:
    file = node.payload
    if file is not None and file.is_rename:
        return renamed_name_at_depth(node.path, file.previous_path, depth)
    return name_at_depth(node.path, depth)


def commit_file_name_at_depth(node: Node[CommitFile], depth: int) -> str:
    return name_at_depth(node.path, depth)


def staging_arrow_color(status: StagingStatus, theme: UITheme) -> str:
    if status is StagingStatus.STAGED:
        return theme.green
    if status is StagingStatus.MIXED:
        return theme.yellow
    return theme.red


def patch_arrow_color(status: PatchStatus, theme: UITheme) -> str:
    if status is PatchStatus.WHOLE:
        return theme.green
    if status is PatchStatus.PART:
        return theme.yellow
    return theme.default_text


def color_for_change_status(change_status: str, theme: UITheme) -> str:
    if change_status == "A":
        return theme.green
    if change_status in {"M", "R"}:
        return theme.yellow
    if change_status == "D":
        return theme.unstaged_changes
    if change_status == "C":
        return theme.cyan
    if change_status == "T":
        return theme.magenta
    return theme.default_text


def file_line(
    node: Node[File],
    depth: int,
    collapsed: Set[str],
    theme: UITheme = DEFAULT_THEME,
    icon_for: IconFor | None = None,
) -> str:
    """Compose one working-tree row (without its connector prefix)."""
    file = node.payload
    name = file_name_at_depth(node, depth)

    if file is None:
        arrow_color = staging_arrow_color(aggregate_staging_status(node), theme)
        output = theme.paint(arrow_color, _arrow(node, collapsed)) + " "
    else:
        staged_char = file.short_status[:1]
        unstaged_char = file.short_status[1:2]
        if staged_char == "?":
            staged_color = theme.unstaged_changes
        elif staged_char == " ":
            staged_color = theme.default_text
        else:
            staged_color = theme.green
        unstaged_color = theme.default_text if unstaged_char == " " else theme.unstaged_changes
        output = theme.paint(staged_color, staged_char) + theme.paint(unstaged_color, unstaged_char) + " "

    is_submodule = file is not None and file.is_submodule
    output += _icon(
        icon_for,
        name,
        theme,
        submodule=is_submodule,
        worktree=file is not None and file.is_worktree,
        directory=file is None,
    )
    output += theme.paint(theme.default_text, escape_special_chars(name))
    if is_submodule:
        output += theme.paint(theme.default_text, SUBMODULE_SUFFIX)
    return output


def commit_file_line(
    node: Node[CommitFile],
    depth: int,
    collapsed: Set[str],
    status: PatchStatus,
    diff_name: str = "",
    theme: UITheme = DEFAULT_THEME,
    icon_for: IconFor | None = None,
) -> str:
    """Compose one commit-file row; ``status`` is the aggregated patch status."""
    commit_file = node.payload
    name = commit_file_name_at_depth(node, depth)

    if commit_file is None:
        if diff_name and diff_name == node.path:
            arrow_color = theme.diff_terminal
        else:
            arrow_color = patch_arrow_color(status, theme)
        output = theme.paint(arrow_color, _arrow(node, collapsed)) + " "
    else:
        color = color_for_change_status(commit_file.change_status, theme)
        output = theme.paint(color, commit_file.change_status) + " "

    output += _icon(icon_for, name, theme, submodule=False, worktree=False, directory=commit_file is None)
    output += theme.paint(theme.default_text, escape_special_chars(name))
    return output


def render_file_tree(
    root: Node[File],
    collapsed: Set[str] = frozenset(),
    *,
    theme: UITheme = DEFAULT_THEME,
    icon_for: IconFor | None = None,
    connectors: Connectors = LINE_CONNECTORS,
) -> list[str]:
    """Render the working-tree listing, one string per visible row."""
    return render_tree(
        root,
        collapsed,
        lambda node, depth: file_line(node, depth, collapsed, theme, icon_for),
        connectors,
    )


def render_commit_file_tree(
    root: Node[CommitFile],
    collapsed: Set[str] = frozenset(),
    status_of: Callable[[CommitFile], PatchStatus] | None = None,
    *,
    diff_name: str = "",
    theme: UITheme = DEFAULT_THEME,
    icon_for: IconFor | None = None,
    connectors: Connectors = LINE_CONNECTORS,
) -> list[str]:
    """Render a commit's files; directory arrows reflect their files' patch selection."""
    resolve = status_of or (lambda _file: PatchStatus.UNSELECTED)

    def render_line(node: Node[CommitFile], depth: int) -> str:
        status = aggregate_patch_status(node, resolve)
        return commit_file_line(node, depth, collapsed, status, diff_name, theme, icon_for)

    return render_tree(root, collapsed, render_line, connectors)


__all__ = [
    "COLLAPSED_ARROW",
    "EXPANDED_ARROW",
    "IconFor",
    "color_for_change_status",
    "commit_file_line",
    "commit_file_name_at_depth",
    "file_line",
    "file_name_at_depth",
    "patch_arrow_color",
    "render_commit_file_tree",
    "render_file_tree",
    "staging_arrow_color",
]
