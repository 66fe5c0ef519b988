"""Depth-first rendering skeleton shared by both file listings.

The traversal draws connector prefixes and decides which nodes are visible;
the per-row text is supplied by a callback so the two listings can keep their
own status vocabularies.
"""

from __future__ import annotations

from collections.abc import Callable, Set
from dataclasses import dataclass
from typing import TypeVar

from ..filetree import Node, join_path, split_path

T = TypeVar("T")

RENAME_ARROW = " → "


@dataclass(frozen=True)
class Connectors:
    """Prefix fragments for tree rows.

    ``inner`` and ``last`` mark a row's own position among its siblings;
    ``nested`` and ``nothing`` replace them on deeper rows.
    """

    inner: str
    last: str
    nested: str
    nothing: str


LINE_CONNECTORS = Connectors(inner="├─ ", last="└─ ", nested="│  ", nothing="   ")
BLANK_CONNECTORS = Connectors(inner="  ", last="  ", nested="  ", nothing="  ")


def connectors_for_style(style: str) -> Connectors:
    return BLANK_CONNECTORS if style == "blank" else LINE_CONNECTORS


def render_tree(
    root: Node[T],
    collapsed: Set[str],
    render_line: Callable[[Node[T], int], str],
    connectors: Connectors = LINE_CONNECTORS,
) -> list[str]:
    """Return one display line per visible node below ``root``.

    ``render_line(node, depth)`` builds the row body; ``depth`` already
    accounts for the compression of every ancestor.
    """
    return _render_aux(root, collapsed, "", -1, render_line, connectors)


def _render_aux(
    node: Node[T],
    collapsed: Set[str],
    prefix: str,
    depth: int,
    render_line: Callable[[Node[T], int], str],
    connectors: Connectors,
) -> list[str]:
    is_root = depth == -1

    if node.is_leaf:
        if is_root:
            return []
        return [prefix + render_line(node, depth)]

    lines: list[str] = []
    if not is_root:
        lines.append(prefix + render_line(node, depth))
        if node.path in collapsed:
            return lines

    if prefix.endswith(connectors.last):
        prefix = prefix[: -len(connectors.last)] + connectors.nothing
    elif prefix.endswith(connectors.inner):
        prefix = prefix[: -len(connectors.inner)] + connectors.nested

    child_depth = depth + 1 + node.compression_level
    for i, child in enumerate(node.children):
        if is_root:
            child_prefix = prefix
        elif i == len(node.children) - 1:
            child_prefix = prefix + connectors.last
        else:
            child_prefix = prefix + connectors.inner
        lines.extend(_render_aux(child, collapsed, child_prefix, child_depth, render_line, connectors))
    return lines


def name_at_depth(path: str, depth: int) -> str:
    """Strip the ``depth`` leading segments already shown by ancestors."""
    return join_path(split_path(path)[depth:])


def renamed_name_at_depth(path: str, previous_path: str, depth: int) -> str:
    """Label a rename as ``old → new``.

    The old path is shortened the same way only when it was renamed inside the
    same directory at this depth; otherwise it is shown in full.
    """
    segments = split_path(path)
    previous_segments = split_path(previous_path)
    previous_name = previous_path
    same_parent_dir = len(segments) == len(previous_segments) and segments[:depth] == previous_segments[:depth]
    if same_parent_dir:
        previous_name = join_path(previous_segments[depth:])
    return previous_name + RENAME_ARROW + join_path(segments[depth:])


__all__ = [
    "BLANK_CONNECTORS",
    "Connectors",
    "LINE_CONNECTORS",
    "connectors_for_style",
    "name_at_depth",
    "render_tree",
    "renamed_name_at_depth",
]
