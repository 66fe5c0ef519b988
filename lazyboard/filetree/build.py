"""Path-tree construction from flat listings."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from .models import CommitFile, File
from .node import Node, join_path, split_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


def insert_path(root: Node[T], path: str, payload: T) -> Node[T]:
    """Add a leaf at ``path``, creating intermediate directories as needed."""
    segments = split_path(path)
    current = root
    for depth in range(len(segments)):
        node_path = join_path(segments[: depth + 1])
        existing = next((child for child in current.children if child.path == node_path), None)
        if existing is None:
            existing = Node(path=node_path)
            current.children.append(existing)
        current = existing
    current.payload = payload
    return current


def build_tree(entries: Iterable[T], path_of: Callable[[T], str]) -> Node[T]:
    """Build a sorted, compressed tree from ``entries``."""
    root: Node[T] = Node()
    count = 0
    for entry in entries:
        insert_path(root, path_of(entry), entry)
        count += 1
    root.sort()
    root.compress()
    logger.debug("built path tree from %d entries", count)
    return root


def build_tree_from_files(files: Iterable[File]) -> Node[File]:
    return build_tree(files, lambda file: file.path)


def build_tree_from_commit_files(files: Iterable[CommitFile]) -> Node[CommitFile]:
    return build_tree(files, lambda file: file.path)


__all__ = [
    "build_tree",
    "build_tree_from_commit_files",
    "build_tree_from_files",
    "insert_path",
]
