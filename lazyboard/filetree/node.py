"""Generic path tree shared by the working-tree and commit-file listings.

Nodes are keyed by slash-joined paths. Leaves carry a payload, directories
carry children. After compression a directory node may stand for a chain of
single-child directories; ``compression_level`` counts the extra segments it
absorbed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Set
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

PATH_SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    return path.split(PATH_SEPARATOR)


def join_path(segments: list[str]) -> str:
    return PATH_SEPARATOR.join(segments)


@dataclass(eq=False)
class Node(Generic[T]):
    """One directory or file in a path tree."""

    path: str = ""
    payload: T | None = None
    children: list[Node[T]] = field(default_factory=list)
    compression_level: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.payload is not None

    @property
    def name(self) -> str:
        return split_path(self.path)[-1]

    def walk(self) -> Iterator[Node[T]]:
        """Pre-order traversal including ``self``."""
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> list[Node[T]]:
        return [node for node in self.walk() if node.is_leaf]

    def every_leaf(self, predicate: Callable[[T], bool]) -> bool:
        """True when ``predicate`` holds for every payload below (or at) this node."""
        return all(predicate(node.payload) for node in self.leaves())

    def some_leaf(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(node.payload) for node in self.leaves())

    def find(self, path: str) -> Node[T] | None:
        for node in self.walk():
            if node.path == path:
                return node
        return None

    def flatten(self, collapsed: Set[str]) -> list[Node[T]]:
        """Visible nodes in render order; the root itself is excluded."""
        out: list[Node[T]] = []

        def visit(node: Node[T]) -> None:
            for child in node.children:
                out.append(child)
                if not child.is_leaf and child.path not in collapsed:
                    visit(child)

        visit(self)
        return out

    def size(self, collapsed: Set[str]) -> int:
        return len(self.flatten(collapsed))

    def node_at_index(self, index: int, collapsed: Set[str]) -> Node[T] | None:
        visible = self.flatten(collapsed)
        if 0 <= index < len(visible):
            return visible[index]
        return None

    def index_for_path(self, path: str, collapsed: Set[str]) -> int | None:
        for index, node in enumerate(self.flatten(collapsed)):
            if node.path == path:
                return index
        return None

    def sort(self) -> None:
        """Order children directories first, then by path, recursively."""
        self.children.sort(key=lambda node: (node.is_leaf, node.path))
        for child in self.children:
            child.sort()

    def compress(self) -> None:
        """Fold every directory whose only child is a directory into that child."""
        for i, child in enumerate(self.children):
            while len(child.children) == 1 and not child.children[0].is_leaf:
                grandchild = child.children[0]
                grandchild.compression_level = child.compression_level + 1
                child = grandchild
            self.children[i] = child
        for child in self.children:
            child.compress()


__all__ = [
    "Node",
    "PATH_SEPARATOR",
    "join_path",
    "split_path",
]
