"""Per-path collapse state that outlives tree rebuilds."""

from __future__ import annotations

from collections.abc import Iterable

from .node import join_path, split_path


class CollapsedPaths:
    """Mutable set of collapsed directory paths owned by the session.

    Keys are paths, not nodes, so collapse state survives every rebuild that
    keeps the path. Renderers receive :meth:`snapshot`, never this object.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def is_collapsed(self, path: str) -> bool:
        return path in self._paths

    def collapse(self, path: str) -> None:
        self._paths.add(path)

    def expand(self, path: str) -> None:
        self._paths.discard(path)

    def toggle(self, path: str) -> None:
        if path in self._paths:
            self._paths.remove(path)
        else:
            self._paths.add(path)

    def expand_to_path(self, path: str) -> None:
        """Expand every ancestor directory so ``path`` becomes visible."""
        segments = split_path(path)
        for depth in range(1, len(segments)):
            self._paths.discard(join_path(segments[:depth]))

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._paths)

    def __len__(self) -> int:
        return len(self._paths)


__all__ = ["CollapsedPaths"]
