"""Versioned listing snapshots handed from background refreshes to redraws.

Producers build a complete :class:`ListingSnapshot` (listings, per-file patch
statuses and the path trees built from them) off the render path and publish
it with a reference swap. Redraws read whatever snapshot is current and never
see listings and statuses from two different refreshes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .filetree import (
    CommitFile,
    File,
    Node,
    PatchStatus,
    build_tree_from_commit_files,
    build_tree_from_files,
)

logger = logging.getLogger(__name__)


def _empty_statuses() -> Mapping[str, PatchStatus]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ListingSnapshot:
    """One refresh cycle's listings, treated as read-only by renderers."""

    version: int = 0
    files: tuple[File, ...] = ()
    commit_files: tuple[CommitFile, ...] = ()
    patch_statuses: Mapping[str, PatchStatus] = field(default_factory=_empty_statuses)
    file_tree: Node[File] = field(default_factory=Node)
    commit_file_tree: Node[CommitFile] = field(default_factory=Node)

    def patch_status_of(self, commit_file: CommitFile) -> PatchStatus:
        return self.patch_statuses.get(commit_file.path, PatchStatus.UNSELECTED)


def build_listing_snapshot(
    files: Iterable[File] = (),
    commit_files: Iterable[CommitFile] = (),
    patch_statuses: Mapping[str, PatchStatus] | None = None,
    *,
    version: int = 0,
) -> ListingSnapshot:
    """Build a snapshot and its path trees from plain listings."""
    file_tuple = tuple(files)
    commit_file_tuple = tuple(commit_files)
    return ListingSnapshot(
        version=version,
        files=file_tuple,
        commit_files=commit_file_tuple,
        patch_statuses=MappingProxyType(dict(patch_statuses or {})),
        file_tree=build_tree_from_files(file_tuple),
        commit_file_tree=build_tree_from_commit_files(commit_file_tuple),
    )


class SnapshotPublisher:
    """Holds the latest snapshot; producers publish one at a time, readers never wait."""

    def __init__(self, initial: ListingSnapshot | None = None) -> None:
        self._publish_lock = threading.Lock()
        self._current = initial or ListingSnapshot()

    def current(self) -> ListingSnapshot:
        """Return the latest published snapshot without blocking on producers."""
        return self._current

    def publish(
        self,
        *,
        files: Iterable[File] | None = None,
        commit_files: Iterable[CommitFile] | None = None,
        patch_statuses: Mapping[str, PatchStatus] | None = None,
    ) -> ListingSnapshot:
        """Build and publish the next snapshot.

        Listings left as ``None`` carry over from the snapshot current when the
        publish lock is acquired; the whole build runs under that lock.
        :meth:`current` never takes it.
        """
        with self._publish_lock:
            previous = self._current
            published = build_listing_snapshot(
                previous.files if files is None else files,
                previous.commit_files if commit_files is None else commit_files,
                previous.patch_statuses if patch_statuses is None else patch_statuses,
                version=previous.version + 1,
            )
            self._current = published
        logger.debug(
            "published listing snapshot v%d (%d files, %d commit files)",
            published.version,
            len(published.files),
            len(published.commit_files),
        )
        return published


__all__ = [
    "ListingSnapshot",
    "SnapshotPublisher",
    "build_listing_snapshot",
]
