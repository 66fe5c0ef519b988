"""Directory indicators derived from the leaves below them.

A directory never stores a status of its own: it is recomputed from its
descendant files on every render. The two listings aggregate into different
vocabularies.
"""

from __future__ import annotations

from collections.abc import Callable

from ..filetree import CommitFile, File, Node, PatchStatus, StagingStatus


def aggregate_patch_status(node: Node[CommitFile], status_of: Callable[[CommitFile], PatchStatus]) -> PatchStatus:
    """WHOLE if every file is WHOLE, UNSELECTED if every file is UNSELECTED, else PART.

    For a leaf this is just the file's own status.
    """
    if node.every_leaf(lambda file: status_of(file) is PatchStatus.WHOLE):
        return PatchStatus.WHOLE
    if node.every_leaf(lambda file: status_of(file) is PatchStatus.UNSELECTED):
        return PatchStatus.UNSELECTED
    return PatchStatus.PART


def aggregate_staging_status(node: Node[File]) -> StagingStatus:
    has_staged = node.some_leaf(lambda file: file.has_staged_changes)
    has_unstaged = node.some_leaf(lambda file: file.has_unstaged_changes)
    if has_staged and not has_unstaged:
        return StagingStatus.STAGED
    if has_staged and has_unstaged:
        return StagingStatus.MIXED
    return StagingStatus.UNSTAGED


__all__ = [
    "aggregate_patch_status",
    "aggregate_staging_status",
]
