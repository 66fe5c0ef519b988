"""Path trees over working-tree and commit-file listings.

Defines the generic ``Node`` model, its builders, collapse state, and the
listing payload types with their separate status vocabularies.
"""

from __future__ import annotations

from .build import build_tree, build_tree_from_commit_files, build_tree_from_files, insert_path
from .collapsed_paths import CollapsedPaths
from .models import (
    CommitFile,
    File,
    PatchStatus,
    StagingStatus,
    parse_name_status_line,
    parse_porcelain_line,
)
from .node import Node, join_path, split_path

__all__ = [
    "CollapsedPaths",
    "CommitFile",
    "File",
    "Node",
    "PatchStatus",
    "StagingStatus",
    "build_tree",
    "build_tree_from_commit_files",
    "build_tree_from_files",
    "insert_path",
    "join_path",
    "parse_name_status_line",
    "parse_porcelain_line",
    "split_path",
]
