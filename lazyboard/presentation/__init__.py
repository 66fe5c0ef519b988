"""Tree-row rendering for the file listings.

Re-exports the traversal skeleton, the per-listing row builders and the
directory status aggregators.
"""

from __future__ import annotations

from .files import (
    COLLAPSED_ARROW,
    EXPANDED_ARROW,
    IconFor,
    commit_file_line,
    file_line,
    render_commit_file_tree,
    render_file_tree,
)
from .status import aggregate_patch_status, aggregate_staging_status
from .tree import BLANK_CONNECTORS, LINE_CONNECTORS, Connectors, connectors_for_style, render_tree

__all__ = [
    "BLANK_CONNECTORS",
    "COLLAPSED_ARROW",
    "Connectors",
    "EXPANDED_ARROW",
    "IconFor",
    "LINE_CONNECTORS",
    "aggregate_patch_status",
    "aggregate_staging_status",
    "commit_file_line",
    "connectors_for_style",
    "file_line",
    "render_commit_file_tree",
    "render_file_tree",
    "render_tree",
]
