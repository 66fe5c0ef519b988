"""Listing entries produced by the version-control collaborator.

Working-tree files and commit files are unrelated payloads that share only
the tree skeleton, so they carry separate status vocabularies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_NO_STAGED_CHANGE = {" ", "U", "?"}
RENAME_SEPARATOR = " -> "


class PatchStatus(Enum):
    """How much of a commit file is selected into the custom patch."""

    UNSELECTED = "unselected"
    PART = "part"
    WHOLE = "whole"


class StagingStatus(Enum):
    """Where a working-tree subtree's changes live."""

    STAGED = "staged"
    MIXED = "mixed"
    UNSTAGED = "unstaged"


@dataclass(frozen=True)
class File:
    """One ``git status --porcelain`` entry."""

    path: str
    short_status: str = "  "
    previous_path: str = ""
    is_submodule: bool = False
    is_worktree: bool = False

    @property
    def _staged_char(self) -> str:
        return self.short_status[:1]

    @property
    def _unstaged_char(self) -> str:
        return self.short_status[1:2]

    @property
    def has_staged_changes(self) -> bool:
        return self._staged_char not in _NO_STAGED_CHANGE

    @property
    def has_unstaged_changes(self) -> bool:
        return self._unstaged_char != " "

    @property
    def is_rename(self) -> bool:
        return bool(self.previous_path)


@dataclass(frozen=True)
class CommitFile:
    """One file touched by a commit, with its single-letter change status."""

    path: str
    change_status: str = "M"


def parse_porcelain_line(line: str, *, submodule_paths: frozenset[str] = frozenset()) -> File | None:
    """Parse ``XY path`` or ``XY old -> new``; blank lines yield ``None``.

    Untracked directories (``?? dir/``) become a single entry named ``dir``.
    """
    line = line.rstrip("\r\n")
    if len(line) < 4:
        return None
    short_status = line[:2]
    name = line[3:]
    previous_path = ""
    if short_status[0] in {"R", "C"} and RENAME_SEPARATOR in name:
        previous_path, name = name.split(RENAME_SEPARATOR, 1)
    name = _clean_path(name)
    if not name:
        return None
    return File(
        path=name,
        short_status=short_status,
        previous_path=_clean_path(previous_path),
        is_submodule=name in submodule_paths,
    )


def _clean_path(path: str) -> str:
    return path.strip('"').rstrip("/")


def parse_name_status_line(line: str) -> CommitFile | None:
    """Parse ``M\\tpath`` or ``R100\\told\\tnew`` from ``git diff --name-status``."""
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) < 2 or not fields[0]:
        return None
    return CommitFile(path=fields[-1], change_status=fields[0][0])


__all__ = [
    "CommitFile",
    "File",
    "PatchStatus",
    "StagingStatus",
    "parse_name_status_line",
    "parse_porcelain_line",
]
