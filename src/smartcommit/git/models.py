"""Data models for diff parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


@dataclass(frozen=True)
class FileChange:
    """One file touched by a diff, with its per-file line counts."""

    path: str
    name: str
    dir: str
    extension: str
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False
    additions: int = 0
    deletions: int = 0

    @property
    def status(self) -> FileStatus:
        if self.is_new:
            return FileStatus.ADDED
        if self.is_deleted:
            return FileStatus.DELETED
        if self.is_renamed:
            return FileStatus.RENAMED
        return FileStatus.MODIFIED

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


@dataclass(frozen=True)
class ChangeStats:
    """Diff-wide aggregate line and file counts."""

    total_additions: int = 0
    total_deletions: int = 0
    total_files: int = 0

    @property
    def net_change(self) -> int:
        return self.total_additions - self.total_deletions

    @property
    def change_ratio(self) -> float:
        # no deletions → ratio falls back to the raw addition count
        if self.total_deletions > 0:
            return self.total_additions / self.total_deletions
        return float(self.total_additions)
