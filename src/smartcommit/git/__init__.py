"""Git interface layer — adapter, diff parsing, models."""

from smartcommit.git.adapter import GitError, get_range_diff, get_repo_root, get_staged_diff
from smartcommit.git.diff_parser import DiffParser
from smartcommit.git.models import ChangeStats, FileChange, FileStatus

__all__ = [
    "ChangeStats",
    "DiffParser",
    "FileChange",
    "FileStatus",
    "GitError",
    "get_range_diff",
    "get_repo_root",
    "get_staged_diff",
]
