"""The DiffAnalysis value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from smartcommit.analysis.categories import FileCategories
from smartcommit.analysis.context import ProjectContext
from smartcommit.git.models import ChangeStats, FileChange


@dataclass(frozen=True)
class DiffAnalysis:
    """Everything derived from one diff; shared read-only by consumers."""

    files: Tuple[FileChange, ...] = ()
    stats: ChangeStats = field(default_factory=ChangeStats)
    categories: FileCategories = field(default_factory=FileCategories)
    change_patterns: Tuple[str, ...] = ()
    project_context: ProjectContext = field(default_factory=ProjectContext)
    suggested_type: Optional[str] = None
    suggested_scope: Optional[str] = None
    is_breaking_change: bool = False

    @property
    def new_files(self) -> Tuple[FileChange, ...]:
        return tuple(f for f in self.files if f.is_new)

    @property
    def deleted_files(self) -> Tuple[FileChange, ...]:
        return tuple(f for f in self.files if f.is_deleted)
