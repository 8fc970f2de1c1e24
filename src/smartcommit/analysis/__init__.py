"""Diff analysis — categories, change patterns, type and scope inference."""

from smartcommit.analysis.analyzer import DiffAnalyzer, summarize
from smartcommit.analysis.categories import FileCategories, categorize_files
from smartcommit.analysis.classifier import suggest_commit_type
from smartcommit.analysis.context import ProjectContext, detect_project_context
from smartcommit.analysis.models import DiffAnalysis
from smartcommit.analysis.scope import suggest_scope

__all__ = [
    "DiffAnalysis",
    "DiffAnalyzer",
    "FileCategories",
    "ProjectContext",
    "categorize_files",
    "detect_project_context",
    "suggest_commit_type",
    "suggest_scope",
    "summarize",
]
