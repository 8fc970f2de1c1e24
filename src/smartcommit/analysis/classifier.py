"""Commit-type inference — an ordered rule cascade, first match wins.

Each rule returns a commit type or ``None`` to pass to the next one. The
keyword scan and the size fallback run only when every rule passes.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from smartcommit.analysis.categories import FileCategories
from smartcommit.analysis.models import DiffAnalysis

MANIFEST_FILES: Tuple[str, ...] = ("package.json", "composer.json")

# Scanned in declaration order against the joined change-pattern text.
COMMIT_TYPE_KEYWORDS: dict[str, Tuple[str, ...]] = {
    "feat": ("add", "implement", "create", "introduce", "new"),
    "fix": ("fix", "resolve", "correct", "patch", "repair", "bug"),
    "refactor": ("refactor", "restructure", "reorganize", "simplify", "optimize"),
    "chore": ("update", "upgrade", "bump", "maintenance", "cleanup"),
    "docs": ("documentation", "readme", "comment", "doc"),
    "style": ("format", "lint", "whitespace", "indentation"),
    "test": ("test", "spec", "coverage"),
    "perf": ("performance", "optimize", "speed", "cache"),
    "ci": ("workflow", "pipeline", "deploy", "build"),
    "build": ("build", "compile", "bundle", "webpack", "rollup"),
}

TypeRule = Callable[[DiffAnalysis], Optional[str]]


def only_category(categories: FileCategories, name: str) -> bool:
    """True if *name* is non-empty and holds every categorised file.

    Files that land in no bucket are ignored; a file in several buckets
    (``auth.test.ts`` is both tests and frontend) counts for each.
    """
    bucket = getattr(categories, name)
    if not bucket:
        return False
    categorised = {f.path for _, files in categories.items() for f in files}
    return categorised == {f.path for f in bucket}


def _tests_only(analysis: DiffAnalysis) -> Optional[str]:
    return "test" if only_category(analysis.categories, "tests") else None


def _docs_only(analysis: DiffAnalysis) -> Optional[str]:
    return "docs" if only_category(analysis.categories, "docs") else None


def _manifest_changed(analysis: DiffAnalysis) -> Optional[str]:
    if analysis.categories.names_of("config") & set(MANIFEST_FILES):
        return "chore"
    return None


def _new_files_mostly_added(analysis: DiffAnalysis) -> Optional[str]:
    stats = analysis.stats
    if analysis.new_files and stats.total_additions > stats.total_deletions * 2:
        return "feat"
    return None


def _net_removal(analysis: DiffAnalysis) -> Optional[str]:
    stats = analysis.stats
    if stats.total_deletions > stats.total_additions:
        return "chore" if analysis.deleted_files else "refactor"
    return None


def _pattern_keywords(analysis: DiffAnalysis) -> Optional[str]:
    text = " ".join(analysis.change_patterns).lower()
    for commit_type, keywords in COMMIT_TYPE_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return commit_type
    return None


TYPE_RULES: List[Tuple[str, TypeRule]] = [
    ("tests_only", _tests_only),
    ("docs_only", _docs_only),
    ("manifest_changed", _manifest_changed),
    ("new_files_mostly_added", _new_files_mostly_added),
    ("net_removal", _net_removal),
    ("pattern_keywords", _pattern_keywords),
]


def _size_fallback(analysis: DiffAnalysis) -> str:
    stats = analysis.stats
    if stats.net_change > 50:
        return "feat"
    if stats.total_files == 1 and stats.net_change < 10:
        return "fix"
    return "chore"


def suggest_commit_type(analysis: DiffAnalysis) -> str:
    for _name, rule in TYPE_RULES:
        result = rule(analysis)
        if result is not None:
            return result
    return _size_fallback(analysis)
