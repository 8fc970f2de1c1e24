"""DiffAnalyzer — unified diff text in, DiffAnalysis out.

The analysis is a pure function of the diff text plus the injected
project-context probe. Malformed input never raises; it degrades to an
empty or partial analysis.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from smartcommit.analysis.categories import categorize_files
from smartcommit.analysis.classifier import suggest_commit_type
from smartcommit.analysis.context import ContextProbe, detect_project_context
from smartcommit.analysis.models import DiffAnalysis
from smartcommit.analysis.patterns import detect_breaking_changes, detect_change_patterns
from smartcommit.analysis.scope import suggest_scope
from smartcommit.git.diff_parser import DiffParser
from smartcommit.log import get_logger
from smartcommit.rules.models import PatternRule

logger = get_logger(__name__)


class DiffAnalyzer:
    """Parse, categorise, and classify a unified diff.

    Usage::

        analyzer = DiffAnalyzer(context_probe=lambda: ProjectContext())
        analysis = analyzer.analyze(diff_text)
    """

    def __init__(
        self,
        context_probe: Optional[ContextProbe] = None,
        breaking_rules: Optional[Sequence[PatternRule]] = None,
    ) -> None:
        if breaking_rules is None:
            from smartcommit.rules.builtin import ALL_BUILTIN_RULES

            breaking_rules = ALL_BUILTIN_RULES
        self._context_probe = context_probe or detect_project_context
        self._breaking_rules = list(breaking_rules)

    def analyze(self, diff_text: str) -> DiffAnalysis:
        parser = DiffParser(diff_text)
        files = tuple(parser.parse_files())

        base = DiffAnalysis(
            files=files,
            stats=parser.calculate_stats(),
            categories=categorize_files(files),
            change_patterns=tuple(detect_change_patterns(diff_text, files)),
            project_context=self._context_probe(),
        )
        analysis = replace(
            base,
            suggested_type=suggest_commit_type(base),
            suggested_scope=suggest_scope(base),
            is_breaking_change=detect_breaking_changes(diff_text, self._breaking_rules),
        )

        logger.debug(
            "diff_analyzed",
            files=len(files),
            additions=analysis.stats.total_additions,
            deletions=analysis.stats.total_deletions,
            suggested_type=analysis.suggested_type,
            suggested_scope=analysis.suggested_scope,
            breaking=analysis.is_breaking_change,
        )
        return analysis


def summarize(analysis: DiffAnalysis) -> str:
    """One-line digest: counts, up to 3 active categories, first 2 patterns."""
    stats = analysis.stats
    parts = [
        f"{stats.total_files} files changed",
        f"{stats.total_additions} additions, {stats.total_deletions} deletions",
    ]

    active = [f"{len(files)} {name}" for name, files in analysis.categories.non_empty()][:3]
    if active:
        parts.append(f"Affects: {', '.join(active)}")

    if analysis.change_patterns:
        parts.append(f"Patterns: {', '.join(analysis.change_patterns[:2])}")

    return " | ".join(parts)
