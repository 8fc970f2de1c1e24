"""Change-pattern labels and breaking-change detection."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from smartcommit.git.models import FileChange
from smartcommit.rules.models import PatternRule

MAJOR_CHANGE_THRESHOLD = 100

DEFINITION_MARKERS: Tuple[str, ...] = ("function ", "def ", "class ")
DEPENDENCY_MARKERS: Tuple[str, ...] = ("import ", "require(", "from ")

# (label template, counter) — evaluated in this order
_FILE_PATTERNS: List[Tuple[str, Callable[[FileChange], bool]]] = [
    ("created {n} new file(s)", lambda f: f.is_new),
    ("deleted {n} file(s)", lambda f: f.is_deleted),
    ("renamed {n} file(s)", lambda f: f.is_renamed),
    ("major changes in {n} file(s)", lambda f: f.total_changes > MAJOR_CHANGE_THRESHOLD),
]

_TEXT_PATTERNS: List[Tuple[str, Tuple[str, ...]]] = [
    ("function/class modifications", DEFINITION_MARKERS),
    ("dependency changes", DEPENDENCY_MARKERS),
]


def detect_change_patterns(diff_text: str, files: Sequence[FileChange]) -> List[str]:
    """Return human-readable labels in a fixed order.

    Consumers read only a prefix of this list, so the order is part of the
    contract.
    """
    patterns: List[str] = []
    for template, predicate in _FILE_PATTERNS:
        n = sum(1 for f in files if predicate(f))
        if n > 0:
            patterns.append(template.format(n=n))
    for label, markers in _TEXT_PATTERNS:
        if any(marker in diff_text for marker in markers):
            patterns.append(label)
    return patterns


def detect_breaking_changes(diff_text: str, rules: Sequence[PatternRule]) -> bool:
    """True if any enabled rule matches anywhere in *diff_text*."""
    return any(rule.enabled and rule.matches(diff_text) for rule in rules)
