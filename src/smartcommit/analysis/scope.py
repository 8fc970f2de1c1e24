"""Scope inference from the dominant file category."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from smartcommit.analysis.models import DiffAnalysis
from smartcommit.git.models import FileChange

CATEGORY_SCOPES: dict[str, str] = {
    "frontend": "ui",
    "backend": "api",
    "database": "db",
    "config": "config",
    "tests": "test",
    "docs": "docs",
    "build": "build",
}

_NAME_DELIMITERS = re.compile(r"[-_]")


def common_directory(files: Sequence[FileChange]) -> Optional[str]:
    """Longest common directory prefix, compared segment by segment."""
    if not files:
        return None
    if len(files) == 1:
        return files[0].dir

    common = files[0].dir.split("/")
    for f in files[1:]:
        parts = f.dir.split("/")
        for i, segment in enumerate(common):
            if i >= len(parts) or parts[i] != segment:
                common = common[:i]
                break
    return "/".join(common)


def _single_file_scope(file: FileChange) -> Optional[str]:
    if file.dir and file.dir != "." and "/" not in file.dir:
        return file.dir
    stem = file.name[: len(file.name) - len(file.extension)] if file.extension else file.name
    if _NAME_DELIMITERS.search(stem):
        return _NAME_DELIMITERS.split(stem)[0]
    return None


def suggest_scope(analysis: DiffAnalysis) -> Optional[str]:
    active = analysis.categories.non_empty()
    if not active:
        return None

    # max() keeps the first of equal counts, so declaration order breaks ties
    category, category_files = max(active, key=lambda item: len(item[1]))

    if len(analysis.files) == 1:
        scope = _single_file_scope(analysis.files[0])
        if scope:
            return scope

    common = common_directory(category_files)
    if common and common != ".":
        return common.split("/")[0]

    return CATEGORY_SCOPES.get(category, category)
