"""File-category buckets — which role each changed file plays."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, List, Sequence, Tuple

from smartcommit.git.models import FileChange

# Declaration order matters: it breaks ties when picking a dominant bucket.
CATEGORY_PATTERNS: dict[str, Tuple[str, ...]] = {
    "frontend": (
        ".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte",
        ".html", ".css", ".scss", ".sass", ".less",
    ),
    "backend": (".py", ".java", ".php", ".rb", ".go", ".rs", ".cpp", ".c", ".cs"),
    "config": (".json", ".yaml", ".yml", ".toml", ".ini", ".env", ".conf"),
    "docs": (".md", ".txt", ".rst", ".adoc"),
    "tests": (".test.", ".spec.", "_test.", "_spec."),
    "database": (".sql", ".migration", ".schema"),
    "assets": (".png", ".jpg", ".jpeg", ".gif", ".svg", ".ico", ".woff", ".ttf"),
    "build": (
        "Dockerfile", "Makefile", ".dockerfile", ".build", "package.json",
        "composer.json", "requirements.txt", "Cargo.toml", "pom.xml",
    ),
}


def _matches(category: str, patterns: Tuple[str, ...], file: FileChange) -> bool:
    if category == "tests":
        return any(p in file.path for p in patterns)
    if category == "build":
        return any(file.name == p or p in file.path for p in patterns)
    return file.extension.lower() in patterns


@dataclass(frozen=True)
class FileCategories:
    """Immutable per-category file lists, iterated in declaration order."""

    frontend: Tuple[FileChange, ...] = ()
    backend: Tuple[FileChange, ...] = ()
    config: Tuple[FileChange, ...] = ()
    docs: Tuple[FileChange, ...] = ()
    tests: Tuple[FileChange, ...] = ()
    database: Tuple[FileChange, ...] = ()
    assets: Tuple[FileChange, ...] = ()
    build: Tuple[FileChange, ...] = ()

    def items(self) -> Iterator[Tuple[str, Tuple[FileChange, ...]]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def non_empty(self) -> List[Tuple[str, Tuple[FileChange, ...]]]:
        return [(name, files) for name, files in self.items() if files]

    def names_of(self, category: str) -> set[str]:
        return {f.name for f in getattr(self, category)}


def categorize_files(files: Sequence[FileChange]) -> FileCategories:
    """Bucket *files*; a file may land in zero, one, or several buckets."""
    buckets = {
        category: tuple(f for f in files if _matches(category, patterns, f))
        for category, patterns in CATEGORY_PATTERNS.items()
    }
    return FileCategories(**buckets)
