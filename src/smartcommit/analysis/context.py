"""Project context probe — ecosystem markers in the working tree.

This is ambient signal for the prompt, not part of the diff analysis
proper; every failure degrades to the default context.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional

from smartcommit.log import get_logger

logger = get_logger(__name__)

ContextProbe = Callable[[], "ProjectContext"]

# First dependency found wins.
_NODE_FRAMEWORKS = (
    ("react", "react"),
    ("vue", "vue"),
    ("next", "nextjs"),
    ("express", "express"),
    ("@nestjs/core", "nestjs"),
)
_NODE_TEST_RUNNERS = ("jest", "mocha", "vitest")

# (marker files, type, language) — checked in order after package.json
_ECOSYSTEM_MARKERS = (
    (("requirements.txt", "pyproject.toml"), "python", "python"),
    (("pom.xml", "build.gradle"), "java", "java"),
    (("go.mod",), "go", "go"),
)


@dataclass(frozen=True)
class ProjectContext:
    type: str = "unknown"
    framework: Optional[str] = None
    language: Optional[str] = None
    has_tests: bool = False
    has_docs: bool = False


def _node_context(package_json: Path) -> ProjectContext:
    pkg = json.loads(package_json.read_text(encoding="utf-8"))
    deps = {**pkg.get("dependencies", {}), **pkg.get("devDependencies", {})}
    framework = next((name for dep, name in _NODE_FRAMEWORKS if dep in deps), None)
    return ProjectContext(
        type="nodejs",
        language="javascript",
        framework=framework,
        has_tests=any(runner in deps for runner in _NODE_TEST_RUNNERS),
    )


def detect_project_context(root: Optional[Path] = None) -> ProjectContext:
    """Probe *root* (default: cwd) for ecosystem marker files."""
    root = root or Path.cwd()
    try:
        context = ProjectContext()
        package_json = root / "package.json"
        if package_json.is_file():
            context = _node_context(package_json)
        else:
            for markers, kind, language in _ECOSYSTEM_MARKERS:
                if any((root / m).exists() for m in markers):
                    context = ProjectContext(type=kind, language=language)
                    break

        has_docs = (root / "README.md").exists() or (root / "docs").is_dir()
        return replace(context, has_docs=has_docs)
    except (OSError, ValueError, AttributeError, TypeError) as exc:
        logger.debug("project_context_probe_failed", root=str(root), error=str(exc))
        return ProjectContext()


def project_context_probe(root: Path) -> ContextProbe:
    """Bind :func:`detect_project_context` to a fixed directory."""
    return lambda: detect_project_context(root)
