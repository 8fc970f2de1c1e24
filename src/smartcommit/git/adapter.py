"""Git subprocess wrapper — where the diff text comes from."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from smartcommit.log import get_logger

logger = get_logger(__name__)

# Non-ASCII paths are written verbatim instead of as quoted octal escapes.
GIT_OPTIONS = ("-c", "core.quotePath=false")

# Plain unified diff regardless of user config: no colour, no external
# diff driver, renames reported as "rename from/to".
DIFF_FLAGS = ("--no-color", "--no-ext-diff", "--find-renames")


class GitError(Exception):
    """Raised when git is missing, times out, or rejects a command."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run ``git *args`` in *cwd* and return stdout."""
    cmd = ["git", *GIT_OPTIONS, *args]
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise GitError("git is not installed or not on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitError(f"{' '.join(cmd)} timed out after {timeout}s") from exc

    if proc.returncode != 0:
        reason = proc.stderr.strip() or f"exit status {proc.returncode}"
        raise GitError(f"{' '.join(cmd)} failed: {reason}")

    logger.debug("git_command", args=args, output_chars=len(proc.stdout))
    return proc.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Top-level directory of the repository containing *cwd*."""
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd or Path.cwd())
    return Path(out.strip())


def get_staged_diff(repo_root: Path) -> str:
    """Unified diff of the index against HEAD, i.e. what would be committed."""
    return _run_git(["diff", "--cached", *DIFF_FLAGS], cwd=repo_root)


def get_range_diff(repo_root: Path, base: str, head: str = "HEAD") -> str:
    """Unified diff of *head* against *base*."""
    return _run_git(["diff", *DIFF_FLAGS, f"{base}..{head}"], cwd=repo_root)
