"""Unified diff parser — per-file change records and diff-wide stats.

Both scans are line-oriented and never raise on malformed input: text
without ``diff --git`` headers simply yields no files and zero counts.
"""

from __future__ import annotations

import posixpath
import re
from typing import List, Optional

from smartcommit.git.models import ChangeStats, FileChange

# --- Regex patterns for diff parsing ---

_DIFF_HEADER_PREFIX = "diff --git"
_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")
# git C-quotes paths with unusual bytes: diff --git "a/caf\303\251.py" "b/caf\303\251.py"
_QUOTED_HEADER_RE = re.compile(r'^diff --git "?a/.*? "b/((?:[^"\\]|\\.)*)"$')
_HUNK_HEADER_RE = re.compile(r"^@@ -\d+(?:,\d+)? \+\d+(?:,\d+)? @@")
_FILE_HEADER_OLD = re.compile(r"^--- ")
_FILE_HEADER_NEW = re.compile(r"^\+\+\+ ")
_NEW_FILE_RE = re.compile(r"new file mode")
_DELETED_FILE_RE = re.compile(r"deleted file mode")
_RENAME_RE = re.compile(r"rename (?:from|to) ")


def _is_added(line: str) -> bool:
    return line.startswith("+") and not line.startswith("+++")


def _is_removed(line: str) -> bool:
    return line.startswith("-") and not line.startswith("---")


class DiffParser:
    """Parse unified diff text into FileChange records and ChangeStats.

    Usage::

        parser = DiffParser(diff_text)
        files = parser.parse_files()
        stats = parser.calculate_stats()
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = [line.rstrip("\r") for line in diff_text.split("\n")]

    def parse_files(self) -> List[FileChange]:
        """Return one FileChange per recognisable ``diff --git`` header."""
        files: List[FileChange] = []
        total = len(self._lines)

        for idx, raw_line in enumerate(self._lines):
            if not raw_line.startswith(_DIFF_HEADER_PREFIX):
                continue
            path = _header_path(raw_line)
            if path is None:
                continue  # header without a/ b/ paths → skip silently

            is_new, is_deleted, is_renamed = self._header_flags(idx + 1, total)
            additions, deletions = self._count_span(idx + 1, total)
            files.append(_make_file_change(
                path,
                is_new=is_new,
                is_deleted=is_deleted,
                is_renamed=is_renamed,
                additions=additions,
                deletions=deletions,
            ))

        return files

    def calculate_stats(self) -> ChangeStats:
        """Count every ``+``/``-`` content line and header in the whole diff.

        This is a separate scan from :meth:`parse_files`; lines before the
        first header still count here.
        """
        additions = deletions = files = 0
        for line in self._lines:
            if _is_added(line):
                additions += 1
            elif _is_removed(line):
                deletions += 1
            elif line.startswith(_DIFF_HEADER_PREFIX):
                files += 1
        return ChangeStats(
            total_additions=additions,
            total_deletions=deletions,
            total_files=files,
        )

    # ---- helpers ----

    def _header_flags(self, idx: int, total: int) -> tuple[bool, bool, bool]:
        """Inspect the extended header (up to ---/+++/@@) for status markers.

        The first marker found wins, so a file gets at most one flag.
        """
        while idx < total:
            sub = self._lines[idx]
            if (
                sub.startswith(_DIFF_HEADER_PREFIX)
                or _FILE_HEADER_OLD.match(sub)
                or _FILE_HEADER_NEW.match(sub)
                or _HUNK_HEADER_RE.match(sub)
            ):
                break
            if _NEW_FILE_RE.search(sub):
                return True, False, False
            if _DELETED_FILE_RE.search(sub):
                return False, True, False
            if _RENAME_RE.search(sub):
                return False, False, True
            idx += 1
        return False, False, False

    def _count_span(self, idx: int, total: int) -> tuple[int, int]:
        additions = deletions = 0
        while idx < total:
            line = self._lines[idx]
            if line.startswith(_DIFF_HEADER_PREFIX):
                break
            if _is_added(line):
                additions += 1
            elif _is_removed(line):
                deletions += 1
            idx += 1
        return additions, deletions


def _unquote(path: str) -> str:
    """Undo git's C-style quoting; octal escapes are UTF-8 bytes."""
    try:
        raw = path.encode("utf-8").decode("unicode_escape").encode("latin-1")
    except (UnicodeDecodeError, UnicodeEncodeError):
        return path
    return raw.decode("utf-8", errors="replace")


def _header_path(line: str) -> Optional[str]:
    """New-side path of a ``diff --git`` header, or None if it has none."""
    m = _QUOTED_HEADER_RE.match(line)
    if m is not None:
        return _unquote(m.group(1))
    m = _DIFF_HEADER_RE.match(line)
    return m.group(2) if m else None


def _make_file_change(path: str, **fields) -> FileChange:
    directory = posixpath.dirname(path)
    return FileChange(
        path=path,
        name=posixpath.basename(path),
        dir=directory or ".",
        extension=posixpath.splitext(path)[1],
        **fields,
    )
