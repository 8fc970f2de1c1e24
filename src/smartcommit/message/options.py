"""Caller-supplied options for message composition."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_LENGTH = 50


@dataclass(frozen=True)
class CommitMessageOptions:
    max_length: int = DEFAULT_MAX_LENGTH  # subject-line budget
    include_breaking_change: bool = True
    include_scope: bool = True  # accepted but never used to drop the scope
