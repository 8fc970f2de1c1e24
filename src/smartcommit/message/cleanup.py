"""Deterministic post-processing of generated commit messages.

``cleanup_message`` applies its steps in a fixed order; each step sees the
output of the previous one:

1. strip one leading and one trailing quote character
2. drop backticks
3. lowercase the first description word unless it is a known proper noun
4. strip one trailing period
5. insert ``!`` for breaking changes
6. truncate the subject description to the length budget
7. re-wrap body lines at 72 characters
"""

from __future__ import annotations

import re
from typing import List

from smartcommit.analysis.models import DiffAnalysis
from smartcommit.message.options import DEFAULT_MAX_LENGTH, CommitMessageOptions

BODY_WIDTH = 72
ELLIPSIS = "..."

PROPER_NOUNS = frozenset({
    "API", "JWT", "OAuth", "HTTP", "CSS", "HTML", "JSON", "XML", "SQL", "UI", "UX",
})

_EDGE_QUOTES_RE = re.compile(r"\A[\"']|[\"']\Z")
_SUBJECT_RE = re.compile(r"^(\w+(?:\([^)]*\))?!?): (.*)$")
_COMMIT_TYPE_RE = re.compile(r"^([a-z]+)(\([^)]+\))?!?:")


def _lowercase_description(message: str) -> str:
    subject, sep, rest = message.partition("\n")
    m = _SUBJECT_RE.match(subject)
    if m is None:
        return message
    prefix, description = m.groups()
    words = description.split(" ")
    if words[0] not in PROPER_NOUNS:
        words[0] = words[0].lower()
    return f"{prefix}: {' '.join(words)}{sep}{rest}"


def _mark_breaking(message: str) -> str:
    idx = message.find("):")
    if idx == -1:
        idx = message.find(":")
    if idx == -1:
        return message
    return message[:idx] + "!" + message[idx:]


def truncate_subject(subject: str, max_length: int) -> str:
    """Shorten the description after ``": "``; the prefix is never cut."""
    if len(subject) <= max_length:
        return subject
    idx = subject.find(": ")
    if idx == -1:
        return subject
    prefix = subject[: idx + 2]
    description = subject[idx + 2:]
    budget = max_length - len(prefix)
    if len(description) <= budget:
        return subject
    keep = max(budget - len(ELLIPSIS), 0)
    return prefix + description[:keep] + ELLIPSIS


def wrap_body_lines(text: str, width: int = BODY_WIDTH) -> str:
    """Word-wrap each line on spaces; words longer than *width* are split."""
    wrapped: List[str] = []
    for line in text.split("\n"):
        if not line.strip():
            wrapped.append("")
            continue
        if len(line) <= width:
            wrapped.append(line)
            continue

        current = ""
        for word in line.split(" "):
            if len(current) + len(word) + 1 <= width:
                current = f"{current} {word}" if current else word
                continue
            if current:
                wrapped.append(current)
            current = word
            while len(current) > width:
                wrapped.append(current[:width])
                current = current[width:]
        if current:
            wrapped.append(current)

    return "\n".join(wrapped)


def cleanup_message(
    message: str,
    analysis: DiffAnalysis,
    options: CommitMessageOptions,
) -> str:
    message = _EDGE_QUOTES_RE.sub("", message)
    message = message.replace("`", "")
    message = _lowercase_description(message)
    if message.endswith("."):
        message = message[:-1]

    if options.include_breaking_change is not False and analysis.is_breaking_change:
        if "!" not in message:
            message = _mark_breaking(message)

    lines = message.split("\n")
    lines[0] = truncate_subject(lines[0], options.max_length or DEFAULT_MAX_LENGTH)

    if len(lines) > 2:
        # subject and separator line are kept as-is
        body = wrap_body_lines("\n".join(lines[2:]), BODY_WIDTH)
        lines = lines[:2] + [body]

    return "\n".join(lines)


def extract_commit_type(message: str) -> str:
    """Leading conventional-commit type token of *message*, or ``"unknown"``."""
    m = _COMMIT_TYPE_RE.match(message)
    return m.group(1) if m else "unknown"
