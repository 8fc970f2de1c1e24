"""Pattern rule model — pattern stored as string, compiled on first use."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PatternRule:
    """A single textual heuristic applied to diff text.

    ``pattern`` is stored as a raw string so the rule stays serialisable.
    Matching is case-insensitive and never spans a newline.
    """

    id: str
    pattern: str
    description: str = ""
    enabled: bool = True

    # --- cached compiled object (not serialised) ---
    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        if self._compiled_pattern is None:
            self._compiled_pattern = re.compile(self.pattern, re.IGNORECASE)
        return self._compiled_pattern

    def matches(self, text: str) -> bool:
        return self.compiled_pattern.search(text) is not None
