"""Built-in rules."""

from smartcommit.rules.builtin.breaking import ALL_BREAKING_RULES
from smartcommit.rules.models import PatternRule

ALL_BUILTIN_RULES: list[PatternRule] = [*ALL_BREAKING_RULES]

__all__ = ["ALL_BUILTIN_RULES"]
