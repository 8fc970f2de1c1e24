"""Rule engine — models, registry, built-in breaking-change rules."""

from smartcommit.rules.models import PatternRule
from smartcommit.rules.registry import RuleRegistry, build_registry

__all__ = ["PatternRule", "RuleRegistry", "build_registry"]
