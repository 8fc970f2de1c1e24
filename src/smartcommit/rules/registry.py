"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from smartcommit.config.schema import SmartCommitConfig
from smartcommit.rules.models import PatternRule


class RuleRegistry:
    """Central store for breaking-change rules, in registration order."""

    def __init__(self) -> None:
        self._rules: Dict[str, PatternRule] = {}

    # ---- registration ----

    def register(self, rule: PatternRule) -> None:
        self._rules[rule.id] = rule

    def register_many(self, rules: list[PatternRule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[PatternRule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[PatternRule]:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> List[PatternRule]:
        return [r for r in self._rules.values() if r.enabled]

    # ---- config filtering ----

    def apply_config(self, config: SmartCommitConfig) -> None:
        """Disable rules listed in config.rules.disable."""
        for rule in self._rules.values():
            if rule.id in config.rules.disable:
                rule.enabled = False

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            rule = PatternRule(
                id=entry["id"],
                pattern=entry["pattern"],
                description=entry.get("description", ""),
            )
            self.register(rule)
            count += 1
        return count


def build_registry(config: SmartCommitConfig, repo_root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from smartcommit.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    # fresh copies: apply_config mutates ``enabled``
    registry.register_many([
        PatternRule(id=r.id, pattern=r.pattern, description=r.description)
        for r in ALL_BUILTIN_RULES
    ])

    registry.load_custom_rules(repo_root / config.rules.custom_dir)
    registry.apply_config(config)

    # Force-compile patterns now (not per analysis)
    for rule in registry.enabled_rules():
        _ = rule.compiled_pattern

    return registry
