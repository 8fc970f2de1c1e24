"""Load and merge configuration from .smartcommit.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import shlex
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from smartcommit.config.schema import (
    LOG_LEVELS,
    GeneratorConfig,
    LoggingConfig,
    MessageConfig,
    OutputConfig,
    PromptConfig,
    RulesConfig,
    SmartCommitConfig,
)

CONFIG_FILENAME = ".smartcommit.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: SmartCommitConfig) -> None:
    """Apply SMARTCOMMIT_* environment variable overrides."""
    if val := os.environ.get("SMARTCOMMIT_MAX_LENGTH"):
        try:
            cfg.message.max_length = int(val)
        except ValueError:
            pass
    if val := os.environ.get("SMARTCOMMIT_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("SMARTCOMMIT_GENERATOR"):
        cfg.generator.command = shlex.split(val)
    if val := os.environ.get("SMARTCOMMIT_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if val := os.environ.get("SMARTCOMMIT_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.logging.level = val.lower()


def _validate(cfg: SmartCommitConfig) -> None:
    if cfg.message.max_length <= 0:
        raise ConfigError("[message] max_length must be a positive integer")
    if cfg.prompt.max_diff_chars <= 0:
        raise ConfigError("[prompt] max_diff_chars must be a positive integer")
    if cfg.output.format not in ("terminal", "json"):
        raise ConfigError(f"[output] unknown format: {cfg.output.format}")
    if not isinstance(cfg.generator.command, list):
        raise ConfigError("[generator] command must be a list of strings")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> SmartCommitConfig:
    """Load, validate, and return a SmartCommitConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = SmartCommitConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = SmartCommitConfig(
            version=raw.get("version", "1.0"),
            message=_build_section(raw, MessageConfig, "message"),
            prompt=_build_section(raw, PromptConfig, "prompt"),
            generator=_build_section(raw, GeneratorConfig, "generator"),
            rules=_build_section(raw, RulesConfig, "rules"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
