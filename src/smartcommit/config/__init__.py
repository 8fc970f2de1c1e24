"""Configuration loading, schema, and defaults."""

from smartcommit.config.loader import ConfigError, load_config
from smartcommit.config.schema import SmartCommitConfig

__all__ = [
    "ConfigError",
    "SmartCommitConfig",
    "load_config",
]
