"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class MessageConfig:
    max_length: int = 50  # subject-line character budget
    include_breaking_change: bool = True
    include_scope: bool = True


@dataclass
class PromptConfig:
    max_diff_chars: int = 8000
    variations: int = 3


@dataclass
class GeneratorConfig:
    command: List[str] = field(default_factory=list)  # empty = not configured
    timeout: int = 120


@dataclass
class RulesConfig:
    disable: List[str] = field(default_factory=list)
    custom_dir: str = ".smartcommit-rules"


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class LoggingConfig:
    level: str = "warning"
    json: bool = False  # JSON lines instead of the console renderer


@dataclass
class SmartCommitConfig:
    version: str = "1.0"
    message: MessageConfig = field(default_factory=MessageConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
