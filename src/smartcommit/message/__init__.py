"""Prompt building, generation, and message cleanup."""

from smartcommit.message.cleanup import cleanup_message, extract_commit_type, wrap_body_lines
from smartcommit.message.composer import GenerationError, compose_message, compose_variations
from smartcommit.message.generator import CommandGenerator, GeneratorError
from smartcommit.message.options import CommitMessageOptions
from smartcommit.message.prompt import build_prompt, build_variation_prompt

__all__ = [
    "CommandGenerator",
    "CommitMessageOptions",
    "GenerationError",
    "GeneratorError",
    "build_prompt",
    "build_variation_prompt",
    "cleanup_message",
    "compose_message",
    "compose_variations",
    "extract_commit_type",
    "wrap_body_lines",
]
