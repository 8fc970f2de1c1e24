"""Message composition around an injected text generator.

The generator is any callable taking a prompt and returning raw text. It
is called exactly once per message; failures surface as GenerationError
with the original exception chained, never as a fabricated message.
"""

from __future__ import annotations

from typing import Callable, List

from smartcommit.analysis.models import DiffAnalysis
from smartcommit.log import get_logger
from smartcommit.message.cleanup import cleanup_message
from smartcommit.message.options import CommitMessageOptions
from smartcommit.message.prompt import (
    DEFAULT_MAX_DIFF_CHARS,
    VARIATION_FOCUS,
    build_prompt,
    build_variation_prompt,
)

logger = get_logger(__name__)

Generate = Callable[[str], str]


class GenerationError(Exception):
    """Raised when the text generator fails or returns nothing usable."""


def _generate(generate: Generate, prompt: str) -> str:
    try:
        raw = generate(prompt)
    except Exception as exc:
        raise GenerationError(f"Failed to generate commit message: {exc}") from exc
    if not isinstance(raw, str):
        raise GenerationError(
            f"Failed to generate commit message: generator returned {type(raw).__name__}"
        )
    return raw.strip()


def compose_message(
    diff_text: str,
    analysis: DiffAnalysis,
    options: CommitMessageOptions,
    generate: Generate,
    *,
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    """Build the prompt, call *generate* once, and clean up the result."""
    prompt = build_prompt(diff_text, analysis, options, max_diff_chars=max_diff_chars)
    logger.debug("generating_message", prompt_chars=len(prompt))
    raw = _generate(generate, prompt)
    return cleanup_message(raw, analysis, options)


def compose_variations(
    diff_text: str,
    analysis: DiffAnalysis,
    options: CommitMessageOptions,
    generate: Generate,
    count: int = len(VARIATION_FOCUS),
    *,
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> List[str]:
    """Generate up to *count* distinct messages from one shared analysis.

    Calls run sequentially. A failed variation is logged and skipped; if
    every one fails, a single plain composition is attempted and its
    failure propagates.
    """
    messages: List[str] = []
    for i in range(count):
        prompt = build_variation_prompt(
            diff_text, analysis, i, options, max_diff_chars=max_diff_chars
        )
        try:
            raw = _generate(generate, prompt)
        except GenerationError as exc:
            logger.warning("variation_failed", variation=i + 1, error=str(exc))
            continue
        message = cleanup_message(raw, analysis, options)
        if message not in messages:
            messages.append(message)

    if messages:
        return messages
    return [
        compose_message(
            diff_text, analysis, options, generate, max_diff_chars=max_diff_chars
        )
    ]
