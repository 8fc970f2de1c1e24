"""Prompt construction for the external text generator.

Blocks are appended in a fixed order: role, project context, change
analysis, categories, change patterns, examples, rules, special
instructions, then the (possibly truncated) diff.
"""

from __future__ import annotations

from typing import List, Tuple

from smartcommit.analysis.models import DiffAnalysis
from smartcommit.message.options import DEFAULT_MAX_LENGTH, CommitMessageOptions

DEFAULT_MAX_DIFF_CHARS = 8000
TRUNCATION_MARKER = "\n\n[... diff truncated for analysis ...]"

ROLE = (
    "You are an expert at writing conventional commit messages. Analyze this "
    "git diff and generate a single, precise commit message."
)

FRAMEWORK_EXAMPLES: dict[str, Tuple[str, ...]] = {
    "react": (
        "feat(auth): add login form validation",
        "fix(ui): resolve button hover state issue",
        "refactor(hooks): simplify useAuth implementation",
    ),
    "nextjs": (
        "feat(api): add user profile endpoints",
        "fix(ssr): resolve hydration mismatch error",
        "chore(deps): upgrade next to 15.0.0",
    ),
    "express": (
        "feat(auth): implement JWT middleware",
        "fix(api): handle null response in user routes",
        "perf(db): optimize user query performance",
    ),
}

TYPE_EXAMPLES: dict[str, Tuple[str, ...]] = {
    "feat": (
        "feat(auth): implement two-factor authentication",
        "feat(api): add user profile management",
        "feat(ui): create responsive navigation menu",
    ),
    "fix": (
        "fix(auth): resolve token expiration handling",
        "fix(api): handle edge case in validation",
        "fix(ui): correct mobile layout issues",
    ),
    "test": (
        "test(auth): add integration tests for login",
        "test(api): increase coverage for user endpoints",
        "test(utils): add unit tests for validation",
    ),
    "docs": (
        "docs: update installation instructions",
        "docs(api): add endpoint documentation",
        "docs: fix typos in contributing guide",
    ),
}

CATEGORY_EXAMPLES: dict[str, Tuple[str, ...]] = {
    "database": (
        "feat(db): add user preferences table",
        "fix(migration): resolve foreign key constraint",
        "perf(db): add indexes for query optimization",
    ),
    "config": (
        "chore(config): update environment variables",
        "ci: add deployment workflow",
        "build: configure webpack optimization",
    ),
}

VARIATION_FOCUS: Tuple[str, ...] = (
    "Focus on the primary business value of this change.",
    "Emphasize the technical implementation aspects.",
    "Highlight the user-facing impact of this change.",
)


def _context_block(analysis: DiffAnalysis) -> str:
    ctx = analysis.project_context
    return (
        "## Project Context:\n"
        f"- Type: {ctx.type}\n"
        f"- Language: {ctx.language or 'mixed'}\n"
        f"- Framework: {ctx.framework or 'none'}"
    )


def _analysis_block(analysis: DiffAnalysis) -> str:
    stats = analysis.stats
    return (
        "## Change Analysis:\n"
        f"- Files changed: {stats.total_files}\n"
        f"- Additions: {stats.total_additions}, Deletions: {stats.total_deletions}\n"
        f"- Suggested type: {analysis.suggested_type}\n"
        f"- Suggested scope: {analysis.suggested_scope or 'none'}\n"
        f"- Breaking change: {'YES' if analysis.is_breaking_change else 'no'}"
    )


def _categories_block(analysis: DiffAnalysis) -> str:
    lines = ["## File Categories Affected:"]
    for name, files in analysis.categories.non_empty():
        sample = ", ".join(f.name for f in files[:3])
        lines.append(f"- {name}: {len(files)} files ({sample})")
    return "\n".join(lines)


def _patterns_block(analysis: DiffAnalysis) -> str:
    lines = ["## Change Patterns:"]
    lines.extend(f"- {p}" for p in analysis.change_patterns)
    return "\n".join(lines)


def context_examples(analysis: DiffAnalysis) -> List[str]:
    """Example subjects chosen by framework, suggested type, and categories."""
    examples: List[str] = []
    framework = analysis.project_context.framework
    if framework in FRAMEWORK_EXAMPLES:
        examples.extend(FRAMEWORK_EXAMPLES[framework])
    if analysis.suggested_type in TYPE_EXAMPLES:
        examples.extend(TYPE_EXAMPLES[analysis.suggested_type])
    for category, lines in CATEGORY_EXAMPLES.items():
        if getattr(analysis.categories, category):
            examples.extend(lines)
    return examples


def _examples_block(analysis: DiffAnalysis) -> str:
    lines = ["## Relevant Examples:"]
    lines.extend(f"- {e}" for e in context_examples(analysis))
    return "\n".join(lines)


def _rules_block(options: CommitMessageOptions) -> str:
    max_length = options.max_length or DEFAULT_MAX_LENGTH
    return (
        "## Conventional Commit Rules:\n"
        "- Format: type(scope): description\n"
        "- For complex changes, add a body after a blank line\n"
        f"- Subject line (first line): under {max_length} characters\n"
        "- Body lines: wrap at exactly 72 characters per line\n"
        "- Use lowercase, imperative mood for subject\n"
        "- No period at end of subject line\n"
        "- Add '!' after type/scope for breaking changes\n"
        "- Scope should be specific and relevant\n"
        "- Body should explain what and why the change matters, not how\n"
        "- Prioritize clarity and brevity\n"
        "- Keep body concise - maximum 2-3 lines total"
    )


def special_instructions(analysis: DiffAnalysis) -> List[str]:
    stats = analysis.stats
    categories = analysis.categories
    instructions: List[str] = []

    if stats.total_files > 10:
        instructions.append("Focus on the primary purpose, not individual files")
    if analysis.is_breaking_change:
        instructions.append('Add "!" after type/scope to indicate breaking change')
        instructions.append("Focus on what functionality changed, not implementation")
    if stats.total_files == 1:
        instructions.append("Be specific about what changed in this file")
    if "package.json" in categories.names_of("config"):
        instructions.append("For dependency updates, mention the key package if obvious")
    if categories.tests and len(categories.tests) == stats.total_files:
        instructions.append('Use "test" type and focus on what is being tested')
    if stats.net_change > 100 and stats.total_additions > stats.total_deletions * 3:
        instructions.append('This appears to be a new feature, use "feat" type')
    if (
        stats.total_additions > 0
        and stats.total_deletions > 0
        and abs(stats.total_additions - stats.total_deletions) < 20
    ):
        instructions.append("Similar additions/deletions suggest refactoring")

    return instructions or ["Follow conventional commit best practices"]


def truncate_diff(diff_text: str, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Character cutoff, not line-aware."""
    if len(diff_text) > max_chars:
        return diff_text[:max_chars] + TRUNCATION_MARKER
    return diff_text


def build_prompt(
    diff_text: str,
    analysis: DiffAnalysis,
    options: CommitMessageOptions,
    *,
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    blocks = [
        ROLE,
        _context_block(analysis),
        _analysis_block(analysis),
        _categories_block(analysis),
    ]
    if analysis.change_patterns:
        blocks.append(_patterns_block(analysis))
    blocks.append(_examples_block(analysis))
    blocks.append(_rules_block(options))
    blocks.append(
        "## Special Instructions:\n"
        + "\n".join(f"- {i}" for i in special_instructions(analysis))
    )
    blocks.append(
        "Git diff to analyze:\n"
        f"```\n{truncate_diff(diff_text, max_diff_chars)}\n```\n\n"
        "Generate only the commit message, nothing else:"
    )
    return "\n\n".join(blocks)


def build_variation_prompt(
    diff_text: str,
    analysis: DiffAnalysis,
    variation: int,
    options: CommitMessageOptions,
    *,
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    prompt = build_prompt(diff_text, analysis, options, max_diff_chars=max_diff_chars)
    if 0 <= variation < len(VARIATION_FOCUS):
        prompt += f"\n\nVariation focus: {VARIATION_FOCUS[variation]}"
    return prompt
