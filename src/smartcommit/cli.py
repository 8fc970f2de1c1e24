"""smartcommit CLI — Typer application with analyze, generate, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from smartcommit import __version__

app = typer.Typer(
    name="smartcommit",
    help="Conventional commit messages from your staged diff.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root(allow_cwd: bool = False) -> Path:
    """Find the git repo root; fall back to cwd or exit 2."""
    from smartcommit.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        if allow_cwd:
            return Path.cwd()
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(repo_root: Path, config: Optional[str], verbose: bool, debug: bool):
    from smartcommit.config.loader import ConfigError, load_config
    from smartcommit.log import setup_logging

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    level = "debug" if debug else "info" if verbose else cfg.logging.level
    setup_logging(level, json_output=cfg.logging.json)
    return cfg


def _read_diff(
    repo_root: Path,
    diff_file: Optional[str],
    from_ref: Optional[str],
    to_ref: Optional[str],
) -> str:
    """Diff text from a file, stdin ('-'), a commit range, or the index."""
    from smartcommit.git.adapter import GitError, get_range_diff, get_staged_diff

    if diff_file == "-":
        return sys.stdin.read()
    if diff_file:
        path = Path(diff_file)
        if not path.is_file():
            console.print(f"[bold red]Error:[/bold red] diff file not found: {diff_file}")
            raise typer.Exit(code=2)
        return path.read_text(encoding="utf-8", errors="replace")

    try:
        if from_ref:
            return get_range_diff(repo_root, from_ref, to_ref or "HEAD")
        return get_staged_diff(repo_root)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _check_format(format: Optional[str]) -> None:
    if format and format not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)


def _check_range(from_ref: Optional[str], to_ref: Optional[str]) -> None:
    if to_ref and not from_ref:
        console.print("[bold red]Error:[/bold red] --to requires --from")
        raise typer.Exit(code=2)


def _build_analyzer(cfg, repo_root: Path):
    from smartcommit.analysis.analyzer import DiffAnalyzer
    from smartcommit.analysis.context import project_context_probe
    from smartcommit.rules.registry import build_registry

    registry = build_registry(cfg, repo_root)
    return DiffAnalyzer(
        context_probe=project_context_probe(repo_root),
        breaking_rules=registry.enabled_rules(),
    )


# ── analyze ───────────────────────────────────────────────────────────────────


@app.command()
def analyze(
    diff_file: Optional[str] = typer.Option(None, "--diff-file", "-d", help="Read diff from file ('-' for stdin)"),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base commit of a range"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Head commit of a range (default HEAD)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .smartcommit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Analyse a diff and print categories, patterns, and the suggested type."""
    from smartcommit.output import json_report, terminal

    _check_format(format)
    _check_range(from_ref, to_ref)
    repo_root = _resolve_repo_root(allow_cwd=diff_file is not None)
    cfg = _load(repo_root, config, verbose, debug)
    if format:
        cfg.output.format = format  # type: ignore[assignment]

    diff_text = _read_diff(repo_root, diff_file, from_ref, to_ref)
    analysis = _build_analyzer(cfg, repo_root).analyze(diff_text)

    if cfg.output.format == "json":
        print(json_report.render(analysis))
    else:
        terminal.render_analysis(analysis, Console())


# ── generate ──────────────────────────────────────────────────────────────────


@app.command()
def generate(
    diff_file: Optional[str] = typer.Option(None, "--diff-file", "-d", help="Read diff from file ('-' for stdin)"),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base commit of a range"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Head commit of a range (default HEAD)"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="Number of message options"),
    variations: bool = typer.Option(False, "--variations", help="Generate [prompt] variations options"),
    max_length: Optional[int] = typer.Option(None, "--max-length", min=1, help="Subject-line budget"),
    no_breaking: bool = typer.Option(False, "--no-breaking", help="Never add the '!' marker"),
    show_prompt: bool = typer.Option(False, "--show-prompt", help="Print the prompt and exit"),
    raw: bool = typer.Option(False, "--raw", help="Print only the message text"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .smartcommit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Generate a conventional commit message for the diff."""
    from smartcommit.message.composer import GenerationError, compose_message, compose_variations
    from smartcommit.message.generator import CommandGenerator, GeneratorError
    from smartcommit.message.options import CommitMessageOptions
    from smartcommit.message.prompt import build_prompt
    from smartcommit.output import json_report, terminal

    _check_format(format)
    _check_range(from_ref, to_ref)
    repo_root = _resolve_repo_root(allow_cwd=diff_file is not None)
    cfg = _load(repo_root, config, verbose, debug)
    if format:
        cfg.output.format = format  # type: ignore[assignment]
    if max_length:
        cfg.message.max_length = max_length

    diff_text = _read_diff(repo_root, diff_file, from_ref, to_ref)
    if not diff_text.strip():
        console.print("[dim]No changes to describe.[/dim]")
        raise typer.Exit(code=0)

    analysis = _build_analyzer(cfg, repo_root).analyze(diff_text)
    options = CommitMessageOptions(
        max_length=cfg.message.max_length,
        include_breaking_change=cfg.message.include_breaking_change and not no_breaking,
        include_scope=cfg.message.include_scope,
    )
    max_diff_chars = cfg.prompt.max_diff_chars

    if show_prompt:
        terminal.render_prompt(
            build_prompt(diff_text, analysis, options, max_diff_chars=max_diff_chars),
            Console(),
        )
        raise typer.Exit(code=0)

    try:
        generator = CommandGenerator(cfg.generator.command, cfg.generator.timeout)
    except GeneratorError as exc:
        console.print(f"[bold red]Generator error:[/bold red] {exc}")
        console.print("[dim]Set [generator] command in .smartcommit.toml or SMARTCOMMIT_GENERATOR.[/dim]")
        raise typer.Exit(code=2) from exc

    if verbose:
        terminal.render_analysis(analysis, console)

    n = count or (cfg.prompt.variations if variations else 1)
    try:
        if n > 1:
            messages = compose_variations(
                diff_text, analysis, options, generator, n, max_diff_chars=max_diff_chars
            )
        else:
            messages = [
                compose_message(
                    diff_text, analysis, options, generator, max_diff_chars=max_diff_chars
                )
            ]
    except GenerationError as exc:
        console.print(f"[bold red]Generation failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if cfg.output.format == "json":
        print(json_report.render(analysis, messages))
    elif raw:
        print("\n\n".join(messages))
    else:
        terminal.render_messages(messages, Console())


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .smartcommit.toml in the repo root."""
    from smartcommit.config.defaults import DEFAULT_TOML
    from smartcommit.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"smartcommit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """smartcommit — Conventional commit messages from your staged diff."""
