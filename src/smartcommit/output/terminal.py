"""Rich terminal reporter — file table, suggestion line, message panels."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from smartcommit.analysis.analyzer import summarize
from smartcommit.analysis.models import DiffAnalysis
from smartcommit.git.models import FileStatus

_STATUS_STYLE = {
    FileStatus.ADDED: "green",
    FileStatus.DELETED: "red",
    FileStatus.RENAMED: "yellow",
    FileStatus.MODIFIED: "cyan",
}

_TYPE_STYLE = {
    "feat": "bold green",
    "fix": "bold red",
    "docs": "bold blue",
    "test": "bold magenta",
    "refactor": "bold yellow",
}


def _suggestion(analysis: DiffAnalysis) -> Text:
    commit_type = analysis.suggested_type or "chore"
    text = Text(commit_type, style=_TYPE_STYLE.get(commit_type, "bold"))
    if analysis.suggested_scope:
        text.append(f"({analysis.suggested_scope})", style="cyan")
    if analysis.is_breaking_change:
        text.append("!", style="bold red")
    return text


def render_analysis(analysis: DiffAnalysis, console: Optional[Console] = None) -> None:
    """Print the diff analysis to the terminal using Rich."""
    console = console or Console()

    if not analysis.files:
        console.print("[dim]No file changes found in diff.[/dim]")
        return

    table = Table(
        title="Changed Files",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("File", style="magenta")
    table.add_column("Status", justify="center")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")

    for f in analysis.files:
        status = f.status
        table.add_row(
            f.path,
            Text(status.value, style=_STATUS_STYLE[status]),
            str(f.additions),
            str(f.deletions),
        )

    console.print(table)
    console.print()

    for name, files in analysis.categories.non_empty():
        console.print(f"[dim]{name}:[/dim] {escape(', '.join(f.name for f in files))}")
    for pattern in analysis.change_patterns:
        console.print(f"[dim]•[/dim] {pattern}")

    console.print()
    console.print(Text("Suggested: ").append_text(_suggestion(analysis)))
    console.print(f"[dim]{summarize(analysis)}[/dim]")


def render_messages(messages: Sequence[str], console: Optional[Console] = None) -> None:
    """Print one panel per generated message."""
    console = console or Console()
    for i, message in enumerate(messages, 1):
        title = f"Option {i}" if len(messages) > 1 else "Commit message"
        console.print(Panel(Text(message), title=title, title_align="left", border_style="green"))


def render_prompt(prompt: str, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(prompt, markup=False, highlight=False, soft_wrap=True)
