"""
Console helpers for the directory splitter.

Includes:
- Styled status messages
- Plan summary rendering
"""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from .planning import Chunk

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))


def print_plan_table(chunks: Sequence[Chunk], sample: int = 10):
    """Print a summary table of the planned chunks."""
    table = Table(title="Plan Summary")
    table.add_column("Directory", style="cyan")
    table.add_column("Files", style="magenta", justify="right")
    table.add_column("First", style="yellow")
    table.add_column("Last", style="yellow")

    for chunk in chunks[:sample]:
        table.add_row(
            chunk.directory_name,
            str(len(chunk)),
            chunk.entries[0].name,
            chunk.entries[-1].name,
        )
    if len(chunks) > sample:
        table.add_row(f"... and {len(chunks) - sample} more", "", "", "")

    console.print(table)

    if chunks:
        tree = Tree("[bold green]Sample Moves[/bold green]")
        first = chunks[0]
        for entry in first.entries[:sample]:
            tree.add(f"[yellow]{entry.name}[/yellow] -> [blue]{first.directory_name}/{entry.name}[/blue]")
        remaining = sum(len(c) for c in chunks) - min(len(first), sample)
        if remaining > 0:
            tree.add(f"[italic]... and {remaining} more[/italic]")
        console.print(tree)


def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {msg}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")
