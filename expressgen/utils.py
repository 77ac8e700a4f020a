"""Shared console helpers for expressgen.

All user-facing output goes through the Rich ``console`` defined here.  The
scaffolder modules never print; the CLI reports progress with these helpers.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from expressgen.scaffolder.emitter import GeneratedTree

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print the welcome banner."""
    console.print()
    console.print(Panel.fit(f"[bold cyan]{title}[/bold cyan]", border_style="cyan"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_next_steps(project_name: str) -> None:
    """Print the commands to run after generation."""
    console.print("\n[yellow]Next steps:[/yellow]")
    console.print(f"  cd {project_name}")
    console.print("  npm install")
    console.print("  npm run dev\n")


# ---------------------------------------------------------------------------
# Tree rendering
# ---------------------------------------------------------------------------


def render_tree(tree: GeneratedTree) -> Tree:
    """Build a Rich ``Tree`` of the generated directories and files."""
    root = Tree(f"[bold]{tree.root}/[/bold]")
    nodes: dict[str, Tree] = {"": root}

    def _node_for(directory: str) -> Tree:
        if directory in nodes:
            return nodes[directory]
        parent = str(PurePosixPath(directory).parent)
        parent_node = _node_for("" if parent == "." else parent)
        node = parent_node.add(f"[bold blue]{PurePosixPath(directory).name}/[/bold blue]")
        nodes[directory] = node
        return node

    for directory in tree.directories:
        _node_for(directory)
    for path in tree.files:
        parent = str(PurePosixPath(path).parent)
        _node_for("" if parent == "." else parent).add(PurePosixPath(path).name)
    return root


def print_tree(tree: GeneratedTree) -> None:
    """Print the generated tree."""
    console.print(render_tree(tree))
    console.print()
