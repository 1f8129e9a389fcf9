"""Rich UI components for the Pinata SDK CLI."""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Create a global console instance
console = Console()


def log(message: str, style: Optional[str] = None) -> None:
    """Log a message to the console with optional styling.

    Args:
        message: The message to log
        style: Optional style to apply to the message
    """
    console.print(message, style=style)


def info(message: str) -> None:
    """Log an info message to the console."""
    console.print(f"[blue]INFO:[/blue] {message}")


def success(message: str) -> None:
    """Log a success message to the console."""
    console.print(f"[green]SUCCESS:[/green] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]ERROR:[/bold red] {message}")


def print_table(
    title: str,
    data: List[Dict[str, Any]],
    columns: List[str],
    style: Optional[str] = None,
) -> None:
    """Print a table of data.

    Args:
        title: The title of the table
        data: List of dictionaries containing the data
        columns: List of column names to include
        style: Optional style to apply to the table
    """
    table = Table(title=title, style=style, expand=True, show_edge=True)

    for column in columns:
        table.add_column(column)

    for row in data:
        table.add_row(*[str(row.get(column, "")) for column in columns])

    console.print(table)


def print_panel(content: str, title: Optional[str] = None) -> None:
    """Print content in a panel.

    Args:
        content: The content to display in the panel
        title: Optional title for the panel
    """
    console.print(Panel(content, title=title))
