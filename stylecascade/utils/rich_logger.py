"""
Rich console output for stylecascade.

Provides colorful status lines and tables of resolved styles using the rich
library.
"""

from typing import Any, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class RichLogger:
    """
    Console output with rich formatting and colors.
    """

    def __init__(self, name: str = "stylecascade", console: Optional[Console] = None):
        """
        Initialize rich logger.

        Args:
            name: Logger name
            console: Console to print to, stdout by default
        """
        self.name = name
        self.console = console or Console()

    def success(self, message: str):
        """Print success message."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def failure(self, message: str):
        """Print failure message."""
        self.console.print(f"[red]✗ {escape(message)}[/red]")

    def style_table(self, title: str, style: Mapping[str, Any]) -> Table:
        """
        Display style attributes in a rich table.

        Args:
            title: Table title
            style: Style attributes

        Returns:
            The printed table
        """
        # wide enough that the title stays on one line
        table = Table(title=escape(title), min_width=len(title))
        table.add_column("Attribute", style="cyan")
        table.add_column("Value", style="magenta")

        for key, value in style.items():
            table.add_row(str(key), str(value))

        self.console.print(table)
        return table


def get_rich_logger(name: str = "stylecascade", console: Optional[Console] = None) -> RichLogger:
    """
    Get rich logger instance.

    Args:
        name: Logger name
        console: Console to print to

    Returns:
        RichLogger instance
    """
    return RichLogger(name, console)
