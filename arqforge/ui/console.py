"""
Console output for command results and listings.

Wraps a rich Console with the arqforge theme. Color is disabled when NO_COLOR
is set or stdout is not a terminal, unless FORCE_COLOR is set.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

ARQFORGE_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
    "key": "bold blue",
    "value": "white",
}


def _should_use_color() -> bool:
    """Determine if color output should be used."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return sys.stdout.isatty()


class Console:
    """
    Themed console.

    Example:
        console = Console()
        console.print_success("Profile arquillian-wildfly-managed added")
        console.print_table("Containers", ["Id", "Profile"], rows)
    """

    def __init__(
        self, *, no_color: bool | None = None, quiet: bool = False, file: Any = None
    ):
        if no_color is None:
            no_color = not _should_use_color()
        self._quiet = quiet
        self._rich = RichConsole(
            no_color=no_color,
            theme=Theme(ARQFORGE_THEME),
            file=file or sys.stdout,
            highlight=False,
        )

    @property
    def quiet(self) -> bool:
        return self._quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        if self._quiet:
            return
        self._rich.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        self.print(f"[success]{escape(message)}[/success]")

    def print_warning(self, message: str) -> None:
        self.print(f"[warning]Warning:[/warning] {escape(message)}")

    def print_error(self, message: str) -> None:
        # Errors are shown even in quiet mode
        self._rich.print(f"[error]Error:[/error] {escape(message)}")

    def print_table(
        self, title: str, columns: list[str], rows: list[list[str]]
    ) -> None:
        """Print rows as a table with one column per header."""
        table = Table(title=title)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        self.print(table)


_global_console: Console | None = None


def get_console(*, no_color: bool | None = None, quiet: bool = False) -> Console:
    """
    Get or create the global console instance.

    Passing any argument builds a fresh console instead.
    """
    global _global_console

    if no_color is not None or quiet:
        return Console(no_color=no_color, quiet=quiet)
    if _global_console is None:
        _global_console = Console()
    return _global_console


def reset_console() -> None:
    """Reset the global console instance."""
    global _global_console
    _global_console = None
