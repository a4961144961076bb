"""Console output for the CLI.

All CLI output goes through this module so stdout only carries command
results and diagnostics go to stderr.
"""

import json
from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None, quiet: bool = False) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {escape(message)}")
        if hint:
            self._err_console.print(f"  [dim]{escape(hint)}[/dim]")

    def info(self, message: str) -> None:
        """Print an info message to stderr (suppressed in quiet mode)."""
        if not self._quiet:
            self._err_console.print(f"[dim]{escape(message)}[/dim]")

    def plain(self, text: str) -> None:
        """Print text without markup or wrapping (URLs, field lists)."""
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def json(self, data: Any) -> None:
        """Print data as indented JSON, safe to pipe into other tools."""
        self.plain(json.dumps(data, indent=2))


_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
