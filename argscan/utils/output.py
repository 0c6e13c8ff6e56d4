"""Output utilities for terminal display with Rich console."""

import json
from typing import Optional

from rich.console import Console
from rich.json import JSON
from rich.text import Text


class OutputFormatter:
    """Handles formatted output using Rich consoles for stdout and stderr."""

    def __init__(self, no_color: bool = False):
        """Initialize output formatter.

        Args:
            no_color: If True, disable all colors and styling
        """
        self._no_color = no_color
        self._console = Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )
        self._err_console = Console(
            stderr=True,
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )

    def print_block(self, text: str, style: Optional[str] = None, error: bool = False) -> None:
        """Print a block of preformatted text exactly as laid out.

        Markup is not interpreted and lines are never re-wrapped, so help
        text keeps its columns.

        Args:
            text: Text to print
            style: Optional Rich style applied to the whole block
            error: If True, print to stderr
        """
        console = self._err_console if error else self._console
        console.print(Text(text.rstrip("\n"), style=style or ""), highlight=False, soft_wrap=True)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr.

        Args:
            message: Error message to print
        """
        line = Text()
        line.append("Error: ", style="bold red")
        line.append(message)
        self._err_console.print(line, highlight=False, soft_wrap=True)

    def print_json(self, data: object) -> None:
        """Print data as JSON, syntax highlighted unless colors are disabled.

        Args:
            data: JSON-serializable data
        """
        output_json = json.dumps(data, indent=2)
        if self._no_color:
            self._console.print(Text(output_json), highlight=False, soft_wrap=True)
        else:
            self._console.print(JSON(output_json))
