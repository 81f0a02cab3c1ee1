"""Console output abstraction.

Services report progress through ``ConsoleProtocol`` and never print
directly. Three backends exist:
- RichConsole: styled terminal output for local runs
- ActionsConsole: GitHub Actions workflow commands (``::debug::`` etc.)
- MockConsole: captures output for tests

Debug-level lines are printed with ``Style.DIM``; the Actions backend turns
them into ``::debug::`` commands, which the runner hides unless step debug
logging is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

import typer

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "ActionsConsole",
    "MockConsole",
    "OutputRecord",
    "escape_command_data",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()  # debug detail
    BOLD = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def success(self, message: str) -> None:
        """Print a success message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message."""
        ...

    def newline(self) -> None:
        """Print an empty line."""
        ...


class RichConsole:
    """Console implementation using Rich, for local terminal runs."""

    def __init__(self) -> None:
        from rich.console import Console

        self._console = Console(highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.BOLD: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        # Commit messages may contain [brackets]; never treat them as markup.
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(f"[green]OK[/green] {_escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {_escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {_escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {_escape(message)}")

    def newline(self) -> None:
        self._console.print()


def _escape(message: str) -> str:
    from rich.markup import escape

    return escape(message)


def escape_command_data(message: str) -> str:
    """Escape a message for use as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsConsole:
    """Console implementation emitting GitHub Actions workflow commands."""

    def _emit(self, line: str) -> None:
        typer.echo(line)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        match style:
            case Style.DIM:
                self._emit(f"::debug::{escape_command_data(message)}")
            case Style.ERROR:
                self.error(message)
            case Style.WARNING:
                self.warning(message)
            case _:
                self._emit(message)

    def success(self, message: str) -> None:
        self._emit(message)

    def error(self, message: str) -> None:
        self._emit(f"::error::{escape_command_data(message)}")

    def warning(self, message: str) -> None:
        self._emit(f"::warning::{escape_command_data(message)}")

    def info(self, message: str) -> None:
        self._emit(message)

    def newline(self) -> None:
        self._emit("")


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
