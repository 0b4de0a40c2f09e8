# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help message rendering for Olive commands.

`HelpRenderer` reads a `Command` through its public accessors and lays out a
multi-section help message with Rich:

    <description>

    Usage:

        olive <command> [-o|--output=<string>] [-h|--help]

    Commands:

        build   Build a package

    Arguments:

        -o, --output   Output path

    Flags:

        -h, --help   Get help

Sections without content are left out. Declaration order is kept throughout.
The same renderables are used for styled terminal output (`print`) and for the
plain-text message (`render`).
"""
from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from olive.themes import get_olive_theme

if TYPE_CHECKING:
    from olive.parser.argument import Argument, Flag
    from olive.parser.command import Command

INDENT = 4
COLUMN_GAP = 3


def format_argument_usage(argument: Argument) -> str:
    """Return the usage fragment for a named argument, e.g. `[-o|--output=<string>]`."""
    names = f"--{argument.name}"
    if argument.short_name is not None:
        names = f"-{argument.short_name}|{names}"
    return f"[{names}=<{argument.get_metavar()}>]"


def format_flag_usage(flag: Flag) -> str:
    """Return the usage fragment for a flag, e.g. `[-v|--verbose]`."""
    if flag.short_name is None:
        return f"[--{flag.name}]"
    return f"[-{flag.short_name}|--{flag.name}]"


def format_names(name: str, short_name: str | None) -> str:
    """Return the label used in the Arguments and Flags sections."""
    if short_name is None:
        return f"--{name}"
    return f"-{short_name}, --{name}"


class HelpRenderer:
    """
    Builds the help message for a single command.

    Args:
        command (Command): The command to describe. It is never modified.
        width (int): Total width of the rendered message.
    """

    def __init__(self, command: Command, width: int = 60) -> None:
        self.command = command
        self.width = width

    def get_usage(self) -> str:
        """Return the usage line for the command."""
        parts = [self.command.name]
        if self.command.has_subcommands:
            parts.append("<command>")
        elif self.command.primary_argument is not None:
            parts.append(f"[{self.command.primary_argument.name}]")
        parts.extend(
            format_argument_usage(argument)
            for argument in self.command.arguments.values()
        )
        parts.extend(format_flag_usage(flag) for flag in self.command.flags.values())
        return " ".join(parts)

    def _section(self, title: str, body: RenderableType) -> list[RenderableType]:
        return [
            Text(""),
            Text(f"{title}:", style="olive.heading"),
            Text(""),
            Padding(body, (0, 0, 0, INDENT)),
        ]

    def _grid(self, rows: list[tuple[str, Text]], name_style: str) -> Table:
        grid = Table.grid(padding=(0, COLUMN_GAP))
        grid.add_column(style=name_style, no_wrap=True)
        grid.add_column(overflow="fold")
        for name, description in rows:
            grid.add_row(name, description)
        return grid

    def _argument_description(self, argument: Argument) -> Text:
        text = Text(argument.description, style="olive.description")
        if argument.has_default:
            if argument.description:
                text.append(" ")
            text.append(f"(default: {argument.default})", style="olive.muted")
        return text

    def get_renderables(self) -> list[RenderableType]:
        """Return the Rich renderables making up the help message."""
        command = self.command
        renderables: list[RenderableType] = []
        if command.description:
            renderables.append(Text(command.description, style="olive.description"))
            renderables.append(Text(""))

        renderables.append(Text("Usage:", style="olive.heading"))
        renderables.append(Text(""))
        renderables.append(
            Padding(Text(self.get_usage(), style="olive.usage"), (0, 0, 0, INDENT))
        )

        if command.has_subcommands:
            rows = [
                (name, Text(subcommand.description, style="olive.description"))
                for name, subcommand in command.subcommands.items()
            ]
            renderables.extend(
                self._section("Commands", self._grid(rows, "olive.command"))
            )

        if command.primary_argument is not None:
            primary = command.primary_argument
            rows = [(primary.name, Text(primary.description, style="olive.description"))]
            renderables.extend(
                self._section("Primary Argument", self._grid(rows, "olive.primary"))
            )

        if command.arguments:
            rows = [
                (
                    format_names(argument.name, argument.short_name),
                    self._argument_description(argument),
                )
                for argument in command.arguments.values()
            ]
            renderables.extend(
                self._section("Arguments", self._grid(rows, "olive.argument"))
            )

        if command.flags:
            rows = [
                (
                    format_names(flag.name, flag.short_name),
                    Text(flag.description, style="olive.description"),
                )
                for flag in command.flags.values()
            ]
            renderables.extend(self._section("Flags", self._grid(rows, "olive.flag")))

        return renderables

    def render(self) -> str:
        """Render the help message to plain text."""
        buffer = Console(
            width=self.width,
            file=StringIO(),
            color_system=None,
            theme=get_olive_theme(),
            highlight=False,
            force_terminal=False,
        )
        with buffer.capture() as capture:
            for renderable in self.get_renderables():
                buffer.print(renderable)
        lines = [line.rstrip() for line in capture.get().splitlines()]
        return "\n".join(lines) + "\n"

    def print(self, console: Console) -> None:
        """Print the styled help message to `console`."""
        for renderable in self.get_renderables():
            console.print(renderable)
