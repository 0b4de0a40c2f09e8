# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, the node type of an Olive command tree.

A command is a keyword that directs how the rest of the input is read: `go` is
the root command of `go build`, and `build` is one of its subcommands. Each
command owns:

- flags (`--verbose` / `-v`), looked up by full name and by short name,
- named arguments (`--output=dist` / `-o=dist`), looked up the same way,
- either one primary argument (an unlabelled value) or a set of subcommands.

The tree is built once through the builder methods below and then handed to the
parser, which only reads it. Every builder failure raises `ConfigurationError`
immediately; a tree that raised during construction must not be parsed.

Example:
    cli = new_cli("olive", "Package manager for olive projects")
    cli.add_flag("verbose", "v", "Print more output")

    build = cli.add_subcommand("build", "Build a package")
    build.add_primary_argument("package-name", "Package to build")
    build.add_string_argument("output", "o", "Output path").set_default_value("dist")

    result = parse_args(cli, ["olive", "build", "-o=out", "mypkg"])
"""
from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from olive.console import console
from olive.exceptions import ConfigurationError
from olive.logger import logger
from olive.parser.argument import (
    Argument,
    Flag,
    FloatArgument,
    IntArgument,
    PrimaryArgument,
    SelectorArgument,
    StringArgument,
)
from olive.parser.argument_parser import ArgParser
from olive.parser.help import HelpRenderer
from olive.parser.result import ParseResult
from olive.parser.utils import MISSING, Validator

HELP_FLAG_NAME = "help"
HELP_FLAG_SHORT_NAME = "h"
HELP_FLAG_DESCRIPTION = "Get help"


class Command:
    """
    A command (or subcommand) in an Olive command tree.

    Args:
        name (str): Keyword that selects this command.
        description (str): Help text for the command.
        help_enabled (bool): Register the `--help` / `-h` flag.
        requires_subcommand (bool): When the command has subcommands, whether
            parsing fails if none is given.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        help_enabled: bool = True,
        requires_subcommand: bool = True,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self.requires_subcommand: bool = requires_subcommand
        self._subcommands: dict[str, Command] = {}
        self._flags: dict[str, Flag] = {}
        self._flags_by_short_name: dict[str, Flag] = {}
        self._arguments: dict[str, Argument] = {}
        self._arguments_by_short_name: dict[str, Argument] = {}
        self._primary_argument: PrimaryArgument | None = None
        if help_enabled:
            self.enable_help()

    @property
    def subcommands(self) -> Mapping[str, Command]:
        return MappingProxyType(self._subcommands)

    @property
    def flags(self) -> Mapping[str, Flag]:
        return MappingProxyType(self._flags)

    @property
    def flags_by_short_name(self) -> Mapping[str, Flag]:
        return MappingProxyType(self._flags_by_short_name)

    @property
    def arguments(self) -> Mapping[str, Argument]:
        return MappingProxyType(self._arguments)

    @property
    def arguments_by_short_name(self) -> Mapping[str, Argument]:
        return MappingProxyType(self._arguments_by_short_name)

    @property
    def primary_argument(self) -> PrimaryArgument | None:
        return self._primary_argument

    @property
    def has_subcommands(self) -> bool:
        return bool(self._subcommands)

    @property
    def help_enabled(self) -> bool:
        return HELP_FLAG_NAME in self._flags

    def get_flag(self, name: str) -> Flag | None:
        """Return the flag with the given full name, if declared on this command."""
        return self._flags.get(name)

    def get_argument(self, name: str) -> Argument | None:
        """Return the argument with the given full name, if declared on this command."""
        return self._arguments.get(name)

    def get_subcommand(self, name: str) -> Command | None:
        """Return the direct subcommand with the given name, if any."""
        return self._subcommands.get(name)

    def _validate_name(self, what: str, name: Any, short: bool = False) -> None:
        label = f"{what} short name" if short else f"{what} name"
        if not isinstance(name, str) or not name:
            raise ConfigurationError(
                f"{label.capitalize()} must be a non-empty string, got {name!r}",
                command=self.name,
                name=name,
            )
        if name.startswith("-") or "=" in name:
            raise ConfigurationError(
                f"{label.capitalize()} '{name}' cannot start with '-' or contain '='",
                command=self.name,
                name=name,
            )

    def add_subcommand(
        self,
        name: str,
        description: str = "",
        help_enabled: bool = True,
        requires_subcommand: bool = True,
    ) -> Command:
        """
        Add a subcommand to this command.

        Raises:
            ConfigurationError: If this command takes a primary argument or
                already has a subcommand with this name.
        """
        if self._primary_argument is not None:
            raise ConfigurationError(
                f"Command '{self.name}' cannot both take a primary argument and have subcommands",
                command=self.name,
                name=name,
            )
        self._validate_name("subcommand", name)
        if name in self._subcommands:
            raise ConfigurationError(
                f"Command '{self.name}' already has a subcommand named '{name}'",
                command=self.name,
                name=name,
            )
        subcommand = Command(
            name,
            description,
            help_enabled=help_enabled,
            requires_subcommand=requires_subcommand,
        )
        self._subcommands[name] = subcommand
        return subcommand

    def add_primary_argument(
        self, name: str, description: str = "", required: bool = False
    ) -> PrimaryArgument:
        """
        Add the primary argument to this command.

        Raises:
            ConfigurationError: If this command has subcommands or already has a
                primary argument.
        """
        if self._subcommands:
            raise ConfigurationError(
                f"Command '{self.name}' cannot both take a primary argument and have subcommands",
                command=self.name,
                name=name,
            )
        if self._primary_argument is not None:
            raise ConfigurationError(
                f"Command '{self.name}' already has a primary argument "
                f"'{self._primary_argument.name}'",
                command=self.name,
                name=name,
            )
        self._validate_name("primary argument", name)
        self._primary_argument = PrimaryArgument(name, description, required)
        return self._primary_argument

    def add_flag(
        self, name: str, short_name: str | None, description: str = ""
    ) -> Flag:
        """
        Add a flag to this command.

        Raises:
            ConfigurationError: If another flag already uses the name or short name.
        """
        self._validate_name("flag", name)
        if short_name is not None:
            self._validate_name("flag", short_name, short=True)
        if name in self._flags:
            raise ConfigurationError(
                f"Command '{self.name}' already has a flag named '{name}'",
                command=self.name,
                name=name,
            )
        if short_name is not None and short_name in self._flags_by_short_name:
            existing = self._flags_by_short_name[short_name]
            raise ConfigurationError(
                f"Short name '{short_name}' is already used by flag '{existing.name}' "
                f"on command '{self.name}'",
                command=self.name,
                name=short_name,
            )
        flag = Flag(name=name, short_name=short_name, description=description)
        self._flags[name] = flag
        if short_name is not None:
            self._flags_by_short_name[short_name] = flag
        return flag

    def _add_argument(
        self, argument: Argument, default: Any, validator: Validator | None
    ) -> None:
        self._validate_name("argument", argument.name)
        if argument.short_name is not None:
            self._validate_name("argument", argument.short_name, short=True)
        if argument.name in self._arguments:
            raise ConfigurationError(
                f"Command '{self.name}' already has an argument named '{argument.name}'",
                command=self.name,
                name=argument.name,
            )
        short_name = argument.short_name
        if short_name is not None and short_name in self._arguments_by_short_name:
            existing = self._arguments_by_short_name[short_name]
            raise ConfigurationError(
                f"Short name '{short_name}' is already used by argument "
                f"'{existing.name}' on command '{self.name}'",
                command=self.name,
                name=short_name,
            )
        if validator is not None:
            argument.set_validator(validator)
        if default is not MISSING:
            argument.set_default_value(default)
        self._arguments[argument.name] = argument
        if short_name is not None:
            self._arguments_by_short_name[short_name] = argument

    def add_int_argument(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
        *,
        default: Any = MISSING,
        validator: Validator | None = None,
    ) -> IntArgument:
        """Add a named integer argument."""
        argument = IntArgument(name, short_name, description, required)
        self._add_argument(argument, default, validator)
        return argument

    def add_float_argument(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
        *,
        default: Any = MISSING,
        validator: Validator | None = None,
    ) -> FloatArgument:
        """Add a named float argument."""
        argument = FloatArgument(name, short_name, description, required)
        self._add_argument(argument, default, validator)
        return argument

    def add_string_argument(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
        *,
        default: Any = MISSING,
        validator: Validator | None = None,
    ) -> StringArgument:
        """Add a named string argument."""
        argument = StringArgument(name, short_name, description, required)
        self._add_argument(argument, default, validator)
        return argument

    def add_selector_argument(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
        choices: Iterable[str] = (),
        *,
        default: Any = MISSING,
        validator: Validator | None = None,
    ) -> SelectorArgument:
        """Add a named argument restricted to `choices`."""
        argument = SelectorArgument(name, short_name, description, required, choices)
        self._add_argument(argument, default, validator)
        return argument

    def enable_help(self) -> None:
        """Register the `--help` / `-h` flag if it is not already present."""
        if HELP_FLAG_NAME in self._flags:
            return
        flag = self.add_flag(HELP_FLAG_NAME, HELP_FLAG_SHORT_NAME, HELP_FLAG_DESCRIPTION)
        flag.set_action(self.show_help_and_exit)

    def disable_help(self) -> None:
        """Remove the `--help` / `-h` flag."""
        flag = self._flags.pop(HELP_FLAG_NAME, None)
        if flag is not None and flag.short_name is not None:
            self._flags_by_short_name.pop(flag.short_name, None)

    def help_message(self, width: int = 60) -> str:
        """Return the help message for this command as plain text."""
        return HelpRenderer(self, width=width).render()

    def help(self) -> None:
        """Print the help message for this command."""
        HelpRenderer(self).print(console)

    def show_help_and_exit(self) -> None:
        """
        Print help and exit the process with status 0.

        This is the default action of the help flag. Replace it with
        `command.get_flag("help").set_action(...)` to keep the process alive.
        """
        logger.debug("Help requested for command '%s'", self.name)
        self.help()
        sys.exit(0)

    def parse(self, args: list[str]) -> ParseResult:
        """Parse `args` (without the program name) against this command."""
        return ArgParser(self).parse(args)

    def __str__(self) -> str:
        primary = self._primary_argument.name if self._primary_argument else None
        return (
            f"Command(name={self.name!r}, flags={len(self._flags)}, "
            f"arguments={len(self._arguments)}, subcommands={len(self._subcommands)}, "
            f"primary={primary!r})"
        )

    def __repr__(self) -> str:
        return str(self)


def new_cli(
    name: str,
    description: str = "",
    help_enabled: bool = True,
    requires_subcommand: bool = True,
) -> Command:
    """Create the root command of a CLI."""
    return Command(
        name,
        description,
        help_enabled=help_enabled,
        requires_subcommand=requires_subcommand,
    )
