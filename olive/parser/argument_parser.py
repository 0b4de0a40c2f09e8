# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgParser`, the state machine that turns a flat list of
tokens into a `ParseResult` for an Olive command tree.

The parser keeps two parallel stacks: the commands entered so far (the root
command at the bottom, one entry per subcommand taken) and the in-progress
`ScopeState` for each of them. Flags and named arguments are resolved from the
innermost command outwards, so a subcommand may shadow a flag of its parent
while every ancestor flag stays reachable.

Token grammar:
- `--name` / `-short`: a flag.
- `--name=value` / `-short=value`: a named argument; the value is everything
  after the first `=`.
- Any other word: the primary argument of the innermost command if it declares
  one, otherwise a subcommand name. Subcommands are only accepted before the
  first flag, argument or primary argument.

Parsing stops at the first error; no partial result is returned. After the
last token, a missing required subcommand is reported for the innermost
command and defaults are filled in for every scope on the stack.

Public Interface:
- `ArgParser(command).parse(tokens)`: Parse tokens (no program name).
- `parse_args(command, argv)`: Parse a full argv, dropping the program name.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from olive.exceptions import (
    ArgumentRepeatedError,
    FlagRepeatedError,
    MissingSubcommandError,
    MultiplePrimaryArgumentsError,
    UnknownArgumentError,
    UnknownFlagError,
    UnknownSubcommandError,
)
from olive.logger import logger
from olive.parser.argument import Argument, Flag
from olive.parser.result import ParseResult, ScopeState
from olive.parser.utils import split_token

if TYPE_CHECKING:
    from olive.parser.command import Command


class ArgParser:
    """
    Parses tokens against a command tree.

    The command tree is only read. All parse state is created fresh by each
    call to `parse()`, so one `ArgParser` (and one tree) can be reused.
    """

    def __init__(self, command: Command) -> None:
        self.command: Command = command
        self._command_stack: list[Command] = []
        self._scope_stack: list[ScopeState] = []
        self._allow_subcommands: bool = True

    @property
    def _current_command(self) -> Command:
        return self._command_stack[-1]

    @property
    def _current_scope(self) -> ScopeState:
        return self._scope_stack[-1]

    def _reset(self) -> ScopeState:
        root = ScopeState()
        self._command_stack = [self.command]
        self._scope_stack = [root]
        self._allow_subcommands = True
        return root

    def parse(self, args: list[str] | None = None) -> ParseResult:
        """
        Parse a list of tokens into a `ParseResult`.

        Args:
            args (list[str] | None): Tokens to parse, without the program name.

        Returns:
            ParseResult: The result rooted at this parser's command.

        Raises:
            ParseError: On the first token or value that cannot be accepted.
        """
        if args is None:
            args = []
        root = self._reset()
        logger.debug("Parsing %d token(s) for command '%s'", len(args), self.command.name)

        for token in args:
            self._consume(token)

        current = self._current_command
        if (
            current.has_subcommands
            and current.requires_subcommand
            and self._current_scope.subcommand is None
        ):
            raise MissingSubcommandError(
                f"Command '{current.name}' requires a subcommand", token=current.name
            )

        self._fill_defaults()
        return root.freeze()

    def _consume(self, token: str) -> None:
        if token.startswith("--"):
            self._consume_named(token, short=False)
        elif token.startswith("-"):
            self._consume_named(token, short=True)
        elif self._current_command.primary_argument is not None:
            self._consume_primary(token)
        elif self._allow_subcommands:
            self._enter_subcommand(token)
        else:
            raise UnknownSubcommandError(f"Unknown subcommand: '{token}'", token=token)

    def _consume_named(self, token: str, short: bool) -> None:
        self._allow_subcommands = False
        name, value = split_token(token)
        label = "short name " if short else ""

        if value is None:
            for index in range(len(self._command_stack) - 1, -1, -1):
                command = self._command_stack[index]
                lookup = command.flags_by_short_name if short else command.flags
                flag = lookup.get(name)
                if flag is not None:
                    logger.debug("Token '%s' → flag '%s' on '%s'", token, flag.name, command.name)
                    self._set_flag(index, flag)
                    return
            raise UnknownFlagError(f"Unknown flag {label}'{name}'", token=token)

        for index in range(len(self._command_stack) - 1, -1, -1):
            command = self._command_stack[index]
            lookup = command.arguments_by_short_name if short else command.arguments
            argument = lookup.get(name)
            if argument is not None:
                logger.debug(
                    "Token '%s' → argument '%s' on '%s'", token, argument.name, command.name
                )
                self._set_argument(index, argument, value)
                return
        raise UnknownArgumentError(f"Unknown argument {label}'{name}'", token=token)

    def _consume_primary(self, token: str) -> None:
        self._allow_subcommands = False
        scope = self._current_scope
        if scope.primary_arg is not None:
            raise MultiplePrimaryArgumentsError(
                f"Multiple primary arguments given to command '{self._current_command.name}'",
                token=token,
            )
        scope.primary_arg = token

    def _enter_subcommand(self, token: str) -> None:
        subcommand = self._current_command.get_subcommand(token)
        if subcommand is None:
            raise UnknownSubcommandError(f"Unknown subcommand: '{token}'", token=token)
        logger.debug("Entering subcommand '%s'", subcommand.name)
        scope = ScopeState()
        self._current_scope.subcommand_name = subcommand.name
        self._current_scope.subcommand = scope
        self._command_stack.append(subcommand)
        self._scope_stack.append(scope)

    def _set_flag(self, index: int, flag: Flag) -> None:
        scope = self._scope_stack[index]
        if flag.name in scope.flags:
            raise FlagRepeatedError(
                f"Flag '{flag.name}' set multiple times", token=flag.name
            )
        scope.flags.add(flag.name)
        flag.trigger()

    def _set_argument(self, index: int, argument: Argument, value: str) -> None:
        scope = self._scope_stack[index]
        if argument.name in scope.arguments:
            raise ArgumentRepeatedError(
                f"Argument '{argument.name}' set multiple times", token=argument.name
            )
        scope.arguments[argument.name] = argument.check_value(value)

    def _fill_defaults(self) -> None:
        # innermost first; argument names are scope-local so order is not observable
        for command, scope in zip(
            reversed(self._command_stack), reversed(self._scope_stack)
        ):
            for argument in command.arguments.values():
                if argument.name in scope.arguments:
                    continue
                value, present = argument.get_default_value()
                if present:
                    logger.debug(
                        "Using default %r for argument '%s' on '%s'",
                        value,
                        argument.name,
                        command.name,
                    )
                    scope.arguments[argument.name] = value


def parse_args(command: Command, args: list[str]) -> ParseResult:
    """
    Parse a full argument vector against a command tree.

    The first element is conventionally the program name and is discarded.

    Args:
        command (Command): Root of the command tree.
        args (list[str]): Argument vector, usually `sys.argv`.

    Returns:
        ParseResult: The parse result rooted at `command`.
    """
    return ArgParser(command).parse(list(args[1:]))
