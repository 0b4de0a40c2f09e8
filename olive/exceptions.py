# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Olive.

Two families of errors exist:

- Configuration errors are raised while a command tree is being built
  (name collisions, primary argument / subcommand conflicts, invalid defaults).
  They point at a bug in the caller's CLI definition and the tree must not be
  used afterwards.
- Parse errors are raised by the parsing engine for bad user input. They carry
  the offending token so the caller can report it and exit cleanly.

All exceptions inherit from `OliveError`, the base exception for the package.

Exception Hierarchy:
- OliveError
    ├── ConfigurationError
    └── ParseError
        ├── UnknownFlagError
        ├── UnknownArgumentError
        ├── UnknownSubcommandError
        ├── FlagRepeatedError
        ├── ArgumentRepeatedError
        ├── MultiplePrimaryArgumentsError
        ├── MissingSubcommandError
        └── ArgumentValueError
            ├── InvalidValueError
            └── ValueRejectedError
"""


class OliveError(Exception):
    """Base exception for Olive."""


class ConfigurationError(OliveError):
    """Exception raised when a command tree is configured incorrectly."""

    def __init__(
        self, message: str, command: str | None = None, name: str | None = None
    ) -> None:
        super().__init__(message)
        self.command = command
        self.name = name


class ParseError(OliveError):
    """Exception raised when the input tokens cannot be parsed."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class UnknownFlagError(ParseError):
    """Exception raised when no command in scope declares the flag."""


class UnknownArgumentError(ParseError):
    """Exception raised when no command in scope declares the named argument."""


class UnknownSubcommandError(ParseError):
    """Exception raised when a bare word cannot be matched to a subcommand."""


class FlagRepeatedError(ParseError):
    """Exception raised when a flag is set more than once in the same scope."""


class ArgumentRepeatedError(ParseError):
    """Exception raised when an argument is set more than once in the same scope."""


class MultiplePrimaryArgumentsError(ParseError):
    """Exception raised when a command receives a second primary argument."""


class MissingSubcommandError(ParseError):
    """Exception raised when a command requiring a subcommand did not get one."""


class ArgumentValueError(ParseError):
    """Exception raised when the value given to a named argument is not accepted."""

    def __init__(self, message: str, argument: str, value: str) -> None:
        super().__init__(message, token=value)
        self.argument = argument
        self.value = value


class InvalidValueError(ArgumentValueError):
    """Exception raised when a value cannot be converted to the argument's kind."""


class ValueRejectedError(ArgumentValueError):
    """Exception raised when an argument validator rejects a value."""
