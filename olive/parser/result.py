# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result model for Olive's argument parser.

Contents:
- `ScopeState`: Mutable, per-command state the parser fills in while it consumes
  tokens. One exists for every command on the parser's stack.
- `ParseResult`: The immutable result handed back to the caller. It mirrors the
  subcommand chain that was actually taken: every result holds at most one child
  result for the chosen subcommand.

Each result only describes its own scope. A flag defined on the root command
and set while inside a subcommand is recorded on the root result, so callers
query the scope that declares the flag or argument.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass
class ScopeState:
    """Tracks what has been consumed for one command during a parse."""

    flags: set[str] = field(default_factory=set)
    arguments: dict[str, Any] = field(default_factory=dict)
    primary_arg: str | None = None
    subcommand_name: str | None = None
    subcommand: ScopeState | None = None

    def freeze(self) -> ParseResult:
        """Convert this state (and its chosen child) to a `ParseResult`."""
        child = self.subcommand.freeze() if self.subcommand is not None else None
        return ParseResult(
            flags=frozenset(self.flags),
            arguments=MappingProxyType(dict(self.arguments)),
            primary_arg=self.primary_arg,
            subcommand_name=self.subcommand_name,
            subcommand_result=child,
        )


@dataclass(frozen=True, eq=False)
class ParseResult:
    """
    The result produced by parsing, for a single command scope.

    Attributes:
        flags (frozenset[str]): Full names of the flags that were set.
        arguments (Mapping[str, Any]): Argument values by full name, including
            defaults that were filled in.
        primary_arg (str | None): The primary argument token, if one was given.
        subcommand_name (str | None): Name of the chosen subcommand.
        subcommand_result (ParseResult | None): Result for the chosen subcommand.
    """

    flags: frozenset[str] = frozenset()
    arguments: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )
    primary_arg: str | None = None
    subcommand_name: str | None = None
    subcommand_result: ParseResult | None = None

    def has_flag(self, name: str) -> bool:
        """Check if a flag was set in this scope."""
        return name in self.flags

    def has_argument(self, name: str) -> bool:
        """Check if an argument has a value (given or default) in this scope."""
        return name in self.arguments

    def get_argument(self, name: str, default: Any = None) -> Any:
        """Return the value of an argument in this scope, or `default`."""
        return self.arguments.get(name, default)

    def primary_argument(self) -> tuple[str | None, bool]:
        """Return the primary argument value and whether one was given."""
        return self.primary_arg, self.primary_arg is not None

    def subcommand(self) -> tuple[str | None, ParseResult | None, bool]:
        """Return the chosen subcommand's name, its result, and whether one exists."""
        return (
            self.subcommand_name,
            self.subcommand_result,
            self.subcommand_result is not None,
        )

    def subcommand_chain(self) -> list[str]:
        """Return the names of the subcommands taken below this scope."""
        chain = []
        result = self
        while result.subcommand_result is not None:
            chain.append(result.subcommand_name)
            result = result.subcommand_result
        return chain

    def innermost(self) -> ParseResult:
        """Return the result of the deepest subcommand taken."""
        result = self
        while result.subcommand_result is not None:
            result = result.subcommand_result
        return result

    def to_dict(self) -> dict[str, Any]:
        """Return a nested plain-dict view of this result."""
        return {
            "flags": sorted(self.flags),
            "arguments": dict(self.arguments),
            "primary_argument": self.primary_arg,
            "subcommand": (
                {
                    "name": self.subcommand_name,
                    "result": self.subcommand_result.to_dict(),
                }
                if self.subcommand_result is not None
                else None
            ),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (
            self.flags == other.flags
            and dict(self.arguments) == dict(other.arguments)
            and self.primary_arg == other.primary_arg
            and self.subcommand_name == other.subcommand_name
            and self.subcommand_result == other.subcommand_result
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.flags,
                tuple(sorted(self.arguments.items())),
                self.primary_arg,
                self.subcommand_name,
                self.subcommand_result,
            )
        )
