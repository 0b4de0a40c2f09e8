"""
Olive Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import (
    Argument,
    Flag,
    FloatArgument,
    IntArgument,
    PrimaryArgument,
    SelectorArgument,
    StringArgument,
)
from .argument_kind import ArgumentKind
from .argument_parser import ArgParser, parse_args
from .command import Command, new_cli
from .help import HelpRenderer
from .result import ParseResult

__all__ = [
    "ArgParser",
    "Argument",
    "ArgumentKind",
    "Command",
    "Flag",
    "FloatArgument",
    "HelpRenderer",
    "IntArgument",
    "ParseResult",
    "PrimaryArgument",
    "SelectorArgument",
    "StringArgument",
    "new_cli",
    "parse_args",
]
