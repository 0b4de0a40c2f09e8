"""
Olive Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ConfigurationError, OliveError, ParseError
from .parser import (
    ArgParser,
    ArgumentKind,
    Command,
    HelpRenderer,
    ParseResult,
    new_cli,
    parse_args,
)

logger = logging.getLogger("olive")


__all__ = [
    "ArgParser",
    "ArgumentKind",
    "Command",
    "ConfigurationError",
    "HelpRenderer",
    "OliveError",
    "ParseError",
    "ParseResult",
    "new_cli",
    "parse_args",
]
