# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, an enum naming the value kinds a named argument can take.

The kind set is closed: integer, float, string and selector (a string restricted
to a fixed set of legal values). Each member maps to one `Argument` subclass in
`olive.parser.argument`.

Supports alias coercion for shorthand or config-friendly values, so YAML and
TOML command definitions can say `kind: int` or `kind: choice`.

Example:
    ArgumentKind("integer") → ArgumentKind.INTEGER
    ArgumentKind("int")     → ArgumentKind.INTEGER (via alias)
    ArgumentKind("enum")    → ArgumentKind.SELECTOR (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """
    Defines the value kind of a named argument.

    Members:
        INTEGER: A signed integer, base prefixes accepted.
        FLOAT: A 64-bit floating point number.
        STRING: Any string, stored verbatim.
        SELECTOR: A string constrained to a fixed set of legal values.

    Aliases:
        - "int" → "integer"
        - "number" → "float"
        - "str" → "string"
        - "choice", "enum" → "selector"
    """

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SELECTOR = "selector"

    @classmethod
    def choices(cls) -> list[ArgumentKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "int": "integer",
            "number": "float",
            "str": "string",
            "choice": "selector",
            "enum": "selector",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
