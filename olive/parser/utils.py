# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token and value helpers for Olive's argument parser.

Functions:
- split_token: Split a dashed token into its name and optional raw value.
- coerce_int: Convert a string to a native-width signed integer.
- coerce_float: Convert a string to a float.
- apply_validator: Run a caller-supplied validator against a typed value.
"""
import re
import sys
from typing import Any, Callable

Validator = Callable[[Any], Any]


class _Missing:
    """Sentinel type for "no value supplied" where `None` is a legal value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

INT_MIN = -sys.maxsize - 1
INT_MAX = sys.maxsize

LEGACY_OCTAL = re.compile(r"[+-]?0[0-7_]+")


def split_token(token: str) -> tuple[str, str | None]:
    """
    Split a dashed token into a name and a raw value.

    Leading dashes are stripped from the name. The token is split on the first
    `=` only, so the value keeps any further `=` characters verbatim. An empty
    value counts as no value, so `--verbose=` names a flag.

    Args:
        token (str): A token such as `--output=dist` or `-v`.

    Returns:
        tuple[str, str | None]: The name and the raw value, or `None` when the
        token carries no value (a flag).

    Example:
        split_token("--define=a=b") → ("define", "a=b")
        split_token("-v")           → ("v", None)
        split_token("--verbose=")   → ("verbose", None)
    """
    if "=" in token:
        name, value = token.split("=", 1)
        return name.lstrip("-"), value or None
    return token.lstrip("-"), None


def coerce_int(value: str) -> int:
    """
    Convert a string to an integer.

    Base prefixes (`0x`, `0o`, `0b`) and a leading sign are accepted. A bare
    leading zero marks an octal literal, so `010` is 8. The result must fit in
    the platform's native signed word.

    Raises:
        ValueError: If the string is not an integer literal or is out of range.
    """
    base = 8 if LEGACY_OCTAL.fullmatch(value.strip()) else 0
    try:
        number = int(value, base)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer") from None
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"'{value}' is out of range for an integer")
    return number


def coerce_float(value: str) -> float:
    """
    Convert a string to a float.

    Raises:
        ValueError: If the string is not a floating point literal.
    """
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid float") from None


def apply_validator(validator: Validator | None, value: Any) -> None:
    """
    Run a validator against an already-typed value.

    A validator rejects a value by raising `ValueError` or `TypeError`, or by
    returning `False`. Any other outcome accepts the value.

    Raises:
        ValueError: If the validator returns `False`.
        TypeError: Raised by the validator itself.
    """
    if validator is None:
        return
    if validator(value) is False:
        raise ValueError(f"{value!r} was rejected by the validator")
