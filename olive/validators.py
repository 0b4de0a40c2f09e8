# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reusable validators for Olive named arguments.

A validator receives the already-converted value of an argument and rejects it
by raising `ValueError`. The message of the error is shown to the user, so it
should say what a valid value looks like.

Included Validators:
- int_range_validator: Enforces an integer within a range.
- float_range_validator: Enforces a float within a range.
- max_length_validator: Limits the length of a string.
- regex_validator: Requires a string to fully match a pattern.
- one_of_validator: Accepts specific words, case-insensitive by default.

Example:
    cli.add_int_argument("port", "p", "Port to bind").set_validator(
        int_range_validator(1, 65535)
    )
"""
import re
from typing import Callable, Sequence


def int_range_validator(minimum: int, maximum: int) -> Callable[[int], None]:
    """Validator for integer ranges (inclusive)."""

    def validate(value: int) -> None:
        if not minimum <= value <= maximum:
            raise ValueError(f"Enter a number between {minimum} and {maximum}.")

    return validate


def float_range_validator(minimum: float, maximum: float) -> Callable[[float], None]:
    """Validator for float ranges (inclusive)."""

    def validate(value: float) -> None:
        if not minimum <= value <= maximum:
            raise ValueError(f"Enter a number between {minimum} and {maximum}.")

    return validate


def max_length_validator(length: int) -> Callable[[str], None]:
    """Validator for the maximum length of a string."""

    def validate(value: str) -> None:
        if len(value) > length:
            raise ValueError(f"Must be at most {length} characters long.")

    return validate


def regex_validator(
    pattern: str, error_message: str | None = None
) -> Callable[[str], None]:
    """Validator requiring the whole string to match `pattern`."""
    compiled = re.compile(pattern)
    if error_message is None:
        error_message = f"Must match the pattern '{pattern}'."

    def validate(value: str) -> None:
        if not compiled.fullmatch(value):
            raise ValueError(error_message)

    return validate


def one_of_validator(
    words: Sequence[str], case_sensitive: bool = False
) -> Callable[[str], None]:
    """Validator for specific word inputs."""
    if case_sensitive:
        allowed = set(words)
    else:
        allowed = {word.upper() for word in words}

    def validate(value: str) -> None:
        candidate = value if case_sensitive else value.upper()
        if candidate not in allowed:
            raise ValueError(f"Choices: {{{', '.join(words)}}}.")

    return validate
