# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the building blocks a `Command` is made of: flags, named arguments
and the primary argument.

Named arguments form a small, closed type registry. Every kind shares one
capability set (parse a raw token into a typed value, expose a default, expose
required-ness) and differs only in how the raw text is converted:

- `IntArgument`: signed integers, base prefixes accepted.
- `FloatArgument`: 64-bit floats.
- `StringArgument`: any string.
- `SelectorArgument`: a string restricted to a fixed, ordered set of values.

Each argument may carry a validator, run after the raw text has been converted,
and a default value. A default is checked when it is set: it must have the
argument's type, be a legal selector value where applicable, and pass the
validator. A bad default is a configuration error, not a parse error.

Arguments are created through the `Command.add_*_argument()` builder methods,
which return the argument so callers can chain `set_validator()` and
`set_default_value()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable

from olive.exceptions import (
    ConfigurationError,
    InvalidValueError,
    ValueRejectedError,
)
from olive.parser.argument_kind import ArgumentKind
from olive.parser.utils import (
    MISSING,
    Validator,
    apply_validator,
    coerce_float,
    coerce_int,
)


@dataclass
class Flag:
    """
    Represents a flag: a name that is either present or absent.

    Attributes:
        name (str): Full name, matched by `--name`.
        short_name (str | None): Short name, matched by `-short_name`.
        description (str): Help text for the flag.
        action (Callable[[], Any] | None): Called once each time the flag is set.
    """

    name: str
    short_name: str | None
    description: str = ""
    action: Callable[[], Any] | None = None

    def set_action(self, action: Callable[[], Any] | None) -> Flag:
        """Set the callable run when this flag is encountered."""
        if action is not None and not callable(action):
            raise ConfigurationError(
                f"Action for flag '{self.name}' must be callable", name=self.name
            )
        self.action = action
        return self

    def trigger(self) -> None:
        """Run the flag's action, if any."""
        if self.action is not None:
            self.action()


@dataclass
class PrimaryArgument:
    """
    Represents the single unlabelled argument a command may take.

    For `go build <package>`, `<package>` is the primary argument of `build`.
    Its value is always the raw token.
    """

    name: str
    description: str = ""
    required: bool = False


class Argument(ABC):
    """
    Base class for named arguments (`--name=value` / `-short=value`).

    Subclasses set `kind` and implement `coerce()` and `_check_default_type()`.
    """

    kind: ClassVar[ArgumentKind]

    def __init__(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
    ) -> None:
        self._name = name
        self._short_name = short_name
        self._description = description
        self._required = required
        self._validator: Validator | None = None
        self._default: Any = None
        self._has_default = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def short_name(self) -> str | None:
        return self._short_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def required(self) -> bool:
        return self._required

    @property
    def validator(self) -> Validator | None:
        return self._validator

    @property
    def default(self) -> Any:
        """The default value, or `None` when no default is set."""
        return self._default

    @property
    def has_default(self) -> bool:
        return self._has_default

    def get_default_value(self) -> tuple[Any, bool]:
        """Return the default value and whether one was set."""
        return self._default, self._has_default

    def set_validator(self, validator: Validator | None) -> Argument:
        """
        Set the validation function for this argument.

        The validator receives the converted value and rejects it by raising
        `ValueError` or `TypeError`, or by returning `False`. An existing
        default is re-checked against the new validator.

        Raises:
            ConfigurationError: If the validator is not callable or rejects the
                current default.
        """
        if validator is not None and not callable(validator):
            raise ConfigurationError(
                f"Validator for argument '{self.name}' must be callable",
                name=self.name,
            )
        if self._has_default:
            self._validate_default(self._default, validator)
        self._validator = validator
        return self

    def set_default_value(self, value: Any) -> Argument:
        """
        Set the default value of this argument.

        Raises:
            ConfigurationError: If the value has the wrong type, is not a legal
                value, or is rejected by the validator.
        """
        typed = self._check_default_type(value)
        self._validate_default(typed, self._validator)
        self._default = typed
        self._has_default = True
        return self

    def clear_default_value(self) -> Argument:
        """Remove the default value of this argument."""
        self._default = None
        self._has_default = False
        return self

    def _validate_default(self, value: Any, validator: Validator | None) -> None:
        try:
            apply_validator(validator, value)
        except (TypeError, ValueError) as error:
            raise ConfigurationError(
                f"Default value {value!r} for argument '{self.name}' is invalid: {error}",
                name=self.name,
            ) from error

    def check_value(self, raw: str) -> Any:
        """
        Convert a raw token value to this argument's kind and validate it.

        Raises:
            InvalidValueError: If the raw value cannot be converted.
            ValueRejectedError: If the validator rejects the converted value.
        """
        try:
            value = self.coerce(raw)
        except ValueError as error:
            raise InvalidValueError(
                f"Invalid value for argument '{self.name}': {error}",
                argument=self.name,
                value=raw,
            ) from error
        try:
            apply_validator(self._validator, value)
        except (TypeError, ValueError) as error:
            raise ValueRejectedError(
                f"Invalid value for argument '{self.name}': {error}",
                argument=self.name,
                value=raw,
            ) from error
        return value

    @abstractmethod
    def coerce(self, raw: str) -> Any:
        """Convert raw text to a typed value, raising `ValueError` on failure."""

    @abstractmethod
    def _check_default_type(self, value: Any) -> Any:
        """Return `value` as this kind's type or raise `ConfigurationError`."""

    def get_metavar(self) -> str:
        """Return the placeholder shown for the value in usage lines."""
        return str(self.kind)

    def _wrong_default(self, value: Any, expected: str) -> ConfigurationError:
        return ConfigurationError(
            f"Default value {value!r} for argument '{self.name}' must be {expected}",
            name=self.name,
        )

    def __repr__(self) -> str:
        default = repr(self._default) if self._has_default else MISSING
        return (
            f"{type(self).__name__}(name={self.name!r}, short_name={self.short_name!r}, "
            f"required={self.required}, default={default})"
        )


class IntArgument(Argument):
    """An argument whose value must be an integer."""

    kind = ArgumentKind.INTEGER

    def coerce(self, raw: str) -> int:
        return coerce_int(raw)

    def _check_default_type(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._wrong_default(value, "an int")
        return value

    def get_metavar(self) -> str:
        return "int"


class FloatArgument(Argument):
    """An argument whose value must be a float."""

    kind = ArgumentKind.FLOAT

    def coerce(self, raw: str) -> float:
        return coerce_float(raw)

    def _check_default_type(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._wrong_default(value, "a float")
        return float(value)


class StringArgument(Argument):
    """An argument whose value is any string."""

    kind = ArgumentKind.STRING

    def coerce(self, raw: str) -> str:
        return raw

    def _check_default_type(self, value: Any) -> str:
        if not isinstance(value, str):
            raise self._wrong_default(value, "a str")
        return value


class SelectorArgument(Argument):
    """An argument whose value is constrained to a finite set of strings."""

    kind = ArgumentKind.SELECTOR

    def __init__(
        self,
        name: str,
        short_name: str | None,
        description: str = "",
        required: bool = False,
        choices: Iterable[str] = (),
    ) -> None:
        super().__init__(name, short_name, description, required)
        if isinstance(choices, (str, dict)):
            raise ConfigurationError(
                f"Choices for argument '{name}' must be a list of strings", name=name
            )
        try:
            values = list(choices)
        except TypeError:
            raise ConfigurationError(
                f"Choices for argument '{name}' must be iterable", name=name
            ) from None
        if not values:
            raise ConfigurationError(
                f"Selector argument '{name}' needs at least one choice", name=name
            )
        for value in values:
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"Choice {value!r} for argument '{name}' must be a string",
                    name=name,
                )
        self._choices: tuple[str, ...] = tuple(dict.fromkeys(values))

    @property
    def choices(self) -> tuple[str, ...]:
        return self._choices

    def coerce(self, raw: str) -> str:
        if raw not in self._choices:
            raise ValueError(
                f"'{raw}' is not one of {{{', '.join(self._choices)}}}"
            )
        return raw

    def _check_default_type(self, value: Any) -> str:
        if not isinstance(value, str):
            raise self._wrong_default(value, "a str")
        if value not in self._choices:
            raise ConfigurationError(
                f"Default value '{value}' for argument '{self.name}' not in allowed "
                f"choices: {{{', '.join(self._choices)}}}",
                name=self.name,
            )
        return value

    def get_metavar(self) -> str:
        return "|".join(self._choices)
