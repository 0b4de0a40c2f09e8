# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Olive command trees.

A command tree can be declared in YAML or TOML instead of code. The file holds
the root command; subcommands nest under `subcommands`:

    name: olive
    description: Package manager for olive projects
    requires_subcommand: true
    flags:
      - name: verbose
        short_name: v
        description: Print more output
    subcommands:
      - name: build
        description: Build a package
        primary_argument:
          name: package-name
        arguments:
          - name: output
            short_name: o
            kind: string
            default: dist
          - name: jobs
            short_name: j
            kind: int
            default: 1
            validator: my_project.validators.positive

`action` (flags) and `validator` (arguments) are dotted import paths. The tree is
built through the regular `Command` builder methods, so every rule enforced in
code is enforced for configuration files too.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from olive.exceptions import ConfigurationError
from olive.logger import logger
from olive.parser.argument_kind import ArgumentKind
from olive.parser.command import Command
from olive.utils import import_object


class FlagConfig(BaseModel):
    """Flag model for Olive configuration."""

    name: str
    short_name: str | None = None
    description: str = ""
    action: str | None = None


class ArgumentConfig(BaseModel):
    """Named argument model for Olive configuration."""

    name: str
    short_name: str | None = None
    kind: ArgumentKind = ArgumentKind.STRING
    description: str = ""
    required: bool = False
    default: Any = None
    choices: list[str] = Field(default_factory=list)
    validator: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @model_validator(mode="after")
    def validate_choices(self) -> ArgumentConfig:
        if self.kind == ArgumentKind.SELECTOR and not self.choices:
            raise ValueError(f"Selector argument '{self.name}' needs choices")
        if self.kind != ArgumentKind.SELECTOR and self.choices:
            raise ValueError(
                f"Argument '{self.name}' of kind '{self.kind}' cannot have choices"
            )
        return self

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set


class PrimaryArgumentConfig(BaseModel):
    """Primary argument model for Olive configuration."""

    name: str
    description: str = ""
    required: bool = False


class CommandConfig(BaseModel):
    """Command model for Olive configuration."""

    name: str
    description: str = ""
    help: bool = True
    requires_subcommand: bool = True
    flags: list[FlagConfig] = Field(default_factory=list)
    arguments: list[ArgumentConfig] = Field(default_factory=list)
    primary_argument: PrimaryArgumentConfig | None = None
    subcommands: list[CommandConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_primary_or_subcommands(self) -> CommandConfig:
        if self.primary_argument is not None and self.subcommands:
            raise ValueError(
                f"Command '{self.name}' cannot both take a primary argument "
                "and have subcommands"
            )
        return self

    def to_command(self, parent: Command | None = None) -> Command:
        """Build the `Command` described by this model, attached to `parent` if given."""
        if parent is None:
            command = Command(
                self.name,
                self.description,
                help_enabled=self.help,
                requires_subcommand=self.requires_subcommand,
            )
        else:
            command = parent.add_subcommand(
                self.name,
                self.description,
                help_enabled=self.help,
                requires_subcommand=self.requires_subcommand,
            )

        for raw_flag in self.flags:
            flag = command.add_flag(raw_flag.name, raw_flag.short_name, raw_flag.description)
            if raw_flag.action:
                flag.set_action(import_object(raw_flag.action))

        for raw_argument in self.arguments:
            add_argument(command, raw_argument)

        if self.primary_argument is not None:
            command.add_primary_argument(
                self.primary_argument.name,
                self.primary_argument.description,
                self.primary_argument.required,
            )

        for raw_subcommand in self.subcommands:
            raw_subcommand.to_command(command)

        return command


CommandConfig.model_rebuild()


def add_argument(command: Command, raw_argument: ArgumentConfig) -> None:
    """Add the argument described by `raw_argument` to `command`."""
    options: dict[str, Any] = {}
    if raw_argument.has_default:
        options["default"] = raw_argument.default
    if raw_argument.validator:
        options["validator"] = import_object(raw_argument.validator)

    name = raw_argument.name
    short_name = raw_argument.short_name
    description = raw_argument.description
    required = raw_argument.required
    if raw_argument.kind == ArgumentKind.INTEGER:
        command.add_int_argument(name, short_name, description, required, **options)
    elif raw_argument.kind == ArgumentKind.FLOAT:
        command.add_float_argument(name, short_name, description, required, **options)
    elif raw_argument.kind == ArgumentKind.STRING:
        command.add_string_argument(name, short_name, description, required, **options)
    else:
        command.add_selector_argument(
            name, short_name, description, required, raw_argument.choices, **options
        )


def read_config(path: Path) -> dict[str, Any]:
    """
    Read a YAML or TOML file into a dictionary.

    Raises:
        ValueError: If the format is unsupported or the content is not a mapping.
        ConfigurationError: If the file is not valid YAML or TOML.
    """
    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ValueError(f"Unsupported config format: {suffix}")

    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raw_config = yaml.safe_load(config_file)
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigurationError(f"Could not read {path}:\n{error}") from error

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary describing the root command.\n"
            "Example:\n"
            "name: 'olive'\n"
            "subcommands:\n"
            "  - name: 'build'\n"
            "    description: 'Build a package'"
        )
    return raw_config


def loader(file_path: Path | str) -> Command:
    """
    Load an Olive command tree from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        Command: The root command of the configured tree.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a mapping.
        ConfigurationError: If the file cannot be decoded or does not describe a
            valid command tree.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = read_config(path)
    try:
        config = CommandConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid command configuration in {path}:\n{error}") from error

    logger.debug("Loaded command '%s' from %s", config.name, path)
    return config.to_command()
