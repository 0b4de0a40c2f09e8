"""
Olive Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command line entry point for inspecting Olive command trees declared in YAML or
TOML files. The CLI is itself an Olive command tree:

    olive show <config>
    olive help <config>
    olive parse [--tokens="..."] [--json] <config>

Root flags and arguments (`--verbose`, `--log-mode=...`) are accepted anywhere
after the subcommand name, e.g. `olive show -v cli.yaml`.
"""
from __future__ import annotations

import logging
import shlex
import sys

from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from olive.config import loader
from olive.console import console
from olive.exceptions import OliveError, ParseError
from olive.logger import logger
from olive.parser import Command, HelpRenderer, ParseResult, new_cli, parse_args
from olive.parser.help import format_names
from olive.utils import setup_logging


def build_cli() -> Command:
    """Build the command tree of the `olive` program."""
    cli = new_cli("olive", "Inspect and exercise Olive command trees.")
    cli.add_flag("verbose", "v", "Enable debug logging")
    cli.add_selector_argument(
        "log-mode", None, "Log output format", choices=["cli", "json"]
    )

    show = cli.add_subcommand("show", "Print a configured command tree")
    show.add_primary_argument("config", "YAML or TOML command definition", True)

    help_command = cli.add_subcommand(
        "help", "Print the help message of a configured command tree"
    )
    help_command.add_primary_argument("config", "YAML or TOML command definition", True)

    parse = cli.add_subcommand("parse", "Parse tokens against a configured command tree")
    parse.add_primary_argument("config", "YAML or TOML command definition", True)
    parse.add_string_argument(
        "tokens", "t", "Tokens to parse, split with shell rules", default=""
    )
    parse.add_flag("json", "j", "Print the result as JSON")
    return cli


def command_tree(command: Command, parent: Tree | None = None) -> Tree:
    """Return a Rich tree describing `command` and its subcommands."""
    label = Text(command.name, style="olive.command")
    if command.description:
        label.append(f"  {command.description}", style="olive.muted")
    node = Tree(label) if parent is None else parent.add(label)

    for flag in command.flags.values():
        node.add(Text(format_names(flag.name, flag.short_name), style="olive.flag"))
    for argument in command.arguments.values():
        text = Text(
            f"{format_names(argument.name, argument.short_name)}=<{argument.get_metavar()}>",
            style="olive.argument",
        )
        if argument.has_default:
            text.append(f"  default: {argument.default!r}", style="olive.muted")
        node.add(text)
    if command.primary_argument is not None:
        node.add(Text(f"[{command.primary_argument.name}]", style="olive.primary"))
    for subcommand in command.subcommands.values():
        command_tree(subcommand, node)
    return node


def result_tree(name: str, result: ParseResult, parent: Tree | None = None) -> Tree:
    """Return a Rich tree describing a parse result and its subcommand chain."""
    label = Text(name, style="olive.command")
    node = Tree(label) if parent is None else parent.add(label)

    for flag in sorted(result.flags):
        node.add(Text(f"--{flag}", style="olive.flag"))
    for argument, value in result.arguments.items():
        text = Text(f"{argument} = ", style="olive.argument")
        text.append(repr(value), style="olive.value")
        node.add(text)
    primary, present = result.primary_argument()
    if present:
        node.add(Text(f"primary: {primary!r}", style="olive.primary"))
    subcommand_name, subcommand_result, present = result.subcommand()
    if present:
        result_tree(subcommand_name, subcommand_result, node)
    return node


def print_error(message: str) -> None:
    console.print(f"[olive.error]error:[/] {escape(message)}")


def run_parse(command: Command, options: ParseResult) -> int:
    tokens = shlex.split(options.get_argument("tokens", ""))
    logger.debug("Parsing tokens %s against '%s'", tokens, command.name)
    try:
        result = command.parse(tokens)
    except ParseError as error:
        print_error(str(error))
        return 1
    if options.has_flag("json"):
        console.print_json(data=result.to_dict())
    else:
        console.print(result_tree(command.name, result))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the `olive` program and return its exit code."""
    cli = build_cli()
    try:
        result = parse_args(cli, sys.argv if argv is None else argv)
    except ParseError as error:
        print_error(str(error))
        return 2

    setup_logging(
        mode=result.get_argument("log-mode"),
        console_log_level=logging.DEBUG if result.has_flag("verbose") else logging.WARNING,
    )

    name, options, _ = result.subcommand()
    config_path, present = options.primary_argument()
    if not present:
        print_error(f"'olive {name}' needs the path of a command definition")
        return 2

    try:
        command = loader(config_path)
    except (OliveError, OSError, ValueError) as error:
        print_error(str(error))
        return 1

    if name == "show":
        console.print(command_tree(command))
    elif name == "help":
        HelpRenderer(command).print(console)
    else:
        return run_parse(command, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
