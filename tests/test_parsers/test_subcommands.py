import pytest

from olive.exceptions import (
    FlagRepeatedError,
    MissingSubcommandError,
    UnknownFlagError,
    UnknownSubcommandError,
)
from olive.parser import new_cli, parse_args


def build_cli():
    cli = new_cli("olive", "Olive package manager")
    cli.add_flag("verbose", "v", "Print more output")

    build = cli.add_subcommand("build", "Build a package")
    build.add_primary_argument("package-name", "Package to build", True)
    build.add_string_argument("output", "o", "Output path", default="cool_path")

    mod = cli.add_subcommand("mod", "Module maintenance")
    mod.add_flag("verbose", "v", "Print module details")
    init = mod.add_subcommand("init", "Initialise a module")
    init.add_primary_argument("module-name", "Name of the new module", True)
    return cli


def test_subcommand_with_argument_and_primary():
    result = parse_args(build_cli(), ["olive", "build", "-o=other_path", "package"])
    name, build, present = result.subcommand()
    assert present
    assert name == "build"
    assert build.get_argument("output") == "other_path"
    assert build.primary_argument() == ("package", True)


def test_subcommand_default_is_filled():
    result = parse_args(build_cli(), ["olive", "build", "package"])
    assert result.innermost().get_argument("output") == "cool_path"


def test_nested_subcommands():
    result = parse_args(build_cli(), ["olive", "mod", "init", "pog"])
    assert result.subcommand_chain() == ["mod", "init"]
    assert result.innermost().primary_argument() == ("pog", True)

    _, mod, _ = result.subcommand()
    assert mod.subcommand_name == "init"
    assert mod.primary_argument() == (None, False)


def test_root_flag_is_reachable_from_subcommand():
    result = parse_args(build_cli(), ["olive", "build", "-v", "package"])
    assert result.has_flag("verbose")
    assert not result.innermost().has_flag("verbose")


def test_subcommand_flag_shadows_root_flag():
    result = parse_args(build_cli(), ["olive", "mod", "init", "--verbose", "pog"])
    _, mod, _ = result.subcommand()
    assert mod.has_flag("verbose")
    assert not result.has_flag("verbose")
    assert not result.innermost().has_flag("verbose")


def test_shadowed_root_flag_cannot_be_set_twice_from_subcommand():
    with pytest.raises(FlagRepeatedError):
        parse_args(build_cli(), ["olive", "mod", "-v", "-v"])


def test_flag_before_subcommand_closes_subcommand_selection():
    with pytest.raises(UnknownSubcommandError) as exc_info:
        parse_args(build_cli(), ["olive", "-v", "build", "package"])
    assert exc_info.value.token == "build"


def test_unknown_subcommand():
    with pytest.raises(UnknownSubcommandError) as exc_info:
        parse_args(build_cli(), ["olive", "deploy"])
    assert "Unknown subcommand" in str(exc_info.value)
    assert exc_info.value.token == "deploy"


def test_subcommand_name_is_not_a_primary_argument_of_its_parent():
    with pytest.raises(UnknownSubcommandError):
        parse_args(build_cli(), ["olive", "mod", "build"])


def test_missing_required_subcommand():
    with pytest.raises(MissingSubcommandError) as exc_info:
        parse_args(build_cli(), ["olive"])
    assert exc_info.value.token == "olive"
    assert "requires a subcommand" in str(exc_info.value)


def test_missing_required_nested_subcommand():
    with pytest.raises(MissingSubcommandError) as exc_info:
        parse_args(build_cli(), ["olive", "mod"])
    assert exc_info.value.token == "mod"


def test_optional_subcommand():
    cli = new_cli("olive", requires_subcommand=False)
    cli.add_flag("verbose", "v")
    cli.add_subcommand("build")

    result = parse_args(cli, ["olive", "-v"])
    assert result.has_flag("verbose")
    assert result.subcommand() == (None, None, False)
    assert result.subcommand_chain() == []
    assert result.innermost() is result


def test_leaf_command_does_not_require_subcommand():
    cli = new_cli("olive")
    result = parse_args(cli, ["olive"])
    assert result.subcommand() == (None, None, False)


def test_subcommand_flags_are_not_visible_from_parent():
    with pytest.raises(UnknownFlagError):
        parse_args(build_cli(), ["olive", "build", "package", "--nope"])
