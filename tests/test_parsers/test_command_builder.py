import pytest

from olive.exceptions import ConfigurationError
from olive.parser import Command, new_cli


def test_new_cli_defaults():
    cli = new_cli("olive", "Package manager")
    assert isinstance(cli, Command)
    assert cli.name == "olive"
    assert cli.description == "Package manager"
    assert cli.requires_subcommand
    assert cli.help_enabled
    assert list(cli.flags) == ["help"]


def test_primary_argument_then_subcommand():
    cli = new_cli("olive")
    cli.add_primary_argument("path")
    with pytest.raises(ConfigurationError, match="cannot both take a primary argument"):
        cli.add_subcommand("build")


def test_subcommand_then_primary_argument():
    cli = new_cli("olive")
    cli.add_subcommand("build")
    with pytest.raises(ConfigurationError, match="cannot both take a primary argument"):
        cli.add_primary_argument("path")


def test_second_primary_argument():
    cli = new_cli("olive")
    cli.add_primary_argument("path")
    with pytest.raises(ConfigurationError, match="already has a primary argument"):
        cli.add_primary_argument("other")
    assert cli.primary_argument.name == "path"


def test_duplicate_subcommand():
    cli = new_cli("olive")
    cli.add_subcommand("build")
    with pytest.raises(ConfigurationError) as exc_info:
        cli.add_subcommand("build")
    assert exc_info.value.command == "olive"
    assert exc_info.value.name == "build"


def test_duplicate_flag_name():
    cli = new_cli("olive")
    cli.add_flag("verbose", "v")
    with pytest.raises(ConfigurationError, match="already has a flag named"):
        cli.add_flag("verbose", "x")


def test_duplicate_flag_short_name():
    cli = new_cli("olive")
    cli.add_flag("verbose", "v")
    with pytest.raises(ConfigurationError, match="already used by flag 'verbose'"):
        cli.add_flag("version", "v")
    assert cli.get_flag("version") is None


def test_flag_collides_with_help():
    cli = new_cli("olive")
    with pytest.raises(ConfigurationError):
        cli.add_flag("host", "h")


def test_help_registration_obeys_collision_checks():
    cli = new_cli("olive", help_enabled=False)
    cli.add_flag("host", "h")
    with pytest.raises(ConfigurationError):
        cli.enable_help()


def test_duplicate_argument_name():
    cli = new_cli("olive")
    cli.add_int_argument("jobs", "j")
    with pytest.raises(ConfigurationError, match="already has an argument named"):
        cli.add_string_argument("jobs", "x")


def test_duplicate_argument_short_name():
    cli = new_cli("olive")
    cli.add_int_argument("jobs", "j")
    with pytest.raises(ConfigurationError, match="already used by argument 'jobs'"):
        cli.add_float_argument("jitter", "j")


def test_flag_and_argument_may_share_names():
    cli = new_cli("olive")
    cli.add_flag("output", "o")
    cli.add_string_argument("output", "o")
    assert cli.get_flag("output") is not None
    assert cli.get_argument("output") is not None


def test_same_names_on_different_commands():
    cli = new_cli("olive")
    cli.add_flag("verbose", "v")
    build = cli.add_subcommand("build")
    build.add_flag("verbose", "v")
    assert build.get_flag("verbose") is not cli.get_flag("verbose")


@pytest.mark.parametrize("name", ["", "-v", "--verbose", "a=b", None, 3])
def test_invalid_names(name):
    cli = new_cli("olive")
    with pytest.raises(ConfigurationError):
        cli.add_flag(name, None)
    with pytest.raises(ConfigurationError):
        cli.add_int_argument(name, "j")
    with pytest.raises(ConfigurationError):
        cli.add_subcommand(name)


@pytest.mark.parametrize("choices", [[], "abc", [1, 2], None, {"a": 1}])
def test_invalid_selector_choices(choices):
    cli = new_cli("olive")
    with pytest.raises(ConfigurationError):
        cli.add_selector_argument("mode", "m", choices=choices)


def test_selector_choices_keep_order_without_duplicates():
    cli = new_cli("olive")
    argument = cli.add_selector_argument("mode", "m", choices=["b", "a", "b"])
    assert argument.choices == ("b", "a")


def test_builder_chaining():
    cli = new_cli("olive")
    argument = cli.add_int_argument("jobs", "j").set_validator(
        lambda value: value > 0
    ).set_default_value(4)
    assert argument is cli.get_argument("jobs")
    assert argument.get_default_value() == (4, True)

    flag = cli.add_flag("verbose", "v").set_action(print)
    assert flag.action is print


def test_flag_action_must_be_callable():
    cli = new_cli("olive")
    with pytest.raises(ConfigurationError, match="must be callable"):
        cli.add_flag("verbose", "v").set_action("print")


def test_disable_and_enable_help():
    cli = new_cli("olive")
    cli.disable_help()
    assert not cli.help_enabled
    assert "h" not in cli.flags_by_short_name
    cli.add_flag("host", "h")
    cli.disable_help()

    other = new_cli("other", help_enabled=False)
    assert other.get_flag("help") is None
    other.enable_help()
    other.enable_help()
    assert other.flags_by_short_name["h"] is other.get_flag("help")


def test_subcommand_help_can_be_suppressed():
    cli = new_cli("olive")
    build = cli.add_subcommand("build", help_enabled=False)
    assert build.get_flag("help") is None
    assert cli.get_flag("help") is not None


def test_lookup_tables_are_read_only():
    cli = new_cli("olive")
    with pytest.raises(TypeError):
        cli.flags["verbose"] = None
    with pytest.raises(TypeError):
        cli.subcommands["build"] = cli


def test_command_repr():
    cli = new_cli("olive")
    cli.add_subcommand("build")
    assert repr(cli) == (
        "Command(name='olive', flags=1, arguments=0, subcommands=1, primary=None)"
    )


@pytest.mark.parametrize("short_name", ["", "-v", "x=y", 3])
def test_invalid_short_names(short_name):
    cli = new_cli("olive")
    with pytest.raises(ConfigurationError):
        cli.add_flag("verbose", short_name)
    with pytest.raises(ConfigurationError):
        cli.add_string_argument("output", short_name)
