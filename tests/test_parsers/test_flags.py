import pytest

from olive.exceptions import FlagRepeatedError, UnknownFlagError
from olive.parser import new_cli, parse_args


def build_cli(calls=None):
    cli = new_cli("olive")
    cli.add_flag("flag1", "f1")
    flag2 = cli.add_flag("flag2", "f2")
    if calls is not None:
        flag2.set_action(lambda: calls.append("flag2"))
    cli.add_flag("flag3", "f3")
    return cli


def test_long_and_short_flags():
    result = parse_args(build_cli(), ["olive", "-f1", "--flag2"])
    assert result.has_flag("flag1")
    assert result.has_flag("flag2")
    assert not result.has_flag("flag3")
    assert result.flags == frozenset({"flag1", "flag2"})


def test_flag_action_runs_once_per_occurrence():
    calls = []
    cli = build_cli(calls)
    parse_args(cli, ["olive", "--flag2"])
    assert calls == ["flag2"]

    parse_args(cli, ["olive", "-f1"])
    assert calls == ["flag2"]


def test_flag_actions_run_in_token_order():
    calls = []
    cli = new_cli("olive")
    cli.add_flag("first", "a").set_action(lambda: calls.append("first"))
    cli.add_flag("second", "b").set_action(lambda: calls.append("second"))
    parse_args(cli, ["olive", "-b", "--first"])
    assert calls == ["second", "first"]


@pytest.mark.parametrize(
    "tokens",
    [
        ["olive", "-f1", "--flag1"],
        ["olive", "--flag1", "--flag1"],
        ["olive", "-f1", "-f1"],
    ],
)
def test_flag_set_multiple_times(tokens):
    with pytest.raises(FlagRepeatedError) as exc_info:
        parse_args(build_cli(), tokens)
    assert exc_info.value.token == "flag1"
    assert "set multiple times" in str(exc_info.value)


def test_failed_parse_does_not_run_later_actions():
    calls = []
    cli = build_cli(calls)
    with pytest.raises(FlagRepeatedError):
        parse_args(cli, ["olive", "-f1", "-f1", "--flag2"])
    assert calls == []


@pytest.mark.parametrize("token", ["--v", "-v", "--flag", "-flag1", "--f1", "-", "--"])
def test_unknown_flag(token):
    with pytest.raises(UnknownFlagError) as exc_info:
        parse_args(build_cli(), ["olive", token])
    assert exc_info.value.token == token


def test_flag_without_short_name_only_matches_full_name():
    cli = new_cli("olive")
    cli.add_flag("dry-run", None, "Do nothing")
    assert parse_args(cli, ["olive", "--dry-run"]).has_flag("dry-run")
    with pytest.raises(UnknownFlagError):
        parse_args(cli, ["olive", "-dry-run"])


def test_extra_leading_dashes_are_stripped():
    result = parse_args(build_cli(), ["olive", "---flag1"])
    assert result.has_flag("flag1")


def test_help_flag_is_present_by_default():
    cli = new_cli("olive")
    assert cli.get_flag("help") is not None
    assert cli.flags_by_short_name["h"] is cli.get_flag("help")


@pytest.mark.parametrize("token", ["--flag2=", "-f2="])
def test_flag_with_empty_value(token):
    calls = []
    result = parse_args(build_cli(calls), ["olive", token])
    assert result.has_flag("flag2")
    assert calls == ["flag2"]


def test_flag_with_empty_value_counts_as_repeat():
    with pytest.raises(FlagRepeatedError):
        parse_args(build_cli(), ["olive", "--flag1", "-f1="])
