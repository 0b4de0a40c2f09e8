import pytest

from olive.parser import (
    ArgumentKind,
    FloatArgument,
    IntArgument,
    SelectorArgument,
    StringArgument,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("integer", ArgumentKind.INTEGER),
        ("int", ArgumentKind.INTEGER),
        ("INT", ArgumentKind.INTEGER),
        ("float", ArgumentKind.FLOAT),
        ("number", ArgumentKind.FLOAT),
        ("str", ArgumentKind.STRING),
        (" string ", ArgumentKind.STRING),
        ("choice", ArgumentKind.SELECTOR),
        ("enum", ArgumentKind.SELECTOR),
        ("selector", ArgumentKind.SELECTOR),
    ],
)
def test_kind_aliases(value, expected):
    assert ArgumentKind(value) is expected


@pytest.mark.parametrize("value", ["bool", "", 3, None])
def test_invalid_kind(value):
    with pytest.raises(ValueError, match="Invalid ArgumentKind"):
        ArgumentKind(value)


def test_kind_str_and_choices():
    assert str(ArgumentKind.SELECTOR) == "selector"
    assert ArgumentKind.choices() == [
        ArgumentKind.INTEGER,
        ArgumentKind.FLOAT,
        ArgumentKind.STRING,
        ArgumentKind.SELECTOR,
    ]


def test_argument_classes_declare_kind():
    assert IntArgument.kind is ArgumentKind.INTEGER
    assert FloatArgument.kind is ArgumentKind.FLOAT
    assert StringArgument.kind is ArgumentKind.STRING
    assert SelectorArgument.kind is ArgumentKind.SELECTOR


def test_metavars():
    assert IntArgument("jobs", "j").get_metavar() == "int"
    assert FloatArgument("ratio", "r").get_metavar() == "float"
    assert StringArgument("output", "o").get_metavar() == "string"
    assert SelectorArgument("mode", "m", choices=["a", "b"]).get_metavar() == "a|b"
