import pytest

from olive.exceptions import ValueRejectedError
from olive.parser import new_cli, parse_args
from olive.validators import float_range_validator, int_range_validator


def test_int_range_validator():
    validator = int_range_validator(1, 10)
    validator(1)
    validator(10)
    with pytest.raises(ValueError, match="Enter a number between 1 and 10."):
        validator(0)
    with pytest.raises(ValueError):
        validator(11)


def test_float_range_validator():
    validator = float_range_validator(0.0, 1.0)
    validator(0.5)
    with pytest.raises(ValueError, match="between 0.0 and 1.0"):
        validator(1.01)


def test_range_validator_on_argument():
    cli = new_cli("serve")
    cli.add_int_argument("port", "p", "Port to bind", validator=int_range_validator(1, 65535))
    assert parse_args(cli, ["serve", "-p=8080"]).get_argument("port") == 8080
    with pytest.raises(ValueRejectedError, match="Enter a number between 1 and 65535."):
        parse_args(cli, ["serve", "--port=0"])
