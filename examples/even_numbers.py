import sys

from olive import new_cli, parse_args


def must_be_even(value: int) -> None:
    """Reject odd numbers."""
    if value % 2:
        raise ValueError("must be even")


cli = new_cli("even", "Print an even number", requires_subcommand=False)
cli.add_int_argument("int", "i", "An even number", default=0, validator=must_be_even)

# Keep the process alive when -h is given
cli.get_flag("help").set_action(cli.help)

if __name__ == "__main__":
    result = parse_args(cli, sys.argv)
    print(result.get_argument("int"))
