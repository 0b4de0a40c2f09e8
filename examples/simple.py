import sys

from olive import ParseError, new_cli, parse_args
from olive.utils import setup_logging
from olive.validators import int_range_validator

setup_logging()

cli = new_cli("olive", "Package manager for olive projects")
cli.add_flag("verbose", "v", "Print more output")

build = cli.add_subcommand("build", "Build a package")
build.add_primary_argument("package-name", "Package to build")
build.add_string_argument("output", "o", "Output path", default="dist")
build.add_int_argument("jobs", "j", "Parallel jobs", default=1).set_validator(
    int_range_validator(1, 64)
)

mod = cli.add_subcommand("mod", "Module maintenance")
init = mod.add_subcommand("init", "Initialise a new module")
init.add_primary_argument("module-name", "Name of the module")


if __name__ == "__main__":
    try:
        result = parse_args(cli, sys.argv)
    except ParseError as error:
        print(f"error: {error}")
        sys.exit(2)

    print(" → ".join(["olive", *result.subcommand_chain()]))
    print(result.to_dict())
