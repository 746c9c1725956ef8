from __future__ import annotations

from hackforge.cli.errors.error_handler import cli_hackforge_error_handler
from hackforge.cli.executable import cli_get_executable_program
from hackforge.cli.goals import perform_desired_toolchain_goal
from hackforge.cli.parser.builder import build_cli_parser
from hackforge.cli.parser.parser import parse_cli_arguments


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry, always exits the process."""
    prog = cli_get_executable_program(warn_proper_installation=True)

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))

    # Handler exits even if goal returns, so nothing follows it
    with cli_hackforge_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    ):
        perform_desired_toolchain_goal(args)


if __name__ == "__main__":
    cli_entry_point()
