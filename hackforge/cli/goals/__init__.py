"""Goals for CLI (e.g assemble, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from hackforge.cli.goals.assemble import cli_perform_assemble_goal
from hackforge.cli.goals.build import cli_perform_build_goal
from hackforge.cli.goals.translate import cli_perform_translate_goal
from hackforge.cli.goals.version import cli_perform_version_goal
from hackforge.cli.infer import ASSEMBLY_SUFFIX
from hackforge.cli.output import cli_message
from hackforge.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments and source file type."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.source_filepaths[0].suffix == ASSEMBLY_SUFFIX:
            return cli_perform_assemble_goal(args)

        if args.output_format == "hack":
            return cli_perform_build_goal(args)

        return cli_perform_translate_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
