from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackforge.cli.goals._common import (
    assembler_config_from_arguments,
    cli_warning_callback,
    display_symbol_table,
    translator_config_from_arguments,
)
from hackforge.cli.goals.execute import cli_execute_binary_output
from hackforge.cli.output import cli_message
from libhackforge.hackforge import build_file

if TYPE_CHECKING:
    from hackforge.cli.parser.arguments import CLIArguments


def cli_perform_build_goal(args: CLIArguments) -> NoReturn:
    """Translate input VM bytecode file and assemble it into binary words."""
    source = args.source_filepaths[0]
    cli_message(
        level="INFO",
        text=f"Translating and assembling `{source.name}`...",
        verbose=args.verbose,
    )

    symbols = build_file(
        source,
        args.output_filepath,
        translator_config=translator_config_from_arguments(args),
        assembler_config=assembler_config_from_arguments(args),
        on_warning=cli_warning_callback(args),
    )

    cli_message(
        level="INFO",
        text=f"Built input file down to `{args.output_filepath.name}`!",
        verbose=args.verbose,
    )

    if args.display_symbols:
        display_symbol_table(symbols)

    if args.execute_after_compilation:
        cli_execute_binary_output(args, is_vm_program=True)

    return sys.exit(0)
