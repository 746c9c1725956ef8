from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackforge.cli.goals._common import (
    cli_warning_callback,
    translator_config_from_arguments,
)
from hackforge.cli.output import cli_message
from libhackforge.hackforge import translate_file

if TYPE_CHECKING:
    from hackforge.cli.parser.arguments import CLIArguments


def cli_perform_translate_goal(args: CLIArguments) -> NoReturn:
    """Translate input VM bytecode file into assembly."""
    source = args.source_filepaths[0]
    cli_message(
        level="INFO",
        text=f"Translating `{source.name}`...",
        verbose=args.verbose,
    )

    if args.display_symbols:
        cli_message(
            "WARNING",
            "Symbol table is only available when assembling, ignoring `--symbols`.",
            verbose=args.verbose,
        )

    translate_file(
        source,
        args.output_filepath,
        config=translator_config_from_arguments(args),
        on_warning=cli_warning_callback(args),
    )

    cli_message(
        level="INFO",
        text=f"Translated input file down to `{args.output_filepath.name}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)
