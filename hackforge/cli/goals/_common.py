from __future__ import annotations

from typing import TYPE_CHECKING

from hackforge.cli.output import cli_message
from libhackforge.assembler import AssemblerConfig
from libhackforge.vm import TranslatorConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from hackforge.cli.parser.arguments import CLIArguments
    from libhackforge.assembler import SymbolTable


def cli_warning_callback(args: CLIArguments) -> Callable[[str], None]:
    """Get callback that reports toolchain warnings into CLI."""
    return lambda message: cli_message(
        level="WARNING",
        text=message,
        verbose=args.verbose,
    )


def assembler_config_from_arguments(args: CLIArguments) -> AssemblerConfig:
    return AssemblerConfig(strict=args.strict)


def translator_config_from_arguments(args: CLIArguments) -> TranslatorConfig:
    return TranslatorConfig(
        emit_comments=args.emit_comments,
        strict=args.strict,
        temp_segment_base=args.temp_segment_base,
    )


def display_symbol_table(symbols: SymbolTable) -> None:
    """Print every symbol known after assembling, ordered by address."""
    print("[Symbol table]")
    for name, address in sorted(symbols, key=lambda item: (item[1], item[0])):
        print(f"\t{address:>5}\t{name}")
