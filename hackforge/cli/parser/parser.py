from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

from hackforge.cli.infer import (
    ASSEMBLY_SUFFIX,
    BYTECODE_SUFFIX,
    infer_output_filename,
    infer_output_format,
)
from hackforge.cli.output import cli_fatal_abort
from hackforge.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    source_filepaths = _process_source_filepaths(args)
    output_format = _process_output_format(source_filepaths, args)
    output = _process_output_path(source_filepaths, args, output_format)
    temp_segment_base = _process_temp_segment_base(args)

    if args.execute_after_compilation and output_format != "hack":
        return cli_fatal_abort(
            "Execution requires binary output, remove `--output-format asm` or `--execute` flag.",
        )

    return CLIArguments(
        source_filepaths=source_filepaths,
        output_filepath=output,
        output_format=output_format,
        version=bool(args.version),
        verbose=bool(args.verbose),
        display_symbols=bool(args.display_symbols),
        strict=bool(args.strict),
        emit_comments=bool(args.emit_comments),
        temp_segment_base=temp_segment_base,
        execute_after_compilation=bool(args.execute_after_compilation),
        execution_max_cycles=int(args.execution_max_cycles),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths and validate it."""
    paths = [Path(f) for f in args.source_files]
    if args.version:
        return paths

    if len(paths) == 0:
        return cli_fatal_abort("Expected source file to process!")

    if len(paths) > 1:
        return cli_fatal_abort("Processing several files at once is not supported.")

    if any(p.suffix not in (ASSEMBLY_SUFFIX, BYTECODE_SUFFIX) for p in paths):
        return cli_fatal_abort(
            f"Unknown source file type, expected `{ASSEMBLY_SUFFIX}` (assembly) or `{BYTECODE_SUFFIX}` (VM bytecode).",
        )

    if any(not p.exists() for p in paths):
        return cli_fatal_abort(
            text="Input source file does not exist, aborting as safe mechanism.",
        )

    return paths


def _process_output_format(
    source_filepaths: list[Path],
    args: Namespace,
) -> Literal["hack", "asm"]:
    """Validate and process output format as type safe value."""
    assert args.output_format in ("hack", "asm", None)
    requested = cast('Literal["hack", "asm"] | None', args.output_format)
    if not source_filepaths:
        return requested or "hack"

    output_format = infer_output_format(source_filepaths[0], requested=requested)
    if output_format is None:
        return cli_fatal_abort(
            "Assembly source can only be assembled into `hack` output format.",
        )
    return output_format


def _process_output_path(
    source_filepaths: list[Path],
    args: Namespace,
    output_format: Literal["hack", "asm"],
) -> Path:
    inferred_output_path = (
        Path(args.output)
        if args.output
        else infer_output_filename(source_filepaths, output_format=output_format)
    )
    if inferred_output_path in source_filepaths:
        return cli_fatal_abort(
            "Inferred/specified output file path will rewrite existing input file, please specify another output path.",
        )
    return inferred_output_path


def _process_temp_segment_base(args: Namespace) -> int:
    temp_segment_base = int(args.temp_segment_base)
    if temp_segment_base < 0:
        return cli_fatal_abort("Temp segment base must be an non-negative address.")
    return temp_segment_base
