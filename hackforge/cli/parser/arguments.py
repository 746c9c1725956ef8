from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Hackforge toolchain process."""

    source_filepaths: list[Path]
    output_filepath: Path
    output_format: Literal["hack", "asm"]

    version: bool

    verbose: bool
    display_symbols: bool

    strict: bool
    emit_comments: bool
    temp_segment_base: int

    execute_after_compilation: bool
    execution_max_cycles: int

    cli_debug_user_friendly_errors: bool
