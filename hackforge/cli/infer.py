from pathlib import Path
from typing import Literal

ASSEMBLY_SUFFIX = ".asm"
BYTECODE_SUFFIX = ".vm"
BINARY_SUFFIX = ".hack"

OUTPUT_FORMAT_SUFFIXES = {
    "hack": BINARY_SUFFIX,
    "asm": ASSEMBLY_SUFFIX,
}


def infer_output_format(
    source_filepath: Path,
    requested: Literal["hack", "asm"] | None,
) -> Literal["hack", "asm"] | None:
    """Infer output format from source file type, `None` means requested format is not reachable from that source."""
    if source_filepath.suffix == ASSEMBLY_SUFFIX:
        return None if requested == "asm" else "hack"
    return requested or "asm"


def infer_output_filename(
    source_filepaths: list[Path],
    output_format: Literal["hack", "asm"],
) -> Path:
    """Try to infer filename for output from input source files."""
    suffix = OUTPUT_FORMAT_SUFFIXES[output_format]

    if not source_filepaths:
        return Path("out").with_suffix(suffix)

    source_filepath = source_filepaths[0]

    if source_filepath.suffix == suffix:
        suffix = source_filepath.suffix + suffix
    return source_filepath.with_suffix(suffix)
