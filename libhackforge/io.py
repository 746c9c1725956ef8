"""Source files streaming, shared between assembler and VM translator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libhackforge.location import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Sequence
    from pathlib import Path

SINGLE_LINE_COMMENT = "//"


@dataclass(frozen=True, slots=True)
class SourceLine:
    """Trimmed, comment-free source line with its location."""

    text: str
    location: SourceLocation


def open_source_file_line_stream(filepath: Path) -> Generator[str]:
    """Stream raw lines of an source file (without line terminators)."""
    with filepath.open(
        errors="strict",
        buffering=1,
        newline="",
        encoding="UTF-8",
    ) as fd:
        for line in fd:
            yield line.rstrip("\r\n")


def strip_comment(line: str) -> str:
    """Remove trailing single line comment and surrounding whitespace."""
    if (comment_at := line.find(SINGLE_LINE_COMMENT)) != -1:
        line = line[:comment_at]
    return line.strip()


def filter_source_lines(
    iterable: Iterable[str],
    filepath: Path | None = None,
) -> Generator[SourceLine]:
    """Drop blank and comment-only lines, keeping location of each remaining one."""
    for row, line in enumerate(iterable, start=0):
        text = strip_comment(line)
        if not text:
            continue

        location = (
            SourceLocation(line_number=row, filepath=filepath)
            if filepath
            else SourceLocation.toolchain(line_number=row)
        )
        yield SourceLine(text=text, location=location)


def read_source_lines(filepath: Path) -> list[SourceLine]:
    """Read whole source file into sequence of meaningful lines."""
    return list(filter_source_lines(open_source_file_line_stream(filepath), filepath))


def write_output_lines(filepath: Path, lines: Sequence[str]) -> None:
    """Write translated lines into output file, one per line."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open(
        mode="w",
        errors="strict",
        newline="",
        encoding="UTF-8",
    ) as fd:
        for line in lines:
            fd.write(line)
            fd.write("\n")
