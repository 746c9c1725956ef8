from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of an instruction / command within source file."""

    line_number: int

    filepath: Path | None = None
    source: Literal["file", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "toolchain":
            return "'(hackforge-toolchain-internals)'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}'"

    @classmethod
    def toolchain(cls, line_number: int = 0) -> SourceLocation:
        """Create a location for lines that are not originated from file (e.g tests, generated code)."""
        return cls(line_number=line_number, source="toolchain")


def describe_location(location: SourceLocation | None) -> str:
    """Human readable location suffix for error messages."""
    if location is None:
        return ""
    return f" at {location!r}"
