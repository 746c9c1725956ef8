"""Hackforge toolchain core.

Provides assembler and VM translator for the 16-bit Hack platform.
"""

from .hackforge import (
    assemble_file,
    assemble_lines,
    build_file,
    translate_file,
    translate_lines,
)

__all__ = [
    "assemble_file",
    "assemble_lines",
    "build_file",
    "translate_file",
    "translate_lines",
]
