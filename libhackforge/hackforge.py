"""Hackforge core entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhackforge.assembler import Assembler, AssemblerConfig
from libhackforge.io import read_source_lines, write_output_lines
from libhackforge.vm import TranslatorConfig, VMTranslator

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from libhackforge.assembler.symbol_table import SymbolTable
    from libhackforge.io import SourceLine


def assemble_lines(
    lines: Iterable[str | SourceLine],
    *,
    config: AssemblerConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> tuple[list[str], SymbolTable]:
    """Assemble lines into binary words, also giving symbol table of that run."""
    assembler = Assembler(config=config, on_warning=on_warning)
    words = assembler.assemble(lines)
    return words, assembler.symbols


def translate_lines(
    lines: Iterable[str | SourceLine],
    file_name: str,
    *,
    config: TranslatorConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> list[str]:
    """Translate VM commands of one translation unit into assembly lines."""
    translator = VMTranslator(file_name, config=config, on_warning=on_warning)
    return translator.translate(lines)


def assemble_file(
    source: Path,
    output: Path,
    *,
    config: AssemblerConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> SymbolTable:
    """Core entry for Hackforge API, assembles given `.asm` file into `.hack` file.

    Output is written only when whole source is assembled successfully.
    """
    words, symbols = assemble_lines(
        read_source_lines(source),
        config=config,
        on_warning=on_warning,
    )
    write_output_lines(output, words)
    return symbols


def translate_file(
    source: Path,
    output: Path,
    *,
    config: TranslatorConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> None:
    """Translate given `.vm` file into `.asm` file, static variables are namespaced by file stem."""
    assembly = translate_lines(
        read_source_lines(source),
        source.stem,
        config=config,
        on_warning=on_warning,
    )
    write_output_lines(output, assembly)


def build_file(
    source: Path,
    output: Path,
    *,
    translator_config: TranslatorConfig | None = None,
    assembler_config: AssemblerConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> SymbolTable:
    """Translate given `.vm` file and assemble result straight into `.hack` file.

    Each stage fully consumes its input before next one starts.
    """
    assembly = translate_lines(
        read_source_lines(source),
        source.stem,
        config=translator_config,
        on_warning=on_warning,
    )
    words, symbols = assemble_lines(
        assembly,
        config=assembler_config,
        on_warning=on_warning,
    )
    write_output_lines(output, words)
    return symbols
