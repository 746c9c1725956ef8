from __future__ import annotations

from dataclasses import dataclass, field

from libhackforge.assembler.symbol_table import SymbolTable


@dataclass(frozen=False)
class AssemblerContext:
    """State of one assembly run which only required for internal usages.

    Never shared between runs, so repeated assembling of same source is deterministic.
    """

    symbols: SymbolTable = field(default_factory=SymbolTable)

    # Count of address / compute instructions seen so far (labels are not instructions)
    instruction_index: int = 0

    labels_resolved: bool = False
    finalized: bool = False
