"""Assembler package that translates symbolic assembly text into binary machine words.

Workflow is two-pass over the same sequence of source lines:
- First pass binds labels to addresses of instructions (labels are not instructions themselves)
- Second pass classifies and encodes each instruction, allocating RAM for variables on first use

Assembly text may be written by hand or emitted by the VM translator (`libhackforge.vm`)
In matchup: VM bytecode -> VM translator (Assembly text) -> Assembler (Binary words)
"""

from .assembler import Assembler
from .config import AssemblerConfig
from .symbol_table import SymbolTable

__all__ = ["Assembler", "AssemblerConfig", "SymbolTable"]
