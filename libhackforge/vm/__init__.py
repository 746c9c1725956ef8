"""VM translator package that lowers stack machine bytecode into symbolic assembly.

Only arithmetic / logical commands and push / pop over memory segments are translated,
program flow and function commands are recognized but skipped.
Output is an assembly text accepted by `libhackforge.assembler`.
"""

from .codegen import VMTranslator
from .commands import (
    ArithmeticOperation,
    MemorySegment,
    classify_vm_command,
)
from .config import TranslatorConfig

__all__ = [
    "ArithmeticOperation",
    "MemorySegment",
    "TranslatorConfig",
    "VMTranslator",
    "classify_vm_command",
]
