from __future__ import annotations

import re
from typing import TYPE_CHECKING

from libhackforge.io import SourceLine, strip_comment
from libhackforge.location import describe_location
from libhackforge.vm._context import VMTranslationContext
from libhackforge.vm.assembly import (
    BINARY_COMPUTATIONS,
    COMPARISON_JUMPS,
    UNARY_OPERATORS,
    binary_operation_on_stack,
    comparison_operation_on_stack,
    halt_in_end_loop,
    is_directly_addressed,
    load_based_segment_address_into_a,
    load_constant_into_d,
    load_direct_segment_value_into_d,
    pop_stack_into_d,
    push_d_onto_stack,
    store_d_into_based_segment,
    store_d_into_direct_segment,
    unary_operation_on_stack,
)
from libhackforge.vm.commands import (
    ARITHMETIC_TOKENS_COUNT,
    ArithmeticCommand,
    ArithmeticOperation,
    MemorySegment,
    PopCommand,
    PushCommand,
    UnrecognizedCommand,
    UnsupportedCommand,
    classify_vm_command,
    parse_arithmetic_operation,
)
from libhackforge.vm.config import TranslatorConfig
from libhackforge.vm.errors import UnrecognizedCommandError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from libhackforge.location import SourceLocation

# Characters that are not allowed within assembler symbols
_INVALID_SYMBOL_CHARACTERS_REGEX = re.compile(r"[^\w.$:]", flags=re.ASCII)


class VMTranslator:
    """Translator of VM commands into symbolic assembly for one translation unit.

    Each command is translated independently into an fixed (or parametrized) sequence of instructions.
    """

    context: VMTranslationContext

    def __init__(
        self,
        file_name: str,
        config: TranslatorConfig | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.context = VMTranslationContext(
            file_name=sanitize_file_name(file_name),
            config=config or TranslatorConfig(),
            on_warning=on_warning,
        )

    def translate(self, lines: Iterable[str | SourceLine]) -> list[str]:
        """Translate whole translation unit into assembly lines."""
        output: list[str] = []
        for line in lines:
            output.extend(self.classify_and_translate(line))
        output.extend(self.finalize())
        return output

    def classify_and_translate(self, line: str | SourceLine) -> Sequence[str]:
        """Translate single VM command into assembly lines (may be none)."""
        assert not self.context.finalized, "Translator run is already finalized"
        if isinstance(line, SourceLine):
            text, location = line.text, line.location
        else:
            text, location = strip_comment(line), None
        if not text:
            return []

        command = classify_vm_command(text, location)
        self.context.comment(text)
        match command:
            case PushCommand(segment=segment, offset=offset):
                self._translate_push(segment, offset)
            case PopCommand(segment=segment, offset=offset):
                self._translate_pop(segment, offset)
            case ArithmeticCommand(operation=operation):
                self._translate_arithmetic(operation)
            case UnsupportedCommand(kind=kind):
                self.context.warning(
                    f"Skipping unsupported {kind.name.lower().replace('_', '-')} command '{text}'{describe_location(location)}",
                )
            case UnrecognizedCommand():
                self._on_unrecognized(text, location)

        return self.context.flush()

    def finalize(self) -> Sequence[str]:
        """Finish translation unit, flushing anything that is left in buffer."""
        self.context.finalized = True
        if self.context.config.emit_end_loop:
            halt_in_end_loop(self.context)
        return self.context.flush()

    def _translate_push(self, segment: MemorySegment, offset: int) -> None:
        context = self.context
        if segment == MemorySegment.CONSTANT:
            load_constant_into_d(context, offset)
        elif is_directly_addressed(segment):
            load_direct_segment_value_into_d(context, segment, offset)
        else:
            load_based_segment_address_into_a(context, segment, offset)
            context.write("D=M")
        push_d_onto_stack(context)

    def _translate_pop(self, segment: MemorySegment, offset: int) -> None:
        context = self.context
        pop_stack_into_d(context)
        if is_directly_addressed(segment):
            store_d_into_direct_segment(context, segment, offset)
        else:
            store_d_into_based_segment(context, segment, offset)

    def _translate_arithmetic(self, operation: ArithmeticOperation) -> None:
        if operation in BINARY_COMPUTATIONS:
            return binary_operation_on_stack(self.context, operation)
        if operation in UNARY_OPERATORS:
            return unary_operation_on_stack(self.context, operation)
        assert operation in COMPARISON_JUMPS, f"Unhandled arithmetic operation {operation}"
        return comparison_operation_on_stack(self.context, operation)

    def _on_unrecognized(self, text: str, location: SourceLocation | None) -> None:
        if self.context.config.strict:
            if len(text.split()) == ARITHMETIC_TOKENS_COUNT:
                # Single word may only be an arithmetic command
                parse_arithmetic_operation(text, location)
            raise UnrecognizedCommandError(command=text, location=location)
        self.context.warning(
            f"Skipping unrecognized command '{text}'{describe_location(location)}",
        )


def sanitize_file_name(file_name: str) -> str:
    """Make translation unit name usable as an namespace for assembler symbols."""
    sanitized = _INVALID_SYMBOL_CHARACTERS_REGEX.sub("_", file_name)
    if not sanitized or sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized
