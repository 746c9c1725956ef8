from __future__ import annotations

from typing import TYPE_CHECKING

from libhackforge.architecture import ADDRESS_SPACE_SIZE
from libhackforge.assembler._context import AssemblerContext
from libhackforge.assembler.config import AssemblerConfig
from libhackforge.assembler.encoding import encode_address, encode_compute
from libhackforge.assembler.errors import (
    AddressSpaceExhaustedError,
    MalformedInstructionError,
)
from libhackforge.assembler.instructions import (
    AddressInstruction,
    ComputeInstruction,
    LabelDefinition,
    UnrecognizedInstruction,
    classify_instruction,
)
from libhackforge.io import SourceLine, strip_comment
from libhackforge.location import describe_location

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from libhackforge.assembler.symbol_table import SymbolTable
    from libhackforge.location import SourceLocation


class Assembler:
    """Two-pass assembler translating symbolic assembly into 16-bit binary words.

    First pass (`resolve_labels`) binds every label to its instruction address,
    second pass (`classify_and_translate` per line) encodes instructions
    and allocates variables for symbols that are still unknown.
    Label bindings always take precedence over variable allocation.
    """

    config: AssemblerConfig
    context: AssemblerContext

    def __init__(
        self,
        config: AssemblerConfig | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config or AssemblerConfig()
        self.context = AssemblerContext()
        self.on_warning = on_warning

    @property
    def symbols(self) -> SymbolTable:
        return self.context.symbols

    def assemble(self, lines: Iterable[str | SourceLine]) -> list[str]:
        """Assemble whole source into words, in source order."""
        lines = list(lines)
        self.resolve_labels(lines)

        words: list[str] = []
        for line in lines:
            words.extend(self.classify_and_translate(line))

        words.extend(self.finalize())
        return words

    def resolve_labels(self, lines: Iterable[str | SourceLine]) -> None:
        """Perform first pass: bind labels to count of instructions preceding them."""
        assert not self.context.labels_resolved, "Labels are already resolved"
        context = self.context

        for line in lines:
            text, location = _unpack_line(line)
            if not text:
                continue
            match classify_instruction(text, location):
                case LabelDefinition(name=name):
                    context.symbols.add(
                        name,
                        context.instruction_index,
                        location=location,
                    )
                case AddressInstruction() | ComputeInstruction():
                    context.instruction_index += 1
                    if context.instruction_index > ADDRESS_SPACE_SIZE:
                        raise AddressSpaceExhaustedError(
                            address=context.instruction_index - 1,
                            limit=ADDRESS_SPACE_SIZE,
                            region="instructions",
                            location=location,
                        )
                case UnrecognizedInstruction():
                    pass

        context.labels_resolved = True

    def classify_and_translate(self, line: str | SourceLine) -> Sequence[str]:
        """Perform second pass over single line, returning words it is assembled into (none or one)."""
        assert self.context.labels_resolved, (
            "Labels must be resolved before translation, otherwise variables may shadow forward labels"
        )
        assert not self.context.finalized, "Assembler run is already finalized"
        text, location = _unpack_line(line)
        if not text:
            return []

        match classify_instruction(text, location):
            case AddressInstruction() as instruction:
                return [self._translate_address(instruction, location)]
            case ComputeInstruction() as instruction:
                return [encode_compute(instruction, location)]
            case LabelDefinition():
                return []
            case UnrecognizedInstruction():
                self._on_unrecognized(text, location)
                return []

    def finalize(self) -> Sequence[str]:
        """Finish run, assembler holds no buffered output so nothing is flushed."""
        self.context.finalized = True
        return []

    def _translate_address(
        self,
        instruction: AddressInstruction,
        location: SourceLocation | None,
    ) -> str:
        if instruction.is_literal:
            address = int(instruction.symbol)
        else:
            address = self.context.symbols.get_or_allocate(
                instruction.symbol,
                location=location,
            )
        return encode_address(address, location)

    def _on_unrecognized(self, text: str, location: SourceLocation | None) -> None:
        if self.config.strict:
            raise MalformedInstructionError(
                text=text,
                reason="Line does not match any instruction grammar (address, label or compute instruction)",
                location=location,
            )
        if self.on_warning:
            self.on_warning(
                f"Skipping unrecognized line '{text}'{describe_location(location)}",
            )


def _unpack_line(line: str | SourceLine) -> tuple[str, SourceLocation | None]:
    if isinstance(line, SourceLine):
        return line.text, line.location
    return strip_comment(line), None
