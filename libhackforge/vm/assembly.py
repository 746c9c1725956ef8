"""Assembly abstraction layer that hides stack manipulation sequences into functions that generates that for you.

Stack pointer (`SP`) always holds address one past the value on top of the stack.
`D` register carries values between sequences, `R13` / `R14` are scratch registers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from libhackforge.vm.commands import ArithmeticOperation, MemorySegment

if TYPE_CHECKING:
    from ._context import VMTranslationContext

STACK_POINTER = "SP"

# Scratch registers, value being moved and its destination address
SCRATCH_VALUE_REGISTER = "R13"
SCRATCH_ADDRESS_REGISTER = "R14"

# Segments whose base address is held in an register (pointer to the segment)
SEGMENT_BASE_REGISTERS: Mapping[MemorySegment, str] = {
    MemorySegment.ARGUMENT: "ARG",
    MemorySegment.LOCAL: "LCL",
    MemorySegment.THIS: "THIS",
    MemorySegment.THAT: "THAT",
}

# Computations over second value (M) and first one (D), written as assembler accepts them (no swapped operands)
BINARY_COMPUTATIONS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.ADD: "D+M",
    ArithmeticOperation.SUB: "M-D",
    ArithmeticOperation.AND: "D&M",
    ArithmeticOperation.OR: "D|M",
}

UNARY_OPERATORS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.NEG: "-",
    ArithmeticOperation.NOT: "!",
}

COMPARISON_JUMPS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.EQ: "JEQ",
    ArithmeticOperation.LT: "JLT",
    ArithmeticOperation.GT: "JGT",
}

# Booleans on the stack
TRUE_VALUE = -1
FALSE_VALUE = 0


def segment_direct_address(
    context: VMTranslationContext,
    segment: MemorySegment,
    offset: int,
) -> str:
    """Address (literal or symbol) of an cell within segment that is known at translation time."""
    match segment:
        case MemorySegment.POINTER:
            return str(context.config.pointer_segment_base + offset)
        case MemorySegment.TEMP:
            return str(context.config.temp_segment_base + offset)
        case MemorySegment.STATIC:
            return context.static_symbol(offset)
        case _:
            msg = f"Segment {segment.name} has no address known at translation time"
            raise ValueError(msg)


def is_directly_addressed(segment: MemorySegment) -> bool:
    return segment in (MemorySegment.POINTER, MemorySegment.TEMP, MemorySegment.STATIC)


def load_constant_into_d(context: VMTranslationContext, value: int) -> None:
    """Store given non-negative constant into D register."""
    assert value >= 0, "Constants are loaded via address instruction, must be non-negative"
    context.write(f"@{value}", "D=A")


def load_direct_segment_value_into_d(
    context: VMTranslationContext,
    segment: MemorySegment,
    offset: int,
) -> None:
    context.write(
        f"@{segment_direct_address(context, segment, offset)}",
        "D=M",
    )


def load_based_segment_address_into_a(
    context: VMTranslationContext,
    segment: MemorySegment,
    offset: int,
) -> None:
    """Compute base of the segment + offset into A register (clobbers D)."""
    context.write(
        f"@{offset}",
        "D=A",
        f"@{SEGMENT_BASE_REGISTERS[segment]}",
        "A=D+M",
    )


def push_d_onto_stack(context: VMTranslationContext) -> None:
    """Store D register onto top of the stack and increment stack pointer.

    This sequence ends every push regardless of segment.
    """
    context.write(
        f"@{STACK_POINTER}",
        "A=M",
        "M=D",
        f"@{STACK_POINTER}",
        "M=M+1",
    )


def pop_stack_into_d(context: VMTranslationContext) -> None:
    """Read value on top of the stack into D register and decrement stack pointer."""
    context.write(
        f"@{STACK_POINTER}",
        "A=M-1",
        "D=M",
        f"@{STACK_POINTER}",
        "M=M-1",
    )


def point_a_to_top_of_stack(context: VMTranslationContext) -> None:
    """Set A register to the address of value on top of the stack (SP is unchanged)."""
    context.write(f"@{STACK_POINTER}", "A=M-1")


def store_d_into_direct_segment(
    context: VMTranslationContext,
    segment: MemorySegment,
    offset: int,
) -> None:
    context.write(
        f"@{segment_direct_address(context, segment, offset)}",
        "M=D",
    )


def store_d_into_based_segment(
    context: VMTranslationContext,
    segment: MemorySegment,
    offset: int,
) -> None:
    """Store D register into base of the segment + offset.

    Address computation requires D register, so value and address are spilled into scratch registers.
    """
    context.write(f"@{SCRATCH_VALUE_REGISTER}", "M=D")

    load_based_segment_address_into_a(context, segment, offset)
    context.write(
        "D=A",
        f"@{SCRATCH_ADDRESS_REGISTER}",
        "M=D",
    )

    context.write(
        f"@{SCRATCH_VALUE_REGISTER}",
        "D=M",
        f"@{SCRATCH_ADDRESS_REGISTER}",
        "A=M",
        "M=D",
    )


def binary_operation_on_stack(
    context: VMTranslationContext,
    operation: ArithmeticOperation,
) -> None:
    """Combine two values on top of the stack, result replaces the second one (stack shrinks by one)."""
    computation = BINARY_COMPUTATIONS[operation]
    pop_stack_into_d(context)
    context.write("A=M-1", f"M={computation}")


def unary_operation_on_stack(
    context: VMTranslationContext,
    operation: ArithmeticOperation,
) -> None:
    """Modify value on top of the stack in place."""
    operator = UNARY_OPERATORS[operation]
    point_a_to_top_of_stack(context)
    context.write(f"M={operator}M")


def comparison_operation_on_stack(
    context: VMTranslationContext,
    operation: ArithmeticOperation,
) -> None:
    """Compare two values on top of the stack, result (true / false) replaces the second one.

    Branches into blocks with unique labels, as same comparison may be emitted several times.
    """
    jump = COMPARISON_JUMPS[operation]

    pop_stack_into_d(context)
    context.write(f"@{SCRATCH_VALUE_REGISTER}", "M=D")

    # second - first
    point_a_to_top_of_stack(context)
    context.write(
        "D=M",
        f"@{SCRATCH_VALUE_REGISTER}",
        "D=D-M",
    )

    prefix = context.next_label_prefix()
    label_true = f"{prefix}.start"
    label_end = f"{prefix}.end"

    context.write(f"@{label_true}", f"D;{jump}")

    point_a_to_top_of_stack(context)
    context.write(
        f"M={FALSE_VALUE}",
        f"@{label_end}",
        "0;JMP",
    )

    context.label(label_true)
    point_a_to_top_of_stack(context)
    context.write(f"M={TRUE_VALUE}")

    context.label(label_end)


def halt_in_end_loop(context: VMTranslationContext) -> None:
    """Spin forever on an single jump, as platform has no halt instruction."""
    label_end = f"{context.file_name}$END"
    context.label(label_end)
    context.write(f"@{label_end}", "0;JMP")
