"""Classification of VM bytecode lines into typed commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, TypeAlias

from libhackforge.architecture import ADDRESS_SPACE_SIZE
from libhackforge.vm.errors import (
    InvalidOperandArityError,
    UnknownArithmeticOperationError,
    UnknownSegmentError,
)

if TYPE_CHECKING:
    from libhackforge.location import SourceLocation


class ArithmeticOperation(Enum):
    """Arithmetic and logical operations over values on top of the stack."""

    # Binary, pops two values and pushes result
    ADD = auto()
    SUB = auto()
    AND = auto()
    OR = auto()

    # Comparison, pops two values and pushes boolean (-1 is true, 0 is false)
    EQ = auto()
    LT = auto()
    GT = auto()

    # Unary, modifies value on top in place
    NEG = auto()
    NOT = auto()


class MemorySegment(Enum):
    """Virtual memory segments addressable by push / pop."""

    ARGUMENT = auto()
    LOCAL = auto()
    STATIC = auto()
    CONSTANT = auto()
    THIS = auto()
    THAT = auto()
    POINTER = auto()
    TEMP = auto()


class UnsupportedCommandKind(Enum):
    """Program flow and function commands, recognized but not translated."""

    LABEL = auto()
    GOTO = auto()
    IF_GOTO = auto()
    FUNCTION = auto()
    CALL = auto()
    RETURN = auto()


WORD_TO_ARITHMETIC_OPERATION = {
    "add": ArithmeticOperation.ADD,
    "sub": ArithmeticOperation.SUB,
    "and": ArithmeticOperation.AND,
    "or": ArithmeticOperation.OR,
    "eq": ArithmeticOperation.EQ,
    "lt": ArithmeticOperation.LT,
    "gt": ArithmeticOperation.GT,
    "neg": ArithmeticOperation.NEG,
    "not": ArithmeticOperation.NOT,
}
WORD_TO_MEMORY_SEGMENT = {
    "argument": MemorySegment.ARGUMENT,
    "local": MemorySegment.LOCAL,
    "static": MemorySegment.STATIC,
    "constant": MemorySegment.CONSTANT,
    "this": MemorySegment.THIS,
    "that": MemorySegment.THAT,
    "pointer": MemorySegment.POINTER,
    "temp": MemorySegment.TEMP,
}
WORD_TO_UNSUPPORTED_COMMAND = {
    "label": UnsupportedCommandKind.LABEL,
    "goto": UnsupportedCommandKind.GOTO,
    "if-goto": UnsupportedCommandKind.IF_GOTO,
    "function": UnsupportedCommandKind.FUNCTION,
    "call": UnsupportedCommandKind.CALL,
    "return": UnsupportedCommandKind.RETURN,
}

PUSH_COMMAND = "push"
POP_COMMAND = "pop"

# `push segment offset` / `pop segment offset`
MEMORY_ACCESS_TOKENS_COUNT = 3
ARITHMETIC_TOKENS_COUNT = 1

# Offset must be strictly less than limit, other segments are unbounded
# Constants are loaded with an address instruction so they are limited to 15 bits
SEGMENT_OFFSET_LIMITS = {
    MemorySegment.CONSTANT: ADDRESS_SPACE_SIZE,
}


@dataclass(frozen=True, slots=True)
class ArithmeticCommand:
    operation: ArithmeticOperation


@dataclass(frozen=True, slots=True)
class PushCommand:
    segment: MemorySegment
    offset: int


@dataclass(frozen=True, slots=True)
class PopCommand:
    segment: MemorySegment
    offset: int

    def __post_init__(self) -> None:
        assert self.segment != MemorySegment.CONSTANT, "Constant is never an pop target"


@dataclass(frozen=True, slots=True)
class UnsupportedCommand:
    kind: UnsupportedCommandKind
    text: str


@dataclass(frozen=True, slots=True)
class UnrecognizedCommand:
    text: str


VMCommand: TypeAlias = (
    ArithmeticCommand
    | PushCommand
    | PopCommand
    | UnsupportedCommand
    | UnrecognizedCommand
)


def classify_vm_command(
    line: str,
    location: SourceLocation | None = None,
) -> VMCommand:
    """Classify trimmed and comment-free line into an VM command.

    Token count is validated exactly per command kind.
    :raises InvalidOperandArityError: Wrong tokens count, non-numeric offset or pop into constant
    :raises UnknownSegmentError: push / pop with unknown segment name
    """
    tokens = line.split()
    assert tokens, "Expected non-empty command line"
    command = tokens[0].lower()

    if command in (PUSH_COMMAND, POP_COMMAND):
        return _classify_memory_access_command(line, tokens, location)

    if command in WORD_TO_ARITHMETIC_OPERATION:
        operation = parse_arithmetic_operation(command, location)
        if len(tokens) != ARITHMETIC_TOKENS_COUNT:
            raise InvalidOperandArityError(
                command=line,
                reason=f"Arithmetic command '{command}' takes no operands, but got {len(tokens) - 1}",
                location=location,
            )
        return ArithmeticCommand(operation=operation)

    if kind := WORD_TO_UNSUPPORTED_COMMAND.get(command):
        return UnsupportedCommand(kind=kind, text=line)

    return UnrecognizedCommand(text=line)


def parse_memory_segment(
    word: str,
    location: SourceLocation | None = None,
) -> MemorySegment:
    """Get memory segment by its name (case-insensitive)."""
    if segment := WORD_TO_MEMORY_SEGMENT.get(word.lower()):
        return segment
    raise UnknownSegmentError(segment=word, location=location)


def parse_arithmetic_operation(
    word: str,
    location: SourceLocation | None = None,
) -> ArithmeticOperation:
    """Get arithmetic operation by its mnemonic (case-insensitive)."""
    if operation := WORD_TO_ARITHMETIC_OPERATION.get(word.lower()):
        return operation
    raise UnknownArithmeticOperationError(operation=word, location=location)


def _classify_memory_access_command(
    line: str,
    tokens: list[str],
    location: SourceLocation | None,
) -> PushCommand | PopCommand:
    command = tokens[0].lower()
    if len(tokens) != MEMORY_ACCESS_TOKENS_COUNT:
        raise InvalidOperandArityError(
            command=line,
            reason=f"Expected exactly two operands (segment and offset) for '{command}', but got {len(tokens) - 1}",
            location=location,
        )

    _, segment_name, offset_text = tokens
    segment = parse_memory_segment(segment_name, location)

    if not offset_text.isdecimal() or not offset_text.isascii():
        raise InvalidOperandArityError(
            command=line,
            reason=f"Offset must be an non-negative integer, but got '{offset_text}'",
            location=location,
        )
    offset = int(offset_text)

    limit = SEGMENT_OFFSET_LIMITS.get(segment)
    if limit is not None and offset >= limit:
        raise InvalidOperandArityError(
            command=line,
            reason=f"Offset {offset} is out of '{segment_name.lower()}' segment bounds (expected less than {limit})",
            location=location,
        )

    if command == PUSH_COMMAND:
        return PushCommand(segment=segment, offset=offset)

    if segment == MemorySegment.CONSTANT:
        raise InvalidOperandArityError(
            command=line,
            reason="Constant segment is not addressable, it cannot be an target of pop",
            location=location,
        )
    return PopCommand(segment=segment, offset=offset)
