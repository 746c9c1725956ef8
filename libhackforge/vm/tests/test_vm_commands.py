import pytest

from libhackforge.vm.commands import (
    ArithmeticCommand,
    ArithmeticOperation,
    MemorySegment,
    PopCommand,
    PushCommand,
    UnrecognizedCommand,
    UnsupportedCommand,
    UnsupportedCommandKind,
    classify_vm_command,
    parse_arithmetic_operation,
    parse_memory_segment,
)
from libhackforge.vm.errors import (
    InvalidOperandArityError,
    UnknownArithmeticOperationError,
    UnknownSegmentError,
)


def test_classify_memory_access_commands() -> None:
    assert classify_vm_command("push constant 7") == PushCommand(
        segment=MemorySegment.CONSTANT,
        offset=7,
    )
    assert classify_vm_command("pop local 2") == PopCommand(
        segment=MemorySegment.LOCAL,
        offset=2,
    )
    assert classify_vm_command("PUSH Argument  1") == PushCommand(
        segment=MemorySegment.ARGUMENT,
        offset=1,
    )


def test_classify_arithmetic_commands() -> None:
    for word, operation in (
        ("add", ArithmeticOperation.ADD),
        ("sub", ArithmeticOperation.SUB),
        ("neg", ArithmeticOperation.NEG),
        ("eq", ArithmeticOperation.EQ),
        ("gt", ArithmeticOperation.GT),
        ("lt", ArithmeticOperation.LT),
        ("and", ArithmeticOperation.AND),
        ("or", ArithmeticOperation.OR),
        ("not", ArithmeticOperation.NOT),
    ):
        assert classify_vm_command(word) == ArithmeticCommand(operation=operation)
        assert classify_vm_command(word.upper()) == ArithmeticCommand(
            operation=operation,
        )


def test_classify_unsupported_and_unrecognized_commands() -> None:
    assert classify_vm_command("if-goto LOOP") == UnsupportedCommand(
        kind=UnsupportedCommandKind.IF_GOTO,
        text="if-goto LOOP",
    )
    assert classify_vm_command("call Main.main 0") == UnsupportedCommand(
        kind=UnsupportedCommandKind.CALL,
        text="call Main.main 0",
    )
    assert classify_vm_command("frobnicate 1") == UnrecognizedCommand(
        text="frobnicate 1",
    )


@pytest.mark.parametrize(
    "line",
    [
        "push constant",
        "push",
        "pop local 1 2",
        "add 1",
        "push constant x",
        "push constant -1",
        "push constant 32768",
        "pop constant 1",
    ],
)
def test_classify_invalid_operands(line: str) -> None:
    with pytest.raises(InvalidOperandArityError):
        classify_vm_command(line)


def test_classify_unknown_segment() -> None:
    with pytest.raises(UnknownSegmentError) as error:
        classify_vm_command("push heap 1")
    assert error.value.segment == "heap"


def test_classify_segment_bounds() -> None:
    assert classify_vm_command("push constant 32767") == PushCommand(
        segment=MemorySegment.CONSTANT,
        offset=32767,
    )
    # Pointer and temp are addressed directly past their base, any offset is accepted
    assert classify_vm_command("push temp 8") == PushCommand(
        segment=MemorySegment.TEMP,
        offset=8,
    )
    assert classify_vm_command("pop pointer 2") == PopCommand(
        segment=MemorySegment.POINTER,
        offset=2,
    )
    # Unbounded segments accept any offset
    assert classify_vm_command("push local 1000") == PushCommand(
        segment=MemorySegment.LOCAL,
        offset=1000,
    )


def test_parse_words() -> None:
    assert parse_memory_segment("THAT") == MemorySegment.THAT
    assert parse_arithmetic_operation("Not") == ArithmeticOperation.NOT
    with pytest.raises(UnknownSegmentError):
        parse_memory_segment("heap")
    with pytest.raises(UnknownArithmeticOperationError):
        parse_arithmetic_operation("xor")
