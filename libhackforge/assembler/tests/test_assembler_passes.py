import pytest

from libhackforge.assembler import Assembler, AssemblerConfig
from libhackforge.assembler.errors import (
    DuplicateLabelError,
    MalformedInstructionError,
    UnknownComputationError,
)
from libhackforge.io import filter_source_lines

ADD_PROGRAM = [
    "// Computes R0 = 2 + 3",
    "",
    "@2",
    "D=A",
    "@3",
    "D=D+A  // sum",
    "@0",
    "M=D",
]
ADD_PROGRAM_WORDS = [
    "0000000000000010",
    "1110110000010000",
    "0000000000000011",
    "1110000010010000",
    "0000000000000000",
    "1110001100001000",
]


def test_assembler_add_program() -> None:
    assert Assembler().assemble(ADD_PROGRAM) == ADD_PROGRAM_WORDS


def test_assembler_accepts_source_lines() -> None:
    lines = list(filter_source_lines(ADD_PROGRAM))
    assert Assembler().assemble(lines) == ADD_PROGRAM_WORDS


def test_assembler_is_deterministic() -> None:
    program = ["@i", "M=1", "(LOOP)", "@j", "@LOOP", "0;JMP"]
    assert Assembler().assemble(program) == Assembler().assemble(program)


def test_assembler_labels_are_not_instructions() -> None:
    assembler = Assembler()
    words = assembler.assemble(["(START)", "(LOOP)", "@LOOP", "0;JMP", "(END)"])
    assert words == ["0000000000000000", "1110101010000111"]
    assert assembler.symbols["START"] == 0
    assert assembler.symbols["LOOP"] == 0
    assert assembler.symbols["END"] == 2


def test_assembler_forward_reference() -> None:
    assembler = Assembler()
    words = assembler.assemble(["@END", "0;JMP", "(END)", "@i"])
    assert words == [
        "0000000000000010",
        "1110101010000111",
        "0000000000010000",
    ]
    # Label used before definition must not be allocated as variable
    assert assembler.symbols["END"] == 2
    assert assembler.symbols["i"] == 16


def test_assembler_allocates_variables_in_order() -> None:
    assembler = Assembler()
    words = assembler.assemble(["@i", "@j", "@i", "@R2", "@SCREEN"])
    assert words == [
        "0000000000010000",
        "0000000000010001",
        "0000000000010000",
        "0000000000000010",
        "0100000000000000",
    ]


def test_assembler_duplicate_label() -> None:
    with pytest.raises(DuplicateLabelError):
        Assembler().assemble(["(X)", "@0", "(X)"])
    with pytest.raises(DuplicateLabelError):
        Assembler().assemble(["(SP)"])


def test_assembler_unknown_computation() -> None:
    with pytest.raises(UnknownComputationError):
        Assembler().assemble(["M=M+D"])


def test_assembler_skips_unrecognized_with_warning() -> None:
    warnings: list[str] = []
    assembler = Assembler(on_warning=warnings.append)
    assert assembler.assemble(["@1", "nop", "D=A"]) == [
        "0000000000000001",
        "1110110000010000",
    ]
    assert len(warnings) == 1
    assert "nop" in warnings[0]


def test_assembler_strict_unrecognized() -> None:
    assembler = Assembler(config=AssemblerConfig(strict=True))
    with pytest.raises(MalformedInstructionError):
        assembler.assemble(["@1", "nop"])


def test_assembler_requires_resolved_labels() -> None:
    assembler = Assembler()
    with pytest.raises(AssertionError):
        assembler.classify_and_translate("@1")


def test_assembler_per_line_workflow() -> None:
    assembler = Assembler()
    lines = ["@LOOP", "(LOOP)", "0;JMP"]
    assembler.resolve_labels(lines)
    assert assembler.classify_and_translate(lines[0]) == ["0000000000000001"]
    assert assembler.classify_and_translate(lines[1]) == []
    assert assembler.classify_and_translate("") == []
    assert assembler.classify_and_translate(lines[2]) == ["1110101010000111"]
    assert assembler.finalize() == []
    with pytest.raises(AssertionError):
        assembler.classify_and_translate(lines[2])
