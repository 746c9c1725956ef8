import pytest

from libhackforge.assembler.encoding import (
    COMPUTATION_CODES,
    JUMP_CODES,
    encode_address,
    encode_compute,
)
from libhackforge.assembler.errors import (
    AddressSpaceExhaustedError,
    UnknownComputationError,
    UnknownJumpError,
)
from libhackforge.assembler.instructions import ComputeInstruction, classify_instruction


def _encode(line: str) -> str:
    instruction = classify_instruction(line)
    assert isinstance(instruction, ComputeInstruction)
    return encode_compute(instruction)


def test_encode_address() -> None:
    assert encode_address(0) == "0000000000000000"
    assert encode_address(2) == "0000000000000010"
    assert encode_address(16384) == "0100000000000000"
    assert encode_address(32767) == "0111111111111111"


@pytest.mark.parametrize("address", [-1, 32768, 65535])
def test_encode_address_out_of_range(address: int) -> None:
    with pytest.raises(AddressSpaceExhaustedError):
        encode_address(address)


@pytest.mark.parametrize(
    ("line", "word"),
    [
        ("0;JMP", "1110101010000111"),
        ("D=M", "1111110000010000"),
        ("D=A", "1110110000010000"),
        ("M=D", "1110001100001000"),
        ("D=D+A", "1110000010010000"),
        ("M=D+M", "1111000010001000"),
        ("MD=M-1", "1111110010011000"),
        ("M=!M", "1111110001001000"),
        ("A=M", "1111110000100000"),
        ("M=-1", "1110111010001000"),
        ("D=-A", "1110110011010000"),
        ("D=-M", "1111110011010000"),
        ("AM=M+1", "1111110111101000"),
        ("D;JGT", "1110001100000001"),
        ("AMD=D|A;JNE", "1110010101111101"),
    ],
)
def test_encode_compute_instruction(line: str, word: str) -> None:
    assert _encode(line) == word


def test_encode_compute_instruction_tables() -> None:
    assert len(COMPUTATION_CODES) == 28
    assert len(JUMP_CODES) == 8
    assert all(len(code) == 7 for code in COMPUTATION_CODES.values())

    # Same ALU control bits for A and M based computations, only `a` bit differs
    for computation, code in COMPUTATION_CODES.items():
        if "M" in computation:
            assert code[0] == "1"
            assert COMPUTATION_CODES[computation.replace("M", "A")] == "0" + code[1:]


def test_encode_compute_instruction_every_jump() -> None:
    for jump, code in JUMP_CODES.items():
        line = f"D;{jump}" if jump else "D"
        assert _encode(line) == "1110001100000" + code


def test_encode_compute_instruction_unknown_computation() -> None:
    with pytest.raises(UnknownComputationError):
        _encode("D=M+D")
    with pytest.raises(UnknownComputationError):
        _encode(";JMP")


def test_encode_compute_instruction_unknown_jump() -> None:
    with pytest.raises(UnknownJumpError):
        _encode("0;JXX")
