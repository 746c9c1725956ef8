"""Binary encoding of address and compute instructions into 16-bit words (as text of `0`/`1`)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from libhackforge.architecture import ADDRESS_SPACE_SIZE, ADDRESS_WIDTH
from libhackforge.assembler.errors import (
    AddressSpaceExhaustedError,
    UnknownComputationError,
    UnknownJumpError,
)
from libhackforge.assembler.instructions import Register

if TYPE_CHECKING:
    from collections.abc import Set

    from libhackforge.assembler.instructions import ComputeInstruction
    from libhackforge.location import SourceLocation

COMPUTE_INSTRUCTION_PREFIX = "111"
ADDRESS_INSTRUCTION_PREFIX = "0"

# `a` bit followed by six ALU control bits (zx, nx, zy, ny, f, no)
# Keys are exact text, operands are not normalized (`M+D` is not an `D+M`)
COMPUTATION_CODES: Mapping[str, str] = {
    "0": "0101010",
    "1": "0111111",
    "-1": "0111010",
    "D": "0001100",
    "A": "0110000",
    "M": "1110000",
    "!D": "0001101",
    "!A": "0110001",
    "!M": "1110001",
    "-D": "0001111",
    "-A": "0110011",
    "-M": "1110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "M+1": "1110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "M-1": "1110010",
    "D+A": "0000010",
    "D+M": "1000010",
    "D-A": "0010011",
    "D-M": "1010011",
    "A-D": "0000111",
    "M-D": "1000111",
    "D&A": "0000000",
    "D&M": "1000000",
    "D|A": "0010101",
    "D|M": "1010101",
}

JUMP_CODES: Mapping[str, str] = {
    "": "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}

# Order of bits within destination part
DESTINATION_BITS_ORDER = (Register.A, Register.D, Register.M)


def encode_address(
    address: int,
    location: SourceLocation | None = None,
) -> str:
    """Encode resolved address into address instruction word."""
    if not 0 <= address < ADDRESS_SPACE_SIZE:
        raise AddressSpaceExhaustedError(
            address=address,
            limit=ADDRESS_SPACE_SIZE,
            region="address",
            location=location,
        )
    return ADDRESS_INSTRUCTION_PREFIX + format(address, f"0{ADDRESS_WIDTH}b")


def encode_destination(destination: Set[Register]) -> str:
    """Encode destination registers, presence of register sets its bit."""
    return "".join("1" if r in destination else "0" for r in DESTINATION_BITS_ORDER)


def encode_computation(
    computation: str,
    location: SourceLocation | None = None,
) -> str:
    if (code := COMPUTATION_CODES.get(computation)) is None:
        raise UnknownComputationError(computation=computation, location=location)
    return code


def encode_jump(
    jump: str,
    location: SourceLocation | None = None,
) -> str:
    if (code := JUMP_CODES.get(jump)) is None:
        raise UnknownJumpError(jump=jump, location=location)
    return code


def encode_compute(
    instruction: ComputeInstruction,
    location: SourceLocation | None = None,
) -> str:
    """Encode compute instruction into `111` + comp (7) + dest (3) + jump (3)."""
    return "".join(
        (
            COMPUTE_INSTRUCTION_PREFIX,
            encode_computation(instruction.computation, location),
            encode_destination(instruction.destination),
            encode_jump(instruction.jump, location),
        ),
    )
