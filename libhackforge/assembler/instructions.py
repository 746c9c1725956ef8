"""Classification of assembly source lines into typed instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

from libhackforge.assembler.errors import MalformedInstructionError

if TYPE_CHECKING:
    from libhackforge.location import SourceLocation


ADDRESS_INSTRUCTION_MARK = "@"
LABEL_OPEN = "("
LABEL_CLOSE = ")"

# Symbols may not start with an digit, otherwise they are treated as an literal
SYMBOL_NAME_REGEX = re.compile(r"[A-Za-z_.$:][\w.$:]*", flags=re.ASCII)
LITERAL_ADDRESS_REGEX = re.compile(r"\d+", flags=re.ASCII)

# [dest=]comp[;jump]
# Terms are registers and constants, computation is an unary/binary expression over them
COMPUTE_INSTRUCTION_REGEX = re.compile(
    r"(?:(?P<dest>[AMD]{1,3})=)?"
    r"(?P<comp>[-!]?[01AMD](?:[-+&|][01AMD])?)?"
    r"(?:;(?P<jump>[A-Z]+))?",
)


class Register(Enum):
    """Registers that can be destination of an compute instruction."""

    A = "A"
    D = "D"
    M = "M"


@dataclass(frozen=True, slots=True)
class AddressInstruction:
    """Load address (literal or symbolic) into A register (`@value`)."""

    symbol: str

    @property
    def is_literal(self) -> bool:
        return LITERAL_ADDRESS_REGEX.fullmatch(self.symbol) is not None


@dataclass(frozen=True, slots=True)
class LabelDefinition:
    """Pseudo instruction binding name to address of the next instruction (`(NAME)`)."""

    name: str


@dataclass(frozen=True, slots=True)
class ComputeInstruction:
    """`dest=comp;jump` instruction, where both dest and jump are optional."""

    destination: frozenset[Register]
    computation: str
    jump: str


@dataclass(frozen=True, slots=True)
class UnrecognizedInstruction:
    """Line that does not match any instruction grammar."""

    text: str


Instruction: TypeAlias = (
    AddressInstruction | LabelDefinition | ComputeInstruction | UnrecognizedInstruction
)


def classify_instruction(
    line: str,
    location: SourceLocation | None = None,
) -> Instruction:
    """Classify trimmed and comment-free line into an instruction.

    :raises MalformedInstructionError: Line looks like an instruction of known shape but violates its grammar.
    """
    if line.startswith(ADDRESS_INSTRUCTION_MARK):
        return _classify_address_instruction(line, location)

    if line.startswith(LABEL_OPEN):
        return _classify_label_definition(line, location)

    if match := COMPUTE_INSTRUCTION_REGEX.fullmatch(line):
        return _classify_compute_instruction(line, match, location)

    return UnrecognizedInstruction(text=line)


def _classify_address_instruction(
    line: str,
    location: SourceLocation | None,
) -> AddressInstruction:
    symbol = line.removeprefix(ADDRESS_INSTRUCTION_MARK).strip()
    if not symbol:
        raise MalformedInstructionError(
            text=line,
            reason="Address instruction requires an symbol or an literal after '@'",
            location=location,
        )

    if LITERAL_ADDRESS_REGEX.fullmatch(symbol) or SYMBOL_NAME_REGEX.fullmatch(symbol):
        return AddressInstruction(symbol=symbol)

    raise MalformedInstructionError(
        text=line,
        reason="Address must be an non-negative decimal literal or an symbol name (letters, digits, '_', '.', '$', ':' and not starting with digit)",
        location=location,
    )


def _classify_label_definition(
    line: str,
    location: SourceLocation | None,
) -> LabelDefinition:
    name = line.removeprefix(LABEL_OPEN).removesuffix(LABEL_CLOSE)
    if line.endswith(LABEL_CLOSE) and SYMBOL_NAME_REGEX.fullmatch(name):
        return LabelDefinition(name=name)

    raise MalformedInstructionError(
        text=line,
        reason="Label definition must be an symbol name enclosed in parentheses, e.g '(LOOP)'",
        location=location,
    )


def _classify_compute_instruction(
    line: str,
    match: re.Match[str],
    location: SourceLocation | None,
) -> ComputeInstruction:
    dest = match.group("dest") or ""
    comp = match.group("comp") or ""
    jump = match.group("jump") or ""

    if not comp and not jump:
        raise MalformedInstructionError(
            text=line,
            reason="Compute instruction requires an computation or an jump (or both)",
            location=location,
        )

    if len(set(dest)) != len(dest):
        raise MalformedInstructionError(
            text=line,
            reason=f"Destination '{dest}' has repeated registers",
            location=location,
        )

    return ComputeInstruction(
        destination=frozenset(Register(r) for r in dest),
        computation=comp,
        jump=jump,
    )
