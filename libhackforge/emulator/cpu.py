from __future__ import annotations

import re
from typing import TYPE_CHECKING

from libhackforge.architecture import ADDRESS_SPACE_SIZE, WORD_WIDTH
from libhackforge.emulator.errors import InvalidMachineWordError
from libhackforge.io import SourceLine, strip_comment

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, MutableSequence, Sequence

WORD_MASK = (1 << WORD_WIDTH) - 1
ADDRESS_MASK = ADDRESS_SPACE_SIZE - 1
SIGN_BIT = 1 << (WORD_WIDTH - 1)

STACK_POINTER_ADDRESS = 0
STACK_BASE_ADDRESS = 256

_MACHINE_WORD_REGEX = re.compile(r"[01]{16}")


def to_signed(value: int) -> int:
    """Interpret 16-bit word as two's complement integer."""
    value &= WORD_MASK
    return value - (1 << WORD_WIDTH) if value & SIGN_BIT else value


def to_word(value: int) -> int:
    return value & WORD_MASK


def words_to_rom(lines: Iterable[str | SourceLine]) -> list[int]:
    """Parse binary words (text of `0`/`1`, one per line) into instruction memory."""
    rom: list[int] = []
    for line in lines:
        if isinstance(line, SourceLine):
            word, location = line.text, line.location
        else:
            word, location = strip_comment(line), None
            if not word:
                continue
        if not _MACHINE_WORD_REGEX.fullmatch(word):
            raise InvalidMachineWordError(word=word, location=location)
        rom.append(int(word, 2))
    return rom


class HackCPU:
    """CPU of the platform with its instruction (ROM) and data (RAM) memory.

    Execution halts when program counter leaves the instruction memory.
    """

    rom: Sequence[int]
    ram: MutableSequence[int]

    a: int
    d: int
    pc: int

    def __init__(self, rom: Sequence[int]) -> None:
        assert len(rom) <= ADDRESS_SPACE_SIZE, "Program does not fit into instruction memory"
        self.rom = rom
        self.ram = [0] * ADDRESS_SPACE_SIZE
        self.a = 0
        self.d = 0
        self.pc = 0

    @property
    def halted(self) -> bool:
        return self.pc >= len(self.rom)

    def step(self) -> None:
        """Execute single instruction under program counter."""
        assert not self.halted, "Cannot step halted CPU"
        instruction = self.rom[self.pc]

        if not instruction & SIGN_BIT:
            # Address instruction
            self.a = instruction
            self.pc += 1
            return

        use_memory = bool(instruction & (1 << 12))
        control = (instruction >> 6) & 0b111111
        destination = (instruction >> 3) & 0b111
        jump = instruction & 0b111

        y = self.ram[self.a & ADDRESS_MASK] if use_memory else self.a
        out = _alu(self.d, y, control)

        # Memory write and jump both use A register value before its update
        address = self.a
        if destination & 0b001:
            self.ram[address & ADDRESS_MASK] = out
        if destination & 0b010:
            self.d = out
        if destination & 0b100:
            self.a = out

        if _is_jump_taken(out, jump):
            self.pc = address & ADDRESS_MASK
        else:
            self.pc += 1

    def run(
        self,
        max_cycles: int,
        until: Callable[[HackCPU], bool] | None = None,
    ) -> int:
        """Run until halted, given predicate is satisfied or cycles limit is reached.

        :returns cycles: Count of executed instructions
        """
        cycles = 0
        while cycles < max_cycles and not self.halted:
            if until and until(self):
                break
            self.step()
            cycles += 1
        return cycles

    def stack(self) -> list[int]:
        """Values on the VM stack (as signed integers), bottom first."""
        stack_pointer = self.ram[STACK_POINTER_ADDRESS]
        return [to_signed(v) for v in self.ram[STACK_BASE_ADDRESS:stack_pointer]]


def _alu(x: int, y: int, control: int) -> int:
    zx, nx, zy, ny, f, no = ((control >> shift) & 1 for shift in range(5, -1, -1))
    if zx:
        x = 0
    if nx:
        x = ~x
    if zy:
        y = 0
    if ny:
        y = ~y
    out = x + y if f else x & y
    if no:
        out = ~out
    return to_word(out)


def _is_jump_taken(out: int, jump: int) -> bool:
    value = to_signed(out)
    return bool(
        (jump & 0b100 and value < 0)
        or (jump & 0b010 and value == 0)
        or (jump & 0b001 and value > 0),
    )
