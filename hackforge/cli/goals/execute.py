from __future__ import annotations

from typing import TYPE_CHECKING

from hackforge.cli.output import cli_message
from libhackforge.architecture import VIRTUAL_REGISTERS_COUNT
from libhackforge.emulator import HackCPU, words_to_rom
from libhackforge.emulator.cpu import (
    STACK_BASE_ADDRESS,
    STACK_POINTER_ADDRESS,
    to_signed,
)
from libhackforge.io import read_source_lines

if TYPE_CHECKING:
    from hackforge.cli.parser.arguments import CLIArguments


def cli_execute_binary_output(args: CLIArguments, *, is_vm_program: bool) -> None:
    """Run binary output on the emulator and display resulting state.

    VM programs get stack pointer initialized and their stack displayed,
    plain assembly programs get virtual registers displayed.
    """
    cpu = HackCPU(words_to_rom(read_source_lines(args.output_filepath)))
    if is_vm_program:
        cpu.ram[STACK_POINTER_ADDRESS] = STACK_BASE_ADDRESS

    cli_message(
        level="INFO",
        text=f"Executing `{args.output_filepath.name}` ({len(cpu.rom)} instructions)...",
        verbose=args.verbose,
    )
    cycles = cpu.run(args.execution_max_cycles)

    if not cpu.halted:
        cli_message(
            "WARNING",
            f"Program did not halt within {args.execution_max_cycles} cycles, displaying state at the moment of stop.",
        )
    cli_message(
        "INFO",
        f"Program executed {cycles} instructions!",
        verbose=args.verbose,
    )

    print("[Execution state]")
    print(f"\tA = {to_signed(cpu.a)}, D = {to_signed(cpu.d)}, PC = {cpu.pc}")
    if is_vm_program:
        print(f"\tStack: {cpu.stack()}")
        return
    for register in range(VIRTUAL_REGISTERS_COUNT):
        print(f"\tR{register} = {to_signed(cpu.ram[register])}")
