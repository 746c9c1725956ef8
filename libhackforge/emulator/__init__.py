"""Minimal emulator of the platform CPU, executes binary words emitted by the assembler."""

from .cpu import HackCPU, words_to_rom

__all__ = ["HackCPU", "words_to_rom"]
