"""Hackforge toolchain CLI.

Provides command-line interface over `libhackforge` (assembler, VM translator, emulator).
"""
