"""Constants of the target 16-bit platform (Hack) shared by all toolchain stages."""

from collections.abc import Mapping

WORD_WIDTH = 16
ADDRESS_WIDTH = 15

# Both instruction memory (ROM) and data memory (RAM) are addressed with 15 bits
ADDRESS_SPACE_SIZE = 1 << ADDRESS_WIDTH

# Memory maps of I/O devices
SCREEN_ADDRESS = 16384
KEYBOARD_ADDRESS = 24576

# Variables are allocated right after virtual registers up to the screen memory map
VARIABLES_BASE_ADDRESS = 16
VARIABLES_LIMIT_ADDRESS = SCREEN_ADDRESS

VIRTUAL_REGISTERS_COUNT = 16

PREDEFINED_SYMBOLS: Mapping[str, int] = {
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": SCREEN_ADDRESS,
    "KBD": KEYBOARD_ADDRESS,
    **{f"R{i}": i for i in range(VIRTUAL_REGISTERS_COUNT)},
}
