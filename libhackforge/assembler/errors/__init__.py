"""Errors collections that assembler may raise (user-facing ones)."""

from .address_space_exhausted import AddressSpaceExhaustedError
from .duplicate_label import DuplicateLabelError
from .malformed_instruction import MalformedInstructionError
from .unknown_computation import UnknownComputationError
from .unknown_jump import UnknownJumpError

__all__ = [
    "AddressSpaceExhaustedError",
    "DuplicateLabelError",
    "MalformedInstructionError",
    "UnknownComputationError",
    "UnknownJumpError",
]
