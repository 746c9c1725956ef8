"""Errors collections that VM translator may raise (user-facing ones)."""

from .invalid_operand_arity import InvalidOperandArityError
from .unknown_arithmetic_operation import UnknownArithmeticOperationError
from .unknown_segment import UnknownSegmentError
from .unrecognized_command import UnrecognizedCommandError

__all__ = [
    "InvalidOperandArityError",
    "UnknownArithmeticOperationError",
    "UnknownSegmentError",
    "UnrecognizedCommandError",
]
