from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class UnknownComputationError(HackforgeError):
    def __init__(
        self,
        computation: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.computation = computation
        self.location = location

    def __repr__(self) -> str:
        if not self.computation:
            return f"""Missing computation{describe_location(self.location)}!

Compute instruction must have an computation part to be encoded (e.g '0;JMP' instead of ';JMP')

{self.generic_error_name}"""
        return f"""Unknown computation '{self.computation}'{describe_location(self.location)}!

Computation must be written exactly as in the instruction set table.
Swapped operands (e.g 'M+D' instead of 'D+M') are not supported!

{self.generic_error_name}"""
