from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class InvalidOperandArityError(HackforgeError):
    def __init__(
        self,
        command: str,
        reason: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.command = command
        self.reason = reason
        self.location = location

    def __repr__(self) -> str:
        return f"""Invalid operands of command '{self.command}'{describe_location(self.location)}!

{self.reason}

{self.generic_error_name}"""
