from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class MalformedInstructionError(HackforgeError):
    def __init__(
        self,
        text: str,
        reason: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.text = text
        self.reason = reason
        self.location = location

    def __repr__(self) -> str:
        return f"""Malformed instruction '{self.text}'{describe_location(self.location)}!

{self.reason}

{self.generic_error_name}"""
