from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class InvalidMachineWordError(HackforgeError):
    def __init__(
        self,
        word: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.word = word
        self.location = location

    def __repr__(self) -> str:
        return f"""Invalid machine word '{self.word}'{describe_location(self.location)}!

Expected exactly 16 characters of '0' / '1'.

{self.generic_error_name}"""
