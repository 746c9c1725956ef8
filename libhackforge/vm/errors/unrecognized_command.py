from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class UnrecognizedCommandError(HackforgeError):
    def __init__(
        self,
        command: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.command = command
        self.location = location

    def __repr__(self) -> str:
        return f"""Unrecognized command '{self.command}'{describe_location(self.location)}!

Command is neither push/pop, arithmetic nor known program flow / function command.
Did you mistype command name?

{self.generic_error_name}"""
