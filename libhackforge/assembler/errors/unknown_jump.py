from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class UnknownJumpError(HackforgeError):
    def __init__(
        self,
        jump: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.jump = jump
        self.location = location

    def __repr__(self) -> str:
        return f"""Unknown jump '{self.jump}'{describe_location(self.location)}!

Expected one of: JGT, JEQ, JGE, JLT, JNE, JLE, JMP

{self.generic_error_name}"""
