from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class UnknownSegmentError(HackforgeError):
    def __init__(
        self,
        segment: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.segment = segment
        self.location = location

    def __repr__(self) -> str:
        return f"""Unknown memory segment '{self.segment}'{describe_location(self.location)}!

Expected one of: argument, local, static, constant, this, that, pointer, temp

{self.generic_error_name}"""
