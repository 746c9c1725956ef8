from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class UnknownArithmeticOperationError(HackforgeError):
    def __init__(
        self,
        operation: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.operation = operation
        self.location = location

    def __repr__(self) -> str:
        return f"""Unknown arithmetic operation '{self.operation}'{describe_location(self.location)}!

Expected one of: add, sub, neg, eq, gt, lt, and, or, not

{self.generic_error_name}"""
