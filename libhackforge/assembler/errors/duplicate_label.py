from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class DuplicateLabelError(HackforgeError):
    def __init__(
        self,
        label: str,
        already_bound_to: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.label = label
        self.already_bound_to = already_bound_to
        self.location = location

    def __repr__(self) -> str:
        return f"""Label '{self.label}' redefinition{describe_location(self.location)}!

Symbol is already bound to address {self.already_bound_to}.
Labels cannot be redefined and cannot shadow predefined symbols.

{self.generic_error_name}"""
