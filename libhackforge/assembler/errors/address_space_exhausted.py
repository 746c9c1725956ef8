from typing import Literal

from libhackforge.exceptions import HackforgeError
from libhackforge.location import SourceLocation, describe_location


class AddressSpaceExhaustedError(HackforgeError):
    def __init__(
        self,
        address: int,
        limit: int,
        region: Literal["instructions", "variables", "address"],
        location: SourceLocation | None = None,
    ) -> None:
        self.address = address
        self.limit = limit
        self.region = region
        self.location = location

    def __repr__(self) -> str:
        match self.region:
            case "instructions":
                hint = "Program has too many instructions to be addressed by labels"
            case "variables":
                hint = "Too many variables allocated, next one would overlap screen memory map"
            case "address":
                hint = "Address literal does not fit into 15 bits"
        return f"""Address space exhausted{describe_location(self.location)}!

Address {self.address} is out of available range (limit: {self.limit}).
{hint}

{self.generic_error_name}"""
