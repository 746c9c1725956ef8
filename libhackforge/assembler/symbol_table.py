from __future__ import annotations

from typing import TYPE_CHECKING

from libhackforge.architecture import (
    ADDRESS_SPACE_SIZE,
    PREDEFINED_SYMBOLS,
    VARIABLES_BASE_ADDRESS,
    VARIABLES_LIMIT_ADDRESS,
)
from libhackforge.assembler.errors import (
    AddressSpaceExhaustedError,
    DuplicateLabelError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping

    from libhackforge.location import SourceLocation


class SymbolTable:
    """Mapping from symbol name to an 15-bit address, owned by exactly one assembly run.

    Seeded with predefined platform symbols which are never overwritten.
    Labels are bound explicitly, variables are allocated on first use.
    """

    _entries: MutableMapping[str, int]

    # Next free RAM address for variable allocation
    next_variable_address: int

    def __init__(self) -> None:
        self._entries = dict(PREDEFINED_SYMBOLS)
        self.next_variable_address = VARIABLES_BASE_ADDRESS

    def add(
        self,
        name: str,
        address: int,
        *,
        location: SourceLocation | None = None,
    ) -> None:
        """Bind label to given instruction address."""
        if (bound_to := self._entries.get(name)) is not None:
            raise DuplicateLabelError(
                label=name,
                already_bound_to=bound_to,
                location=location,
            )

        if not 0 <= address < ADDRESS_SPACE_SIZE:
            raise AddressSpaceExhaustedError(
                address=address,
                limit=ADDRESS_SPACE_SIZE,
                region="instructions",
                location=location,
            )

        self._entries[name] = address

    def get_or_allocate(
        self,
        name: str,
        *,
        location: SourceLocation | None = None,
    ) -> int:
        """Get address of an symbol, allocating new variable slot if it is not known."""
        if (address := self._entries.get(name)) is not None:
            return address

        address = self.next_variable_address
        if address >= VARIABLES_LIMIT_ADDRESS:
            raise AddressSpaceExhaustedError(
                address=address,
                limit=VARIABLES_LIMIT_ADDRESS,
                region="variables",
                location=location,
            )

        self._entries[name] = address
        self.next_variable_address += 1
        return address

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __getitem__(self, name: str) -> int:
        return self._entries[name]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._entries.items())
