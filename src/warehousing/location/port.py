"""Location directory port (abstract interface).

Locations are owned outside the warehousing context. The core only reads
them, so the contract is a lookup by identifier.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A physical site and the limits it imposes on its warehouses."""

    identification: str
    max_number_of_warehouses: int
    max_capacity: int


class LocationResolver(ABC):
    """Abstract location directory interface."""

    @abstractmethod
    def resolve_by_identifier(self, identifier: str) -> Location | None:
        """Return the location registered under `identifier`, or None."""
        ...

    @abstractmethod
    def all(self) -> list[Location]:
        """Return every known location."""
        ...
