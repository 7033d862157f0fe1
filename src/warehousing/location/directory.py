"""Static location directory — the fulfilment network as a read-only table.

Used in every environment until locations are served by their own system.
Tests can pass their own locations to build an isolated directory.
"""

from warehousing.location.port import Location, LocationResolver

DEFAULT_LOCATIONS = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class StaticLocationDirectory(LocationResolver):
    """In-memory location directory keyed by identification."""

    def __init__(self, locations=DEFAULT_LOCATIONS) -> None:
        self._locations: dict[str, Location] = {loc.identification: loc for loc in locations}

    def resolve_by_identifier(self, identifier: str) -> Location | None:
        if identifier is None:
            return None
        return self._locations.get(identifier)

    def all(self) -> list[Location]:
        return list(self._locations.values())
