"""Repository for the Warehouse aggregate, keyed by business unit code."""

from warehousing.domain import warehousing
from warehousing.warehouse.warehouse import Warehouse


@warehousing.repository(part_of=Warehouse)
class WarehouseRepository:
    """Warehouse records, active and archived.

    The base repository provides `add` and `get` by record id. The methods
    below are the lookups the lifecycle rules work with. Writes go through
    `add`, so they join the unit of work of the calling command handler.
    """

    def get_all(self) -> list[Warehouse]:
        """Every warehouse record, archived ones included."""
        return self._dao.query.limit(None).all().items

    def find_by_business_unit_code(self, business_unit_code: str) -> Warehouse | None:
        """The current record for a business unit code.

        Returns the active record when there is one. Otherwise returns the
        most recently archived record, or None when the code was never used.
        """
        records = self._dao.query.filter(business_unit_code=business_unit_code).limit(None).all().items
        if not records:
            return None

        active = [w for w in records if w.archived_at is None]
        if active:
            return active[0]
        return max(records, key=lambda w: w.archived_at)

    def find_active_at(self, location: str) -> list[Warehouse]:
        """Active warehouses occupying a slot at `location`."""
        records = self._dao.query.filter(location=location).limit(None).all().items
        return [w for w in records if w.archived_at is None]

    def create(self, warehouse: Warehouse) -> None:
        self.add(warehouse)

    def update(self, warehouse: Warehouse) -> None:
        self.add(warehouse)

    def remove(self, warehouse: Warehouse) -> None:
        """Hard-delete a record. Lifecycle operations archive instead."""
        self._dao.delete(warehouse)
