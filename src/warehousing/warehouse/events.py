"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from warehousing.domain import warehousing


@warehousing.event(part_of="Warehouse")
class WarehouseCreated:
    """A new warehouse was created."""

    __version__ = "v1"

    warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    location = String(required=True)
    capacity = Integer(default=0)
    stock = Integer(default=0)
    created_at = DateTime(required=True)


@warehousing.event(part_of="Warehouse")
class WarehouseArchived:
    """A warehouse was archived. Archival is terminal."""

    __version__ = "v1"

    warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    location = String(required=True)
    archived_at = DateTime(required=True)


@warehousing.event(part_of="Warehouse")
class WarehouseReplaced:
    """A warehouse superseded the archived record with the same business unit code."""

    __version__ = "v1"

    warehouse_id = Identifier(required=True)
    previous_warehouse_id = Identifier(required=True)
    business_unit_code = String(required=True)
    location = String(required=True)
    capacity = Integer(default=0)
    stock = Integer(default=0)
    replaced_at = DateTime(required=True)
