"""Warehouse aggregate (CQRS) — one physical storage unit at a location.

A warehouse is identified externally by its business unit code. A code can
span several records over time: at most one active record, plus any number
of archived predecessors left behind by replacements.

State Machine (2 states):
    ACTIVE → ARCHIVED
    ARCHIVED → (terminal)
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import DateTime, Integer, String

from warehousing.domain import warehousing
from warehousing.warehouse.events import (
    WarehouseArchived,
    WarehouseCreated,
    WarehouseReplaced,
)


@warehousing.aggregate
class Warehouse:
    """A physical location where stock is held, bounded by its capacity."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer(min_value=0, default=0)
    stock = Integer(min_value=0, default=0)
    created_at = DateTime()
    archived_at = DateTime()

    @invariant.post
    def stock_cannot_exceed_capacity(self):
        if self.stock is not None and self.capacity is not None and self.stock > self.capacity:
            raise ValidationError(
                {"stock": [f"Warehouse capacity ({self.capacity}) cannot handle the stock ({self.stock})."]}
            )

    @property
    def is_active(self) -> bool:
        return self.archived_at is None

    @classmethod
    def create(cls, business_unit_code, location, capacity, stock=0):
        """Create a new active warehouse, stamped with its creation time."""
        now = datetime.now(UTC)
        warehouse = cls(
            business_unit_code=business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
            created_at=now,
        )
        warehouse.raise_(
            WarehouseCreated(
                warehouse_id=str(warehouse.id),
                business_unit_code=business_unit_code,
                location=location,
                capacity=capacity,
                stock=stock,
                created_at=now,
            )
        )
        return warehouse

    @classmethod
    def succeed(cls, predecessor, location, capacity, stock):
        """Create the record that replaces `predecessor` under the same business unit code."""
        now = datetime.now(UTC)
        warehouse = cls(
            business_unit_code=predecessor.business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
            created_at=now,
        )
        warehouse.raise_(
            WarehouseReplaced(
                warehouse_id=str(warehouse.id),
                previous_warehouse_id=str(predecessor.id),
                business_unit_code=warehouse.business_unit_code,
                location=location,
                capacity=capacity,
                stock=stock,
                replaced_at=now,
            )
        )
        return warehouse

    def archive(self):
        """Archive the warehouse. Once set, `archived_at` never changes."""
        if self.archived_at is not None:
            raise InvalidOperationError(
                {
                    "business_unit_code": [
                        f"Warehouse with business unit code '{self.business_unit_code}' is already archived."
                    ]
                }
            )
        self.archived_at = datetime.now(UTC)
        self.raise_(
            WarehouseArchived(
                warehouse_id=str(self.id),
                business_unit_code=self.business_unit_code,
                location=self.location,
                archived_at=self.archived_at,
            )
        )
