"""Warehouse replacement — command and handler.

Replacing a warehouse archives the active record behind a business unit code
and creates its successor under the same code. Both writes happen in the
unit of work Protean opens around the handler, so they commit together.
"""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from warehousing.domain import warehousing
from warehousing.location import get_location_resolver
from warehousing.warehouse.archival import archive
from warehousing.warehouse.validation import WarehouseValidator
from warehousing.warehouse.warehouse import Warehouse


@warehousing.command(part_of="Warehouse")
class ReplaceWarehouse:
    """Replace the active warehouse behind a business unit code."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer(min_value=0, default=0)
    stock = Integer(min_value=0, default=0)


@warehousing.command_handler(part_of=Warehouse)
class ReplaceWarehouseHandler:
    @handle(ReplaceWarehouse)
    def replace_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        validator = WarehouseValidator(repo, get_location_resolver())
        stock = command.stock or 0

        existing = validator.require_active_warehouse(command.business_unit_code)
        location = validator.require_valid_location(command.location)

        # Replacement rules before the general capacity check
        validator.validate_capacity_accommodation(command.capacity, existing.stock)
        validator.validate_stock_matching(stock, existing.stock)
        validator.validate_capacity_and_stock(command.capacity, stock, location)

        # The predecessor only frees a slot at its own location
        if command.location != existing.location:
            validator.require_available_slot(command.location, location)

        successor = Warehouse.succeed(
            existing,
            location=command.location,
            capacity=command.capacity,
            stock=stock,
        )
        archive(repo, existing)
        repo.create(successor)
        return str(successor.id)
