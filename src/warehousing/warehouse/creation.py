"""Warehouse creation — command and handler."""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from warehousing.domain import warehousing
from warehousing.location import get_location_resolver
from warehousing.warehouse.validation import WarehouseValidator
from warehousing.warehouse.warehouse import Warehouse


@warehousing.command(part_of="Warehouse")
class CreateWarehouse:
    """Create a new warehouse at a location."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer(min_value=0, default=0)
    stock = Integer(min_value=0, default=0)


@warehousing.command_handler(part_of=Warehouse)
class CreateWarehouseHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        validator = WarehouseValidator(repo, get_location_resolver())
        stock = command.stock or 0

        validator.require_unique_business_unit_code(command.business_unit_code)
        location = validator.require_valid_location(command.location)
        validator.require_available_slot(command.location, location)
        validator.validate_capacity_and_stock(command.capacity, stock, location)

        warehouse = Warehouse.create(
            business_unit_code=command.business_unit_code,
            location=command.location,
            capacity=command.capacity,
            stock=stock,
        )
        repo.create(warehouse)
        return str(warehouse.id)
