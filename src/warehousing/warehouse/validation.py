"""Centralised validation rules for warehouse lifecycle operations.

Each method checks a single business rule, so every command handler composes
only the checks it needs. Rules either return quietly (or return the record
they looked up) or raise a Protean exception whose class carries the error
kind: ObjectNotFoundError, InvalidOperationError, or ValidationError.
"""

from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError

from warehousing.location import Location, LocationResolver
from warehousing.warehouse.warehouse import Warehouse


class WarehouseValidator:
    def __init__(self, repository, locations: LocationResolver) -> None:
        self.repository = repository
        self.locations = locations

    def require_unique_business_unit_code(self, business_unit_code: str) -> None:
        """Reject the code when an active warehouse already uses it."""
        existing = self.repository.find_by_business_unit_code(business_unit_code)
        if existing is not None and existing.archived_at is None:
            raise InvalidOperationError(
                {
                    "business_unit_code": [
                        f"Warehouse with business unit code '{business_unit_code}' already exists."
                    ]
                }
            )

    def require_active_warehouse(self, business_unit_code: str) -> Warehouse:
        """Return the active warehouse for the code.

        Raises ObjectNotFoundError when the code was never used, and
        InvalidOperationError when its latest record is archived.
        """
        existing = self.repository.find_by_business_unit_code(business_unit_code)
        if existing is None:
            raise ObjectNotFoundError(
                {
                    "business_unit_code": [
                        f"Warehouse with business unit code '{business_unit_code}' does not exist."
                    ]
                }
            )
        if existing.archived_at is not None:
            raise InvalidOperationError(
                {
                    "business_unit_code": [
                        f"Warehouse with business unit code '{business_unit_code}' is already archived."
                    ]
                }
            )
        return existing

    def require_valid_location(self, location_id: str) -> Location:
        location = self.locations.resolve_by_identifier(location_id)
        if location is None:
            raise ValidationError({"location": [f"Location '{location_id}' is not a valid location."]})
        return location

    def require_available_slot(self, location_id: str, location: Location) -> None:
        """Reject when the location already holds its maximum of active warehouses."""
        active_count = len(self.repository.find_active_at(location_id))
        if active_count >= location.max_number_of_warehouses:
            raise InvalidOperationError(
                {
                    "location": [
                        f"Maximum number of warehouses ({location.max_number_of_warehouses}) "
                        f"already reached for location '{location_id}'."
                    ]
                }
            )

    def validate_capacity_and_stock(self, capacity: int, stock: int | None, location: Location) -> None:
        if capacity > location.max_capacity:
            raise ValidationError(
                {
                    "capacity": [
                        f"Warehouse capacity ({capacity}) exceeds maximum capacity "
                        f"({location.max_capacity}) for location '{location.identification}'."
                    ]
                }
            )
        if stock is not None and capacity < stock:
            raise ValidationError(
                {"capacity": [f"Warehouse capacity ({capacity}) cannot handle the stock ({stock})."]}
            )

    def validate_capacity_accommodation(self, new_capacity: int, existing_stock: int) -> None:
        """The replacement must be able to hold the stock of the warehouse it replaces."""
        if new_capacity < existing_stock:
            raise ValidationError(
                {
                    "capacity": [
                        f"New warehouse capacity ({new_capacity}) cannot accommodate "
                        f"the existing warehouse's stock ({existing_stock})."
                    ]
                }
            )

    def validate_stock_matching(self, new_stock: int, existing_stock: int) -> None:
        """The replacement takes over the stock of its predecessor unchanged."""
        if new_stock != existing_stock:
            raise ValidationError(
                {
                    "stock": [
                        f"New warehouse stock ({new_stock}) must match "
                        f"the existing warehouse's stock ({existing_stock})."
                    ]
                }
            )
