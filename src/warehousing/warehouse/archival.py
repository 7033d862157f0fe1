"""Warehouse archival — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from warehousing.domain import warehousing
from warehousing.location import get_location_resolver
from warehousing.warehouse.validation import WarehouseValidator
from warehousing.warehouse.warehouse import Warehouse


@warehousing.command(part_of="Warehouse")
class ArchiveWarehouse:
    """Archive the active warehouse behind a business unit code."""

    business_unit_code = String(required=True, max_length=50)


def archive(repo, warehouse):
    """Archive an already validated active warehouse and persist it."""
    warehouse.archive()
    repo.update(warehouse)


@warehousing.command_handler(part_of=Warehouse)
class ArchiveWarehouseHandler:
    @handle(ArchiveWarehouse)
    def archive_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        validator = WarehouseValidator(repo, get_location_resolver())

        existing = validator.require_active_warehouse(command.business_unit_code)
        archive(repo, existing)
