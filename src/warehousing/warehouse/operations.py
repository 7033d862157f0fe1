"""Warehouse lifecycle operations — the entry points callers use.

Each operation processes its command synchronously, so the caller gets the
result (or the domain error) straight away. Logging and auditing are
composed around each call explicitly: `logged` outermost, so its timing
covers the audit write too.
"""

from protean.utils.globals import current_domain

from warehousing.audit import AuditAction, audited
from warehousing.utils.logging import logged
from warehousing.warehouse.archival import ArchiveWarehouse
from warehousing.warehouse.creation import CreateWarehouse
from warehousing.warehouse.replacement import ReplaceWarehouse


@logged
@audited("Warehouse", AuditAction.CREATED)
def create_warehouse(business_unit_code, location, capacity, stock=0):
    """Create a warehouse and return its record id."""
    command = CreateWarehouse(
        business_unit_code=business_unit_code,
        location=location,
        capacity=capacity,
        stock=stock,
    )
    return current_domain.process(command, asynchronous=False)


@logged
@audited("Warehouse", AuditAction.ARCHIVED)
def archive_warehouse(business_unit_code):
    command = ArchiveWarehouse(business_unit_code=business_unit_code)
    current_domain.process(command, asynchronous=False)


@logged
@audited("Warehouse", AuditAction.REPLACED)
def replace_warehouse(business_unit_code, location, capacity, stock=0):
    """Replace the active warehouse behind the code and return the new record id."""
    command = ReplaceWarehouse(
        business_unit_code=business_unit_code,
        location=location,
        capacity=capacity,
        stock=stock,
    )
    return current_domain.process(command, asynchronous=False)
