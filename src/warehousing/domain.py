"""Warehousing bounded context — Warehouse Lifecycle and Location Capacity.

Handles creation, replacement, and archival of warehouses tied to physical
locations with finite capacity and slot limits. CQRS (not event sourced):
the current state of each warehouse record is what the rules read.
"""

import structlog
from protean.domain import Domain

warehousing = Domain(name="warehousing")

logger = structlog.get_logger(__name__)
