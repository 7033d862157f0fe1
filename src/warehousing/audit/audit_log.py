"""AuditLog aggregate — one record per attempted warehouse mutation."""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.fields import DateTime, String, Text
from protean.utils.globals import current_domain

from warehousing.domain import warehousing

logger = structlog.get_logger(__name__)


class AuditAction(Enum):
    CREATED = "CREATED"
    ARCHIVED = "ARCHIVED"
    REPLACED = "REPLACED"


class AuditOutcome(Enum):
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@warehousing.aggregate
class AuditLog:
    """Audit trail entry for a warehouse lifecycle operation."""

    resource_name = String(required=True, max_length=255)
    action = String(required=True, choices=AuditAction)
    outcome = String(required=True, choices=AuditOutcome)
    performed_by = String(max_length=255, default="system")
    detail = Text()
    timestamp = DateTime()


def record_audit(resource_name, action, outcome, detail=None):
    """Persist an audit entry.

    Called outside the operation's unit of work, so the entry survives when
    the operation itself rolls back.
    """
    entry = AuditLog(
        resource_name=resource_name,
        action=action.value,
        outcome=outcome.value,
        detail=detail,
        timestamp=datetime.now(UTC),
    )
    current_domain.repository_for(AuditLog).add(entry)
    logger.info(
        "Audit recorded",
        resource=resource_name,
        action=action.value,
        outcome=outcome.value,
    )
    return entry
