from warehousing.audit.audit_log import AuditAction, AuditLog, AuditOutcome, record_audit
from warehousing.audit.decorator import audited

__all__ = ["AuditAction", "AuditLog", "AuditOutcome", "audited", "record_audit"]
