"""The `audited` decorator — explicit audit trail around lifecycle operations."""

import functools
import inspect

from warehousing.audit.audit_log import AuditOutcome, record_audit
from warehousing.errors import error_message


def audited(resource, action, key="business_unit_code"):
    """Record an AuditLog entry for every call of the decorated operation.

    The resource identifier is read from the operation's `key` argument.
    Failures are recorded with the error message and then re-raised.
    """

    def decorator(func):
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            identifier = signature.bind(*args, **kwargs).arguments.get(key)
            resource_name = f"{resource}({identifier})" if identifier is not None else resource

            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                record_audit(resource_name, action, AuditOutcome.FAILED, detail=error_message(exc))
                raise

            record_audit(resource_name, action, AuditOutcome.SUCCEEDED)
            return result

        return wrapper

    return decorator
