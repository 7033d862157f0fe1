"""Error kinds raised by the warehousing core.

The core never deals in transport codes. Each rule raises a Protean
exception whose class tells the caller what kind of failure happened:

    NotFound   → ObjectNotFoundError    (referenced warehouse is absent)
    Conflict   → InvalidOperationError  (duplicate code, already archived, slot limit)
    Validation → ValidationError        (bad location, capacity/stock mismatch)
"""

from enum import Enum

from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    VALIDATION = "Validation"


_KIND_BY_EXCEPTION = (
    (ObjectNotFoundError, ErrorKind.NOT_FOUND),
    (InvalidOperationError, ErrorKind.CONFLICT),
    (ValidationError, ErrorKind.VALIDATION),
)


def kind_of(exc: BaseException) -> ErrorKind | None:
    """Return the error kind for a raised exception, or None if it is not a domain error."""
    for exc_class, kind in _KIND_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            return kind
    return None


def error_message(exc: BaseException) -> str:
    """Flatten a Protean exception's messages into one human-readable string."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        parts = []
        for value in messages.values():
            if isinstance(value, (list, tuple)):
                parts.extend(str(v) for v in value)
            else:
                parts.append(str(value))
        return "; ".join(parts)
    if messages:
        return str(messages)
    return str(exc)
