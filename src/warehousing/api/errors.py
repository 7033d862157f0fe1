"""Translation of domain error kinds into HTTP responses.

Kept out of the core: the rules only raise errors of a kind, and this
adapter alone decides what each kind means over HTTP.
"""

from datetime import UTC, datetime
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError

from warehousing.api.schemas import ErrorResponse
from warehousing.errors import ErrorKind, error_message, kind_of

logger = structlog.get_logger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.VALIDATION: 400,
}


def status_for(kind: ErrorKind | None) -> int:
    """HTTP status code for an error kind. Unknown errors are server errors."""
    return _STATUS_BY_KIND.get(kind, 500)


def error_response(exc: Exception) -> JSONResponse:
    code = status_for(kind_of(exc))
    message = error_message(exc) if code < 500 else str(exc)

    if code >= 500:
        logger.error("Failed to handle request", error_type=type(exc).__name__, exc_info=exc)
    else:
        logger.warning("Request error", code=code, error=message)

    body = ErrorResponse(
        error_id=uuid4().hex[:8],
        code=code,
        error=message,
        exception_type=type(exc).__name__,
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(status_code=code, content=body.model_dump(mode="json"))


async def _handle_domain_error(_request: Request, exc: Exception) -> JSONResponse:
    return error_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on a FastAPI application."""
    for exc_class in (ObjectNotFoundError, InvalidOperationError, ValidationError):
        app.add_exception_handler(exc_class, _handle_domain_error)
