"""
Domain Exception Handlers.

Translate the business errors raised by the application services into HTTP
responses:

- ``EntityNotFoundError`` -> 404
- ``DuplicateEntityError`` -> 409
- ``OptimisticLockingError`` -> 409
- any other ``DomainValidationError`` -> 400; an ``InvalidEntityError`` also
  lists the rejected fields
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from scouts.core.errors import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityError,
    OptimisticLockingError,
)
from scouts.core.logging_config import get_logger
from scouts.core.monitoring import log_error

logger = get_logger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    content = {"detail": str(exc), "error_type": type(exc).__name__}
    if isinstance(exc, InvalidEntityError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=content)


async def domain_exception_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    if isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, DuplicateEntityError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
    log_error(type(exc).__name__, str(exc), {"path": request.url.path})
    return _error_response(status_code, exc)


async def optimistic_locking_handler(request: Request, exc: OptimisticLockingError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} lost an optimistic lock: {exc}")
    log_error(type(exc).__name__, str(exc), {"path": request.url.path})
    return _error_response(status.HTTP_409_CONFLICT, exc)
