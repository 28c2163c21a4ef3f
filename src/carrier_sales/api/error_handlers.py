"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to HTTP status codes. Every error body has the
same envelope:

    {"success": false, "error": <code>, "message": <text>, "timestamp": ...}
"""

from datetime import datetime
from typing import Any, Optional

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from carrier_sales.exceptions import (
    AuthenticationError,
    CarrierRegistryError,
    InvalidInputError,
    LoadNotFoundError,
    MetricsSourceError,
)

logger = structlog.get_logger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Any] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build the standard error envelope."""
    content: dict[str, Any] = {
        "success": False,
        "error": error,
        "message": message,
        "timestamp": datetime.utcnow().isoformat(),
    }
    if details:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def load_not_found_handler(request: Request, exc: LoadNotFoundError) -> JSONResponse:
    """
    Handle lookups of unknown load identifiers.

    Maps to 404 Not Found. Expected condition: logged at info level.
    """
    logger.info("Load not found", load_id=exc.load_id)
    return error_response(
        status.HTTP_404_NOT_FOUND,
        "not_found",
        exc.message,
        details=exc.details,
    )


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """
    Handle missing or empty required fields.

    Maps to 400 Bad Request (client error).
    """
    logger.warning("Invalid input", message=exc.message, **exc.details)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "invalid_input",
        exc.message,
        details=exc.details,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (wrong types, bad JSON).

    Maps to 400 Bad Request, same kind as InvalidInputError.
    """
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning("Invalid request format", errors=len(errors))
    # Rejected values (e.g. inf) are not echoed back; they may not be JSON-serialisable
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "invalid_input",
        "Request validation failed",
        details=errors,
    )


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    """Maps to 401 Unauthorized."""
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        "unauthorized",
        exc.message,
    )


async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle failures of external collaborators (carrier registry, metrics service).

    Maps to 502 Bad Gateway. Upstream details are logged, not returned.
    """
    logger.error(
        "Upstream service error",
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "upstream_error",
        getattr(exc, "message", "Upstream service error"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Endpoint not found"
    else:
        message = str(exc.detail)
    return error_response(
        exc.status_code,
        "http_error",
        message,
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error. Internal details are logged with
    the traceback and never returned to the client.
    """
    logger.exception(
        "Unexpected error",
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred",
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    LoadNotFoundError: load_not_found_handler,
    InvalidInputError: invalid_input_handler,
    RequestValidationError: request_validation_error_handler,
    AuthenticationError: authentication_error_handler,
    CarrierRegistryError: upstream_error_handler,
    MetricsSourceError: upstream_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: generic_error_handler,
}
