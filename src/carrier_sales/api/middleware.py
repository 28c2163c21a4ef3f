"""Request tracing middleware.

Each request gets an id (the caller's X-Request-ID when it is usable,
otherwise a fresh UUID4) that is bound to the structlog context for the
duration of the request and echoed back in the response headers, including
on 500 responses for unhandled errors.
"""

import re
import time
import uuid
from typing import Callable, Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from carrier_sales.api.error_handlers import generic_error_handler

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,128}")

# Polled endpoints, logged at debug level only
QUIET_PATHS = frozenset({"/health", "/metrics", "/dashboard/metrics"})


def resolve_request_id(incoming: Optional[str]) -> str:
    """Reuse a well-formed caller id; replace anything else."""
    if incoming and _REQUEST_ID_PATTERN.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Binds request_id/method/path to the log context and times each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        path = request.url.path

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Answered here, inside the request context, so the 500 keeps its request id
            response = await generic_error_handler(request, exc)
            logger.error(
                "Request failed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        else:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            if response.status_code >= 500:
                log = logger.error
            elif response.status_code >= 400:
                log = logger.warning
            elif path in QUIET_PATHS:
                log = logger.debug
            else:
                log = logger.info
            log("Request completed", status_code=response.status_code, duration_ms=duration_ms)

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
