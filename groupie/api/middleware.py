"""API middleware -- request logging and error handling.

Starlette middleware is a stack (last added, first executed).  ``create_app``
adds ``ErrorHandlingMiddleware`` first and ``RequestLoggingMiddleware``
second, so the request log sees the final status code even when the error
middleware replaced the response.
"""

from __future__ import annotations

import time

import structlog
from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from groupie.utils.errors import GroupieTrackerError, ValidationError
from groupie.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response else 500
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=status_code,
                duration_ms=duration_ms,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


def error_status(exc: GroupieTrackerError) -> int:
    """HTTP status for an application error: 400 for bad input, else 500."""
    if isinstance(exc, ValidationError):
        return 400
    return 500


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn ``GroupieTrackerError`` subclasses into plain-text error responses.

    The error message is returned to the caller as-is and logged server-side
    together with the error type and the upstream resource that failed.
    Nothing from the failed request is rendered.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except GroupieTrackerError as exc:
            status_code = error_status(exc)
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                resource=exc.resource,
                path=str(request.url.path),
                status=status_code,
            )
            return PlainTextResponse(exc.message, status_code=status_code)
