"""
HTTP middleware for request tracing.

CorrelationMiddleware must wrap RequestLoggingMiddleware so the access
line carries the request's correlation id.

Dependencies: starlette, mentorhub.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mentorhub.observability.correlation import CORRELATION_HEADER, correlation_scope

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the request and echo it on the response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One access line per request with status and latency.

    Health probes log at DEBUG so they do not drown the access log.
    Bodies and cookies are never logged.
    """

    quiet_paths = frozenset({"/health", "/health/db"})

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        path = request.url.path
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed",
                request.method,
                path,
                extra={"duration_ms": _elapsed_ms(started)},
            )
            raise

        level = logging.DEBUG if path in self.quiet_paths else logging.INFO
        logger.log(
            level,
            "%s %s -> %s",
            request.method,
            path,
            response.status_code,
            extra={"status_code": response.status_code, "duration_ms": _elapsed_ms(started)},
        )
        return response
