"""
Per-request context middleware.

RequestTimeMiddleware stamps each request with its arrival time so
handlers can echo it back. RequestLoggingMiddleware writes one log
line per request with method, path, status and duration.
"""

import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from natours.shared.logging import REQUEST_LOGGER

logger = logging.getLogger(REQUEST_LOGGER)


def utc_now_iso() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RequestTimeMiddleware(BaseHTTPMiddleware):
    """Sets ``request.state.request_time``."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.state.request_time = utc_now_iso()
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request after the response is produced.

    Only the method, path, status and timing are logged; never bodies.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - started) * 1000.0
            logger.info(
                "%s %s %d %.2f ms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )
