"""
Request body size limit middleware.

Rejects requests whose declared Content-Length exceeds the configured
limit before the body is read, mirroring a JSON body parser limit.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

HTTP_413 = 413


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Answers 413 for bodies larger than ``max_bytes``."""

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_bytes:
            logger.warning(
                "Rejected %s %s: body of %s bytes exceeds %d",
                request.method,
                request.url.path,
                declared,
                self.max_bytes,
            )
            return JSONResponse(
                status_code=HTTP_413,
                content={"status": "fail", "message": "Request body too large"},
            )
        return await call_next(request)
