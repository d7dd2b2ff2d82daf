"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit shared by every API route.
Protects against denial-of-service and resource abuse.

The limit is checked by a router dependency rather than SlowAPIMiddleware:
the middleware looks up the matched endpoint itself and lets through any
request it cannot resolve, which includes routes added via include_router.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from natours.core.config import Settings

HTTP_429 = 429
RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter with in-memory storage keyed on the client address.

    The limit is an application limit: one budget per client across all
    routes, not one per path.

    Args:
        settings: Application settings carrying the limit and toggle.

    Returns:
        A Limiter to store on ``app.state.limiter``.
    """
    return Limiter(
        key_func=get_remote_address,
        application_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


async def enforce_rate_limit(request: Request) -> None:
    """Count the request against the client's budget.

    Added to the API routers with ``dependencies=[Depends(...)]``.
    A disabled limiter returns without counting.

    Raises:
        RateLimitExceeded: If the client has used up its budget.
    """
    limiter: Limiter = request.app.state.limiter
    limiter._check_request_limit(request, None, in_middleware=True)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={
            "status": "fail",
            "message": RATE_LIMIT_MESSAGE,
            "limit": str(exc.detail),
        },
    )
