"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (tours, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Request middleware (timestamping, request logging)
- Security middleware (headers, body size limit)
- Per-client rate limiting on the API routers
- Logging configuration
- The file-backed tour repository, loaded at startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded

from natours.core.config import Settings, settings as default_settings
from natours.infrastructure.tours.json_file_repository import JsonFileTourRepository
from natours.interfaces.health import router as health_router
from natours.interfaces.tours.router import router as tours_router
from natours.shared.errors.handlers import register_error_handlers
from natours.shared.logging import configure_logging
from natours.shared.middleware.request_context import (
    RequestLoggingMiddleware,
    RequestTimeMiddleware,
)
from natours.shared.security.body_limit import BodySizeLimitMiddleware
from natours.shared.security.headers import SecurityHeadersMiddleware
from natours.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the tour collection before serving any request.

    A missing or malformed data file raises TourStoreLoadError and
    aborts startup.
    """
    repository = JsonFileTourRepository(app.state.settings.tours_data_file)
    repository.load_all()
    app.state.tour_repository = repository

    yield

    logger.info(
        "Shutting down with %d tours in memory (%s)",
        len(repository.list_all()),
        repository.path,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Overrides the environment-derived settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestTimeMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    rate_limited = [Depends(enforce_rate_limit)]
    app.include_router(health_router, prefix=settings.api_prefix, dependencies=rate_limited)
    app.include_router(tours_router, prefix=settings.api_prefix, dependencies=rate_limited)

    # --- Static files (mounted last so API routes take precedence) ---
    if settings.static_dir is not None:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()
