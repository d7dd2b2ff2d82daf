"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
Reports the number of tours currently loaded.
"""

from fastapi import APIRouter, Depends, Request

from natours.domain.tours.ports import TourRepository
from natours.interfaces.tours.dependencies import get_tour_repository
from natours.interfaces.tours.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and tour count.",
)
async def health_check(
    request: Request,
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.version,
        tours_loaded=len(tour_repo.list_all()),
    )
