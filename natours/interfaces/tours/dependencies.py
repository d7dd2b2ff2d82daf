"""
Dependency injection for the tours bounded context.

Provides FastAPI dependency functions that wire the repository held
on application state into use cases via constructor injection.
"""

import re

from fastapi import Depends, Request

from natours.application.tours.create_tour import CreateTourUseCase
from natours.application.tours.delete_tour import DeleteTourUseCase
from natours.application.tours.get_tour import GetTourUseCase
from natours.application.tours.list_tours import ListToursUseCase
from natours.application.tours.update_tour import UpdateTourUseCase
from natours.domain.tours.errors import TourNotFoundError
from natours.domain.tours.ports import TourRepository

# ASCII decimal only: int() and float() also accept "1_0" and non-ASCII digits
NUMERIC_ID = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def get_tour_repository(request: Request) -> TourRepository:
    """Return the repository loaded during application startup."""
    return request.app.state.tour_repository


def parse_tour_id(tour_id: str) -> int:
    """Parse the ``{tour_id}`` path segment as an integer.

    Plain ASCII decimals only. Integral floats such as ``"5.0"`` are
    accepted. Anything else can never match a stored tour and is reported
    as not found.

    Raises:
        TourNotFoundError: If the segment is not an integer.
    """
    if NUMERIC_ID.fullmatch(tour_id) is None:
        raise TourNotFoundError(tour_id)
    text = tour_id.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise TourNotFoundError(tour_id) from None
    if not value.is_integer():
        raise TourNotFoundError(tour_id)
    return int(value)


def get_list_tours_use_case(
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> ListToursUseCase:
    return ListToursUseCase(tour_repo=tour_repo)


def get_tour_use_case(
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> GetTourUseCase:
    return GetTourUseCase(tour_repo=tour_repo)


def get_create_tour_use_case(
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> CreateTourUseCase:
    return CreateTourUseCase(tour_repo=tour_repo)


def get_update_tour_use_case(
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> UpdateTourUseCase:
    return UpdateTourUseCase(tour_repo=tour_repo)


def get_delete_tour_use_case(
    tour_repo: TourRepository = Depends(get_tour_repository),
) -> DeleteTourUseCase:
    return DeleteTourUseCase(tour_repo=tour_repo)
