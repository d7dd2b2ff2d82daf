"""
Use case: List every tour in the collection.

Input: none
Output: TourListResult
Side effects: None.
Failure cases: None.
"""

import logging

from natours.application.tours.dtos import TourListResult
from natours.domain.tours.ports import TourRepository

logger = logging.getLogger(__name__)


class ListToursUseCase:
    """Returns a snapshot of the whole tour collection."""

    def __init__(self, tour_repo: TourRepository) -> None:
        self._tour_repo = tour_repo

    def execute(self) -> TourListResult:
        tours = self._tour_repo.list_all()
        logger.debug("Listing %d tours", len(tours))
        return TourListResult(tours=tours, results=len(tours))
