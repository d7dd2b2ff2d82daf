"""
Use case: Retrieve a single tour by id.

Input: GetTourQuery (tour_id)
Output: Tour
Side effects: None.
Failure cases: TourNotFoundError.
"""

import logging

from natours.application.tours.dtos import GetTourQuery
from natours.domain.tours.entities import Tour
from natours.domain.tours.errors import TourNotFoundError
from natours.domain.tours.ports import TourRepository

logger = logging.getLogger(__name__)


class GetTourUseCase:
    """Looks a tour up by id."""

    def __init__(self, tour_repo: TourRepository) -> None:
        self._tour_repo = tour_repo

    def execute(self, query: GetTourQuery) -> Tour:
        """Run the lookup.

        Args:
            query: Query carrying the tour id.

        Returns:
            The matching tour.

        Raises:
            TourNotFoundError: If no tour has that id.
        """
        tour = self._tour_repo.find_by_id(query.tour_id)
        if tour is None:
            raise TourNotFoundError(query.tour_id)
        return tour
