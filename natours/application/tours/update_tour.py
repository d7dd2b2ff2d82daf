"""
Use case: Partially update a tour.

Input: UpdateTourCommand (tour_id, patch)
Output: Tour (merged record)
Side effects: Replaces the tour in the collection and rewrites the backing file.
Failure cases: TourNotFoundError, TourPersistenceError.
"""

import logging

from natours.application.tours.dtos import UpdateTourCommand
from natours.domain.tours.entities import Tour
from natours.domain.tours.errors import TourNotFoundError, TourPersistenceError
from natours.domain.tours.ports import TourRepository

logger = logging.getLogger(__name__)


class UpdateTourUseCase:
    """Shallow-merges patch fields over a stored tour; patch values win."""

    def __init__(self, tour_repo: TourRepository) -> None:
        self._tour_repo = tour_repo

    async def execute(self, command: UpdateTourCommand) -> Tour:
        async with self._tour_repo.writer():
            tour = self._tour_repo.replace(command.tour_id, command.patch)
            if tour is None:
                raise TourNotFoundError(command.tour_id)
            outcome = await self._tour_repo.persist()
            if not outcome.ok:
                raise TourPersistenceError(outcome.error or "unknown error")

        logger.info(
            "Updated tour id=%d fields=%s", tour.id, sorted(command.patch)
        )
        return tour
