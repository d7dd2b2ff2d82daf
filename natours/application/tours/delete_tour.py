"""
Use case: Delete a tour.

Input: DeleteTourCommand (tour_id)
Output: None
Side effects: Removes the tour and rewrites the backing file.
Failure cases: TourNotFoundError, TourPersistenceError.
"""

import logging

from natours.application.tours.dtos import DeleteTourCommand
from natours.domain.tours.errors import TourNotFoundError, TourPersistenceError
from natours.domain.tours.ports import TourRepository

logger = logging.getLogger(__name__)


class DeleteTourUseCase:
    """Removes a tour, responding only once the write has settled."""

    def __init__(self, tour_repo: TourRepository) -> None:
        self._tour_repo = tour_repo

    async def execute(self, command: DeleteTourCommand) -> None:
        async with self._tour_repo.writer():
            if not self._tour_repo.remove(command.tour_id):
                raise TourNotFoundError(command.tour_id)
            outcome = await self._tour_repo.persist()
            if not outcome.ok:
                raise TourPersistenceError(outcome.error or "unknown error")

        logger.info("Deleted tour id=%d", command.tour_id)
