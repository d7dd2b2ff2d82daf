"""
Use case: Create a tour and write the collection through to storage.

Input: CreateTourCommand (fields)
Output: Tour (with its server-assigned id)
Side effects: Appends to the collection and rewrites the backing file.
Failure cases: TourPersistenceError (the append is rolled back).
"""

import logging

from natours.application.tours.dtos import CreateTourCommand
from natours.domain.tours.entities import Tour
from natours.domain.tours.errors import TourPersistenceError
from natours.domain.tours.ports import TourRepository

logger = logging.getLogger(__name__)


class CreateTourUseCase:
    """Orchestrates tour creation.

    The append and the file write happen under the repository's writer
    lock, so concurrent creates always receive distinct ids.
    """

    def __init__(self, tour_repo: TourRepository) -> None:
        self._tour_repo = tour_repo

    async def execute(self, command: CreateTourCommand) -> Tour:
        """Run the create use case.

        Args:
            command: Fields for the new tour.

        Returns:
            The stored tour.

        Raises:
            TourPersistenceError: If the backing file could not be written.
        """
        async with self._tour_repo.writer():
            tour = self._tour_repo.append(command.fields)
            outcome = await self._tour_repo.persist()
            if not outcome.ok:
                raise TourPersistenceError(outcome.error or "unknown error")

        logger.info("Created tour id=%d", tour.id)
        return tour
