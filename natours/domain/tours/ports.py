"""
Port interfaces (ABCs) for the tours bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from natours.domain.tours.entities import Tour


@dataclass(frozen=True)
class PersistOutcome:
    """Result of writing the collection to durable storage.

    Attributes:
        ok: Whether the write completed.
        record_count: Number of tours written (0 on failure).
        error: Failure description when ``ok`` is False.
    """

    ok: bool
    record_count: int = 0
    error: Optional[str] = None


class TourRepository(ABC):
    """Port for the authoritative tour collection.

    Reads are plain method calls. Mutations must run inside ``writer()``
    so that read-modify-persist sequences are serialized.
    """

    @abstractmethod
    def load_all(self) -> list[Tour]:
        """Load the collection from storage, replacing any in-memory state.

        Raises:
            TourStoreLoadError: If storage is missing or malformed.
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Tour]:
        """Return every tour in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, tour_id: int) -> Optional[Tour]:
        """Return the tour with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def append(self, fields: Mapping[str, Any]) -> Tour:
        """Store a new tour under the next id and return it."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, tour_id: int, patch: Mapping[str, Any]) -> Optional[Tour]:
        """Merge ``patch`` over an existing tour. None if the id is absent."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, tour_id: int) -> bool:
        """Remove a tour. Returns whether anything was removed."""
        raise NotImplementedError

    @abstractmethod
    async def persist(self) -> PersistOutcome:
        """Write the whole collection to storage."""
        raise NotImplementedError

    @abstractmethod
    def writer(self) -> AbstractAsyncContextManager[None]:
        """Exclusive write access; rolls back in-memory state on error."""
        raise NotImplementedError
