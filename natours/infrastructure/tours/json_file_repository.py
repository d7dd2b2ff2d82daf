"""
Adapter: Tour persistence in a JSON file.

Implements TourRepository port.
Holds the collection in memory and writes the whole array back to the
file after every mutation (write-through, full overwrite).
"""

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Mapping, Optional

from natours.domain.tours.entities import ID_FIELD, Tour, without_id
from natours.domain.tours.errors import TourStoreLoadError
from natours.domain.tours.ports import PersistOutcome, TourRepository

logger = logging.getLogger(__name__)

FIRST_TOUR_ID = 1


class JsonFileTourRepository(TourRepository):
    """Concrete adapter keeping tours in memory, backed by a JSON array file.

    Ids come from a monotonic counter seeded from the largest id on load,
    so a removed tour's id is never handed out again in this process.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._tours: list[Tour] = []
        self._next_id = FIRST_TOUR_ID
        self._lock = asyncio.Lock()
        self._committed: tuple[list[Tour], int] = ([], FIRST_TOUR_ID)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Tour]:
        """Parse the backing file and replace the in-memory collection.

        Returns:
            The loaded tours in file order.

        Raises:
            TourStoreLoadError: Missing file, invalid JSON, or a record
                without an integer id.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TourStoreLoadError(str(self._path), exc.strerror or str(exc)) from exc

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise TourStoreLoadError(str(self._path), f"invalid JSON ({exc.msg})") from exc

        if not isinstance(records, list):
            raise TourStoreLoadError(str(self._path), "top-level value must be an array")

        tours = []
        for position, record in enumerate(records):
            if not isinstance(record, dict) or not _is_int_id(record.get(ID_FIELD)):
                raise TourStoreLoadError(
                    str(self._path), f"record {position} has no integer id"
                )
            tours.append(Tour.from_record(record))

        self._tours = tours
        self._next_id = max((t.id for t in tours), default=FIRST_TOUR_ID - 1) + 1
        logger.info("Loaded %d tours from %s", len(tours), self._path)
        return list(tours)

    def list_all(self) -> list[Tour]:
        return list(self._tours)

    def find_by_id(self, tour_id: int) -> Optional[Tour]:
        for tour in self._tours:
            if tour.id == tour_id:
                return tour
        return None

    def append(self, fields: Mapping[str, Any]) -> Tour:
        tour = Tour(id=self._next_id, fields=without_id(fields))
        self._next_id += 1
        self._tours.append(tour)
        return tour

    def replace(self, tour_id: int, patch: Mapping[str, Any]) -> Optional[Tour]:
        index = self._index_of(tour_id)
        if index is None:
            return None
        updated = self._tours[index].merged(patch)
        self._tours[index] = updated
        return updated

    def remove(self, tour_id: int) -> bool:
        index = self._index_of(tour_id)
        if index is None:
            return False
        del self._tours[index]
        return True

    async def persist(self) -> PersistOutcome:
        """Overwrite the backing file with the current collection.

        The write happens in a worker thread. Failures are reported in the
        returned outcome rather than raised. If the caller is cancelled
        mid-write, the thread is allowed to finish before the cancellation
        propagates, so ``writer()`` knows what reached the file.
        """
        snapshot = (list(self._tours), self._next_id)
        records = [tour.to_record() for tour in snapshot[0]]
        try:
            payload = json.dumps(records, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            return self._write_failed(exc)

        write = asyncio.ensure_future(asyncio.to_thread(self._write, payload))
        cancelled = False
        while not write.done():
            try:
                await asyncio.wait({write})
            except asyncio.CancelledError:
                cancelled = True

        error = write.exception()
        if error is None:
            self._committed = snapshot
            logger.debug("Wrote %d tours to %s", len(records), self._path)
        if cancelled:
            raise asyncio.CancelledError
        if isinstance(error, OSError):
            return self._write_failed(error)
        if error is not None:
            raise error
        return PersistOutcome(ok=True, record_count=len(records))

    @asynccontextmanager
    async def writer(self) -> AsyncIterator[None]:
        """Serialize mutations and restore the last written state if one fails.

        On error or cancellation the collection goes back to what the file
        holds: the state on entry, or the last successful ``persist()``
        inside the block.
        """
        async with self._lock:
            self._committed = (list(self._tours), self._next_id)
            try:
                yield
            except BaseException as exc:
                tours, next_id = self._committed
                self._tours = list(tours)
                self._next_id = next_id
                logger.debug("Rolled back tour mutation: %s", type(exc).__name__)
                raise

    def _write_failed(self, exc: Exception) -> PersistOutcome:
        logger.error("Failed to write %s: %s", self._path, exc)
        return PersistOutcome(ok=False, error=str(exc))

    def _index_of(self, tour_id: int) -> Optional[int]:
        for index, tour in enumerate(self._tours):
            if tour.id == tour_id:
                return index
        return None

    def _write(self, payload: str) -> None:
        # Readers of self._path only ever see a complete file
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, self._path)


def _is_int_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
