"""
Tests for the tours domain layer.

Tests the Tour entity and error classes in isolation.
No external dependencies or IO required.
"""

from natours.domain.tours.entities import Tour, without_id
from natours.domain.tours.errors import (
    TourDomainError,
    TourNotFoundError,
    TourPersistenceError,
    TourStoreLoadError,
)


class TestTourEntity:
    """Tests for the Tour entity."""

    def test_to_record_puts_id_first(self) -> None:
        tour = Tour(id=4, fields={"name": "C", "price": 100})
        record = tour.to_record()

        assert record == {"id": 4, "name": "C", "price": 100}
        assert list(record)[0] == "id"

    def test_from_record_splits_id_from_fields(self) -> None:
        tour = Tour.from_record({"id": 2, "name": "X", "tags": ["a", "b"]})

        assert tour.id == 2
        assert tour.fields == {"name": "X", "tags": ["a", "b"]}

    def test_merged_patch_fields_win(self) -> None:
        tour = Tour(id=5, fields={"name": "Hike", "price": 397, "duration": 5})

        updated = tour.merged({"price": 100})

        assert updated.to_record() == {
            "id": 5,
            "name": "Hike",
            "price": 100,
            "duration": 5,
        }
        # source tour untouched
        assert tour.fields["price"] == 397

    def test_merged_keeps_id(self) -> None:
        tour = Tour(id=5, fields={"name": "Hike"})

        assert tour.merged({"id": 99, "name": "Walk"}).id == 5

    def test_merge_is_shallow(self) -> None:
        tour = Tour(id=1, fields={"location": {"city": "Banff", "country": "CA"}})

        updated = tour.merged({"location": {"city": "Jasper"}})

        assert updated.fields["location"] == {"city": "Jasper"}

    def test_without_id(self) -> None:
        assert without_id({"id": 1, "name": "A"}) == {"name": "A"}
        assert without_id({}) == {}


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_carries_id(self) -> None:
        error = TourNotFoundError(42)

        assert error.tour_id == 42
        assert "42" in error.message
        assert isinstance(error, TourDomainError)

    def test_persistence_error_carries_reason(self) -> None:
        error = TourPersistenceError("disk full")

        assert error.reason == "disk full"
        assert "disk full" in str(error)

    def test_load_error_names_file(self) -> None:
        error = TourStoreLoadError("/data/tours.json", "invalid JSON")

        assert error.path == "/data/tours.json"
        assert "/data/tours.json" in error.message
        assert "invalid JSON" in error.message
