"""
Data Transfer Objects for the tours application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any

from natours.domain.tours.entities import Tour


@dataclass(frozen=True)
class GetTourQuery:
    """Input DTO for fetching a single tour.

    Attributes:
        tour_id: Integer id parsed from the request path.
    """

    tour_id: int


@dataclass(frozen=True)
class CreateTourCommand:
    """Input DTO for creating a tour.

    Attributes:
        fields: Client-supplied tour attributes, stored as given.
    """

    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateTourCommand:
    """Input DTO for partially updating a tour.

    Attributes:
        tour_id: Id of the tour to update.
        patch: Attributes to merge over the stored tour.
    """

    tour_id: int
    patch: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteTourCommand:
    """Input DTO for deleting a tour."""

    tour_id: int


@dataclass(frozen=True)
class TourListResult:
    """Output DTO for listing tours.

    Attributes:
        tours: All tours in insertion order.
        results: Number of tours returned.
    """

    tours: list[Tour]
    results: int
