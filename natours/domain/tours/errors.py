"""
Domain-specific errors for the tours bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TourDomainError(Exception):
    """Base error for all tours domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TourNotFoundError(TourDomainError):
    """Raised when no tour matches the requested id."""

    def __init__(self, tour_id: object) -> None:
        super().__init__(f"Tour not found: {tour_id}")
        self.tour_id = tour_id


class TourPersistenceError(TourDomainError):
    """Raised when the collection could not be written to its backing file."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not persist tours: {reason}")
        self.reason = reason


class TourStoreLoadError(TourDomainError):
    """Raised at startup when the backing file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load tours from {path}: {reason}")
        self.path = path
        self.reason = reason
