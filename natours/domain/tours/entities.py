"""
Domain entities for the tours bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

ID_FIELD = "id"


@dataclass(frozen=True)
class Tour:
    """A bookable tour.

    Only ``id`` is owned by the server. Every other attribute is whatever
    the client supplied and is carried through untouched.
    """

    id: int
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Tour":
        """Build a Tour from a stored record that carries its own id."""
        return cls(id=record[ID_FIELD], fields=without_id(record))

    def to_record(self) -> dict[str, Any]:
        """Return the flat JSON-ready representation, id first."""
        return {ID_FIELD: self.id, **self.fields}

    def merged(self, patch: Mapping[str, Any]) -> "Tour":
        """Return a copy with ``patch`` shallow-merged over the fields."""
        return Tour(id=self.id, fields={**self.fields, **without_id(patch)})


def without_id(values: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a mapping, dropping any client-supplied id."""
    return {key: value for key, value in values.items() if key != ID_FIELD}
