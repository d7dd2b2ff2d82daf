"""
Pydantic schemas for tours API request/response validation.

Request bodies accept any JSON object: tour attributes are not
validated and are stored exactly as sent. Responses follow the
JSend envelope ({status, data} or {status, message}).
No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from natours.domain.tours.entities import Tour

STATUS_SUCCESS = "success"
STATUS_FAIL = "fail"


class TourPayload(BaseModel):
    """Request schema for create and update.

    Any JSON object is accepted. Unknown keys are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class TourListData(BaseModel):
    tours: list[dict[str, Any]]


class TourListResponse(BaseModel):
    """Response schema for the list endpoint."""

    status: str = STATUS_SUCCESS
    requested_at: Optional[str] = Field(default=None, serialization_alias="requestedAt")
    results: int
    data: TourListData


class TourData(BaseModel):
    tour: dict[str, Any]


class TourResponse(BaseModel):
    """Response schema for single-tour endpoints."""

    status: str = STATUS_SUCCESS
    data: TourData

    @classmethod
    def of(cls, tour: Tour) -> "TourResponse":
        return cls(data=TourData(tour=tour.to_record()))


class FailResponse(BaseModel):
    """Error response returned for client and server failures."""

    status: str = STATUS_FAIL
    message: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    tours_loaded: int
