"""
FastAPI router for the tours bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from natours.application.tours.create_tour import CreateTourUseCase
from natours.application.tours.delete_tour import DeleteTourUseCase
from natours.application.tours.dtos import (
    CreateTourCommand,
    DeleteTourCommand,
    GetTourQuery,
    UpdateTourCommand,
)
from natours.application.tours.get_tour import GetTourUseCase
from natours.application.tours.list_tours import ListToursUseCase
from natours.application.tours.update_tour import UpdateTourUseCase
from natours.interfaces.tours.dependencies import (
    get_create_tour_use_case,
    get_delete_tour_use_case,
    get_list_tours_use_case,
    get_tour_use_case,
    get_update_tour_use_case,
    parse_tour_id,
)
from natours.interfaces.tours.schemas import (
    FailResponse,
    TourListData,
    TourListResponse,
    TourPayload,
    TourResponse,
)

router = APIRouter(prefix="/tours", tags=["tours"])

NOT_FOUND = {404: {"model": FailResponse}}
WRITE_FAILED = {500: {"model": FailResponse}}


@router.get(
    "",
    response_model=TourListResponse,
    summary="List tours",
    description="Return every tour with a result count and the request timestamp.",
)
async def get_all_tours(
    request: Request,
    use_case: ListToursUseCase = Depends(get_list_tours_use_case),
) -> TourListResponse:
    result = use_case.execute()
    return TourListResponse(
        requested_at=getattr(request.state, "request_time", None),
        results=result.results,
        data=TourListData(tours=[tour.to_record() for tour in result.tours]),
    )


@router.get(
    "/{tour_id}",
    response_model=TourResponse,
    responses=NOT_FOUND,
    summary="Get a tour",
)
async def get_tour(
    tour_id: int = Depends(parse_tour_id),
    use_case: GetTourUseCase = Depends(get_tour_use_case),
) -> TourResponse:
    return TourResponse.of(use_case.execute(GetTourQuery(tour_id=tour_id)))


@router.post(
    "",
    response_model=TourResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_FAILED,
    summary="Create a tour",
    description="Store a new tour under the next free id and write the collection to disk.",
)
async def create_tour(
    payload: TourPayload,
    use_case: CreateTourUseCase = Depends(get_create_tour_use_case),
) -> TourResponse:
    tour = await use_case.execute(CreateTourCommand(fields=payload.to_fields()))
    return TourResponse.of(tour)


@router.patch(
    "/{tour_id}",
    response_model=TourResponse,
    responses={**NOT_FOUND, **WRITE_FAILED},
    summary="Update a tour",
    description="Merge the given fields over the stored tour.",
)
async def update_tour(
    payload: TourPayload,
    tour_id: int = Depends(parse_tour_id),
    use_case: UpdateTourUseCase = Depends(get_update_tour_use_case),
) -> TourResponse:
    tour = await use_case.execute(
        UpdateTourCommand(tour_id=tour_id, patch=payload.to_fields())
    )
    return TourResponse.of(tour)


@router.delete(
    "/{tour_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **WRITE_FAILED},
    summary="Delete a tour",
)
async def delete_tour(
    tour_id: int = Depends(parse_tour_id),
    use_case: DeleteTourUseCase = Depends(get_delete_tour_use_case),
) -> Response:
    await use_case.execute(DeleteTourCommand(tour_id=tour_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
