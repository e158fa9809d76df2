from fastapi import APIRouter, Depends

from autolot.entrypoints.http.boundary import operation_boundary
from autolot.entrypoints.http.dependencies import get_credential, get_saved_cars_use_case
from autolot.entrypoints.http.dtos.catalog_search import CarResponseDTO
from autolot.entrypoints.http.envelope import Envelope
from autolot.entrypoints.http.error_responses import ERROR_RESPONSES
from autolot.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from autolot.use_cases.get_saved_cars import GetSavedCars, GetSavedCarsRequest


router = APIRouter(tags=["Saved cars"])


@router.get(
    "/saved-cars",
    response_model=Envelope[list[CarResponseDTO]],
    summary="List saved cars",
    description="The caller's wishlist, most recently saved first.",
    responses={401: ERROR_RESPONSES[401], 500: ERROR_RESPONSES[500]},
)
def get_saved_cars(
    credential: str | None = Depends(get_credential),
    use_case: GetSavedCars = Depends(get_saved_cars_use_case),
) -> Envelope[list[CarResponseDTO]]:
    with operation_boundary("Failed to fetch saved cars"):
        cars = use_case.execute(GetSavedCarsRequest(credential=credential))

    return Envelope[list[CarResponseDTO]](
        data=[CatalogSearchMapper.to_car_response(car) for car in cars]
    )
