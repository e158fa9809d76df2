from fastapi import APIRouter, Depends

from autolot.entrypoints.http.boundary import operation_boundary
from autolot.entrypoints.http.dependencies import (
    RequestTransaction,
    get_car_filters_use_case,
    get_credential,
    get_get_car_by_id_use_case,
    get_search_catalog_use_case,
    get_toggle_saved_car_use_case,
    get_transaction,
)
from autolot.entrypoints.http.dtos.car_detail import CarDetailResponseDTO
from autolot.entrypoints.http.dtos.catalog_search import (
    CarFiltersResponseDTO,
    CarResponseDTO,
    CarsSearchQueryDTO,
    ToggleSavedCarResponseDTO,
)
from autolot.entrypoints.http.envelope import Envelope, PaginatedEnvelope
from autolot.entrypoints.http.error_responses import ERROR_RESPONSES
from autolot.entrypoints.http.mappers.car_detail_mapper import CarDetailMapper
from autolot.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from autolot.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from autolot.use_cases.get_car_filters import GetCarFilters
from autolot.use_cases.search_car_catalog import SearchCarCatalog
from autolot.use_cases.toggle_saved_car import ToggleSavedCar, ToggleSavedCarRequest


router = APIRouter(tags=["Cars"])


# Declared before /cars/{car_id} so "filters" is not taken as an id
@router.get(
    "/cars/filters",
    response_model=Envelope[CarFiltersResponseDTO],
    summary="Catalog filter options",
    description="""
    Distinct makes, body types, fuel types and transmissions among
    AVAILABLE cars (lowercased, ascending), plus their price range.
    The price range defaults to 0..100000 when no car is available.
    """,
    responses={500: ERROR_RESPONSES[500]},
)
def get_car_filters(
    use_case: GetCarFilters = Depends(get_car_filters_use_case),
) -> Envelope[CarFiltersResponseDTO]:
    with operation_boundary("Failed to fetch filters"):
        options = use_case.execute()

    return Envelope[CarFiltersResponseDTO](data=CatalogSearchMapper.to_filters_response(options))


@router.get(
    "/cars",
    response_model=PaginatedEnvelope[CarResponseDTO],
    summary="Search car catalog",
    description="""
    Search AVAILABLE cars with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - search: case-insensitive substring of make, model or description
    - make/body_type/fuel_type/transmission: case-insensitive exact match
    - min_price/max_price: inclusive; unparseable values are ignored,
      max_price=0 means no upper bound

    ## Sorting
    - newest (default), priceAsc, priceDesc

    ## Pagination
    - page is 1-based, default limit: 6
    - pagination.pages = ceil(total / limit)

    Authenticated callers get ``wishlisted`` flags for their saved cars.

    ## Example
    ```
    GET /v1/cars?make=Toyota&max_price=30000&sort_by=priceAsc&page=2
    ```
    """,
    responses={422: ERROR_RESPONSES[422], 500: ERROR_RESPONSES[500]},
)
def get_cars(
    query: CarsSearchQueryDTO = Depends(),
    credential: str | None = Depends(get_credential),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> PaginatedEnvelope[CarResponseDTO]:
    """Search cars endpoint following parse → execute → map → return pattern."""
    with operation_boundary("Failed to fetch cars"):
        # 1. Map to domain request
        request = CatalogSearchMapper.to_domain_request(query, credential)

        # 2. Execute use case
        result = use_case.execute(request)

    # 3. Map to response
    return CatalogSearchMapper.to_response(result)


@router.get(
    "/cars/{car_id}",
    response_model=Envelope[CarDetailResponseDTO],
    summary="Get car details",
    description="""
    A single car with the caller's wishlist flag and test drive context:
    the caller's active booking for this car (PENDING, CONFIRMED or
    COMPLETED) and the dealership with its working hours.
    Anonymous callers are allowed.
    """,
    responses={404: ERROR_RESPONSES[404], 500: ERROR_RESPONSES[500]},
)
def get_car_by_id(
    car_id: str,
    credential: str | None = Depends(get_credential),
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> Envelope[CarDetailResponseDTO]:
    with operation_boundary("Failed to fetch car details"):
        result = use_case.execute(GetCarByIdRequest(car_id=car_id, credential=credential))

    return Envelope[CarDetailResponseDTO](data=CarDetailMapper.to_response(result))


@router.post(
    "/cars/{car_id}/saved",
    response_model=Envelope[ToggleSavedCarResponseDTO],
    summary="Toggle car in wishlist",
    description="""
    Saves the car for the caller, or removes it if already saved.
    ``saved`` reports the state after the call.
    """,
    responses={
        401: ERROR_RESPONSES[401],
        404: ERROR_RESPONSES[404],
        500: ERROR_RESPONSES[500],
    },
)
def toggle_saved_car(
    car_id: str,
    credential: str | None = Depends(get_credential),
    use_case: ToggleSavedCar = Depends(get_toggle_saved_car_use_case),
    transaction: RequestTransaction = Depends(get_transaction),
) -> Envelope[ToggleSavedCarResponseDTO]:
    with operation_boundary("Failed to toggle saved car"):
        result = use_case.execute(ToggleSavedCarRequest(credential=credential, car_id=car_id))
        transaction.commit()

    return Envelope[ToggleSavedCarResponseDTO](data=ToggleSavedCarResponseDTO(saved=result.saved))
