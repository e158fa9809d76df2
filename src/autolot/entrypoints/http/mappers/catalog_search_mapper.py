from __future__ import annotations

from autolot.domain.car import (
    Car,
    CarFilterOptions,
    CarSort,
    CatalogFilters,
    Paging,
    parse_price_max,
    parse_price_min,
)
from autolot.entrypoints.http.dtos.catalog_search import (
    CarFiltersResponseDTO,
    CarResponseDTO,
    CarsSearchQueryDTO,
    PriceRangeDTO,
)
from autolot.entrypoints.http.envelope import PaginatedEnvelope, PaginationDTO
from autolot.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for the car catalog."""

    @staticmethod
    def to_domain_filters(dto: CarsSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        Empty strings become None; price bounds are parsed leniently so a
        malformed bound drops the clause instead of failing the request.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters restricted to AVAILABLE cars
        """
        return CatalogFilters(
            search=dto.search or None,
            make=dto.make or None,
            body_type=dto.body_type or None,
            fuel_type=dto.fuel_type or None,
            transmission=dto.transmission or None,
            price_min=parse_price_min(dto.min_price),
            price_max=parse_price_max(dto.max_price),
        )

    @staticmethod
    def to_domain_request(
        dto: CarsSearchQueryDTO, credential: str | None = None
    ) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(
            filters=CatalogSearchMapper.to_domain_filters(dto),
            sort=CarSort.parse(dto.sort_by),
            paging=Paging(page=dto.page, limit=dto.limit),
            credential=credential,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Handles Decimal → float conversion at the boundary (money is a JSON number).
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price=float(car.price),
            mileage=car.mileage,
            color=car.color,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            body_type=car.body_type,
            seats=car.seats,
            description=car.description,
            status=car.status.value,
            featured=car.featured,
            images=list(car.images),
            wishlisted=car.wishlisted,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )

    @staticmethod
    def to_response(result: SearchCarCatalogResponse) -> PaginatedEnvelope[CarResponseDTO]:
        """
        Converts domain search result to the paginated envelope.

        Args:
            result: Domain search result containing cars, total count and paging

        Returns:
            PaginatedEnvelope with cars and pagination metadata
        """
        return PaginatedEnvelope[CarResponseDTO](
            data=[CatalogSearchMapper.to_car_response(car) for car in result.cars],
            pagination=PaginationDTO(
                total=result.total_count,
                page=result.paging.page,
                limit=result.paging.limit,
                pages=result.pages,
            ),
        )

    @staticmethod
    def to_filters_response(options: CarFilterOptions) -> CarFiltersResponseDTO:
        return CarFiltersResponseDTO(
            makes=options.makes,
            body_types=options.body_types,
            fuel_types=options.fuel_types,
            transmissions=options.transmissions,
            price_range=PriceRangeDTO(
                min=float(options.price_range.min),
                max=float(options.price_range.max),
            ),
        )
