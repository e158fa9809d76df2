from __future__ import annotations

from decimal import Decimal

from autolot.domain.car import (
    Car,
    CarFilterOptions,
    CarSort,
    CarStatus,
    CarStatusSnapshot,
    CatalogFilters,
    Paging,
    PriceRange,
)
from autolot.ports.car_catalog_repository import CarCatalogRepository, SearchResult


def _contains_ci(value: str | None, term: str) -> bool:
    return value is not None and term.lower() in value.lower()


def _equals_ci(value: str | None, expected: str) -> bool:
    return value is not None and value.lower() == expected.lower()


def car_matches(car: Car, filters: CatalogFilters) -> bool:
    """Pure-Python twin of sql_predicates.car_clauses."""
    if filters.status is not None and car.status is not filters.status:
        return False
    if filters.search and not (
        _contains_ci(car.make, filters.search)
        or _contains_ci(car.model, filters.search)
        or _contains_ci(car.description, filters.search)
    ):
        return False
    if filters.make and not _equals_ci(car.make, filters.make):
        return False
    if filters.body_type and not _equals_ci(car.body_type, filters.body_type):
        return False
    if filters.fuel_type and not _equals_ci(car.fuel_type, filters.fuel_type):
        return False
    if filters.transmission and not _equals_ci(car.transmission, filters.transmission):
        return False
    if car.price < filters.price_min:
        return False
    if filters.price_max is not None and car.price > filters.price_max:
        return False
    return True


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - Applies the same predicate semantics as the SQL adapter
    - Sorts, then applies paging AFTER filtering
    - Returns total_count of matching cars before paging
    """

    def __init__(self, cars: list[Car]) -> None:
        self._cars = cars

    def search(self, filters: CatalogFilters, sort: CarSort, paging: Paging) -> SearchResult:
        matches = [car for car in self._cars if car_matches(car, filters)]
        total_count = len(matches)  # Count BEFORE paging

        if sort is CarSort.PRICE_ASC:
            matches.sort(key=lambda car: car.price)
        elif sort is CarSort.PRICE_DESC:
            matches.sort(key=lambda car: car.price, reverse=True)
        else:
            matches.sort(
                key=lambda car: car.created_at.timestamp() if car.created_at else 0.0,
                reverse=True,
            )

        start = paging.offset
        end = paging.offset + paging.limit
        return SearchResult(cars=matches[start:end], total_count=total_count)

    def get_by_id(self, car_id: str) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)

    def get_filter_options(self) -> CarFilterOptions:
        available = [car for car in self._cars if car.status is CarStatus.AVAILABLE]
        prices = [car.price for car in available]

        def distinct(values: list[str | None]) -> list[str]:
            return sorted({value.lower() for value in values if value is not None})

        return CarFilterOptions(
            makes=distinct([car.make for car in available]),
            body_types=distinct([car.body_type for car in available]),
            fuel_types=distinct([car.fuel_type for car in available]),
            transmissions=distinct([car.transmission for car in available]),
            price_range=PriceRange(
                min=min(prices) if prices else Decimal("0"),
                max=max(prices) if prices else Decimal("100000"),
            ),
        )

    def list_status_snapshots(self) -> list[CarStatusSnapshot]:
        return [
            CarStatusSnapshot(id=car.id, status=car.status, featured=car.featured)
            for car in self._cars
        ]
