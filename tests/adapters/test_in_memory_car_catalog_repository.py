"""
Contract tests for InMemoryCarCatalogRepository.

The in-memory adapter is the reference behavior the SQL adapter mirrors:
- AND of populated filters, free-text search as an OR
- case-insensitive categorical matching
- inclusive price bounds
- sort, then page; total_count counted before paging
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from autolot.adapters.in_memory_car_catalog_repository import (
    InMemoryCarCatalogRepository,
    car_matches,
)
from autolot.domain.car import CarSort, CarStatus, CatalogFilters, Paging
from factories import make_car


@pytest.fixture
def cars() -> list:
    return [
        make_car(1, make="Toyota", model="Corolla", price=Decimal("18000"), body_type="Sedan"),
        make_car(2, make="Toyota", model="RAV4", price=Decimal("32000"), body_type="SUV"),
        make_car(3, make="Honda", model="Civic", price=Decimal("21000"), fuel_type="Hybrid"),
        make_car(4, make="Honda", model="CR-V", price=Decimal("35000"), body_type="SUV"),
        make_car(5, make="BMW", model="X3", price=Decimal("52000"), status=CarStatus.SOLD),
        make_car(
            6,
            make="Mazda",
            model="CX-5",
            price=Decimal("29000"),
            description="One owner, Toyota service history",
        ),
    ]


@pytest.fixture
def repo(cars: list) -> InMemoryCarCatalogRepository:
    return InMemoryCarCatalogRepository(cars)


# ==============================================================================
# Filtering
# ==============================================================================


def test_default_filters_return_available_cars_only(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(), CarSort.NEWEST, Paging(limit=50))

    assert result.total_count == 5
    assert all(car.status is CarStatus.AVAILABLE for car in result.cars)


def test_search_matches_make_model_or_description(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(search="toyota"), CarSort.NEWEST, Paging(limit=50))

    assert {car.id for car in result.cars} == {make_car(1).id, make_car(2).id, make_car(6).id}


def test_categorical_filters_are_case_insensitive(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(
        CatalogFilters(make="HONDA", body_type="suv"), CarSort.NEWEST, Paging(limit=50)
    )

    assert [car.model for car in result.cars] == ["CR-V"]


def test_price_bounds_are_inclusive(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(
        CatalogFilters(price_min=Decimal("21000"), price_max=Decimal("32000")),
        CarSort.PRICE_ASC,
        Paging(limit=50),
    )

    assert [car.price for car in result.cars] == [Decimal("21000"), Decimal("29000"), Decimal("32000")]


def test_no_car_outside_price_range(repo: InMemoryCarCatalogRepository) -> None:
    low, high = Decimal("20000"), Decimal("30000")

    result = repo.search(
        CatalogFilters(price_min=low, price_max=high), CarSort.NEWEST, Paging(limit=50)
    )

    assert result.cars
    assert all(low <= car.price <= high for car in result.cars)


def test_status_none_includes_every_status(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(status=None), CarSort.NEWEST, Paging(limit=50))

    assert result.total_count == 6


def test_car_matches_ignores_missing_optional_fields() -> None:
    car = make_car(1, body_type=None)

    assert car_matches(car, CatalogFilters()) is True
    assert car_matches(car, CatalogFilters(body_type="SUV")) is False


# ==============================================================================
# Sorting and paging
# ==============================================================================


def test_newest_sort_is_created_desc(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(), CarSort.NEWEST, Paging(limit=50))

    assert [car.id for car in result.cars] == [make_car(n).id for n in (6, 4, 3, 2, 1)]


def test_price_desc_sort(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(), CarSort.PRICE_DESC, Paging(limit=50))

    prices = [car.price for car in result.cars]
    assert prices == sorted(prices, reverse=True)


def test_second_page_returns_items_seven_to_twelve() -> None:
    cars = [make_car(n, price=Decimal(1000 * n)) for n in range(1, 16)]
    repo = InMemoryCarCatalogRepository(cars)

    result = repo.search(CatalogFilters(), CarSort.PRICE_ASC, Paging(page=2, limit=6))

    assert [car.price for car in result.cars] == [Decimal(1000 * n) for n in range(7, 13)]
    assert result.total_count == 15


def test_page_past_the_end_is_empty(repo: InMemoryCarCatalogRepository) -> None:
    result = repo.search(CatalogFilters(), CarSort.NEWEST, Paging(page=9, limit=6))

    assert result.cars == []
    assert result.total_count == 5


# ==============================================================================
# Lookups
# ==============================================================================


def test_get_by_id(repo: InMemoryCarCatalogRepository) -> None:
    car = repo.get_by_id(make_car(3).id)

    assert car is not None
    assert car.model == "Civic"


def test_get_by_id_missing(repo: InMemoryCarCatalogRepository) -> None:
    assert repo.get_by_id("not-a-uuid") is None


def test_filter_options_use_available_cars(repo: InMemoryCarCatalogRepository) -> None:
    options = repo.get_filter_options()

    assert options.makes == ["honda", "mazda", "toyota"]
    assert options.body_types == ["sedan", "suv"]
    assert options.fuel_types == ["hybrid", "petrol"]
    assert options.price_range.min == Decimal("18000")
    assert options.price_range.max == Decimal("35000")


def test_filter_options_default_price_range_when_empty() -> None:
    options = InMemoryCarCatalogRepository([]).get_filter_options()

    assert options.makes == []
    assert options.price_range.min == Decimal("0")
    assert options.price_range.max == Decimal("100000")


def test_status_snapshots_cover_every_car(repo: InMemoryCarCatalogRepository) -> None:
    snapshots = repo.list_status_snapshots()

    assert len(snapshots) == 6
    assert sum(1 for s in snapshots if s.status is CarStatus.SOLD) == 1
