from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

from autolot.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from autolot.domain.car import CarFilterOptions, CarStatus, PriceRange
from autolot.ports.car_catalog_repository import CarCatalogRepository
from autolot.use_cases.get_car_filters import GetCarFilters
from factories import make_car


def test_options_come_from_available_cars() -> None:
    repository = InMemoryCarCatalogRepository(
        [
            make_car(1, make="Toyota", price=Decimal("18000")),
            make_car(2, make="honda", body_type="SUV", price=Decimal("30000")),
            make_car(3, make="BMW", price=Decimal("90000"), status=CarStatus.SOLD),
        ]
    )

    options = GetCarFilters(repository).execute()

    assert options.makes == ["honda", "toyota"]
    assert options.body_types == ["sedan", "suv"]
    assert options.price_range == PriceRange(min=Decimal("18000"), max=Decimal("30000"))


def test_delegates_to_repository() -> None:
    expected = CarFilterOptions(
        makes=[],
        body_types=[],
        fuel_types=[],
        transmissions=[],
        price_range=PriceRange(min=Decimal("0"), max=Decimal("100000")),
    )
    repository = Mock(spec=CarCatalogRepository)
    repository.get_filter_options.return_value = expected

    assert GetCarFilters(repository).execute() is expected
