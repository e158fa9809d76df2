from __future__ import annotations

from autolot.domain.car import CarFilterOptions
from autolot.ports.car_catalog_repository import CarCatalogRepository


class GetCarFilters:
    """Values the search UI offers in its filter dropdowns. Public."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self) -> CarFilterOptions:
        return self._repository.get_filter_options()
