from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from autolot.domain.car import (
    Car,
    CarFilterOptions,
    CarSort,
    CarStatusSnapshot,
    CatalogFilters,
    Paging,
)


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    cars: list[Car]
    total_count: int  # Total matching cars before paging


class CarCatalogRepository(ABC):
    """
    Port for car inventory access.

    Contract (Preconditions):
        - filters are already normalized by the caller (price bounds parsed,
          empty strings may still be present and mean "no filter")
        - paging is trusted; a page past the end yields an empty list
    """

    @abstractmethod
    def search(self, filters: CatalogFilters, sort: CarSort, paging: Paging) -> SearchResult:
        """
        Search catalog with filters, sort and paging.

        The total count is computed with the same predicate but without
        pagination, independently from the page fetch.

        Args:
            filters: Filter criteria (AND of clauses, text search is an OR)
            sort: Result ordering
            paging: Page number and size

        Returns:
            SearchResult containing the page of cars and the total match count
        """
        ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None:
        """Return the car, or None if it does not exist or the id is malformed."""
        ...

    @abstractmethod
    def get_filter_options(self) -> CarFilterOptions:
        """Distinct categorical values and price range among AVAILABLE cars."""
        ...

    @abstractmethod
    def list_status_snapshots(self) -> list[CarStatusSnapshot]:
        """Every car's (id, status, featured), unfiltered."""
        ...
