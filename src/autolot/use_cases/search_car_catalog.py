from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.car import Car, CarSort, CatalogFilters, Paging
from autolot.ports.car_catalog_repository import CarCatalogRepository
from autolot.use_cases.annotate_wishlist import WishlistAnnotator
from autolot.use_cases.identity import IdentityResolver


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CatalogFilters
    sort: CarSort
    paging: Paging
    credential: str | None = None


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]
    total_count: int  # Total matching cars before paging
    paging: Paging

    @property
    def pages(self) -> int:
        return self.paging.page_count(self.total_count)


class SearchCarCatalog:
    """
    Public car search with filters, sorting and pagination.

    Filtering, sorting and counting are delegated to the repository; the
    use case only adds the caller's wishlist flags to the returned page.
    Anonymous callers are allowed.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        car_catalog_repository: CarCatalogRepository,
        wishlist: WishlistAnnotator,
    ) -> None:
        self._identity = identity
        self._repository = car_catalog_repository
        self._wishlist = wishlist

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Normalized filters, sort and paging plus the caller credential

        Returns:
            Response containing the annotated page and the total match count
        """
        caller = self._identity.resolve_caller(request.credential)

        result = self._repository.search(
            filters=request.filters,
            sort=request.sort,
            paging=request.paging,
        )

        return SearchCarCatalogResponse(
            cars=self._wishlist.annotate(result.cars, caller.id if caller else None),
            total_count=result.total_count,
            paging=request.paging,
        )
