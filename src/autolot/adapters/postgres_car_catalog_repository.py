"""PostgreSQL implementation of CarCatalogRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from autolot.adapters.row_mappers import car_to_domain, parse_uuid
from autolot.adapters.sql_predicates import car_clauses
from autolot.adapters.store_errors import translate_store_errors
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
from autolot.infra.db.models.car import CarRow
from autolot.ports.car_catalog_repository import CarCatalogRepository, SearchResult

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute
    from sqlalchemy.sql import Select

# Price range reported when no car is available
DEFAULT_PRICE_RANGE = PriceRange(min=Decimal("0"), max=Decimal("100000"))

# OFFSET and LIMIT are signed 64-bit integers in SQL
MAX_SQL_ROWS = 2**63 - 1


class PostgresCarCatalogRepository(CarCatalogRepository):
    """
    PostgreSQL implementation of CarCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses (see sql_predicates)
    - Returns total_count via COUNT(*) over the filtered subquery
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    @translate_store_errors
    def search(self, filters: CatalogFilters, sort: CarSort, paging: Paging) -> SearchResult:
        """
        Search catalog with filters, sort and paging.

        Executes two queries:
        1. COUNT(*) to get total matching cars (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the requested page

        Args:
            filters: Filter criteria
            sort: Result ordering
            paging: Page number and size

        Returns:
            SearchResult with cars and total_count
        """
        query = self._build_query(filters)

        # COUNT over the unpaged, unsorted query
        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        # A page beyond what SQL can address is empty
        if paging.offset > MAX_SQL_ROWS:
            return SearchResult(cars=[], total_count=total_count)

        query = self._apply_sort(query, sort).offset(paging.offset).limit(min(paging.limit, MAX_SQL_ROWS))

        rows = self._session.execute(query).scalars().all()
        cars = [car_to_domain(row) for row in rows]

        return SearchResult(cars=cars, total_count=total_count)

    @translate_store_errors
    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Args:
            car_id: Car ID (UUID string; malformed ids are treated as missing)

        Returns:
            Car entity if found, None otherwise
        """
        car_uuid = parse_uuid(car_id)
        if car_uuid is None:
            return None

        row = self._session.get(CarRow, car_uuid)
        return car_to_domain(row) if row else None

    @translate_store_errors
    def get_filter_options(self) -> CarFilterOptions:
        price_query = select(func.min(CarRow.price), func.max(CarRow.price)).where(
            CarRow.status == CarStatus.AVAILABLE
        )
        min_price, max_price = self._session.execute(price_query).one()

        return CarFilterOptions(
            makes=self._distinct_available(CarRow.make),
            body_types=self._distinct_available(CarRow.body_type),
            fuel_types=self._distinct_available(CarRow.fuel_type),
            transmissions=self._distinct_available(CarRow.transmission),
            price_range=PriceRange(
                min=min_price if min_price is not None else DEFAULT_PRICE_RANGE.min,
                max=max_price if max_price is not None else DEFAULT_PRICE_RANGE.max,
            ),
        )

    @translate_store_errors
    def list_status_snapshots(self) -> list[CarStatusSnapshot]:
        query = select(CarRow.id, CarRow.status, CarRow.featured)
        return [
            CarStatusSnapshot(id=str(car_id), status=status, featured=featured)
            for car_id, status, featured in self._session.execute(query).all()
        ]

    def _build_query(self, filters: CatalogFilters) -> Select[tuple[CarRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        return select(CarRow).where(*car_clauses(filters))

    def _apply_sort(self, query: Select[tuple[CarRow]], sort: CarSort) -> Select[tuple[CarRow]]:
        if sort is CarSort.PRICE_ASC:
            return query.order_by(CarRow.price.asc(), CarRow.id)
        if sort is CarSort.PRICE_DESC:
            return query.order_by(CarRow.price.desc(), CarRow.id)
        return query.order_by(CarRow.created_at.desc(), CarRow.id)

    def _distinct_available(self, column: InstrumentedAttribute) -> list[str]:
        """Distinct non-null values among AVAILABLE cars, lowercased, ascending."""
        query = (
            select(column)
            .where(CarRow.status == CarStatus.AVAILABLE, column.is_not(None))
            .distinct()
        )
        # Lowercasing can merge "Toyota" and "toyota"; sort after merging
        return sorted({value.lower() for value in self._session.execute(query).scalars().all()})
