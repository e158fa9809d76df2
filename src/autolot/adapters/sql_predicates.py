"""
Compilation of domain filter structs into SQLAlchemy WHERE clauses.

Each function maps the populated fields of a filter to a list of clauses
that the caller combines with AND. Free-text search becomes a single OR
clause of case-insensitive substring matches.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, func, or_
from sqlalchemy.orm import InstrumentedAttribute

from autolot.domain.car import CatalogFilters
from autolot.domain.test_drive import TestDriveFilters
from autolot.infra.db.models.car import CarRow
from autolot.infra.db.models.test_drive import TestDriveBookingRow
from autolot.infra.db.models.user import UserRow

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_ci(column: InstrumentedAttribute, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring containment."""
    return column.ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE)


def equals_ci(column: InstrumentedAttribute, value: str) -> ColumnElement[bool]:
    """Case-insensitive equality."""
    return func.lower(column) == value.lower()


def car_clauses(filters: CatalogFilters) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []

    if filters.status is not None:
        clauses.append(CarRow.status == filters.status)

    if filters.search:
        clauses.append(
            or_(
                contains_ci(CarRow.make, filters.search),
                contains_ci(CarRow.model, filters.search),
                contains_ci(CarRow.description, filters.search),
            )
        )

    # Categorical filters (case-insensitive exact match)
    if filters.make:
        clauses.append(equals_ci(CarRow.make, filters.make))
    if filters.body_type:
        clauses.append(equals_ci(CarRow.body_type, filters.body_type))
    if filters.fuel_type:
        clauses.append(equals_ci(CarRow.fuel_type, filters.fuel_type))
    if filters.transmission:
        clauses.append(equals_ci(CarRow.transmission, filters.transmission))

    # Price range (inclusive)
    clauses.append(CarRow.price >= filters.price_min)
    if filters.price_max is not None:
        clauses.append(CarRow.price <= filters.price_max)

    return clauses


def booking_clauses(filters: TestDriveFilters) -> list[ColumnElement[bool]]:
    """
    Clauses over a query that joins bookings to CarRow and UserRow.

    Search spans both related entities: the booked car's make/model OR the
    booking user's name/email.
    """
    clauses: list[ColumnElement[bool]] = []

    if filters.status is not None:
        clauses.append(TestDriveBookingRow.status == filters.status)

    if filters.search:
        clauses.append(
            or_(
                contains_ci(CarRow.make, filters.search),
                contains_ci(CarRow.model, filters.search),
                contains_ci(UserRow.name, filters.search),
                contains_ci(UserRow.email, filters.search),
            )
        )

    return clauses
