from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum


# Largest integer a JavaScript client can send exactly; treated as "no upper bound".
MAX_PRICE_BOUND = Decimal(2**53 - 1)

DEFAULT_PAGE_SIZE = 6


class CarStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"
    SOLD = "SOLD"


class CarSort(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"

    @classmethod
    def parse(cls, value: str | None) -> CarSort:
        """Unknown or missing sort keys fall back to NEWEST."""
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


@dataclass(frozen=True)
class Car:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    mileage: int = 0
    color: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    body_type: str | None = None
    seats: int | None = None
    description: str | None = None
    status: CarStatus = CarStatus.AVAILABLE
    featured: bool = False
    images: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    wishlisted: bool = False

    def with_wishlisted(self, wishlisted: bool) -> Car:
        return replace(self, wishlisted=wishlisted)


@dataclass(frozen=True, slots=True)
class CarStatusSnapshot:
    """The slice of a car the dashboard needs."""

    id: str
    status: CarStatus
    featured: bool


@dataclass(frozen=True, slots=True)
class PriceRange:
    min: Decimal
    max: Decimal


@dataclass(frozen=True, slots=True)
class CarFilterOptions:
    makes: list[str]
    body_types: list[str]
    fuel_types: list[str]
    transmissions: list[str]
    price_range: PriceRange


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """
    Optional search criteria for the car catalog.

    Every populated field contributes one AND clause; ``search`` expands to an
    OR over make, model and description. Empty strings count as absent.
    """

    search: str | None = None
    make: str | None = None
    body_type: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    price_min: Decimal = Decimal("0")
    price_max: Decimal | None = None
    status: CarStatus | None = CarStatus.AVAILABLE


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def page_count(self, total: int) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(total / self.limit)


def _parse_decimal(value: str | int | float | Decimal | None) -> Decimal | None:
    """Parse a loosely typed number; returns None for blanks, garbage and NaN."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if parsed.is_nan():
        return None
    return parsed


def parse_price_min(value: str | int | float | Decimal | None) -> Decimal:
    """Lower price bound: 0 when absent, non-numeric or not finite."""
    parsed = _parse_decimal(value)
    if parsed is None or not parsed.is_finite():
        return Decimal("0")
    return parsed


def parse_price_max(value: str | int | float | Decimal | None) -> Decimal | None:
    """Upper price bound: None (unbounded) when absent, zero, non-numeric or >= MAX_PRICE_BOUND."""
    parsed = _parse_decimal(value)
    if parsed is None or not parsed.is_finite() or parsed == 0 or parsed >= MAX_PRICE_BOUND:
        return None
    return parsed
