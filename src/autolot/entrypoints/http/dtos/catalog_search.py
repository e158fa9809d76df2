from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from autolot.domain.car import DEFAULT_PAGE_SIZE


class CarResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: float
    mileage: int
    color: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    body_type: str | None = None
    seats: int | None = None
    description: str | None = None
    status: str
    featured: bool
    images: list[str] = Field(default_factory=list)
    wishlisted: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching cars in the catalog.

    Prices are taken as raw strings: an unparseable bound drops the
    filter instead of failing the request.
    """

    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of make, model or description",
        examples=["corolla"],
    )
    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive exact match)",
        examples=["Toyota"],
    )
    body_type: str | None = Field(default=None, examples=["SUV"])
    fuel_type: str | None = Field(default=None, examples=["Petrol"])
    transmission: str | None = Field(default=None, examples=["Automatic"])
    min_price: str | None = Field(
        default=None,
        description="Minimum price (inclusive); defaults to 0",
        examples=["20000"],
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive); 0 or absent means no upper bound",
        examples=["35000"],
    )
    sort_by: str | None = Field(
        default=None,
        description="newest (default), priceAsc or priceDesc",
        examples=["priceAsc"],
    )
    page: int = Field(default=1, description="1-based page number", ge=1)
    limit: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Page size",
        ge=1,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search": "corolla",
                "make": "Toyota",
                "min_price": "20000",
                "max_price": "35000",
                "sort_by": "priceAsc",
                "page": 1,
                "limit": 6,
            }
        }
    )


class PriceRangeDTO(BaseModel):
    min: float
    max: float


class CarFiltersResponseDTO(BaseModel):
    makes: list[str]
    body_types: list[str]
    fuel_types: list[str]
    transmissions: list[str]
    price_range: PriceRangeDTO


class ToggleSavedCarResponseDTO(BaseModel):
    saved: bool
