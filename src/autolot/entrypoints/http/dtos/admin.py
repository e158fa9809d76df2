from datetime import date, datetime

from pydantic import BaseModel, Field

from autolot.entrypoints.http.dtos.catalog_search import CarResponseDTO


class AdminUserDTO(BaseModel):
    id: str
    email: str
    name: str | None = None
    image_url: str | None = None
    phone: str | None = None
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdminStatusDTO(BaseModel):
    authorized: bool
    user: AdminUserDTO | None = None
    reason: str | None = Field(default=None, examples=["not-admin"])


class AdminTestDrivesQueryDTO(BaseModel):
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of car make/model or customer name/email",
        examples=["toyota"],
    )
    status: str | None = Field(
        default=None,
        description="PENDING, CONFIRMED, COMPLETED, CANCELLED or NO_SHOW",
        examples=["PENDING"],
    )


class BookingUserDTO(BaseModel):
    id: str
    email: str
    name: str | None = None
    image_url: str | None = None
    phone: str | None = None


class AdminTestDriveDTO(BaseModel):
    id: str
    car_id: str
    user_id: str
    booking_date: date
    start_time: str
    end_time: str
    status: str
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    car: CarResponseDTO | None = None
    user: BookingUserDTO | None = None


class UpdateTestDriveStatusDTO(BaseModel):
    status: str = Field(examples=["CONFIRMED"])


class StatusUpdatedDTO(BaseModel):
    message: str = "Status updated"


class CarStatsDTO(BaseModel):
    total: int
    available: int
    sold: int
    unavailable: int
    featured: int


class TestDriveStatsDTO(BaseModel):
    total: int
    pending: int
    confirmed: int
    completed: int
    cancelled: int
    no_show: int
    conversion_rate: float = Field(description="Percent, 2 decimal places")


class DashboardResponseDTO(BaseModel):
    cars: CarStatsDTO
    test_drives: TestDriveStatsDTO
