from datetime import date, datetime

from pydantic import BaseModel, Field

from autolot.entrypoints.http.dtos.catalog_search import CarResponseDTO


class UserTestDriveDTO(BaseModel):
    id: str
    status: str
    booking_date: date


class WorkingHourDTO(BaseModel):
    id: str
    day_of_week: str
    open_time: str
    close_time: str
    is_open: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DealershipDTO(BaseModel):
    id: str
    name: str
    address: str
    phone: str
    email: str
    working_hours: list[WorkingHourDTO] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TestDriveInfoDTO(BaseModel):
    user_test_drive: UserTestDriveDTO | None = None
    dealership: DealershipDTO | None = None


class CarDetailResponseDTO(CarResponseDTO):
    test_drive_info: TestDriveInfoDTO
