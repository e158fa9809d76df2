from __future__ import annotations

from autolot.domain.dealership import DealershipInfo
from autolot.domain.test_drive import UserTestDrive
from autolot.entrypoints.http.dtos.car_detail import (
    CarDetailResponseDTO,
    DealershipDTO,
    TestDriveInfoDTO,
    UserTestDriveDTO,
    WorkingHourDTO,
)
from autolot.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from autolot.use_cases.get_car_by_id import GetCarByIdResponse


class CarDetailMapper:
    """Maps the car detail use case result to its REST shape."""

    @staticmethod
    def to_user_test_drive(test_drive: UserTestDrive | None) -> UserTestDriveDTO | None:
        if test_drive is None:
            return None
        return UserTestDriveDTO(
            id=test_drive.id,
            status=test_drive.status.value,
            booking_date=test_drive.booking_date,
        )

    @staticmethod
    def to_dealership(dealership: DealershipInfo | None) -> DealershipDTO | None:
        if dealership is None:
            return None
        return DealershipDTO(
            id=dealership.id,
            name=dealership.name,
            address=dealership.address,
            phone=dealership.phone,
            email=dealership.email,
            working_hours=[
                WorkingHourDTO(
                    id=hour.id,
                    day_of_week=hour.day_of_week.value,
                    open_time=hour.open_time,
                    close_time=hour.close_time,
                    is_open=hour.is_open,
                    created_at=hour.created_at,
                    updated_at=hour.updated_at,
                )
                for hour in dealership.working_hours
            ],
            created_at=dealership.created_at,
            updated_at=dealership.updated_at,
        )

    @staticmethod
    def to_response(result: GetCarByIdResponse) -> CarDetailResponseDTO:
        car = CatalogSearchMapper.to_car_response(result.car)
        return CarDetailResponseDTO(
            **car.model_dump(),
            test_drive_info=TestDriveInfoDTO(
                user_test_drive=CarDetailMapper.to_user_test_drive(result.user_test_drive),
                dealership=CarDetailMapper.to_dealership(result.dealership),
            ),
        )
