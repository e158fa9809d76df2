from __future__ import annotations

from autolot.domain.dashboard import DashboardStats
from autolot.domain.test_drive import TestDriveBooking
from autolot.domain.user import User
from autolot.entrypoints.http.dtos.admin import (
    AdminStatusDTO,
    AdminTestDriveDTO,
    AdminUserDTO,
    BookingUserDTO,
    CarStatsDTO,
    DashboardResponseDTO,
    TestDriveStatsDTO,
)
from autolot.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from autolot.use_cases.get_admin import GetAdminResponse


class AdminMapper:
    """Maps admin use case results to REST DTOs."""

    @staticmethod
    def to_user(user: User) -> AdminUserDTO:
        return AdminUserDTO(
            id=user.id,
            email=user.email,
            name=user.name,
            image_url=user.image_url,
            phone=user.phone,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_admin_status(result: GetAdminResponse) -> AdminStatusDTO:
        return AdminStatusDTO(
            authorized=result.authorized,
            user=AdminMapper.to_user(result.user) if result.user else None,
            reason=result.reason,
        )

    @staticmethod
    def to_test_drive(booking: TestDriveBooking) -> AdminTestDriveDTO:
        user = booking.user
        return AdminTestDriveDTO(
            id=booking.id,
            car_id=booking.car_id,
            user_id=booking.user_id,
            booking_date=booking.booking_date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            status=booking.status.value,
            notes=booking.notes,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
            car=CatalogSearchMapper.to_car_response(booking.car) if booking.car else None,
            user=(
                BookingUserDTO(
                    id=user.id,
                    email=user.email,
                    name=user.name,
                    image_url=user.image_url,
                    phone=user.phone,
                )
                if user
                else None
            ),
        )

    @staticmethod
    def to_dashboard(stats: DashboardStats) -> DashboardResponseDTO:
        cars, test_drives = stats.cars, stats.test_drives
        return DashboardResponseDTO(
            cars=CarStatsDTO(
                total=cars.total,
                available=cars.available,
                sold=cars.sold,
                unavailable=cars.unavailable,
                featured=cars.featured,
            ),
            test_drives=TestDriveStatsDTO(
                total=test_drives.total,
                pending=test_drives.pending,
                confirmed=test_drives.confirmed,
                completed=test_drives.completed,
                cancelled=test_drives.cancelled,
                no_show=test_drives.no_show,
                conversion_rate=float(test_drives.conversion_rate),
            ),
        )
