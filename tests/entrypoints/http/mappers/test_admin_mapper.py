from __future__ import annotations

from datetime import date
from decimal import Decimal

from autolot.domain.dashboard import CarStats, DashboardStats, TestDriveStats
from autolot.domain.test_drive import TestDriveStatus
from autolot.domain.user import User, UserRole
from autolot.entrypoints.http.mappers.admin_mapper import AdminMapper
from autolot.use_cases.get_admin import GetAdminResponse
from factories import make_booking, make_car, make_user, uid


def test_to_admin_status_with_user(admin: User) -> None:
    dto = AdminMapper.to_admin_status(GetAdminResponse(authorized=True, user=admin))

    assert dto.authorized is True
    assert dto.user is not None
    assert dto.user.role == "ADMIN"
    assert dto.user.email == admin.email
    assert dto.reason is None


def test_to_admin_status_without_user() -> None:
    dto = AdminMapper.to_admin_status(GetAdminResponse(authorized=False, reason="not-admin"))

    assert dto.model_dump() == {"authorized": False, "user": None, "reason": "not-admin"}


def test_to_test_drive_embeds_car_and_user() -> None:
    user = make_user(5, UserRole.USER, phone="555-0199")
    booking = make_booking(
        7, make_car(3), user, TestDriveStatus.NO_SHOW, booking_date=date(2026, 5, 9), start_time="13:00"
    )

    dto = AdminMapper.to_test_drive(booking)

    assert dto.id == uid(2007)
    assert dto.car_id == uid(3)
    assert dto.user_id == user.id
    assert dto.status == "NO_SHOW"
    assert dto.booking_date == date(2026, 5, 9)
    assert dto.start_time == "13:00"
    assert dto.car is not None and dto.car.id == uid(3)
    assert dto.user is not None and dto.user.phone == "555-0199"


def test_to_test_drive_without_relations() -> None:
    booking = make_booking(1, make_car(1), make_user(2), car=None, user=None)

    dto = AdminMapper.to_test_drive(booking)

    assert dto.car is None
    assert dto.user is None


def test_to_dashboard_serializes_rate_as_number() -> None:
    stats = DashboardStats(
        cars=CarStats(total=4, available=2, sold=1, unavailable=1, featured=0),
        test_drives=TestDriveStats(
            total=3,
            pending=0,
            confirmed=0,
            completed=3,
            cancelled=0,
            no_show=0,
            conversion_rate=Decimal("33.33"),
        ),
    )

    dto = AdminMapper.to_dashboard(stats)

    assert dto.cars.sold == 1
    assert dto.test_drives.completed == 3
    assert dto.test_drives.conversion_rate == 33.33
