"""Conversions between ORM rows (infrastructure) and domain entities."""

from __future__ import annotations

from uuid import UUID

from autolot.domain.car import Car
from autolot.domain.dealership import DealershipInfo, WorkingHour
from autolot.domain.test_drive import BookingUser, TestDriveBooking
from autolot.domain.user import User
from autolot.infra.db.models.car import CarRow
from autolot.infra.db.models.dealership import DealershipInfoRow, WorkingHourRow
from autolot.infra.db.models.test_drive import TestDriveBookingRow
from autolot.infra.db.models.user import UserRow


def parse_uuid(value: str) -> UUID | None:
    """Parse an externally supplied id; None when malformed."""
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def car_to_domain(row: CarRow) -> Car:
    return Car(
        id=str(row.id),  # Convert UUID to string
        make=row.make,
        model=row.model,
        year=row.year,
        price=row.price,  # Already Decimal from NUMERIC column
        mileage=row.mileage,
        color=row.color,
        fuel_type=row.fuel_type,
        transmission=row.transmission,
        body_type=row.body_type,
        seats=row.seats,
        description=row.description,
        status=row.status,
        featured=row.featured,
        images=list(row.images or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def user_to_domain(row: UserRow) -> User:
    return User(
        id=str(row.id),
        external_auth_id=row.external_auth_id,
        email=row.email,
        role=row.role,
        name=row.name,
        image_url=row.image_url,
        phone=row.phone,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def booking_user_to_domain(row: UserRow) -> BookingUser:
    return BookingUser(
        id=str(row.id),
        email=row.email,
        name=row.name,
        image_url=row.image_url,
        phone=row.phone,
    )


def booking_to_domain(row: TestDriveBookingRow, *, with_relations: bool = True) -> TestDriveBooking:
    return TestDriveBooking(
        id=str(row.id),
        car_id=str(row.car_id),
        user_id=str(row.user_id),
        booking_date=row.booking_date,
        start_time=row.start_time,
        end_time=row.end_time,
        status=row.status,
        car=car_to_domain(row.car) if with_relations else None,
        user=booking_user_to_domain(row.user) if with_relations else None,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def working_hour_to_domain(row: WorkingHourRow) -> WorkingHour:
    return WorkingHour(
        id=str(row.id),
        day_of_week=row.day_of_week,
        open_time=row.open_time,
        close_time=row.close_time,
        is_open=row.is_open,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def dealership_to_domain(row: DealershipInfoRow, hours: list[WorkingHourRow]) -> DealershipInfo:
    return DealershipInfo(
        id=str(row.id),
        name=row.name,
        address=row.address,
        phone=row.phone,
        email=row.email,
        working_hours=[working_hour_to_domain(hour) for hour in hours],
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
