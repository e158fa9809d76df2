from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from autolot.domain.car import CarStatus, CarStatusSnapshot
from autolot.domain.test_drive import BookingStatusSnapshot, TestDriveStatus


@dataclass(frozen=True, slots=True)
class CarStats:
    total: int
    available: int
    sold: int
    unavailable: int
    featured: int


@dataclass(frozen=True, slots=True)
class TestDriveStats:
    total: int
    pending: int
    confirmed: int
    completed: int
    cancelled: int
    no_show: int
    conversion_rate: Decimal


@dataclass(frozen=True, slots=True)
class DashboardStats:
    cars: CarStats
    test_drives: TestDriveStats


def conversion_rate(
    cars: Iterable[CarStatusSnapshot],
    bookings: Iterable[BookingStatusSnapshot],
) -> Decimal:
    """
    Percentage of completed test drives that ended in a sale.

    Numerator: distinct SOLD cars that have at least one COMPLETED booking.
    Denominator: COMPLETED bookings (not distinct cars). A sold car with two
    completed bookings therefore yields 50.00, not 100.00.

    Rounded half-up to 2 decimal places; exactly 0 when nothing is completed.
    """
    completed_car_ids = [b.car_id for b in bookings if b.status is TestDriveStatus.COMPLETED]
    if not completed_car_ids:
        return Decimal("0")

    completed_lookup = set(completed_car_ids)
    sold_after_test_drive = sum(
        1 for car in cars if car.status is CarStatus.SOLD and car.id in completed_lookup
    )

    rate = Decimal(sold_after_test_drive) / Decimal(len(completed_car_ids)) * Decimal("100")
    return rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def compute_dashboard_stats(
    cars: list[CarStatusSnapshot],
    bookings: list[BookingStatusSnapshot],
) -> DashboardStats:
    car_counts = Counter(car.status for car in cars)
    booking_counts = Counter(booking.status for booking in bookings)

    return DashboardStats(
        cars=CarStats(
            total=len(cars),
            available=car_counts[CarStatus.AVAILABLE],
            sold=car_counts[CarStatus.SOLD],
            unavailable=car_counts[CarStatus.UNAVAILABLE],
            featured=sum(1 for car in cars if car.featured),
        ),
        test_drives=TestDriveStats(
            total=len(bookings),
            pending=booking_counts[TestDriveStatus.PENDING],
            confirmed=booking_counts[TestDriveStatus.CONFIRMED],
            completed=booking_counts[TestDriveStatus.COMPLETED],
            cancelled=booking_counts[TestDriveStatus.CANCELLED],
            no_show=booking_counts[TestDriveStatus.NO_SHOW],
            conversion_rate=conversion_rate(cars, bookings),
        ),
    )
