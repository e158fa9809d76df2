"""Tests for dashboard statistics and the conversion rate."""

from __future__ import annotations

from decimal import Decimal

from autolot.domain.car import CarStatus, CarStatusSnapshot
from autolot.domain.dashboard import compute_dashboard_stats, conversion_rate
from autolot.domain.test_drive import BookingStatusSnapshot, TestDriveStatus


def car(car_id: str, status: CarStatus = CarStatus.AVAILABLE, featured: bool = False) -> CarStatusSnapshot:
    return CarStatusSnapshot(id=car_id, status=status, featured=featured)


def booking(booking_id: str, car_id: str, status: TestDriveStatus) -> BookingStatusSnapshot:
    return BookingStatusSnapshot(id=booking_id, status=status, car_id=car_id)


# ==============================================================================
# Conversion rate
# ==============================================================================


def test_conversion_rate_is_zero_without_completed_bookings() -> None:
    cars = [car("c1", CarStatus.SOLD)]
    bookings = [booking("b1", "c1", TestDriveStatus.PENDING)]

    rate = conversion_rate(cars, bookings)

    assert rate == Decimal("0")


def test_conversion_rate_is_zero_with_no_data() -> None:
    assert conversion_rate([], []) == Decimal("0")


def test_sold_car_with_one_completed_booking_is_full_conversion() -> None:
    cars = [car("c1", CarStatus.SOLD)]
    bookings = [booking("b1", "c1", TestDriveStatus.COMPLETED)]

    assert conversion_rate(cars, bookings) == Decimal("100.00")


def test_two_completed_bookings_on_same_sold_car_halve_the_rate() -> None:
    """Numerator counts distinct cars, denominator counts bookings."""
    cars = [car("c1", CarStatus.SOLD)]
    bookings = [
        booking("b1", "c1", TestDriveStatus.COMPLETED),
        booking("b2", "c1", TestDriveStatus.COMPLETED),
    ]

    assert conversion_rate(cars, bookings) == Decimal("50.00")


def test_unsold_cars_and_other_statuses_do_not_count() -> None:
    cars = [car("c1", CarStatus.SOLD), car("c2", CarStatus.AVAILABLE), car("c3", CarStatus.SOLD)]
    bookings = [
        booking("b1", "c1", TestDriveStatus.COMPLETED),
        booking("b2", "c2", TestDriveStatus.COMPLETED),
        booking("b3", "c3", TestDriveStatus.CANCELLED),
    ]

    assert conversion_rate(cars, bookings) == Decimal("50.00")


def test_conversion_rate_rounds_half_up_to_two_places() -> None:
    cars = [car("c1", CarStatus.SOLD)]
    bookings = [booking(f"b{i}", "c1" if i == 0 else f"c{i + 10}", TestDriveStatus.COMPLETED) for i in range(3)]

    rate = conversion_rate(cars, bookings)

    assert rate == Decimal("33.33")
    assert rate.as_tuple().exponent == -2


def test_conversion_rate_rounds_up_at_midpoint() -> None:
    # 1 of 32 completed bookings sold: 3.125% → 3.13
    cars = [car("c1", CarStatus.SOLD)]
    bookings = [booking("b0", "c1", TestDriveStatus.COMPLETED)] + [
        booking(f"b{i}", f"other{i}", TestDriveStatus.COMPLETED) for i in range(1, 32)
    ]

    assert conversion_rate(cars, bookings) == Decimal("3.13")


# ==============================================================================
# Dashboard counts
# ==============================================================================


def test_compute_dashboard_stats_counts_every_status() -> None:
    cars = [
        car("c1", CarStatus.AVAILABLE, featured=True),
        car("c2", CarStatus.AVAILABLE),
        car("c3", CarStatus.SOLD, featured=True),
        car("c4", CarStatus.UNAVAILABLE),
    ]
    bookings = [
        booking("b1", "c1", TestDriveStatus.PENDING),
        booking("b2", "c1", TestDriveStatus.CONFIRMED),
        booking("b3", "c3", TestDriveStatus.COMPLETED),
        booking("b4", "c2", TestDriveStatus.CANCELLED),
        booking("b5", "c2", TestDriveStatus.NO_SHOW),
        booking("b6", "c4", TestDriveStatus.PENDING),
    ]

    stats = compute_dashboard_stats(cars, bookings)

    assert stats.cars.total == 4
    assert stats.cars.available == 2
    assert stats.cars.sold == 1
    assert stats.cars.unavailable == 1
    assert stats.cars.featured == 2

    assert stats.test_drives.total == 6
    assert stats.test_drives.pending == 2
    assert stats.test_drives.confirmed == 1
    assert stats.test_drives.completed == 1
    assert stats.test_drives.cancelled == 1
    assert stats.test_drives.no_show == 1
    assert stats.test_drives.conversion_rate == Decimal("100.00")


def test_compute_dashboard_stats_empty() -> None:
    stats = compute_dashboard_stats([], [])

    assert stats.cars.total == 0
    assert stats.test_drives.total == 0
    assert stats.test_drives.conversion_rate == Decimal("0")
