from __future__ import annotations

from dataclasses import replace

from autolot.adapters.in_memory_car_catalog_repository import _contains_ci
from autolot.domain.test_drive import (
    ACTIVE_TEST_DRIVE_STATUSES,
    BookingStatusSnapshot,
    TestDriveBooking,
    TestDriveFilters,
    TestDriveStatus,
    UserTestDrive,
)
from autolot.ports.test_drive_repository import TestDriveRepository


def booking_matches(booking: TestDriveBooking, filters: TestDriveFilters) -> bool:
    """Pure-Python twin of sql_predicates.booking_clauses."""
    if filters.status is not None and booking.status is not filters.status:
        return False
    if filters.search:
        car, user = booking.car, booking.user
        car_hit = car is not None and (
            _contains_ci(car.make, filters.search) or _contains_ci(car.model, filters.search)
        )
        user_hit = user is not None and (
            _contains_ci(user.name, filters.search) or _contains_ci(user.email, filters.search)
        )
        if not (car_hit or user_hit):
            return False
    return True


class InMemoryTestDriveRepository(TestDriveRepository):
    """Canonical contract implementation for tests. Bookings carry their car and user."""

    def __init__(self, bookings: list[TestDriveBooking]) -> None:
        self._bookings = list(bookings)

    def search(self, filters: TestDriveFilters) -> list[TestDriveBooking]:
        matches = [b for b in self._bookings if booking_matches(b, filters)]
        # Two stable sorts: secondary key first, then primary
        matches.sort(key=lambda b: b.start_time)
        matches.sort(key=lambda b: b.booking_date, reverse=True)
        return matches

    def get_by_id(self, booking_id: str) -> TestDriveBooking | None:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def update_status(self, booking_id: str, status: TestDriveStatus) -> None:
        self._bookings = [
            replace(b, status=status) if b.id == booking_id else b for b in self._bookings
        ]

    def list_status_snapshots(self) -> list[BookingStatusSnapshot]:
        return [
            BookingStatusSnapshot(id=b.id, status=b.status, car_id=b.car_id)
            for b in self._bookings
        ]

    def find_active_for_user(self, car_id: str, user_id: str) -> UserTestDrive | None:
        candidates = [
            b
            for b in self._bookings
            if b.car_id == car_id
            and b.user_id == user_id
            and b.status in ACTIVE_TEST_DRIVE_STATUSES
        ]
        if not candidates:
            return None

        latest = max(
            candidates,
            key=lambda b: b.created_at.timestamp() if b.created_at else 0.0,
        )
        return UserTestDrive(id=latest.id, status=latest.status, booking_date=latest.booking_date)
