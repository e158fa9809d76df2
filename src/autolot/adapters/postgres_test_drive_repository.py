"""PostgreSQL implementation of TestDriveRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session, contains_eager

from autolot.adapters.row_mappers import booking_to_domain, parse_uuid
from autolot.adapters.sql_predicates import booking_clauses
from autolot.adapters.store_errors import translate_store_errors
from autolot.domain.test_drive import (
    ACTIVE_TEST_DRIVE_STATUSES,
    BookingStatusSnapshot,
    TestDriveBooking,
    TestDriveFilters,
    TestDriveStatus,
    UserTestDrive,
)
from autolot.infra.db.models.test_drive import TestDriveBookingRow
from autolot.ports.test_drive_repository import TestDriveRepository


class PostgresTestDriveRepository(TestDriveRepository):
    """
    Booking storage backed by test_drive_bookings.

    search() joins cars and users once and populates both relationships from
    the join, so the embedded car and user cost no extra queries.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @translate_store_errors
    def search(self, filters: TestDriveFilters) -> list[TestDriveBooking]:
        query = (
            select(TestDriveBookingRow)
            .join(TestDriveBookingRow.car)
            .join(TestDriveBookingRow.user)
            .options(
                contains_eager(TestDriveBookingRow.car),
                contains_eager(TestDriveBookingRow.user),
            )
            .where(*booking_clauses(filters))
            .order_by(
                TestDriveBookingRow.booking_date.desc(),
                TestDriveBookingRow.start_time.asc(),
            )
        )
        rows = self._session.execute(query).scalars().all()
        return [booking_to_domain(row) for row in rows]

    @translate_store_errors
    def get_by_id(self, booking_id: str) -> TestDriveBooking | None:
        booking_uuid = parse_uuid(booking_id)
        if booking_uuid is None:
            return None

        row = self._session.get(TestDriveBookingRow, booking_uuid)
        return booking_to_domain(row, with_relations=False) if row else None

    @translate_store_errors
    def update_status(self, booking_id: str, status: TestDriveStatus) -> None:
        booking_uuid = parse_uuid(booking_id)
        if booking_uuid is None:
            raise ValueError(f"Malformed booking id: {booking_id!r}")

        self._session.execute(
            update(TestDriveBookingRow)
            .where(TestDriveBookingRow.id == booking_uuid)
            .values(status=status)
        )
        self._session.flush()

    @translate_store_errors
    def list_status_snapshots(self) -> list[BookingStatusSnapshot]:
        query = select(
            TestDriveBookingRow.id,
            TestDriveBookingRow.status,
            TestDriveBookingRow.car_id,
        )
        return [
            BookingStatusSnapshot(id=str(booking_id), status=status, car_id=str(car_id))
            for booking_id, status, car_id in self._session.execute(query).all()
        ]

    @translate_store_errors
    def find_active_for_user(self, car_id: str, user_id: str) -> UserTestDrive | None:
        car_uuid, user_uuid = parse_uuid(car_id), parse_uuid(user_id)
        if car_uuid is None or user_uuid is None:
            return None

        query = (
            select(TestDriveBookingRow)
            .where(
                TestDriveBookingRow.car_id == car_uuid,
                TestDriveBookingRow.user_id == user_uuid,
                TestDriveBookingRow.status.in_(list(ACTIVE_TEST_DRIVE_STATUSES)),
            )
            .order_by(TestDriveBookingRow.created_at.desc())
            .limit(1)
        )
        row = self._session.execute(query).scalars().first()
        if row is None:
            return None

        return UserTestDrive(id=str(row.id), status=row.status, booking_date=row.booking_date)
