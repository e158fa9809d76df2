"""ORM row builders for SQL adapter tests."""

from __future__ import annotations

import uuid
from datetime import date, timedelta
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from autolot.domain.car import CarStatus
from autolot.domain.test_drive import TestDriveStatus
from autolot.domain.user import UserRole
from autolot.infra.db.models import CarRow, TestDriveBookingRow, UserRow
from factories import BASE_TIME


def add_car(session: Session, n: int, **overrides: Any) -> CarRow:
    values: dict[str, Any] = {
        "id": uuid.UUID(int=n),
        "make": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "price": Decimal("20000.00"),
        "mileage": 30000,
        "fuel_type": "Petrol",
        "transmission": "Automatic",
        "body_type": "Sedan",
        "description": "Reliable daily driver",
        "status": CarStatus.AVAILABLE,
        "featured": False,
        "images": [],
        "created_at": BASE_TIME + timedelta(days=n),
        "updated_at": BASE_TIME + timedelta(days=n),
    }
    values.update(overrides)
    row = CarRow(**values)
    session.add(row)
    session.flush()
    return row


def add_user(session: Session, n: int, role: UserRole = UserRole.USER, **overrides: Any) -> UserRow:
    values: dict[str, Any] = {
        "id": uuid.UUID(int=1000 + n),
        "external_auth_id": f"user_{n}",
        "email": f"user{n}@example.com",
        "name": f"User {n}",
        "role": role,
    }
    values.update(overrides)
    row = UserRow(**values)
    session.add(row)
    session.flush()
    return row


def add_booking(
    session: Session,
    n: int,
    car: CarRow,
    user: UserRow,
    status: TestDriveStatus = TestDriveStatus.PENDING,
    **overrides: Any,
) -> TestDriveBookingRow:
    values: dict[str, Any] = {
        "id": uuid.UUID(int=2000 + n),
        "car_id": car.id,
        "user_id": user.id,
        "booking_date": date(2026, 2, 1),
        "start_time": "10:00",
        "end_time": "11:00",
        "status": status,
        "created_at": BASE_TIME + timedelta(hours=n),
        "updated_at": BASE_TIME + timedelta(hours=n),
    }
    values.update(overrides)
    row = TestDriveBookingRow(**values)
    session.add(row)
    session.flush()
    return row
