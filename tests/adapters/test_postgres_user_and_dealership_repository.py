from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from autolot.adapters.postgres_dealership_repository import PostgresDealershipRepository
from autolot.adapters.postgres_user_repository import PostgresUserRepository
from autolot.domain.dealership import DayOfWeek
from autolot.domain.user import UserRole
from autolot.infra.db.models import DealershipInfoRow, WorkingHourRow
from db_rows import add_user


def test_user_lookup_by_external_id(db_session: Session) -> None:
    add_user(db_session, 1, role=UserRole.ADMIN, external_auth_id="user_abc")
    repo = PostgresUserRepository(db_session)

    user = repo.get_by_external_id("user_abc")

    assert user is not None
    assert user.id == str(uuid.UUID(int=1001))
    assert user.is_admin is True
    assert repo.get_by_external_id("user_missing") is None


def test_dealership_hours_are_ordered_monday_first(db_session: Session) -> None:
    dealership = DealershipInfoRow(
        name="Autolot Motors",
        address="1 Main St",
        phone="555-0100",
        email="hi@autolot.example",
    )
    for day in (DayOfWeek.SUNDAY, DayOfWeek.FRIDAY, DayOfWeek.MONDAY, DayOfWeek.WEDNESDAY):
        dealership.working_hours.append(
            WorkingHourRow(
                day_of_week=day,
                open_time="09:00",
                close_time="18:00",
                is_open=day is not DayOfWeek.SUNDAY,
            )
        )
    db_session.add(dealership)
    db_session.flush()

    info = PostgresDealershipRepository(db_session).get_dealership()

    assert info is not None
    assert info.name == "Autolot Motors"
    assert [hour.day_of_week for hour in info.working_hours] == [
        DayOfWeek.MONDAY,
        DayOfWeek.WEDNESDAY,
        DayOfWeek.FRIDAY,
        DayOfWeek.SUNDAY,
    ]
    assert info.working_hours[-1].is_open is False


def test_no_dealership(db_session: Session) -> None:
    assert PostgresDealershipRepository(db_session).get_dealership() is None
