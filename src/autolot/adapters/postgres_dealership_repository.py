"""PostgreSQL implementation of DealershipRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from autolot.adapters.row_mappers import dealership_to_domain
from autolot.adapters.store_errors import translate_store_errors
from autolot.domain.dealership import DayOfWeek, DealershipInfo
from autolot.infra.db.models.dealership import DealershipInfoRow
from autolot.ports.dealership_repository import DealershipRepository

_DAY_ORDER = {day: position for position, day in enumerate(DayOfWeek)}


class PostgresDealershipRepository(DealershipRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    @translate_store_errors
    def get_dealership(self) -> DealershipInfo | None:
        query = (
            select(DealershipInfoRow)
            .options(selectinload(DealershipInfoRow.working_hours))
            .order_by(DealershipInfoRow.created_at)
            .limit(1)
        )
        row = self._session.execute(query).scalars().first()
        if row is None:
            return None

        # Enum columns sort alphabetically in SQL; order Monday..Sunday here
        hours = sorted(row.working_hours, key=lambda hour: _DAY_ORDER[hour.day_of_week])
        return dealership_to_domain(row, hours)
