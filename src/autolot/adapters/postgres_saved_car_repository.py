"""PostgreSQL implementation of SavedCarRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from autolot.adapters.row_mappers import car_to_domain, parse_uuid
from autolot.adapters.store_errors import translate_store_errors
from autolot.domain.car import Car
from autolot.infra.db.models.saved_car import SavedCarRow
from autolot.ports.saved_car_repository import SavedCarRepository

logger = logging.getLogger(__name__)


class PostgresSavedCarRepository(SavedCarRepository):
    """
    Wishlist storage backed by the saved_cars table.

    Uniqueness of (user_id, car_id) is enforced by the composite primary key;
    toggle() never reads-then-writes:
    - DELETE ... WHERE user_id AND car_id; a deleted row means "unsaved"
    - otherwise INSERT inside a SAVEPOINT; a primary key violation means a
      concurrent toggle inserted the same pair first, which is reported as saved
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @translate_store_errors
    def saved_car_ids(self, user_id: str) -> set[str]:
        user_uuid = parse_uuid(user_id)
        if user_uuid is None:
            return set()

        query = select(SavedCarRow.car_id).where(SavedCarRow.user_id == user_uuid)
        return {str(car_id) for car_id in self._session.execute(query).scalars().all()}

    @translate_store_errors
    def is_saved(self, user_id: str, car_id: str) -> bool:
        user_uuid, car_uuid = parse_uuid(user_id), parse_uuid(car_id)
        if user_uuid is None or car_uuid is None:
            return False

        return self._session.get(SavedCarRow, (user_uuid, car_uuid)) is not None

    @translate_store_errors
    def toggle(self, user_id: str, car_id: str) -> bool:
        user_uuid, car_uuid = parse_uuid(user_id), parse_uuid(car_id)
        if user_uuid is None or car_uuid is None:
            raise ValueError("toggle requires well-formed user and car ids")

        removed = self._session.execute(
            delete(SavedCarRow).where(
                SavedCarRow.user_id == user_uuid,
                SavedCarRow.car_id == car_uuid,
            )
        )
        if removed.rowcount:
            return False

        try:
            with self._session.begin_nested():
                self._session.add(SavedCarRow(user_id=user_uuid, car_id=car_uuid))
        except IntegrityError:
            logger.info(
                "Concurrent save detected, keeping existing entry",
                extra={"user_id": user_id, "car_id": car_id},
            )
        return True

    @translate_store_errors
    def list_saved_cars(self, user_id: str) -> list[Car]:
        user_uuid = parse_uuid(user_id)
        if user_uuid is None:
            return []

        query = (
            select(SavedCarRow)
            .options(joinedload(SavedCarRow.car))
            .where(SavedCarRow.user_id == user_uuid)
            .order_by(SavedCarRow.saved_at.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [car_to_domain(row.car) for row in rows]
