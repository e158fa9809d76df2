"""PostgreSQL implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from autolot.adapters.row_mappers import user_to_domain
from autolot.adapters.store_errors import translate_store_errors
from autolot.domain.user import User
from autolot.infra.db.models.user import UserRow
from autolot.ports.user_repository import UserRepository


class PostgresUserRepository(UserRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    @translate_store_errors
    def get_by_external_id(self, external_auth_id: str) -> User | None:
        query = select(UserRow).where(UserRow.external_auth_id == external_auth_id)
        row = self._session.execute(query).scalar_one_or_none()
        return user_to_domain(row) if row else None
