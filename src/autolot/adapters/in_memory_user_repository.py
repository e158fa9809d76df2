from __future__ import annotations

from autolot.domain.user import User
from autolot.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, users: list[User]) -> None:
        self._by_external_id = {user.external_auth_id: user for user in users}

    def get_by_external_id(self, external_auth_id: str) -> User | None:
        return self._by_external_id.get(external_auth_id)
