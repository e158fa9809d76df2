from __future__ import annotations

from abc import ABC, abstractmethod

from autolot.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    def get_by_external_id(self, external_auth_id: str) -> User | None:
        """Look up the user linked to an identity-provider subject id."""
        ...
