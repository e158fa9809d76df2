"""Caller identity resolution shared by every use case."""

from __future__ import annotations

import logging

from autolot.domain.errors import ForbiddenError, UnauthorizedError
from autolot.domain.user import User
from autolot.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Maps the opaque credential issued by the identity provider to a user.

    The credential is the provider's subject id; authenticating it is the
    provider's job. A credential that matches no user is treated as anonymous.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def resolve_caller(self, credential: str | None) -> User | None:
        if not credential:
            return None
        return self._users.get_by_external_id(credential)

    def require_user(self, credential: str | None) -> User:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
        """
        user = self.resolve_caller(credential)
        if user is None:
            raise UnauthorizedError("Unauthorized")
        return user

    def require_admin(self, credential: str | None) -> User:
        """
        Raises:
            UnauthorizedError: If the caller is anonymous
            ForbiddenError: If the caller is not an admin
        """
        user = self.require_user(credential)
        if not user.is_admin:
            logger.info("Admin access denied", extra={"user_id": user.id})
            raise ForbiddenError("Unauthorized: Admin access required")
        return user
