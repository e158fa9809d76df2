from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.user import User
from autolot.use_cases.identity import IdentityResolver

NOT_ADMIN_REASON = "not-admin"


@dataclass(frozen=True, slots=True)
class GetAdminRequest:
    credential: str | None


@dataclass(frozen=True, slots=True)
class GetAdminResponse:
    authorized: bool
    user: User | None = None
    reason: str | None = None


class GetAdmin:
    """
    Tell the frontend whether the caller may see the admin area.

    Never fails for authorization reasons; anonymous callers and regular
    users both get ``authorized=False``.
    """

    def __init__(self, identity: IdentityResolver) -> None:
        self._identity = identity

    def execute(self, request: GetAdminRequest) -> GetAdminResponse:
        user = self._identity.resolve_caller(request.credential)
        if user is None or not user.is_admin:
            return GetAdminResponse(authorized=False, reason=NOT_ADMIN_REASON)
        return GetAdminResponse(authorized=True, user=user)
