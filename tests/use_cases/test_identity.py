from __future__ import annotations

import pytest

from autolot.domain.errors import ForbiddenError, UnauthorizedError
from autolot.domain.user import User
from autolot.use_cases.identity import IdentityResolver
from factories import ADMIN_CREDENTIAL, CUSTOMER_CREDENTIAL


@pytest.mark.parametrize("credential", [None, "", "user_unknown"])
def test_unknown_callers_are_anonymous(identity: IdentityResolver, credential: str | None) -> None:
    assert identity.resolve_caller(credential) is None


def test_resolves_known_caller(identity: IdentityResolver, customer: User) -> None:
    assert identity.resolve_caller(CUSTOMER_CREDENTIAL) == customer


def test_require_user_rejects_anonymous(identity: IdentityResolver) -> None:
    with pytest.raises(UnauthorizedError, match="Unauthorized"):
        identity.require_user(None)


def test_require_admin_rejects_anonymous_with_401(identity: IdentityResolver) -> None:
    with pytest.raises(UnauthorizedError):
        identity.require_admin("user_unknown")


def test_require_admin_rejects_customer_with_403(identity: IdentityResolver) -> None:
    with pytest.raises(ForbiddenError) as exc_info:
        identity.require_admin(CUSTOMER_CREDENTIAL)

    assert exc_info.value.message == "Unauthorized: Admin access required"


def test_require_admin_returns_admin(identity: IdentityResolver, admin: User) -> None:
    assert identity.require_admin(ADMIN_CREDENTIAL) == admin
