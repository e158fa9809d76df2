from __future__ import annotations

from autolot.domain.user import User
from autolot.use_cases.get_admin import NOT_ADMIN_REASON, GetAdmin, GetAdminRequest
from autolot.use_cases.identity import IdentityResolver
from factories import ADMIN_CREDENTIAL, CUSTOMER_CREDENTIAL


def test_admin_is_authorized(identity: IdentityResolver, admin: User) -> None:
    response = GetAdmin(identity).execute(GetAdminRequest(credential=ADMIN_CREDENTIAL))

    assert response.authorized is True
    assert response.user == admin
    assert response.reason is None


def test_customer_is_not_authorized(identity: IdentityResolver) -> None:
    response = GetAdmin(identity).execute(GetAdminRequest(credential=CUSTOMER_CREDENTIAL))

    assert response.authorized is False
    assert response.user is None
    assert response.reason == NOT_ADMIN_REASON


def test_anonymous_is_not_authorized_and_does_not_raise(identity: IdentityResolver) -> None:
    response = GetAdmin(identity).execute(GetAdminRequest(credential=None))

    assert response.authorized is False
    assert response.reason == "not-admin"
