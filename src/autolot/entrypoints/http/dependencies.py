"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from autolot.adapters.postgres_car_catalog_repository import PostgresCarCatalogRepository
from autolot.adapters.postgres_dealership_repository import PostgresDealershipRepository
from autolot.adapters.postgres_saved_car_repository import PostgresSavedCarRepository
from autolot.adapters.postgres_test_drive_repository import PostgresTestDriveRepository
from autolot.adapters.postgres_user_repository import PostgresUserRepository
from autolot.adapters.store_errors import translate_store_errors
from autolot.adapters.view_invalidators import (
    DeferredViewInvalidator,
    LoggingViewInvalidator,
    WebhookViewInvalidator,
)
from autolot.infra import config
from autolot.infra.db.session import get_session
from autolot.ports.view_invalidator import ViewInvalidator
from autolot.use_cases.annotate_wishlist import WishlistAnnotator
from autolot.use_cases.get_admin import GetAdmin
from autolot.use_cases.get_car_by_id import GetCarById
from autolot.use_cases.get_car_filters import GetCarFilters
from autolot.use_cases.get_dashboard_data import GetDashboardData
from autolot.use_cases.get_saved_cars import GetSavedCars
from autolot.use_cases.identity import IdentityResolver
from autolot.use_cases.search_admin_test_drives import SearchAdminTestDrives
from autolot.use_cases.search_car_catalog import SearchCarCatalog
from autolot.use_cases.toggle_saved_car import ToggleSavedCar
from autolot.use_cases.update_test_drive_status import UpdateTestDriveStatus

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_credential(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """
    The caller's identity-provider subject id from ``Authorization: Bearer``.

    Missing or non-bearer headers yield None (anonymous); routes decide
    whether anonymous callers are allowed.
    """
    if credentials is None:
        return None
    return credentials.credentials or None


@lru_cache
def build_view_invalidator() -> ViewInvalidator:
    """Webhook invalidator when REVALIDATE_WEBHOOK_URL is set, logging otherwise."""
    url = config.revalidate_webhook_url()
    if url is None:
        return LoggingViewInvalidator()
    return WebhookViewInvalidator(
        url=url,
        token=config.revalidate_webhook_token(),
        timeout=config.revalidate_timeout_seconds(),
    )


def get_view_invalidator() -> DeferredViewInvalidator:
    """
    Collects invalidations for the request.

    FastAPI caches this per request, so the use case and the request's
    RequestTransaction share the same buffer.
    """
    return DeferredViewInvalidator(build_view_invalidator())


class RequestTransaction:
    """
    Commits a mutating request's work before its response is built.

    Mutating routes call commit() inside their operation boundary, so a
    failed commit is reported as that operation's failure. Queued
    invalidations are sent only after the commit succeeds.
    """

    def __init__(self, session: Session, view_invalidator: DeferredViewInvalidator) -> None:
        self._session = session
        self._view_invalidator = view_invalidator

    @translate_store_errors
    def _commit_session(self) -> None:
        self._session.commit()

    def commit(self) -> None:
        self._commit_session()
        self._view_invalidator.flush()


def get_transaction(
    db: Session = Depends(get_db),
    view_invalidator: DeferredViewInvalidator = Depends(get_view_invalidator),
) -> RequestTransaction:
    return RequestTransaction(session=db, view_invalidator=view_invalidator)


def get_identity_resolver(db: Session = Depends(get_db)) -> IdentityResolver:
    return IdentityResolver(user_repository=PostgresUserRepository(session=db))


def get_search_catalog_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> SearchCarCatalog:
    """
    Factory function that returns a configured SearchCarCatalog use case.

    This function is called per-request, ensuring each request gets:
    - Fresh repository instances
    - Fresh use case instance
    - Isolated database session
    """
    return SearchCarCatalog(
        identity=identity,
        car_catalog_repository=PostgresCarCatalogRepository(session=db),
        wishlist=WishlistAnnotator(PostgresSavedCarRepository(session=db)),
    )


def get_car_filters_use_case(db: Session = Depends(get_db)) -> GetCarFilters:
    return GetCarFilters(car_catalog_repository=PostgresCarCatalogRepository(session=db))


def get_get_car_by_id_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> GetCarById:
    return GetCarById(
        identity=identity,
        car_catalog_repository=PostgresCarCatalogRepository(session=db),
        saved_car_repository=PostgresSavedCarRepository(session=db),
        test_drive_repository=PostgresTestDriveRepository(session=db),
        dealership_repository=PostgresDealershipRepository(session=db),
    )


def get_toggle_saved_car_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    view_invalidator: ViewInvalidator = Depends(get_view_invalidator),
) -> ToggleSavedCar:
    return ToggleSavedCar(
        identity=identity,
        car_catalog_repository=PostgresCarCatalogRepository(session=db),
        saved_car_repository=PostgresSavedCarRepository(session=db),
        view_invalidator=view_invalidator,
    )


def get_saved_cars_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> GetSavedCars:
    return GetSavedCars(
        identity=identity,
        saved_car_repository=PostgresSavedCarRepository(session=db),
    )


def get_admin_use_case(
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> GetAdmin:
    return GetAdmin(identity=identity)


def get_admin_test_drives_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> SearchAdminTestDrives:
    return SearchAdminTestDrives(
        identity=identity,
        test_drive_repository=PostgresTestDriveRepository(session=db),
    )


def get_update_test_drive_status_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
    view_invalidator: ViewInvalidator = Depends(get_view_invalidator),
) -> UpdateTestDriveStatus:
    return UpdateTestDriveStatus(
        identity=identity,
        test_drive_repository=PostgresTestDriveRepository(session=db),
        view_invalidator=view_invalidator,
    )


def get_dashboard_data_use_case(
    db: Session = Depends(get_db),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> GetDashboardData:
    return GetDashboardData(
        identity=identity,
        car_catalog_repository=PostgresCarCatalogRepository(session=db),
        test_drive_repository=PostgresTestDriveRepository(session=db),
    )
