"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from autolot.adapters.in_memory_user_repository import InMemoryUserRepository
from autolot.domain.user import User, UserRole
from autolot.infra.db.models import Base
from autolot.use_cases.identity import IdentityResolver
from factories import ADMIN_CREDENTIAL, CUSTOMER_CREDENTIAL, make_user


@pytest.fixture
def admin() -> User:
    return make_user(1, UserRole.ADMIN, external_auth_id=ADMIN_CREDENTIAL)


@pytest.fixture
def customer() -> User:
    return make_user(2, external_auth_id=CUSTOMER_CREDENTIAL)


@pytest.fixture
def identity(admin: User, customer: User) -> IdentityResolver:
    """Resolves ADMIN_CREDENTIAL and CUSTOMER_CREDENTIAL; anything else is anonymous."""
    return IdentityResolver(InMemoryUserRepository([admin, customer]))


# ==============================================================================
# SQLite-backed session for SQL adapter tests
# ==============================================================================


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine with the full ORM schema."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Let SQLAlchemy own transaction boundaries so SAVEPOINT works on pysqlite
    @event.listens_for(test_engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(test_engine, "begin")
    def _emit_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Iterator[Session]:
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
