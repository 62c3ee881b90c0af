"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory UserStore double
- Sample registration payloads
- A PostgreSQL connection pool (skipping when no database is reachable)
"""

from collections.abc import Generator
from dataclasses import replace

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import new_object_id, run_migrations
from src.config.settings import get_settings
from src.domain.models import CompanyReference, RegistrationRequest, UserRecord

INVITED_COMPANY_ID = "649060d540e3b169621e9629"


class InMemoryUserStore:
    """UserStore double keeping records in a dict keyed by id."""

    def __init__(self, records: list[UserRecord] | None = None) -> None:
        self.records: dict[str, UserRecord] = {}
        for record in records or []:
            self.create_user(record)

    def create_user(self, record: UserRecord) -> str | None:
        if any(r.email == record.email for r in self.records.values()):
            return None
        user_id = new_object_id()
        self.records[user_id] = replace(record, id=user_id)
        return user_id

    def find_by_id(self, user_id: str) -> UserRecord | None:
        return self.records.get(user_id)

    def find_by_email(self, email: str) -> UserRecord | None:
        return next((r for r in self.records.values() if r.email == email), None)

    def find_by_company(self, company: CompanyReference) -> list[UserRecord]:
        return [r for r in self.records.values() if r.company == company]


@pytest.fixture
def store() -> InMemoryUserStore:
    """Empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def invited_request() -> RegistrationRequest:
    """Registration joining an existing company."""
    return RegistrationRequest(
        name="Test User",
        email="test@example.com",
        password="password",
        role="admin",
        company=INVITED_COMPANY_ID,
        invitation=True,
    )


@pytest.fixture
def founder_request() -> RegistrationRequest:
    """Registration founding a new company."""
    return RegistrationRequest(
        name="Jane Founder",
        email="jane@acme.test",
        password="s3cret",
        role="owner",
        company="Acme Corp",
    )


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Connection pool against DATABASE_URL with migrations applied.

    Tests depending on it are skipped when PostgreSQL is not reachable.
    """
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_users(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the users table before a test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
