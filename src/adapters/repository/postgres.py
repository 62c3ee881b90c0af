"""
PostgreSQL repository adapter - Implements UserStore protocol.

This module provides the PostgreSQL implementation of the domain's
user store port using psycopg3 with raw SQL.

Email uniqueness is enforced by the UNIQUE constraint on users.email.
create_user inserts with ON CONFLICT (email) DO NOTHING, so two
concurrent registrations for the same email resolve to exactly one row
and the loser sees None instead of an exception.

Identifiers keep the 24-character hex shape of the document store the
service originally addressed: 8 hex digits of epoch seconds followed by
16 random hex digits.
"""

import logging
import secrets
import time
from pathlib import Path

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceError
from src.domain.models import CompanyReference, UserRecord

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, name, email, password, role, company"


def new_object_id() -> str:
    """Mint a 24-character hex identifier (timestamp prefix + randomness)."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def _to_record(row: dict) -> UserRecord:
    return UserRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
        role=row["role"],
        company=CompanyReference(row["company"]),
    )


class PostgresUserStore:
    """
    Implements UserStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool, timeout: float = 10.0) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            timeout: Seconds to wait for a pooled connection
        """
        self._pool = pool
        self._timeout = timeout

    def create_user(self, record: UserRecord) -> str | None:
        """
        Insert a user and return its new id.

        Returns:
            New id, or None if the email is already registered
        """
        sql = f"""
            INSERT INTO users ({_USER_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING id
        """
        user_id = new_object_id()
        params = (
            user_id,
            record.name,
            record.email,
            record.password,
            record.role,
            str(record.company),
        )

        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor() as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except psycopg.Error as e:
            logger.error(f"Failed to insert user {record.email}: {e}")
            raise PersistenceError("failed to store user") from e

        if row is None:
            logger.info(f"Insert skipped, email already registered: {record.email}")
            return None
        return row[0]

    def find_by_id(self, user_id: str) -> UserRecord | None:
        """Fetch a user by id."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s"
        return self._fetch_one(sql, (user_id,))

    def find_by_email(self, email: str) -> UserRecord | None:
        """Fetch a user by email."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"
        return self._fetch_one(sql, (email,))

    def find_by_company(self, company: CompanyReference) -> list[UserRecord]:
        """Fetch all users of a company, oldest first."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE company = %s ORDER BY created_at, id"

        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor(
                row_factory=dict_row
            ) as cursor:
                cursor.execute(sql, (str(company),))
                rows = cursor.fetchall()
        except psycopg.Error as e:
            logger.error(f"Failed to list users for company {company}: {e}")
            raise PersistenceError("failed to fetch users") from e

        return [_to_record(row) for row in rows]

    def _fetch_one(self, sql: str, params: tuple) -> UserRecord | None:
        try:
            with self._pool.connection(timeout=self._timeout) as conn, conn.cursor(
                row_factory=dict_row
            ) as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error(f"User lookup failed: {e}")
            raise PersistenceError("failed to fetch user") from e

        return _to_record(row) if row is not None else None


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Shipped as package data next to this module
    migrations_dir = Path(__file__).parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
