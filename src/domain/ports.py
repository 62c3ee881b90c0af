"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol

from .models import CompanyReference, UserRecord


class EmailLookup(Enum):
    """
    Result of the pre-write uniqueness check.

    LOOKUP_FAILED means the store could not answer; the registration
    service decides whether that aborts the attempt.
    """

    FOUND = "found"
    NOT_FOUND = "not_found"
    LOOKUP_FAILED = "lookup_failed"


class UserStore(Protocol):
    """Port interface for user persistence."""

    def create_user(self, record: UserRecord) -> str | None:
        """
        Insert a new user record.

        The store enforces email uniqueness itself, so a concurrent
        registration that slipped past the pre-check is still rejected.

        Args:
            record: User to persist (id is ignored and assigned by the store)

        Returns:
            Assigned identifier, or None if the email is already taken

        Raises:
            PersistenceError: If the store is unreachable or the write fails
        """
        ...

    def find_by_id(self, user_id: str) -> UserRecord | None:
        """Fetch a user by canonical identifier, None if absent."""
        ...

    def find_by_email(self, email: str) -> UserRecord | None:
        """Fetch a user by email, None if absent."""
        ...

    def find_by_company(self, company: CompanyReference) -> list[UserRecord]:
        """Fetch every user belonging to a company."""
        ...


class CompanyProvisioner(Protocol):
    """Port interface for the remote company service."""

    def create_company(self, name: str) -> str:
        """
        Create a company and return its identifier as received.

        Args:
            name: Company display name

        Returns:
            Identifier string minted by the company service (not yet decoded)

        Raises:
            CompanyProvisioningFailed: If the call fails or the response is unusable
        """
        ...
