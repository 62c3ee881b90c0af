"""
User query service - Read-only lookups over the user store.
"""

from dataclasses import dataclass, replace

from .exceptions import InvalidIdentifier, UserNotFound
from .identifiers import decode_object_id
from .models import CompanyReference, UserRecord
from .ports import UserStore


@dataclass
class UserQueryService:
    """Lookups by id, email and company. Store errors propagate unchanged."""

    store: UserStore

    def find_by_id(self, user_id: str) -> UserRecord:
        """
        Fetch a single user by identifier.

        Raises:
            UserNotFound: If the id is malformed or no user has it
        """
        try:
            canonical_id = decode_object_id(user_id)
        except InvalidIdentifier as e:
            raise UserNotFound(f"no user with id: {user_id}") from e

        user = self.store.find_by_id(canonical_id)
        if user is None:
            raise UserNotFound(f"no user with id: {user_id}")
        return user

    def find_by_email(self, email: str) -> UserRecord:
        """
        Fetch a single user by email.

        Raises:
            UserNotFound: If no user has the email
        """
        user = self.store.find_by_email(email)
        if user is None:
            raise UserNotFound(f"no user with email: {email}")
        return user

    def find_by_company(self, company: CompanyReference) -> list[UserRecord]:
        """Fetch all users of a company with passwords blanked."""
        return [replace(user, password="") for user in self.store.find_by_company(company)]
