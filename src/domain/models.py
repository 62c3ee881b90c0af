"""
Domain models - Registration input and persisted user records.

Plain dataclasses with no framework dependencies. The API layer maps
its pydantic models onto these.
"""

from dataclasses import dataclass


@dataclass
class RegistrationRequest:
    """
    Untrusted inbound registration payload.

    `company` is a company name when `invitation` is False, or an
    existing company identifier when `invitation` is True.
    """

    name: str = ""
    email: str = ""
    password: str = ""
    role: str = ""
    company: str = ""
    invitation: bool = False


@dataclass(frozen=True)
class CompanyReference:
    """Canonical identifier of a company owned by the company service."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class UserRecord:
    """
    Persisted user.

    `id` is assigned by the store on creation. The password is stored
    exactly as received.
    """

    name: str
    email: str
    password: str
    role: str
    company: CompanyReference
    id: str | None = None
