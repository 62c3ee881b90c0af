"""
Domain exceptions - Semantic error types for user provisioning.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Adapters translate driver errors into these types.
"""

from enum import Enum


class UserServiceError(Exception):
    """Base class for all user service domain errors."""

    pass


class InvalidIdentifier(UserServiceError, ValueError):
    """Token is not a canonical 24-character hexadecimal identifier."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"invalid identifier: {token!r}")


class RegistrationError(UserServiceError):
    """Base class for errors raised by the registration workflow."""

    pass


class MissingRequiredFields(RegistrationError):
    """One or more required registration fields are blank."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"missing required fields: {', '.join(self.fields)}")


class UserAlreadyExists(RegistrationError):
    """A user record already exists for the candidate email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User already exists with email: {email}")


class ResolutionFailure(str, Enum):
    """Why a company reference could not be resolved."""

    INVALID_REFERENCE = "invalid_reference"
    PROVISIONING_FAILED = "provisioning_failed"


class CompanyResolutionError(RegistrationError):
    """Company reference could not be decoded or provisioned."""

    kind: ResolutionFailure


class InvalidCompanyReference(CompanyResolutionError):
    """Supplied or provisioned company identifier does not decode."""

    kind = ResolutionFailure.INVALID_REFERENCE


class CompanyProvisioningFailed(CompanyResolutionError):
    """Remote company service call errored or returned an unusable response."""

    kind = ResolutionFailure.PROVISIONING_FAILED


class PersistenceError(UserServiceError):
    """User store read or write failed."""

    pass


class UserNotFound(UserServiceError):
    """No user record matches the lookup key."""

    pass
