"""
Registration validator - Required field checks.

Runs before any side-effecting work and reports every blank field at
once rather than stopping at the first.
"""

from .exceptions import MissingRequiredFields
from .models import RegistrationRequest

REQUIRED_FIELDS = ("name", "password", "email", "role", "company")


def missing_fields(request: RegistrationRequest) -> list[str]:
    """Return required field names whose values are empty."""
    missing = []
    for field in REQUIRED_FIELDS:
        value = getattr(request, field, None)
        if not isinstance(value, str) or not value:
            missing.append(field)
    return missing


def validate_registration(request: RegistrationRequest) -> None:
    """
    Validate required registration fields.

    Raises:
        MissingRequiredFields: Listing every blank field, in declaration order
    """
    missing = missing_fields(request)
    if missing:
        raise MissingRequiredFields(missing)
