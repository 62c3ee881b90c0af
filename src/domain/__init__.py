"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user provisioning:
registration, company resolution and user lookups. It defines its own
port interfaces for infrastructure abstraction, ensuring true hexagonal
architecture decoupling.
"""

from .companies import CompanyResolver
from .exceptions import (
    CompanyProvisioningFailed,
    CompanyResolutionError,
    InvalidCompanyReference,
    InvalidIdentifier,
    MissingRequiredFields,
    PersistenceError,
    RegistrationError,
    ResolutionFailure,
    UserAlreadyExists,
    UserNotFound,
    UserServiceError,
)
from .identifiers import decode_company_reference, decode_object_id, is_object_id
from .models import CompanyReference, RegistrationRequest, UserRecord
from .ports import CompanyProvisioner, EmailLookup, UserStore
from .queries import UserQueryService
from .registration import RegistrationService
from .validation import validate_registration

__all__ = [
    "CompanyProvisioner",
    "CompanyProvisioningFailed",
    "CompanyReference",
    "CompanyResolutionError",
    "CompanyResolver",
    "EmailLookup",
    "InvalidCompanyReference",
    "InvalidIdentifier",
    "MissingRequiredFields",
    "PersistenceError",
    "RegistrationError",
    "RegistrationRequest",
    "RegistrationService",
    "ResolutionFailure",
    "UserAlreadyExists",
    "UserNotFound",
    "UserQueryService",
    "UserRecord",
    "UserServiceError",
    "UserStore",
    "decode_company_reference",
    "decode_object_id",
    "is_object_id",
    "validate_registration",
]
