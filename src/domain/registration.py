"""
Registration domain service - User registration workflow.

This module contains the core business logic for creating a user and
attaching it to a company.

Registration Workflow (linear, no retries)
==========================================

States:
- RECEIVED: Raw payload accepted from the caller
- VALIDATED: Every required field is present
- UNIQUENESS_CHECKED: No stored user shares the email
- COMPANY_RESOLVED: Company reference decoded or freshly provisioned
- PERSISTED: Terminal success, record written with a store-assigned id

Transitions:
    RECEIVED -> VALIDATED -> UNIQUENESS_CHECKED -> COMPANY_RESOLVED -> PERSISTED

Any step may exit to FAILED with the first typed error. The duplicate
check runs before company resolution so a duplicate email never
provisions a company.

Note: A company provisioned in COMPANY_RESOLVED is not reclaimed when
the store write fails. Company and user lifecycles belong to different
services, so the orphan is an accepted leak.
"""

import logging
from dataclasses import dataclass, field, replace

from .companies import CompanyResolver
from .exceptions import PersistenceError, UserAlreadyExists
from .models import RegistrationRequest, UserRecord
from .ports import CompanyProvisioner, EmailLookup, UserStore
from .validation import validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates validation, the email uniqueness check, company
    resolution and the store write.

    When `reject_on_lookup_failure` is False, a store error during the
    uniqueness check is treated as "no conflict" and registration
    continues; the store's unique index still rejects real duplicates.
    """

    store: UserStore
    provisioner: CompanyProvisioner
    reject_on_lookup_failure: bool = True
    _resolver: CompanyResolver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._resolver = CompanyResolver(self.provisioner)

    def register(self, request: RegistrationRequest) -> UserRecord:
        """
        Register a new user.

        Args:
            request: Untrusted registration payload

        Returns:
            Persisted UserRecord with its assigned id

        Raises:
            MissingRequiredFields: If any required field is blank
            UserAlreadyExists: If the email is already registered
            CompanyResolutionError: If the company cannot be decoded or provisioned
            PersistenceError: If the store cannot be read or written
        """
        validate_registration(request)

        lookup = self.check_email(request.email)
        if lookup == EmailLookup.FOUND:
            raise UserAlreadyExists(request.email)
        if lookup == EmailLookup.LOOKUP_FAILED:
            if self.reject_on_lookup_failure:
                raise PersistenceError(f"could not check existing users for {request.email}")
            logger.warning("Uniqueness check failed for %s, continuing", request.email)

        company = self._resolver.resolve(request)

        record = UserRecord(
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
            company=company,
        )
        user_id = self.store.create_user(record)
        if user_id is None:
            raise UserAlreadyExists(request.email)

        return replace(record, id=user_id)

    def check_email(self, email: str) -> EmailLookup:
        """
        Check whether a user already exists for an email.

        Store failures are reported as LOOKUP_FAILED rather than raised
        so the caller can choose how strict to be.
        """
        try:
            existing = self.store.find_by_email(email)
        except PersistenceError:
            return EmailLookup.LOOKUP_FAILED
        return EmailLookup.FOUND if existing is not None else EmailLookup.NOT_FOUND
