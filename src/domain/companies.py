"""
Company resolver - Turns a registration payload into a CompanyReference.

Invited users carry an existing company identifier; everyone else
founds a new company through the company service. There is no retry
and no fallback between the two paths.
"""

from dataclasses import dataclass

from .exceptions import InvalidCompanyReference, InvalidIdentifier
from .identifiers import decode_company_reference
from .models import CompanyReference, RegistrationRequest
from .ports import CompanyProvisioner


@dataclass
class CompanyResolver:
    """Resolves or provisions the company a new user belongs to."""

    provisioner: CompanyProvisioner

    def resolve(self, request: RegistrationRequest) -> CompanyReference:
        """
        Resolve the company for a registration.

        Args:
            request: Validated registration payload

        Returns:
            Canonical company reference

        Raises:
            InvalidCompanyReference: If the supplied or provisioned id does not decode
            CompanyProvisioningFailed: If the company service call fails
        """
        if request.invitation:
            return self._decode(request.company)

        company_id = self.provisioner.create_company(request.company)
        return self._decode(company_id)

    def _decode(self, token: str) -> CompanyReference:
        try:
            return decode_company_reference(token)
        except InvalidIdentifier as e:
            raise InvalidCompanyReference(f"invalid company reference: {token!r}") from e
