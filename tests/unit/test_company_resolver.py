"""
Unit tests for CompanyResolver.

Tests both resolution paths with a mocked CompanyProvisioner.
"""

from unittest.mock import Mock

import pytest

from src.domain.companies import CompanyResolver
from src.domain.exceptions import (
    CompanyProvisioningFailed,
    CompanyResolutionError,
    InvalidCompanyReference,
    ResolutionFailure,
)
from src.domain.models import CompanyReference, RegistrationRequest


class TestInvitationPath:
    """Tests for invitation=True."""

    def test_decodes_supplied_company(self, invited_request: RegistrationRequest) -> None:
        """Supplied id becomes the reference without calling the provisioner."""
        provisioner = Mock()
        resolver = CompanyResolver(provisioner)

        ref = resolver.resolve(invited_request)

        assert ref == CompanyReference("649060d540e3b169621e9629")
        provisioner.create_company.assert_not_called()

    def test_invalid_token_is_invalid_reference(
        self, invited_request: RegistrationRequest
    ) -> None:
        """A company name with invitation=True does not decode."""
        invited_request.company = "Company XYZ"
        provisioner = Mock()
        resolver = CompanyResolver(provisioner)

        with pytest.raises(InvalidCompanyReference) as exc_info:
            resolver.resolve(invited_request)

        assert exc_info.value.kind == ResolutionFailure.INVALID_REFERENCE
        provisioner.create_company.assert_not_called()


class TestProvisioningPath:
    """Tests for invitation=False."""

    def test_provisions_by_name(self, founder_request: RegistrationRequest) -> None:
        """Company name is sent to the provisioner and its id decoded."""
        provisioner = Mock()
        provisioner.create_company.return_value = "65a1f0c2e4b0a1b2c3d4e5f6"
        resolver = CompanyResolver(provisioner)

        ref = resolver.resolve(founder_request)

        provisioner.create_company.assert_called_once_with("Acme Corp")
        assert ref == CompanyReference("65a1f0c2e4b0a1b2c3d4e5f6")

    def test_provisioner_failure_propagates(self, founder_request: RegistrationRequest) -> None:
        """Provisioner failure is reported as PROVISIONING_FAILED."""
        provisioner = Mock()
        provisioner.create_company.side_effect = CompanyProvisioningFailed("down")
        resolver = CompanyResolver(provisioner)

        with pytest.raises(CompanyResolutionError) as exc_info:
            resolver.resolve(founder_request)

        assert exc_info.value.kind == ResolutionFailure.PROVISIONING_FAILED

    def test_bad_provisioned_id_is_invalid_reference(
        self, founder_request: RegistrationRequest
    ) -> None:
        """A provisioned id that is not 24 hex chars is INVALID_REFERENCE."""
        provisioner = Mock()
        provisioner.create_company.return_value = "company-42"
        resolver = CompanyResolver(provisioner)

        with pytest.raises(InvalidCompanyReference):
            resolver.resolve(founder_request)

    def test_single_attempt_only(self, founder_request: RegistrationRequest) -> None:
        """No retry after a provisioning failure."""
        provisioner = Mock()
        provisioner.create_company.side_effect = CompanyProvisioningFailed("down")
        resolver = CompanyResolver(provisioner)

        with pytest.raises(CompanyProvisioningFailed):
            resolver.resolve(founder_request)

        assert provisioner.create_company.call_count == 1
