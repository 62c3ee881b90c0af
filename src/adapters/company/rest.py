"""
HTTP company provisioner adapter - Implements CompanyProvisioner protocol.

Creates companies by calling the sibling company service:

    POST {base_url}/companies
    {"name": "<company name>"}

A successful call answers 201 Created with a JSON object carrying a
string "id". Anything else is a provisioning failure.
"""

import logging

import httpx

from src.domain.exceptions import CompanyProvisioningFailed

logger = logging.getLogger(__name__)


class HttpCompanyProvisioner:
    """
    Implements CompanyProvisioner protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The httpx.Client is owned by the caller so it can be shared and
    closed with the application.
    """

    def __init__(self, client: httpx.Client, base_url: str, timeout: float = 10.0) -> None:
        self._client = client
        self._url = base_url.rstrip("/") + "/companies"
        self._timeout = timeout

    def create_company(self, name: str) -> str:
        """
        Create a company on the company service.

        Args:
            name: Company display name

        Returns:
            Company id exactly as returned by the service

        Raises:
            CompanyProvisioningFailed: On transport error, timeout, non-201
                status, unparseable body, error payload or missing id
        """
        try:
            response = self._client.post(self._url, json={"name": name}, timeout=self._timeout)
        except httpx.HTTPError as e:
            logger.error(f"Error creating company {name!r} on company service: {e}")
            raise CompanyProvisioningFailed(
                "failed creating a new company on separate service"
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Unreadable company service response ({response.status_code}): {e}")
            raise CompanyProvisioningFailed("invalid response from company service") from e

        if not isinstance(body, dict):
            raise CompanyProvisioningFailed("invalid response from company service")

        if body.get("error") is not None:
            message = body.get("message") or str(body["error"])
            logger.error(f"Company service rejected {name!r}: {message}")
            raise CompanyProvisioningFailed(str(message))

        if response.status_code != httpx.codes.CREATED:
            logger.error(f"Company service answered {response.status_code} for {name!r}")
            raise CompanyProvisioningFailed(
                f"company service returned status {response.status_code}"
            )

        company_id = body.get("id")
        if not isinstance(company_id, str):
            logger.error("Failed to extract company ID from company service response")
            raise CompanyProvisioningFailed("failed to extract company ID")

        logger.info(f"Company {name!r} created with id {company_id}")
        return company_id
