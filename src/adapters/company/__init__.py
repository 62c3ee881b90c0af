"""Company service adapters - Remote provisioning implementations."""

from .rest import HttpCompanyProvisioner

__all__ = ["HttpCompanyProvisioner"]
