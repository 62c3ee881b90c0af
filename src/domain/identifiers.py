"""
Identifier codec - Canonical company and user identifiers.

Identifiers follow the document-store addressing scheme: exactly 24
hexadecimal characters. Decoding canonicalises to lowercase and never
repairs malformed input.
"""

import re

from .exceptions import InvalidIdentifier
from .models import CompanyReference

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_object_id(token: object) -> bool:
    """Return True if token is a well-formed 24-character hex identifier."""
    return isinstance(token, str) and _OBJECT_ID_PATTERN.fullmatch(token) is not None


def decode_object_id(token: object) -> str:
    """
    Decode an external identifier into its canonical form.

    Args:
        token: Caller-supplied identifier

    Returns:
        Lowercase 24-character hex string

    Raises:
        InvalidIdentifier: If token is not a 24-character hex string
    """
    if not is_object_id(token):
        raise InvalidIdentifier(token)
    return token.lower()  # type: ignore[union-attr]


def decode_company_reference(token: object) -> CompanyReference:
    """Decode a company token into a CompanyReference."""
    return CompanyReference(decode_object_id(token))
