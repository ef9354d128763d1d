"""Signatory-related exceptions."""

from ..core.error import BaseError


class SignatoryError(BaseError):
    """Generic signatory error."""


class IssuerDIDError(SignatoryError):
    """The issuer DID is missing or malformed."""


class SignerNotFoundError(SignatoryError):
    """No signing backend is registered for the requested proof type."""
