"""Completion of partial proof configurations."""

import logging
from typing import Optional

from pydid import DID, DIDError

from ..vc.models.proof_config import LdSignatureType, ProofConfig
from ..vc.util import datetime_now, new_credential_id
from .error import IssuerDIDError
from .verification_method import VerificationMethodResolver

LOGGER = logging.getLogger(__name__)

DEFAULT_LD_SIGNATURE_BY_DID_METHOD = {
    "iota": LdSignatureType.JcsEd25519Signature2020,
}


def issuer_did_method(issuer_did: str) -> str:
    """Return the method of the issuer DID.

    Raises:
        IssuerDIDError: If the issuer DID is missing or malformed

    """
    if not issuer_did or not isinstance(issuer_did, str):
        raise IssuerDIDError("Issuer DID is required")
    try:
        return DID(issuer_did).method
    except DIDError as err:
        raise IssuerDIDError(f"Malformed issuer DID: {issuer_did}") from err


def default_ld_signature_type(issuer_did: str) -> Optional[LdSignatureType]:
    """Return the default signature suite for the method of the issuer DID."""
    return DEFAULT_LD_SIGNATURE_BY_DID_METHOD.get(issuer_did_method(issuer_did))


class ProofConfigCompleter:
    """Derive the missing parameters of a proof configuration."""

    def __init__(self, verification_method_resolver: VerificationMethodResolver):
        """Initialize the completer."""
        self._verification_method_resolver = verification_method_resolver

    async def complete(self, partial: ProofConfig) -> ProofConfig:
        """
        Return a completed copy of a proof configuration.

        The verification method is resolved from the issuer DID document, the
        credential id, issue and valid dates are generated when absent and the
        signature suite defaults by DID method. The proof purpose and creator
        are kept as given. The partial configuration is left untouched.

        Args:
            partial: The caller supplied configuration

        Returns:
            The completed configuration

        Raises:
            IssuerDIDError: If the issuer DID is missing or malformed

        """
        issuer_did_method(partial.issuer_did)

        verification_method = await self._verification_method_resolver.resolve(
            partial.issuer_did,
            partial.proof_purpose,
            partial.issuer_verification_method,
        )

        completed = partial.copy(
            issuer_verification_method=verification_method,
            credential_id=partial.credential_id or new_credential_id(),
            issue_date=(
                partial.issue_date if partial.issue_date is not None else datetime_now()
            ),
            valid_date=(
                partial.valid_date if partial.valid_date is not None else datetime_now()
            ),
            ld_signature_type=(
                partial.ld_signature_type
                if partial.ld_signature_type is not None
                else default_ld_signature_type(partial.issuer_did)
            ),
        )
        LOGGER.debug("Completed proof config: %s", completed)
        return completed
