"""Selection of the verification method an issuer signs with."""

import asyncio
import logging
from typing import List, Optional

from pydid import DIDError

from ..resolver.base import ResolverError
from ..resolver.did_resolver import DIDResolver
from ..vc.constants import DEFAULT_PROOF_PURPOSE

LOGGER = logging.getLogger(__name__)

VERIFICATION_RELATIONSHIPS = (
    "assertionMethod",
    "authentication",
    "capabilityDelegation",
    "capabilityInvocation",
    "keyAgreement",
)
DEFAULT_RELATIONSHIP = "verificationMethod"


def relationship_for_purpose(proof_purpose: Optional[str]) -> str:
    """Return the DID document property listing keys for a proof purpose."""
    if proof_purpose is None:
        proof_purpose = DEFAULT_PROOF_PURPOSE
    if proof_purpose in VERIFICATION_RELATIONSHIPS:
        return proof_purpose
    return DEFAULT_RELATIONSHIP


def absolute_method_id(method_id: str, did: str) -> str:
    """Qualify a relative DID URL (`#key-1`) with the document DID."""
    return f"{did}{method_id}" if method_id.startswith("#") else method_id


def relationship_method_ids(document: dict, relationship: str) -> List[str]:
    """List the verification method ids of a relationship, in document order.

    Entries may be references or embedded verification methods. Ids are
    returned as written in the document; entries without an id are skipped.

    Raises:
        ResolverError: If the document or the relationship is malformed

    """
    if not isinstance(document, dict) or not isinstance(document.get("id"), str):
        raise ResolverError("DID document has no id")

    entries = document.get(relationship) or []
    if not isinstance(entries, list):
        raise ResolverError(f"DID document {relationship} is not a list")

    method_ids = []
    for entry in entries:
        if isinstance(entry, dict):
            entry = entry.get("id")
        if not isinstance(entry, str) or not entry:
            LOGGER.warning(
                "Skipping invalid %s entry in DID document %s",
                relationship,
                document["id"],
            )
            continue
        method_ids.append(entry)
    return method_ids


class VerificationMethodResolver:
    """Pick the signing key of an issuer from its DID document."""

    def __init__(self, did_resolver: DIDResolver):
        """Initialize the resolver."""
        self._did_resolver = did_resolver

    async def resolve(
        self,
        issuer_did: str,
        proof_purpose: Optional[str] = None,
        requested_method_id: Optional[str] = None,
    ) -> Optional[str]:
        """Return the verification method id to sign with.

        The first method listed for the proof purpose is chosen, or the first
        one matching `requested_method_id` when given. When the document cannot
        be resolved or lists no such method, `requested_method_id` is returned
        unchanged.

        Args:
            issuer_did: DID of the issuer
            proof_purpose: Proof purpose, `assertionMethod` when absent
            requested_method_id: Verification method requested by the caller

        """
        relationship = relationship_for_purpose(proof_purpose)
        try:
            document = await self._did_resolver.resolve(issuer_did)
            method_ids = relationship_method_ids(document, relationship)
        except (ResolverError, DIDError, asyncio.TimeoutError) as err:
            LOGGER.warning(
                "Unable to resolve %s verification method of %s: %s",
                relationship,
                issuer_did,
                err,
            )
            return requested_method_id

        if requested_method_id:
            wanted = absolute_method_id(requested_method_id, issuer_did)
            method_ids = [
                method_id
                for method_id in method_ids
                if absolute_method_id(method_id, issuer_did) == wanted
            ]

        if not method_ids:
            LOGGER.warning(
                "No %s verification method %sfound for %s",
                relationship,
                f"{requested_method_id} " if requested_method_id else "",
                issuer_did,
            )
            return requested_method_id

        return method_ids[0]
