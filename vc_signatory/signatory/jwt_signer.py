"""Reference JWT-VC signing backend."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..vc.constants import JWT_VC_CLAIM
from ..vc.models.proof_config import ProofConfig
from ..vc.util import bytes_to_b64, datetime_to_epoch, dict_to_b64
from .dispatcher import BaseCredentialSigner

LOGGER = logging.getLogger(__name__)


class BaseKeySigner(ABC):
    """Produce raw signatures with the key behind a verification method."""

    algorithm = "EdDSA"

    @abstractmethod
    async def sign_message(self, message: bytes, verification_method: str) -> bytes:
        """Sign a message with the key of a verification method."""


def jwt_vc_claims(credential: Mapping[str, Any], config: ProofConfig) -> dict:
    """Build the JWT claim set for a credential."""
    subject = credential.get("credentialSubject")
    subject_id = config.subject_did
    if not subject_id and isinstance(subject, dict):
        subject_id = subject.get("id")

    claims = {
        "jti": config.credential_id or credential.get("id"),
        "iss": config.issuer_did,
        "sub": subject_id,
        "iat": datetime_to_epoch(config.issue_date) if config.issue_date else None,
        "nbf": datetime_to_epoch(config.valid_date) if config.valid_date else None,
        "exp": (
            datetime_to_epoch(config.expiration_date)
            if config.expiration_date
            else None
        ),
        "aud": config.verifier_did,
        "nonce": config.nonce,
        JWT_VC_CLAIM: dict(credential),
    }
    return {name: value for name, value in claims.items() if value is not None}


class JwtCredentialSigner(BaseCredentialSigner):
    """Sign credentials as compact JWS with the credential in the `vc` claim."""

    def __init__(self, key_signer: BaseKeySigner):
        """Initialize the signer."""
        self._key_signer = key_signer

    async def sign(self, serialized_credential: str, config: ProofConfig) -> str:
        """Sign a serialized credential as a JWT."""
        kid = config.issuer_verification_method or config.issuer_did
        headers = {"typ": "JWT", "alg": self._key_signer.algorithm, "kid": kid}
        payload = jwt_vc_claims(json.loads(serialized_credential), config)

        encoded = f"{dict_to_b64(headers)}.{dict_to_b64(payload)}"
        LOGGER.info("jwt sign: %s", kid)
        sig_bytes = await self._key_signer.sign_message(encoded.encode(), kid)

        return f"{encoded}.{bytes_to_b64(sig_bytes, urlsafe=True, pad=False)}"
