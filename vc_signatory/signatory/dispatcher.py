"""Routing of serialized credentials to signing backends."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..vc.models.proof_config import ProofConfig, ProofType
from .error import SignerNotFoundError

LOGGER = logging.getLogger(__name__)


class BaseCredentialSigner(ABC):
    """Signing backend for one proof type."""

    @abstractmethod
    async def sign(self, serialized_credential: str, config: ProofConfig) -> str:
        """Sign a serialized credential.

        Args:
            serialized_credential: JSON of the unsigned credential
            config: Completed proof configuration

        Returns:
            The signed credential

        """


class SignerDispatcher:
    """Select the signing backend by proof type."""

    def __init__(
        self,
        ld_signer: Optional[BaseCredentialSigner] = None,
        jwt_signer: Optional[BaseCredentialSigner] = None,
    ):
        """Initialize the dispatcher with its backends."""
        self._signers = {
            ProofType.LD_PROOF: ld_signer,
            ProofType.JWT: jwt_signer,
        }

    def signer_for(self, proof_type: ProofType) -> BaseCredentialSigner:
        """Return the backend registered for a proof type.

        Raises:
            SignerNotFoundError: If no backend handles the proof type

        """
        signer = self._signers.get(proof_type)
        if not signer:
            raise SignerNotFoundError(
                f"No credential signer registered for proof type: {proof_type}"
            )
        return signer

    async def sign(self, serialized_credential: str, config: ProofConfig) -> str:
        """Sign a serialized credential with the backend for its proof type."""
        signer = self.signer_for(config.proof_type)
        LOGGER.debug("Dispatching %s proof to %s", config.proof_type, signer)
        return await signer.sign(serialized_credential, config)
