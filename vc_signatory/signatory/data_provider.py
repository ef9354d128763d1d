"""Hook for filling credential drafts from external data."""

from abc import ABC, abstractmethod

from ..vc.builder import CredentialBuilder
from ..vc.models.proof_config import ProofConfig


class SignatoryDataProvider(ABC):
    """Populate a credential draft before it is assembled and signed."""

    @abstractmethod
    async def populate(
        self, builder: CredentialBuilder, config: ProofConfig
    ) -> CredentialBuilder:
        """Return the draft with data applied.

        Args:
            builder: Draft built from the template
            config: Proof configuration as given by the caller, not completed

        """
