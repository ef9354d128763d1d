from .credential import CredentialSchema, VerifiableCredential
from .proof_config import (
    Ecosystem,
    LdSignatureType,
    ProofConfig,
    ProofConfigSchema,
    ProofType,
)

__all__ = [
    "CredentialSchema",
    "VerifiableCredential",
    "Ecosystem",
    "LdSignatureType",
    "ProofConfig",
    "ProofConfigSchema",
    "ProofType",
]
