"""Verifiable Credential constants."""

CREDENTIALS_CONTEXT_V1_URL = "https://www.w3.org/2018/credentials/v1"

VERIFIABLE_CREDENTIAL_TYPE = "VerifiableCredential"

DEFAULT_PROOF_PURPOSE = "assertionMethod"

# Claim carrying the credential body in a JWT-VC payload
JWT_VC_CLAIM = "vc"

CREDENTIAL_ID_PREFIX = "urn:uuid:"
