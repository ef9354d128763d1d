"""Proof configuration for credential issuance."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from marshmallow import EXCLUDE, fields
from marshmallow.validate import Length

from ...models.base import BaseModel, BaseModelSchema
from ...models.valid import GENERIC_DID_EXAMPLE, RFC3339_DATETIME_EXAMPLE


class ProofType(Enum):
    """Signature backend selector."""

    JWT = "JWT"
    LD_PROOF = "LD_PROOF"


class Ecosystem(Enum):
    """Issuance profile selector."""

    DEFAULT = "DEFAULT"
    ESSIF = "ESSIF"
    GAIAX = "GAIAX"
    IOTA = "IOTA"


class LdSignatureType(Enum):
    """Linked data signature suites."""

    RsaSignature2018 = "RsaSignature2018"
    Ed25519Signature2018 = "Ed25519Signature2018"
    Ed25519Signature2020 = "Ed25519Signature2020"
    EcdsaSecp256k1Signature2019 = "EcdsaSecp256k1Signature2019"
    JcsEd25519Signature2020 = "JcsEd25519Signature2020"
    JsonWebSignature2020 = "JsonWebSignature2020"


_UNSET = object()


class ProofConfig(BaseModel):
    """Cryptographic and metadata parameters of an issuance request."""

    class Meta:
        """ProofConfig metadata."""

        schema_class = "ProofConfigSchema"

    def __init__(
        self,
        issuer_did: str,
        subject_did: Optional[str] = None,
        verifier_did: Optional[str] = None,
        issuer_verification_method: Optional[str] = None,
        proof_type: ProofType = ProofType.LD_PROOF,
        domain: Optional[str] = None,
        nonce: Optional[str] = None,
        proof_purpose: Optional[str] = None,
        credential_id: Optional[str] = None,
        issue_date: Optional[datetime] = None,
        valid_date: Optional[datetime] = None,
        expiration_date: Optional[datetime] = None,
        data_provider_identifier: Optional[str] = None,
        ld_signature_type: Optional[LdSignatureType] = None,
        creator: Optional[str] = _UNSET,
        ecosystem: Ecosystem = Ecosystem.DEFAULT,
    ):
        """Initialize a ProofConfig instance.

        Args:
            issuer_did: DID of the signing party
            subject_did: DID of the credential subject
            verifier_did: DID of the intended verifier
            issuer_verification_method: DID URL of the signing key; the issuer's
                default key is resolved when absent
            proof_type: Signature backend to use
            domain: Proof domain binding
            nonce: Proof nonce binding
            proof_purpose: Proof purpose, `assertionMethod` when absent
            credential_id: Credential identifier, generated when absent
            issue_date: Issuance timestamp, current time when absent
            valid_date: Validity start timestamp, current time when absent
            expiration_date: Expiration timestamp
            data_provider_identifier: Correlation key for data providers
            ld_signature_type: Linked data signature suite, derived from the
                issuer DID method when absent
            creator: Proof creator, defaults to `issuer_did` unless given
                explicitly (including an explicit None)
            ecosystem: Issuance profile

        """
        super().__init__()
        self.issuer_did = issuer_did
        self.subject_did = subject_did
        self.verifier_did = verifier_did
        self.issuer_verification_method = issuer_verification_method
        self.proof_type = proof_type
        self.domain = domain
        self.nonce = nonce
        self.proof_purpose = proof_purpose
        self.credential_id = credential_id
        self.issue_date = issue_date
        self.valid_date = valid_date
        self.expiration_date = expiration_date
        self.data_provider_identifier = data_provider_identifier
        self.ld_signature_type = ld_signature_type
        self.creator = issuer_did if creator is _UNSET else creator
        self.ecosystem = ecosystem

    def copy(self, **changes) -> "ProofConfig":
        """Return a new ProofConfig with the given attributes replaced."""
        values = dict(vars(self))
        values.update(changes)
        return ProofConfig(**values)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, ProofConfig):
            return False
        return vars(self) == vars(other)


class ProofConfigSchema(BaseModelSchema):
    """ProofConfig schema."""

    class Meta:
        """ProofConfigSchema metadata."""

        model_class = ProofConfig
        unknown = EXCLUDE

    issuer_did = fields.Str(
        required=True,
        data_key="issuerDid",
        validate=Length(min=1),
        metadata={"description": "DID of the issuer", "example": GENERIC_DID_EXAMPLE},
    )
    subject_did = fields.Str(
        required=False,
        allow_none=True,
        data_key="subjectDid",
        metadata={"description": "DID of the credential subject"},
    )
    verifier_did = fields.Str(
        required=False,
        allow_none=True,
        data_key="verifierDid",
        metadata={"description": "DID of the intended verifier"},
    )
    issuer_verification_method = fields.Str(
        required=False,
        allow_none=True,
        data_key="issuerVerificationMethod",
        metadata={
            "description": "DID URL of the signing key",
            "example": f"{GENERIC_DID_EXAMPLE}#key-1",
        },
    )
    proof_type = fields.Enum(
        ProofType,
        required=False,
        data_key="proofType",
        metadata={"description": "Signature backend", "example": "LD_PROOF"},
    )
    domain = fields.Str(required=False, allow_none=True)
    nonce = fields.Str(required=False, allow_none=True)
    proof_purpose = fields.Str(
        required=False,
        allow_none=True,
        data_key="proofPurpose",
        metadata={"example": "assertionMethod"},
    )
    credential_id = fields.Str(
        required=False,
        allow_none=True,
        data_key="credentialId",
        metadata={"example": "urn:uuid:dc86e95c-dc85-4f91-b563-82657d095c44"},
    )
    issue_date = fields.AwareDateTime(
        required=False,
        allow_none=True,
        data_key="issueDate",
        default_timezone=timezone.utc,
        metadata={"example": RFC3339_DATETIME_EXAMPLE},
    )
    valid_date = fields.AwareDateTime(
        required=False,
        allow_none=True,
        data_key="validDate",
        default_timezone=timezone.utc,
        metadata={"example": RFC3339_DATETIME_EXAMPLE},
    )
    expiration_date = fields.AwareDateTime(
        required=False,
        allow_none=True,
        data_key="expirationDate",
        default_timezone=timezone.utc,
        metadata={"example": RFC3339_DATETIME_EXAMPLE},
    )
    data_provider_identifier = fields.Str(
        required=False, allow_none=True, data_key="dataProviderIdentifier"
    )
    ld_signature_type = fields.Enum(
        LdSignatureType,
        required=False,
        allow_none=True,
        data_key="ldSignatureType",
        metadata={"example": "Ed25519Signature2018"},
    )
    creator = fields.Str(required=False, allow_none=True)
    ecosystem = fields.Enum(Ecosystem, required=False)
