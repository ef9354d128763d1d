"""Verifiable Credential marshmallow schema classes."""

import json
from typing import List, Optional, Union

from marshmallow import INCLUDE, fields, post_dump

from ...models.base import BaseModel, BaseModelError, BaseModelSchema
from ...models.valid import (
    CREDENTIAL_CONTEXT_EXAMPLE,
    CREDENTIAL_CONTEXT_VALIDATE,
    CREDENTIAL_SUBJECT_EXAMPLE,
    CREDENTIAL_SUBJECT_VALIDATE,
    CREDENTIAL_TYPE_EXAMPLE,
    CREDENTIAL_TYPE_VALIDATE,
    GENERIC_DID_EXAMPLE,
    RFC3339_DATETIME_EXAMPLE,
    RFC3339_DATETIME_VALIDATE,
    URI_EXAMPLE,
    URI_VALIDATE,
    DictOrDictListField,
    StrOrDictField,
    UriOrDictField,
)
from ..constants import (
    CREDENTIALS_CONTEXT_V1_URL,
    JWT_VC_CLAIM,
    VERIFIABLE_CREDENTIAL_TYPE,
)
from ..util import b64_to_dict

JWT_PROOF_TYPE = "JwtProof2020"


class VerifiableCredential(BaseModel):
    """Verifiable Credential model."""

    class Meta:
        """VerifiableCredential metadata."""

        schema_class = "CredentialSchema"

    def __init__(
        self,
        context: Optional[List[Union[str, dict]]] = None,
        id: Optional[str] = None,
        type: Optional[List[str]] = None,
        issuer: Optional[Union[dict, str]] = None,
        issuance_date: Optional[str] = None,
        issued: Optional[str] = None,
        valid_from: Optional[str] = None,
        expiration_date: Optional[str] = None,
        credential_subject: Optional[Union[dict, List[dict]]] = None,
        proof: Optional[dict] = None,
        **kwargs,
    ) -> None:
        """Initialize the VerifiableCredential instance."""
        super().__init__()
        self.context = context or [CREDENTIALS_CONTEXT_V1_URL]
        self.id = id
        self.type = type or [VERIFIABLE_CREDENTIAL_TYPE]
        self.issuer = issuer
        self.issuance_date = issuance_date
        self.issued = issued
        self.valid_from = valid_from
        self.expiration_date = expiration_date
        self.credential_subject = credential_subject
        self.proof = proof

        self.extra = kwargs

    @property
    def context_urls(self) -> List[str]:
        """Getter for context urls."""
        return [context for context in self.context if type(context) is str]

    @property
    def issuer_id(self) -> Optional[str]:
        """Getter for issuer id."""
        if not self.issuer:
            return None
        elif type(self.issuer) is str:
            return self.issuer

        return self.issuer.get("id")

    @property
    def credential_subject_ids(self) -> List[str]:
        """Getter for credential subject ids."""
        if not self.credential_subject:
            return []
        elif type(self.credential_subject) is dict:
            subject_id = self.credential_subject.get("id")

            return [subject_id] if subject_id else []
        else:
            return [
                subject.get("id")
                for subject in self.credential_subject
                if subject.get("id")
            ]

    @property
    def proof_type(self) -> Optional[str]:
        """Getter for the type of the attached proof."""
        return self.proof.get("type") if self.proof else None

    @classmethod
    def from_signed(cls, signed: str) -> "VerifiableCredential":
        """Parse a signed credential in JSON-LD or compact JWT form.

        A JWT-VC is unwrapped from its `vc` claim; registered claims fill the
        credential id, issuer and subject where the claim body omits them, and
        the token itself is attached as a `JwtProof2020` proof.
        """
        signed = signed.strip()
        if signed.startswith("{"):
            return cls.from_json(signed)

        parts = signed.split(".")
        if len(parts) != 3:
            raise BaseModelError("Signed credential is neither JSON nor a JWT")
        try:
            payload = b64_to_dict(parts[1])
        except (ValueError, json.JSONDecodeError) as err:
            raise BaseModelError("Unable to decode JWT payload") from err

        body = dict(payload.get(JWT_VC_CLAIM) or {})
        if "jti" in payload:
            body.setdefault("id", payload["jti"])
        if "iss" in payload:
            body.setdefault("issuer", payload["iss"])
        subject = body.get("credentialSubject")
        if "sub" in payload and isinstance(subject, dict):
            subject.setdefault("id", payload["sub"])
        body["proof"] = {"type": JWT_PROOF_TYPE, "jwt": signed}

        return cls.deserialize(body)

    def __eq__(self, o: object) -> bool:
        """Check equalness."""
        if isinstance(o, VerifiableCredential):
            return self.serialize() == o.serialize()

        return False


class CredentialSchema(BaseModelSchema):
    """W3C verifiable credential schema.

    Based on https://www.w3.org/TR/vc-data-model

    """

    class Meta:
        """Accept parameter overload."""

        unknown = INCLUDE
        model_class = VerifiableCredential

    context = fields.List(
        UriOrDictField(required=True),
        data_key="@context",
        required=True,
        validate=CREDENTIAL_CONTEXT_VALIDATE,
        metadata={
            "description": "The JSON-LD context of the credential",
            "example": CREDENTIAL_CONTEXT_EXAMPLE,
        },
    )

    id = fields.Str(
        required=False,
        validate=URI_VALIDATE,
        metadata={"description": "The ID of the credential", "example": URI_EXAMPLE},
    )

    type = fields.List(
        fields.Str(required=True),
        required=True,
        validate=CREDENTIAL_TYPE_VALIDATE,
        metadata={
            "description": "The JSON-LD type of the credential",
            "example": CREDENTIAL_TYPE_EXAMPLE,
        },
    )

    issuer = StrOrDictField(
        required=False,
        metadata={
            "description": (
                "The JSON-LD Verifiable Credential Issuer. Either string of object with"
                " id field."
            ),
            "example": GENERIC_DID_EXAMPLE,
        },
    )

    issuance_date = fields.Str(
        data_key="issuanceDate",
        required=False,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The issuance date",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )

    issued = fields.Str(
        required=False,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The issued date",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )

    valid_from = fields.Str(
        data_key="validFrom",
        required=False,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The start of the validity period",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )

    expiration_date = fields.Str(
        data_key="expirationDate",
        required=False,
        validate=RFC3339_DATETIME_VALIDATE,
        metadata={
            "description": "The expiration date",
            "example": RFC3339_DATETIME_EXAMPLE,
        },
    )

    credential_subject = DictOrDictListField(
        required=True,
        data_key="credentialSubject",
        validate=CREDENTIAL_SUBJECT_VALIDATE,
        metadata={"example": CREDENTIAL_SUBJECT_EXAMPLE},
    )

    proof = fields.Dict(
        required=False,
        metadata={"description": "The proof of the credential"},
    )

    @post_dump(pass_original=True)
    def add_unknown_properties(self, data: dict, original, **kwargs):
        """Add back unknown properties before outputting."""

        data.update(original.extra)

        return data
