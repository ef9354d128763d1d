from copy import deepcopy
from unittest import TestCase

from marshmallow import INCLUDE

from ...models.base import BaseModelError
from ..models.credential import JWT_PROOF_TYPE, VerifiableCredential
from ..util import dict_to_b64

CREDENTIAL = {
    "@context": [
        "https://www.w3.org/2018/credentials/v1",
        "https://www.w3.org/2018/credentials/examples/v1",
    ],
    "id": "urn:uuid:dc86e95c-dc85-4f91-b563-82657d095c44",
    "type": ["VerifiableCredential", "UniversityDegreeCredential"],
    "issuer": {"id": "did:example:123", "name": "Example University"},
    "issuanceDate": "2021-04-12T10:00:00Z",
    "issued": "2021-04-12T10:00:00Z",
    "validFrom": "2021-04-12T10:00:00Z",
    "credentialSubject": {
        "id": "did:example:456",
        "degree": {"type": "BachelorDegree", "name": "Bachelor of Science"},
    },
    "credentialSchema": {
        "id": "https://example.org/schemas/degree.json",
        "type": "JsonSchemaValidator2018",
    },
}

VC_PROOF = {
    "type": "Ed25519Signature2018",
    "created": "2021-04-12T10:00:01Z",
    "proofPurpose": "assertionMethod",
    "verificationMethod": "did:example:123#key-1",
    "jws": "eyJhbGciOiJFZERTQSIsImI2NCI6ZmFsc2UsImNyaXQiOlsiYjY0Il19..c2ln",
}


class TestVerifiableCredential(TestCase):
    def test_serde_credential(self):
        credential = VerifiableCredential.deserialize(CREDENTIAL)
        assert type(credential) == VerifiableCredential
        assert credential.extra["credentialSchema"] == CREDENTIAL["credentialSchema"]
        assert credential.serialize() == CREDENTIAL

    def test_properties(self):
        credential = VerifiableCredential.deserialize({**CREDENTIAL, "proof": VC_PROOF})
        assert credential.issuer_id == "did:example:123"
        assert credential.credential_subject_ids == ["did:example:456"]
        assert credential.proof_type == "Ed25519Signature2018"
        assert credential.context_urls == CREDENTIAL["@context"]

        credential = VerifiableCredential.deserialize(
            {
                **CREDENTIAL,
                "issuer": "did:example:789",
                "credentialSubject": [{"id": "did:example:1"}, {"name": "x"}],
            }
        )
        assert credential.issuer_id == "did:example:789"
        assert credential.credential_subject_ids == ["did:example:1"]
        assert credential.proof_type is None

    def test_defaults(self):
        credential = VerifiableCredential(credential_subject={"name": "Alice"})
        assert credential.context == ["https://www.w3.org/2018/credentials/v1"]
        assert credential.type == ["VerifiableCredential"]
        assert credential.issuer_id is None
        assert credential.credential_subject_ids == []

    def test_invalid(self):
        with self.assertRaises(BaseModelError):
            VerifiableCredential.deserialize({**CREDENTIAL, "type": ["Other"]})
        with self.assertRaises(BaseModelError):
            VerifiableCredential.deserialize(
                {**CREDENTIAL, "@context": ["https://example.org/v1"]}
            )
        with self.assertRaises(BaseModelError):
            VerifiableCredential.deserialize(
                {**CREDENTIAL, "issuanceDate": "12 April 2021"}
            )
        with self.assertRaises(BaseModelError):
            VerifiableCredential.deserialize(
                {**CREDENTIAL, "credentialSubject": {"id": "not a uri"}}
            )
        no_subject = deepcopy(CREDENTIAL)
        no_subject.pop("credentialSubject")
        with self.assertRaises(BaseModelError):
            VerifiableCredential.deserialize(no_subject)

    def test_eq(self):
        first = VerifiableCredential.deserialize(CREDENTIAL, unknown=INCLUDE)
        second = VerifiableCredential.deserialize(deepcopy(CREDENTIAL))
        assert first == second
        assert first != CREDENTIAL
        second.issuer = "did:example:789"
        assert first != second


class TestFromSigned(TestCase):
    def test_json(self):
        signed = VerifiableCredential.deserialize(
            {**CREDENTIAL, "proof": VC_PROOF}
        ).to_json()
        credential = VerifiableCredential.from_signed(signed)
        assert credential.proof == VC_PROOF
        assert credential.id == CREDENTIAL["id"]

    def test_jwt(self):
        body = deepcopy(CREDENTIAL)
        body.pop("id")
        body.pop("issuer")
        body["credentialSubject"].pop("id")
        token = ".".join(
            [
                dict_to_b64({"alg": "EdDSA", "typ": "JWT"}),
                dict_to_b64(
                    {
                        "jti": CREDENTIAL["id"],
                        "iss": "did:example:123",
                        "sub": "did:example:456",
                        "vc": body,
                    }
                ),
                "c2lnbmF0dXJl",
            ]
        )
        credential = VerifiableCredential.from_signed(token)
        assert credential.id == CREDENTIAL["id"]
        assert credential.issuer_id == "did:example:123"
        assert credential.credential_subject_ids == ["did:example:456"]
        assert credential.proof == {"type": JWT_PROOF_TYPE, "jwt": token}

    def test_jwt_claims_do_not_override_body(self):
        token = ".".join(
            [
                dict_to_b64({"alg": "EdDSA"}),
                dict_to_b64({"iss": "did:example:999", "vc": CREDENTIAL}),
                "c2ln",
            ]
        )
        credential = VerifiableCredential.from_signed(token)
        assert credential.issuer_id == "did:example:123"

    def test_invalid(self):
        with self.assertRaises(BaseModelError):
            VerifiableCredential.from_signed("not a credential")
        with self.assertRaises(BaseModelError):
            VerifiableCredential.from_signed("a.!!!.c")
        with self.assertRaises(BaseModelError):
            VerifiableCredential.from_signed("{not json")
