import json
from datetime import datetime, timezone

import pytest

from ...vc.models.credential import VerifiableCredential
from ...vc.models.proof_config import ProofConfig, ProofType
from ...vc.util import b64_to_bytes, b64_to_dict
from ..jwt_signer import BaseKeySigner, JwtCredentialSigner, jwt_vc_claims

CREDENTIAL = {
    "@context": ["https://www.w3.org/2018/credentials/v1"],
    "id": "urn:uuid:dc86e95c-dc85-4f91-b563-82657d095c44",
    "type": ["VerifiableCredential"],
    "issuer": "did:example:123",
    "issuanceDate": "2021-04-12T10:00:00Z",
    "credentialSubject": {"id": "did:example:456", "name": "Alice"},
}


class FakeKeySigner(BaseKeySigner):
    def __init__(self):
        self.signed = []

    async def sign_message(self, message: bytes, verification_method: str) -> bytes:
        self.signed.append((message, verification_method))
        return b"signature"


@pytest.fixture
def config():
    yield ProofConfig(
        issuer_did="did:example:123",
        issuer_verification_method="did:example:123#key-1",
        proof_type=ProofType.JWT,
        credential_id=CREDENTIAL["id"],
        issue_date=datetime(2021, 4, 12, 10, tzinfo=timezone.utc),
        valid_date=datetime(2021, 4, 12, 10, tzinfo=timezone.utc),
        verifier_did="did:example:789",
        nonce="abc",
    )


def test_claims(config):
    claims = jwt_vc_claims(CREDENTIAL, config)
    assert claims == {
        "jti": CREDENTIAL["id"],
        "iss": "did:example:123",
        "sub": "did:example:456",
        "iat": 1618221600,
        "nbf": 1618221600,
        "aud": "did:example:789",
        "nonce": "abc",
        "vc": CREDENTIAL,
    }

    claims = jwt_vc_claims(
        CREDENTIAL,
        config.copy(
            subject_did="did:example:000",
            verifier_did=None,
            nonce=None,
            expiration_date=datetime(2021, 4, 12, 11, tzinfo=timezone.utc),
        ),
    )
    assert claims["sub"] == "did:example:000"
    assert claims["exp"] == 1618225200
    assert "aud" not in claims
    assert "nonce" not in claims


@pytest.mark.asyncio
async def test_sign(config):
    key_signer = FakeKeySigner()
    token = await JwtCredentialSigner(key_signer).sign(json.dumps(CREDENTIAL), config)

    header, payload, sig = token.split(".")
    assert b64_to_dict(header) == {
        "typ": "JWT",
        "alg": "EdDSA",
        "kid": "did:example:123#key-1",
    }
    assert b64_to_dict(payload)["vc"] == CREDENTIAL
    assert b64_to_bytes(sig, urlsafe=True) == b"signature"
    assert key_signer.signed == [
        (f"{header}.{payload}".encode(), "did:example:123#key-1")
    ]

    credential = VerifiableCredential.from_signed(token)
    assert credential.credential_subject_ids == ["did:example:456"]
    assert credential.proof_type == "JwtProof2020"


@pytest.mark.asyncio
async def test_sign_without_method(config):
    key_signer = FakeKeySigner()
    token = await JwtCredentialSigner(key_signer).sign(
        json.dumps(CREDENTIAL), config.copy(issuer_verification_method=None)
    )
    assert b64_to_dict(token.split(".")[0])["kid"] == "did:example:123"
