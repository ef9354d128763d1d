import pytest

from ...tests.mock import mock_credential_signer
from ...vc.models.proof_config import ProofConfig, ProofType
from ..dispatcher import SignerDispatcher
from ..error import SignerNotFoundError


@pytest.fixture
def ld_signer():
    yield mock_credential_signer("ld-signed")


@pytest.fixture
def jwt_signer():
    yield mock_credential_signer("jwt-signed")


@pytest.fixture
def dispatcher(ld_signer, jwt_signer):
    yield SignerDispatcher(ld_signer=ld_signer, jwt_signer=jwt_signer)


@pytest.mark.asyncio
async def test_ld_proof(dispatcher, ld_signer, jwt_signer):
    config = ProofConfig(issuer_did="did:example:123")
    assert await dispatcher.sign("{}", config) == "ld-signed"
    ld_signer.sign.assert_awaited_once_with("{}", config)
    jwt_signer.sign.assert_not_called()


@pytest.mark.asyncio
async def test_jwt(dispatcher, ld_signer, jwt_signer):
    config = ProofConfig(issuer_did="did:example:123", proof_type=ProofType.JWT)
    assert await dispatcher.sign("{}", config) == "jwt-signed"
    jwt_signer.sign.assert_awaited_once_with("{}", config)
    ld_signer.sign.assert_not_called()


@pytest.mark.asyncio
async def test_signer_not_found(ld_signer):
    dispatcher = SignerDispatcher(ld_signer=ld_signer)
    with pytest.raises(SignerNotFoundError):
        await dispatcher.sign(
            "{}", ProofConfig(issuer_did="did:example:123", proof_type=ProofType.JWT)
        )
    with pytest.raises(SignerNotFoundError):
        dispatcher.signer_for("PGP")
    ld_signer.sign.assert_not_called()
