"""Issuance of verifiable credentials from templates or drafts."""

import logging
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from ..config.signatory_config import SignatoryConfig, load_signatory_config
from ..resolver.did_resolver import DIDResolver
from ..storage.base import BaseStorage
from ..storage.in_memory import InMemoryStorage
from ..storage.vc_store import VCStore
from ..templates.base import BaseTemplateRegistry
from ..templates.directory import DirectoryTemplateRegistry
from ..vc.builder import CredentialBuilder
from ..vc.models.credential import VerifiableCredential
from ..vc.models.proof_config import ProofConfig
from .assembler import CredentialAssembler
from .data_provider import SignatoryDataProvider
from .dispatcher import BaseCredentialSigner, SignerDispatcher
from .proof_config import ProofConfigCompleter
from .verification_method import VerificationMethodResolver

LOGGER = logging.getLogger(__name__)

VC_GROUP = "signatory"

Issuer = Union[str, Mapping[str, Any]]


class Signatory:
    """Sign credentials and record them in the credential store."""

    def __init__(
        self,
        config: SignatoryConfig,
        *,
        did_resolver: DIDResolver,
        templates: BaseTemplateRegistry,
        dispatcher: SignerDispatcher,
        vc_store: VCStore,
    ):
        """Initialize the signatory.

        Args:
            config: Static settings holding the default proof configuration
            did_resolver: Resolver for issuer DID documents
            templates: Registry of credential templates
            dispatcher: Signing backends by proof type
            vc_store: Store receiving the signed credentials

        """
        self.config = config
        self._templates = templates
        self._dispatcher = dispatcher
        self._vc_store = vc_store
        self._completer = ProofConfigCompleter(
            VerificationMethodResolver(did_resolver)
        )
        self._assembler = CredentialAssembler()

    @property
    def default_proof_config(self) -> ProofConfig:
        """Accessor for the proof configuration used when none is given."""
        return self.config.proof_config

    def _read_template(self, template_id_or_filename: str) -> str:
        path = Path(template_id_or_filename)
        if path.is_file():
            LOGGER.debug("Reading credential template from %s", path)
            return path.read_text()
        return self._templates.get_template(template_id_or_filename).template

    async def issue(
        self,
        template_id_or_filename: str,
        config: Optional[ProofConfig] = None,
        data_provider: Optional[SignatoryDataProvider] = None,
        issuer: Optional[Issuer] = None,
    ) -> str:
        """
        Issue a credential from a template.

        Args:
            template_id_or_filename: Path of a template file, or the name of a
                registered template
            config: Proof configuration, the configured default when absent
            data_provider: Hook populating the draft before signing
            issuer: Issuer record to embed in the credential

        Returns:
            The signed credential

        Raises:
            TemplateNotFoundError: If neither a file nor a registered template
                matches `template_id_or_filename`

        """
        config = config or self.default_proof_config
        builder = CredentialBuilder.from_partial(
            self._read_template(template_id_or_filename)
        )
        if data_provider:
            builder = await data_provider.populate(builder, config)

        return await self.issue_credential(builder, config, issuer)

    async def issue_credential(
        self,
        builder: CredentialBuilder,
        config: Optional[ProofConfig] = None,
        issuer: Optional[Issuer] = None,
    ) -> str:
        """
        Issue a credential from a draft.

        The signed credential is stored under its credential id, so a failed
        store can be retried with the same credential id.

        Args:
            builder: Draft of the credential
            config: Proof configuration, the configured default when absent
            issuer: Issuer record to embed in the credential

        Returns:
            The signed credential

        Raises:
            IssuerDIDError: If the issuer DID is malformed
            SignerNotFoundError: If no backend signs the requested proof type
            StorageError: If the signed credential could not be stored

        """
        full_config = await self._completer.complete(
            config or self.default_proof_config
        )
        credential = self._assembler.assemble(builder, full_config, issuer)

        LOGGER.info(
            "Signing credential with proof using %s...", full_config.proof_type.name
        )
        LOGGER.debug(
            "Signing credential with proof using %s, credential is: %s",
            full_config.proof_type.name,
            credential,
        )
        signed = await self._dispatcher.sign(credential.to_json(), full_config)
        LOGGER.debug("Signed VC is: %s", signed)

        await self._vc_store.store_credential(
            full_config.credential_id,
            VerifiableCredential.from_signed(signed),
            VC_GROUP,
        )
        return signed

    def list_templates(self) -> Sequence[str]:
        """List the names of the registered templates."""
        return self._templates.list_templates()

    def load_template(self, template_id: str) -> VerifiableCredential:
        """Load a registered template as an unsigned credential."""
        return self._templates.load_template(template_id)


def create_signatory(
    config: Union[SignatoryConfig, str, PathLike],
    *,
    did_resolver: Optional[DIDResolver] = None,
    templates: Optional[BaseTemplateRegistry] = None,
    ld_signer: Optional[BaseCredentialSigner] = None,
    jwt_signer: Optional[BaseCredentialSigner] = None,
    storage: Optional[BaseStorage] = None,
) -> Signatory:
    """
    Create a signatory from its configuration and collaborators.

    Args:
        config: Settings, or the path of a YAML or JSON file holding them
        did_resolver: Resolver for issuer DID documents
        templates: Template registry, the bundled templates when absent
        ld_signer: Linked data proof backend
        jwt_signer: JWT backend
        storage: Storage of signed credentials, in memory when absent

    Raises:
        ConfigError: If the configuration file cannot be loaded

    """
    if not isinstance(config, SignatoryConfig):
        config = load_signatory_config(config)

    return Signatory(
        config,
        did_resolver=did_resolver or DIDResolver(),
        templates=templates or DirectoryTemplateRegistry(),
        dispatcher=SignerDispatcher(ld_signer=ld_signer, jwt_signer=jwt_signer),
        vc_store=VCStore(storage or InMemoryStorage()),
    )
