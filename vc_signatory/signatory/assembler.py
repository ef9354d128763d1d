"""Merge of a credential draft with the completed proof configuration."""

from typing import Any, Mapping, Optional, Union

from ..vc.builder import CredentialBuilder
from ..vc.models.credential import VerifiableCredential
from ..vc.models.proof_config import ProofConfig
from ..vc.util import datetime_now, new_credential_id


class CredentialAssembler:
    """Apply issuer, subject, id and validity fields to a credential draft."""

    def assemble(
        self,
        builder: CredentialBuilder,
        config: ProofConfig,
        issuer: Optional[Union[str, Mapping[str, Any]]] = None,
    ) -> VerifiableCredential:
        """Build the unsigned credential.

        The caller's builder is not modified.

        Args:
            builder: Draft of the credential
            config: Completed proof configuration
            issuer: Issuer record to attach before setting the issuer id

        Returns:
            The unsigned credential

        """
        draft = CredentialBuilder(builder.properties)
        issue_date = config.issue_date or datetime_now()

        if issuer is not None:
            draft.set_issuer(issuer)
        draft.set_issuer_id(config.issuer_did)
        draft.set_issuance_date(issue_date)
        draft.set_issued(issue_date)
        if config.subject_did is not None:
            draft.set_subject_id(config.subject_did)
        draft.set_id(config.credential_id or new_credential_id())
        draft.set_valid_from(config.valid_date or datetime_now())
        if config.expiration_date:
            draft.set_expiration_date(config.expiration_date)

        return draft.build()
