"""Store of issued verifiable credentials, grouped by logical namespace."""

import logging
from typing import Sequence

from ..vc.models.credential import VerifiableCredential
from .base import BaseStorage
from .error import StorageNotFoundError
from .record import StorageRecord

LOGGER = logging.getLogger(__name__)

VC_RECORD_TYPE_PREFIX = "vc::"


def record_type_for_group(group: str) -> str:
    """Return the storage record type holding credentials of a group."""
    return f"{VC_RECORD_TYPE_PREFIX}{group}"


def serialize_credential(
    credential_id: str, credential: VerifiableCredential, group: str
) -> StorageRecord:
    """Convert a credential into a stored record."""
    tags = {f"type:{type_val}": "1" for type_val in credential.type}
    for subj_id in credential.credential_subject_ids:
        tags[f"subj:{subj_id}"] = "1"
    if credential.issuer_id:
        tags["issuer_id"] = credential.issuer_id
    if credential.proof_type:
        tags["proof_type"] = credential.proof_type
    return StorageRecord(
        record_type_for_group(group),
        credential.to_json(),
        tags,
        credential_id,
    )


class VCStore:
    """Credential store keyed by credential id within a group."""

    def __init__(self, storage: BaseStorage):
        """Initialize the store over a storage backend."""
        self._storage = storage

    async def store_credential(
        self, credential_id: str, credential: VerifiableCredential, group: str
    ):
        """
        Store a credential, replacing any credential stored under the same id.

        Args:
            credential_id: The key to store the credential under
            credential: The credential to store
            group: The namespace to store the credential in

        """
        record = serialize_credential(credential_id, credential, group)
        try:
            existing = await self._storage.get_record(record.type, record.id)
        except StorageNotFoundError:
            await self._storage.add_record(record)
        else:
            LOGGER.debug("Replacing stored credential %s in %s", credential_id, group)
            await self._storage.update_record(existing, record.value, record.tags)

    async def get_credential(
        self, credential_id: str, group: str
    ) -> VerifiableCredential:
        """
        Fetch a stored credential.

        Raises:
            StorageNotFoundError: If the credential is not found

        """
        record = await self._storage.get_record(
            record_type_for_group(group), credential_id
        )
        return VerifiableCredential.from_json(record.value)

    async def list_credential_ids(self, group: str) -> Sequence[str]:
        """List the ids of all credentials stored in a group."""
        records = await self._storage.find_all_records(record_type_for_group(group))
        return [record.id for record in records]

    async def delete_credential(self, credential_id: str, group: str):
        """
        Remove a stored credential.

        Raises:
            StorageNotFoundError: If the credential is not found

        """
        record = await self._storage.get_record(
            record_type_for_group(group), credential_id
        )
        await self._storage.delete_record(record)
