"""Record storage held in a process-local dict."""

from typing import Mapping, Sequence

from .base import BaseStorage, check_record
from .error import StorageDuplicateError, StorageNotFoundError
from .record import StorageRecord


class InMemoryStorage(BaseStorage):
    """Records kept in memory for the lifetime of the instance."""

    def __init__(self):
        """Initialize an empty store."""
        self.records = {}

    def _existing(self, record_type: str, record_id: str) -> StorageRecord:
        try:
            return self.records[(record_type, record_id)]
        except KeyError:
            raise StorageNotFoundError(
                f"No {record_type} record with id {record_id}"
            ) from None

    async def add_record(self, record: StorageRecord):
        """Insert a record.

        Raises:
            StorageError: If the record is incomplete
            StorageDuplicateError: If the type and id are already taken

        """
        check_record(record)
        key = (record.type, record.id)
        if key in self.records:
            raise StorageDuplicateError(f"Record {record.id} already exists")
        self.records[key] = record

    async def get_record(self, record_type: str, record_id: str) -> StorageRecord:
        """Return the record stored under a type and id."""
        return self._existing(record_type, record_id)

    async def update_record(self, record: StorageRecord, value: str, tags: Mapping):
        """Overwrite the value and tags of a stored record."""
        check_record(record)
        current = self._existing(record.type, record.id)
        self.records[(record.type, record.id)] = current._replace(
            value=value, tags=dict(tags or {})
        )

    async def delete_record(self, record: StorageRecord):
        """Remove a stored record."""
        check_record(record, need_value=False)
        self._existing(record.type, record.id)
        del self.records[(record.type, record.id)]

    async def find_all_records(self, record_type: str) -> Sequence[StorageRecord]:
        """Return every record of a type, in insertion order."""
        return [
            record for record in self.records.values() if record.type == record_type
        ]
