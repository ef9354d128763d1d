"""Interface of the record backends that credential stores write through."""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from .error import StorageError
from .record import StorageRecord


def check_record(record: StorageRecord, *, need_value: bool = True):
    """Reject a record that cannot be written.

    Raises:
        StorageError: If the record, its id or its type is missing, or the
            value is empty when `need_value` is set

    """
    if not record:
        raise StorageError("No record provided")
    if not record.id or not record.type:
        raise StorageError("Record needs both a type and an id")
    if need_value and not record.value:
        raise StorageError(f"Record {record.id} has an empty value")


class BaseStorage(ABC):
    """Records keyed by (type, id), each holding a string value and tags."""

    @abstractmethod
    async def add_record(self, record: StorageRecord):
        """Insert a record.

        Raises:
            StorageDuplicateError: If the type and id are already taken

        """

    @abstractmethod
    async def get_record(self, record_type: str, record_id: str) -> StorageRecord:
        """Return the record stored under a type and id.

        Raises:
            StorageNotFoundError: If there is no such record

        """

    @abstractmethod
    async def update_record(self, record: StorageRecord, value: str, tags: Mapping):
        """Overwrite the value and tags of a stored record.

        Raises:
            StorageNotFoundError: If there is no such record

        """

    @abstractmethod
    async def delete_record(self, record: StorageRecord):
        """Remove a stored record.

        Raises:
            StorageNotFoundError: If there is no such record

        """

    @abstractmethod
    async def find_all_records(self, record_type: str) -> Sequence[StorageRecord]:
        """Return every record of a type."""
