"""Errors raised by record storage backends."""

from ..core.error import BaseError


class StorageError(BaseError):
    """A storage backend rejected or failed an operation."""


class StorageNotFoundError(StorageError):
    """No record exists under the requested type and id."""


class StorageDuplicateError(StorageError):
    """A record already exists under the same type and id."""
