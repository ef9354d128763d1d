"""Errors for config modules."""

from ..core.error import BaseError


class ConfigError(BaseError):
    """A configuration error has been raised."""
