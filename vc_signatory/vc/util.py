"""Utilities for credential timestamps, identifiers and encodings."""

import base64
import json
from datetime import datetime, timezone
from typing import Any, Mapping, Union
from uuid import uuid4

from .constants import CREDENTIAL_ID_PREFIX


def datetime_now() -> datetime:
    """Timestamp in UTC."""
    return datetime.now(tz=timezone.utc)


def datetime_to_str(dt: Union[str, datetime]) -> str:
    """Convert a datetime object to an RFC3339 UTC datetime string.

    Naive datetimes are taken to be UTC already.

    Args:
        dt: May be a string or datetime to allow automatic conversion
    """
    if isinstance(dt, datetime):
        dt = dt.replace(tzinfo=timezone.utc) if not dt.tzinfo else dt
        dt = dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    return dt


def datetime_to_epoch(dt: datetime) -> int:
    """Convert a datetime object to epoch seconds."""
    if not dt.tzinfo:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def new_credential_id() -> str:
    """Generate a fresh random credential identifier in URN form."""
    return f"{CREDENTIAL_ID_PREFIX}{uuid4()}"


def pad(val: str) -> str:
    """Pad base64 values if need be: JWT calls to omit trailing padding."""
    padlen = 4 - len(val) % 4
    return val if padlen > 2 else (val + "=" * padlen)


def unpad(val: str) -> str:
    """Remove padding from base64 values if need be."""
    return val.rstrip("=")


def b64_to_bytes(val: str, urlsafe=False) -> bytes:
    """Convert a base 64 string to bytes."""
    if urlsafe:
        return base64.urlsafe_b64decode(pad(val))
    return base64.b64decode(pad(val))


def bytes_to_b64(val: bytes, urlsafe=False, pad=True, encoding: str = "ascii") -> str:
    """Convert a byte string to base 64."""
    b64 = (
        base64.urlsafe_b64encode(val).decode(encoding)
        if urlsafe
        else base64.b64encode(val).decode(encoding)
    )
    return b64 if pad else unpad(b64)


def dict_to_b64(value: Mapping[str, Any]) -> str:
    """Encode a dictionary as a b64 string."""
    return bytes_to_b64(json.dumps(value).encode(), urlsafe=True, pad=False)


def b64_to_dict(value: str) -> Mapping[str, Any]:
    """Decode a dictionary from a b64 encoded value."""
    return json.loads(b64_to_bytes(value, urlsafe=True))
