"""Mutable draft of a W3C verifiable credential."""

import json
from copy import deepcopy
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from ..models.base import BaseModelError
from .models.credential import VerifiableCredential
from .util import datetime_to_str


class CredentialBuilder:
    """Accumulate credential properties, then build an immutable record."""

    def __init__(self, properties: Optional[Mapping[str, Any]] = None):
        """Initialize the builder from an optional partial credential."""
        self._properties = deepcopy(dict(properties or {}))

    @classmethod
    def from_partial(
        cls, partial: Union[str, Mapping[str, Any], VerifiableCredential]
    ) -> "CredentialBuilder":
        """Create a builder from a partial credential.

        Args:
            partial: JSON string, dict or credential model to start from

        Raises:
            BaseModelError: If a JSON string cannot be parsed into an object

        """
        if isinstance(partial, VerifiableCredential):
            return cls(partial.serialize())
        if isinstance(partial, (str, bytes)):
            try:
                partial = json.loads(partial)
            except ValueError as err:
                raise BaseModelError("Credential template JSON parsing failed") from err
            if not isinstance(partial, dict):
                raise BaseModelError("Credential template must be a JSON object")
        return cls(partial)

    @property
    def properties(self) -> Mapping[str, Any]:
        """Accessor for a copy of the accumulated properties."""
        return deepcopy(self._properties)

    def set_property(self, name: str, value: Any) -> "CredentialBuilder":
        """Set a top-level credential property; None removes it."""
        if value is None:
            self._properties.pop(name, None)
        else:
            self._properties[name] = value
        return self

    def set_issuer(self, issuer: Union[str, Mapping[str, Any]]) -> "CredentialBuilder":
        """Attach an issuer, either an identifier or an issuer object."""
        return self.set_property(
            "issuer", issuer if isinstance(issuer, str) else dict(issuer)
        )

    def set_issuer_id(self, issuer_id: str) -> "CredentialBuilder":
        """Set the issuer id, keeping the issuer object form when present."""
        issuer = self._properties.get("issuer")
        if isinstance(issuer, dict):
            issuer["id"] = issuer_id
            return self
        return self.set_property("issuer", issuer_id)

    def set_id(self, credential_id: str) -> "CredentialBuilder":
        """Set the credential id."""
        return self.set_property("id", credential_id)

    def set_subject_id(self, subject_id: str) -> "CredentialBuilder":
        """Set the id of the credential subject.

        A list of subjects gets the id on its first entry.
        """
        subject = self._properties.get("credentialSubject")
        if isinstance(subject, list) and subject:
            subject[0]["id"] = subject_id
        elif isinstance(subject, dict):
            subject["id"] = subject_id
        else:
            self._properties["credentialSubject"] = {"id": subject_id}
        return self

    def set_issuance_date(self, date: Union[str, datetime]) -> "CredentialBuilder":
        """Set the issuance date."""
        return self.set_property("issuanceDate", datetime_to_str(date))

    def set_issued(self, date: Union[str, datetime]) -> "CredentialBuilder":
        """Set the issued date."""
        return self.set_property("issued", datetime_to_str(date))

    def set_valid_from(self, date: Union[str, datetime]) -> "CredentialBuilder":
        """Set the start of the validity period."""
        return self.set_property("validFrom", datetime_to_str(date))

    def set_expiration_date(self, date: Union[str, datetime]) -> "CredentialBuilder":
        """Set the expiration date."""
        return self.set_property("expirationDate", datetime_to_str(date))

    def build(self) -> VerifiableCredential:
        """Finalize the draft into a credential record.

        Raises:
            BaseModelError: If the accumulated properties are not a valid credential

        """
        return VerifiableCredential.deserialize(deepcopy(self._properties))
