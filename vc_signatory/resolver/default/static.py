"""Resolver serving DID documents held in memory.

Useful for DIDs whose documents are managed locally (issuer DIDs created by
this agent) and for tests.
"""

import re
from typing import Mapping, Optional, Pattern, Sequence

from ..base import BaseDIDResolver, DIDNotFound, ResolverType


class StaticDIDResolver(BaseDIDResolver):
    """Resolve DIDs from a fixed set of documents."""

    def __init__(
        self,
        documents: Optional[Mapping[str, dict]] = None,
        methods: Optional[Sequence[str]] = None,
    ):
        """Initialize the resolver.

        Args:
            documents: DID documents keyed by DID
            methods: DID methods to claim; all methods when omitted

        """
        super().__init__(ResolverType.NATIVE)
        self.documents = dict(documents or {})
        self._did_regex = re.compile(
            "^did:(?:{}):.*$".format("|".join(methods)) if methods else "^did:.*$"
        )

    @property
    def supported_did_regex(self) -> Pattern:
        """Return supported_did_regex of static resolver."""
        return self._did_regex

    def add_document(self, document: dict):
        """Register a DID document under its id."""
        self.documents[document["id"]] = document

    async def _resolve(self, did: str) -> dict:
        """Return the registered document for the DID."""
        try:
            return self.documents[did]
        except KeyError:
            raise DIDNotFound(f"No document registered for {did}") from None
