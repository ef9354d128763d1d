"""the did resolver.

responsible for keeping track of all resolvers. more importantly
retrieving did's from different sources provided by the method type.
"""

import asyncio
import logging
from itertools import chain
from typing import List, Optional, Sequence, Union

from pydid import DID

from .base import BaseDIDResolver, DIDMethodNotSupported, DIDNotFound, ResolverError

LOGGER = logging.getLogger(__name__)


class DIDResolver:
    """did resolver registry."""

    DEFAULT_TIMEOUT = 30

    def __init__(self, resolvers: Optional[List[BaseDIDResolver]] = None):
        """Create DID Resolver."""
        self.resolvers = resolvers or []

    async def resolve(
        self,
        did: Union[str, DID],
        *,
        timeout: Optional[int] = None,
    ) -> dict:
        """Resolve a DID to its DID document.

        Raises:
            DIDError: If the DID is malformed
            DIDMethodNotSupported: If no registered resolver supports the DID
            DIDNotFound: If no supporting resolver knows the DID
            ResolverError: If a supporting resolver fails unexpectedly

        """
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)
        for resolver in await self._match_did_to_resolver(did):
            try:
                LOGGER.debug("Resolving DID %s with %s", did, resolver)
                document = await asyncio.wait_for(
                    resolver.resolve(did),
                    timeout if timeout is not None else self.DEFAULT_TIMEOUT,
                )
                LOGGER.debug("Resolved DID %s with %s: %s", did, resolver, document)
                return document
            except DIDNotFound:
                LOGGER.debug("DID %s not found by resolver %s", did, resolver)
            except (ResolverError, asyncio.TimeoutError):
                raise
            except Exception as err:
                raise ResolverError(
                    f"Resolver {resolver.__class__.__name__} failed for DID {did}"
                ) from err

        raise DIDNotFound(f"DID {did} could not be resolved")

    async def _match_did_to_resolver(self, did: str) -> Sequence[BaseDIDResolver]:
        """Generate supported DID Resolvers.

        Native resolvers are yielded first, in registered order followed by
        non-native resolvers in registered order.
        """
        valid_resolvers = [
            resolver for resolver in self.resolvers if await resolver.supports(did)
        ]
        LOGGER.debug("Valid resolvers for DID %s: %s", did, valid_resolvers)
        native_resolvers = filter(lambda resolver: resolver.native, valid_resolvers)
        non_native_resolvers = filter(
            lambda resolver: not resolver.native, valid_resolvers
        )
        resolvers = list(chain(native_resolvers, non_native_resolvers))
        if not resolvers:
            raise DIDMethodNotSupported(f'No resolver supporting DID "{did}" loaded')
        return resolvers
