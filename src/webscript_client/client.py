"""Facade over all web script clients of one repository store.

This module composes the change-feed, node-action, metadata, authority and
content clients over one shared transport, so a caller builds a single object
and closes a single connection pool.
"""

import logging
from typing import List, Optional

from .auth import Credentials
from .authorities import AuthorityResolver
from .change_feed import ChangeFeedClient, NodeActionClient
from .content import ContentFetcher, ContentStream
from .endpoints import RepositoryEndpoints
from .filters import FilterSpec
from .metadata import MetadataClient
from .models import ChangeBatch, Cursor, MetadataRecord, UserAuthority
from .transport import DEFAULT_TIMEOUT, HttpTransport

logger = logging.getLogger(__name__)


class WebScriptClient:
    """Client for one store of a repository exposing the indexing web scripts.

    Example:
        >>> with WebScriptClient.from_settings("http", "localhost:8080", "/alfresco/service",
        ...                                    "workspace", "SpacesStore") as client:
        ...     batch = client.fetch_changes(Cursor())
        ...     for node_id in batch.node_ids:
        ...         metadata = client.fetch_metadata(node_id)
    """

    def __init__(self, endpoints: RepositoryEndpoints, transport: HttpTransport):
        """Initialize the client over an explicitly owned transport.

        Args:
            endpoints: Web script URLs for the store
            transport: Transport shared by every component; closed by close()
        """
        self.endpoints = endpoints
        self._transport = transport
        self.changes = ChangeFeedClient(endpoints, transport)
        self.actions = NodeActionClient(endpoints, transport)
        self.metadata = MetadataClient(endpoints, transport)
        self.authorities = AuthorityResolver(endpoints, transport)
        self.content = ContentFetcher(transport)

    @classmethod
    def from_settings(
        cls,
        protocol: str,
        hostname: str,
        endpoint: str,
        store_protocol: str,
        store_id: str,
        credentials: Optional[Credentials] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> "WebScriptClient":
        """Build endpoints and a session-owning transport from connection settings."""
        endpoints = RepositoryEndpoints(protocol, hostname, endpoint, store_protocol, store_id)
        logger.debug(f"Creating client for {endpoints.base_url} ({store_protocol}://{store_id})")
        transport = HttpTransport(credentials=credentials, timeout=timeout)
        return cls(endpoints, transport)

    def fetch_changes(self, cursor: Cursor, filters: FilterSpec = None) -> ChangeBatch:
        return self.changes.fetch_changes(cursor, filters)

    def fetch_node(self, node_id: str) -> ChangeBatch:
        return self.actions.fetch_node(node_id)

    def fetch_metadata(self, node_id: str) -> MetadataRecord:
        return self.metadata.fetch_metadata(node_id)

    def fetch_user_authorities(self, username: str) -> UserAuthority:
        return self.authorities.fetch_user_authorities(username)

    def fetch_all_user_authorities(self) -> List[UserAuthority]:
        return self.authorities.fetch_all_user_authorities()

    def fetch_content(self, url: str) -> ContentStream:
        return self.content.fetch_content(url)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "WebScriptClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
