"""URL construction for the repository web scripts."""

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class RepositoryEndpoints:
    """Base URLs of the web scripts for one store.

    Attributes:
        protocol: URL scheme (e.g., "http")
        hostname: Host and optional port (e.g., "localhost:8080")
        endpoint: Web script root path (e.g., "/alfresco/service")
        store_protocol: Store protocol (e.g., "workspace")
        store_id: Store id (e.g., "SpacesStore")

    Example:
        >>> endpoints = RepositoryEndpoints("http", "localhost:8080", "/alfresco/service",
        ...                                 "workspace", "SpacesStore")
        >>> endpoints.changes_url
        'http://localhost:8080/alfresco/service/node/changes/workspace/SpacesStore'
    """
    protocol: str
    hostname: str
    endpoint: str
    store_protocol: str
    store_id: str

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.hostname}{self.endpoint}"

    @property
    def changes_url(self) -> str:
        return f"{self.base_url}/node/changes/{self.store_protocol}/{self.store_id}"

    @property
    def actions_url(self) -> str:
        return f"{self.base_url}/node/actions/{self.store_protocol}/{self.store_id}"

    @property
    def details_url(self) -> str:
        return f"{self.base_url}/node/details/{self.store_protocol}/{self.store_id}"

    @property
    def authorities_url(self) -> str:
        # Trailing slash is part of the contract; the username is appended directly
        return f"{self.base_url}/api/node/auth/resolve/"

    def node_action_url(self, node_id: str) -> str:
        return f"{self.actions_url}/{quote(node_id, safe='')}"

    def node_details_url(self, node_id: str) -> str:
        return f"{self.details_url}/{quote(node_id, safe='')}"

    def user_authorities_url(self, username: str) -> str:
        return f"{self.authorities_url}{quote(username, safe='@')}"
