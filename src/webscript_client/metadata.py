"""Node metadata client."""

from .endpoints import RepositoryEndpoints
from .models import MetadataRecord
from .parsing import parse_metadata
from .transport import HttpTransport


class MetadataClient:
    """Fetches a node's full property set as a flat record."""

    def __init__(self, endpoints: RepositoryEndpoints, transport: HttpTransport):
        self._endpoints = endpoints
        self._transport = transport

    def fetch_metadata(self, node_id: str) -> MetadataRecord:
        """Fetch node details and fold their ``properties`` into the top level.

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached
            MalformedResponseError: If ``properties`` is missing or not a list
        """
        url = self._endpoints.node_details_url(node_id)
        return parse_metadata(node_id, self._transport.read_json(url, identifier=node_id))
