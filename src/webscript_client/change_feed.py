"""Change-feed and node-action clients.

Both web scripts answer with the same envelope, so they share one parser.
Neither client loops over pages: the caller drives pagination by passing back
the cursor each batch reports.
"""

import logging

from .endpoints import RepositoryEndpoints
from .filters import FilterSpec, encode_filters
from .models import ChangeBatch, Cursor
from .parsing import parse_change_batch
from .transport import HttpTransport

logger = logging.getLogger(__name__)

URL_PARAM_LAST_TXN_ID = "lastTxnId"
URL_PARAM_LAST_ACL_CS_ID = "lastAclChangesetId"
URL_PARAM_INDEXING_FILTERS = "indexingFilters"


class ChangeFeedClient:
    """Fetches one page of node and ACL changes for a store.

    Example:
        >>> feed = ChangeFeedClient(endpoints, transport)
        >>> batch = feed.fetch_changes(Cursor(), IndexingFilters(site_filters=["swsdp"]))
        >>> next_cursor = Cursor().advance(batch)
    """

    def __init__(self, endpoints: RepositoryEndpoints, transport: HttpTransport):
        self._endpoints = endpoints
        self._transport = transport

    def changes_url(self, cursor: Cursor, filters: FilterSpec = None) -> str:
        """Build the change-feed URL for ``cursor``.

        The filter value is inserted already encoded, so it is formatted into
        the query string rather than passed through requests' params.
        """
        query = (
            f"{URL_PARAM_LAST_TXN_ID}={cursor.last_transaction_id}"
            f"&{URL_PARAM_LAST_ACL_CS_ID}={cursor.last_acl_changeset_id}"
            f"&{URL_PARAM_INDEXING_FILTERS}={encode_filters(filters)}"
        )
        return f"{self._endpoints.changes_url}?{query}"

    def fetch_changes(self, cursor: Cursor, filters: FilterSpec = None) -> ChangeBatch:
        """Fetch the changes that follow ``cursor``.

        Args:
            cursor: Position returned by the previous call (Cursor() initially)
            filters: Indexing filters; None sends an empty filter object

        Returns:
            ChangeBatch with the repository's new cursor values

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached
            MalformedResponseError: If the envelope is not a json object
        """
        url = self.changes_url(cursor, filters)
        batch = parse_change_batch(self._transport.read_json(url))
        logger.info(
            f"Fetched {len(batch)} changed nodes "
            f"(last_txn_id={batch.last_transaction_id}, "
            f"last_acl_changeset_id={batch.last_acl_changeset_id})"
        )
        return batch


class NodeActionClient:
    """Fetches the current action for a single node.

    The returned batch conventionally holds zero or one document; a document
    whose ``deleted`` flag is set is a tombstone.
    """

    def __init__(self, endpoints: RepositoryEndpoints, transport: HttpTransport):
        self._endpoints = endpoints
        self._transport = transport

    def fetch_node(self, node_id: str) -> ChangeBatch:
        """Fetch the action envelope for ``node_id``.

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached
            MalformedResponseError: If the envelope is not a json object
        """
        url = self._endpoints.node_action_url(node_id)
        return parse_change_batch(self._transport.read_json(url, identifier=node_id))
