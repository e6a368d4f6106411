"""Data models for change-feed pages, node records and user authorities.

All models are transient request/response values. The only state that lives
across calls is the Cursor, which the caller owns and persists.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Position in a store's change feed.

    Attributes:
        last_transaction_id: Last repository transaction already seen
        last_acl_changeset_id: Last ACL change set already seen

    Example:
        >>> cursor = Cursor()
        >>> cursor = cursor.advance(batch)
    """
    last_transaction_id: int = 0
    last_acl_changeset_id: int = 0

    def advance(self, batch: "ChangeBatch") -> "Cursor":
        """Return the cursor to use after ``batch``.

        The repository's reported values are always adopted, so a store that
        was reset or reindexed resumes from its new position. A component
        that moves backwards is logged as a warning.
        """
        if batch.last_transaction_id < self.last_transaction_id:
            logger.warning(
                f"Repository reported last_txn_id {batch.last_transaction_id} "
                f"behind cursor {self.last_transaction_id}, resuming from the reported value"
            )
        if batch.last_acl_changeset_id < self.last_acl_changeset_id:
            logger.warning(
                f"Repository reported last_acl_changeset_id {batch.last_acl_changeset_id} "
                f"behind cursor {self.last_acl_changeset_id}, resuming from the reported value"
            )
        return batch.cursor


# Wire name -> attribute name for the fields every document may carry
_DOCUMENT_FIELDS = {
    'uuid': 'uuid',
    'type': 'type',
    'deleted': 'deleted',
    'nodeRef': 'node_ref',
    'name': 'name',
}

# Per-document spellings of the store fields; the envelope always wins
_STORE_FIELD_ALIASES = ('store_id', 'storeId', 'store_protocol', 'storeProtocol')


@dataclass
class DocumentRecord(Mapping):
    """One changed node as reported by the change feed or node action script.

    Known fields are typed attributes; anything else the repository sends is
    kept in ``extra``. The record also reads as a mapping keyed by wire
    names, so ``record['nodeRef']`` and ``record.node_ref`` are the same value.

    No field is required here. Callers validate what they need.

    Attributes:
        uuid: Node uuid
        type: Content model type (e.g., "cm:content")
        deleted: Tombstone flag as sent by the repository
        node_ref: Full node reference (e.g., "workspace://SpacesStore/<uuid>")
        name: Node name
        store_id: Store id injected from the envelope
        store_protocol: Store protocol injected from the envelope
        extra: Any other repository-supplied field
    """
    uuid: Optional[str] = None
    type: Optional[str] = None
    deleted: Any = None
    node_ref: Optional[str] = None
    name: Optional[str] = None
    store_id: str = ""
    store_protocol: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(
        cls,
        payload: Any,
        store_id: str = "",
        store_protocol: str = "",
    ) -> "DocumentRecord":
        """Build a record from one element of a ``docs`` array.

        A non-object element yields an empty record that still carries the
        envelope's store fields.
        """
        if not isinstance(payload, dict):
            logger.warning(f"Document entry is not a json object, using an empty document: {payload!r}")
            return cls(store_id=store_id, store_protocol=store_protocol)

        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in payload.items():
            if key in _DOCUMENT_FIELDS:
                known[_DOCUMENT_FIELDS[key]] = value
            elif key in _STORE_FIELD_ALIASES:
                continue
            else:
                extra[key] = value
        return cls(store_id=store_id, store_protocol=store_protocol, extra=extra, **known)

    @property
    def is_deleted(self) -> bool:
        """Whether this record is a tombstone (accepts booleans and "true")."""
        if isinstance(self.deleted, str):
            return self.deleted.strip().lower() == 'true'
        return bool(self.deleted)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire view: present known fields, extras, then store fields."""
        result: Dict[str, Any] = {}
        for wire_name, attr in _DOCUMENT_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                result[wire_name] = value
        result.update(self.extra)
        result['store_id'] = self.store_id
        result['store_protocol'] = self.store_protocol
        return result

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self.to_dict())


@dataclass
class ChangeBatch:
    """One page of changes for one store.

    Attributes:
        last_transaction_id: Transaction id to resume from
        last_acl_changeset_id: ACL change set id to resume from
        store_id: Store id reported by the repository
        store_protocol: Store protocol reported by the repository
        documents: Changed nodes, in repository order
    """
    last_transaction_id: int = 0
    last_acl_changeset_id: int = 0
    store_id: str = ""
    store_protocol: str = ""
    documents: List[DocumentRecord] = field(default_factory=list)

    @property
    def cursor(self) -> Cursor:
        return Cursor(self.last_transaction_id, self.last_acl_changeset_id)

    @property
    def node_ids(self) -> List[str]:
        """Uuids of the documents that carry one."""
        return [doc.uuid for doc in self.documents if doc.uuid]

    def __len__(self) -> int:
        return len(self.documents)


@dataclass
class MetadataRecord(Mapping):
    """Flat metadata of one node.

    The node-detail object's ``properties`` list has been folded into the
    top level, so property names and node fields share one namespace.

    Attributes:
        node_id: Node the metadata was fetched for
        fields: The flattened key-value pairs
    """
    node_id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def uuid(self) -> Optional[str]:
        return self.fields.get('uuid')

    @property
    def node_ref(self) -> Optional[str]:
        return self.fields.get('nodeRef')

    @property
    def type(self) -> Optional[str]:
        return self.fields.get('type')

    @property
    def name(self) -> Optional[str]:
        return self.fields.get('name')

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


@dataclass
class UserAuthority:
    """Groups and roles a user belongs to, used for security filtering."""
    username: str
    authorities: List[str] = field(default_factory=list)
