"""Response shape contracts for the repository web scripts.

Pure functions turning decoded JSON into models. The change-feed envelope is
read leniently (missing docs or store fields are tolerated), while node
details and user authorities are read strictly: any shape violation fails
the whole response.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .errors import MalformedResponseError
from .models import ChangeBatch, DocumentRecord, MetadataRecord, UserAuthority

logger = logging.getLogger(__name__)

LAST_TXN_ID = "last_txn_id"
LAST_ACL_CS_ID = "last_acl_changeset_id"
STORE_ID = "store_id"
STORE_PROTOCOL = "store_protocol"
DOCS = "docs"

FIELD_PROPERTIES = "properties"
USERNAME = "username"
AUTHORITIES = "authorities"

# Optional sign and ASCII digits only; no whitespace or underscores
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63 - 1


def _json_type(value: Any) -> str:
    """Name the JSON type of a decoded value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def get_string(obj: Dict[str, Any], key: str) -> str:
    """Read a string field, falling back to "" with a warning."""
    if key not in obj:
        logger.warning(f"The key {key} is missing from response")
        return ""
    value = obj[key]
    if not isinstance(value, str):
        logger.warning(f"The {key} property (={value!r}) is not a string")
        return ""
    return value


def get_string_as_int(obj: Dict[str, Any], key: str, default: int = 0) -> int:
    """Read a numeric-string field such as ``last_txn_id``.

    Absent, empty and non-string values give ``default``; a JSON integer is
    accepted as is.

    Raises:
        MalformedResponseError: If the string is not a base-10 64-bit integer
    """
    value = obj.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is not None and not isinstance(value, str):
        logger.warning(f"The {key} property (={value!r}) is not a string, using {default}")
        return default
    if not value:
        return default
    if not _INTEGER.fullmatch(value) or not _INT64_MIN <= int(value) <= _INT64_MAX:
        raise MalformedResponseError(
            f"{key} must be a numeric string. It was: {value!r}",
            field=key,
        )
    return int(value)


def parse_change_batch(payload: Any) -> ChangeBatch:
    """Parse a change-feed or node-action envelope.

    Raises:
        MalformedResponseError: If the top level is not an object or a cursor
                                field is not numeric
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Change response must be a json object. It was: {_json_type(payload)}"
        )

    last_transaction_id = get_string_as_int(payload, LAST_TXN_ID)
    last_acl_changeset_id = get_string_as_int(payload, LAST_ACL_CS_ID)
    store_id = get_string(payload, STORE_ID)
    store_protocol = get_string(payload, STORE_PROTOCOL)

    documents: List[DocumentRecord] = []
    docs = payload.get(DOCS)
    if isinstance(docs, list):
        for element in docs:
            documents.append(DocumentRecord.from_json(element, store_id, store_protocol))
    else:
        logger.warning("No documents found in response!")

    return ChangeBatch(
        last_transaction_id=last_transaction_id,
        last_acl_changeset_id=last_acl_changeset_id,
        store_id=store_id,
        store_protocol=store_protocol,
        documents=documents,
    )


def parse_metadata(node_id: str, payload: Any) -> MetadataRecord:
    """Flatten a node-detail object into a MetadataRecord.

    Raises:
        MalformedResponseError: If the object has no ``properties`` list or an
                                entry is not a named object
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Node details for {node_id} must be a json object. It was: {_json_type(payload)}",
            identifier=node_id,
        )

    flat = dict(payload)
    properties = flat.pop(FIELD_PROPERTIES, None)
    if properties is None:
        raise MalformedResponseError(
            f"No properties fetched for node {node_id}",
            field=FIELD_PROPERTIES,
            identifier=node_id,
        )
    if not isinstance(properties, list):
        raise MalformedResponseError(
            f"{FIELD_PROPERTIES} is not a list, it is of type {_json_type(properties)}",
            field=FIELD_PROPERTIES,
            identifier=node_id,
        )

    for entry in properties:
        if not isinstance(entry, dict) or not isinstance(entry.get('name'), str):
            raise MalformedResponseError(
                f"Property entry of node {node_id} must be an object with a string name. It was: {entry!r}",
                field=FIELD_PROPERTIES,
                identifier=node_id,
            )
        flat[entry['name']] = entry.get('value')

    return MetadataRecord(node_id=node_id, fields=flat)


def parse_user(obj: Any, identifier: Optional[str] = None) -> UserAuthority:
    """Validate one user object and return its UserAuthority.

    Args:
        obj: Decoded user object
        identifier: Username the object was requested for, if known

    Raises:
        MalformedResponseError: On any shape violation
    """
    if not isinstance(obj, dict):
        raise MalformedResponseError(
            f"User must be a json object. It was: {_json_type(obj)}",
            identifier=identifier,
        )

    if USERNAME not in obj:
        raise MalformedResponseError(
            "Json response is missing username.",
            field=USERNAME,
            identifier=identifier,
        )
    username = obj[USERNAME]
    if not isinstance(username, str):
        raise MalformedResponseError(
            f"Username must be a string. It was: {username!r}",
            field=USERNAME,
            identifier=identifier,
        )

    if AUTHORITIES not in obj:
        raise MalformedResponseError(
            f"Json response is missing authorities for user {username}.",
            field=AUTHORITIES,
            identifier=username,
        )
    authorities = obj[AUTHORITIES]
    if not isinstance(authorities, list):
        raise MalformedResponseError(
            f"Authorities must be a json array. It was: {authorities!r}",
            field=AUTHORITIES,
            identifier=username,
        )
    for authority in authorities:
        if not isinstance(authority, str):
            raise MalformedResponseError(
                f"Authority entry must be a string. It was: {authority!r}",
                field=AUTHORITIES,
                identifier=username,
            )

    return UserAuthority(username=username, authorities=list(authorities))


def parse_users(payload: Any) -> List[UserAuthority]:
    """Validate an array of user objects; the first violation fails them all."""
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"Users must be a json array. It was: {_json_type(payload)}"
        )
    return [parse_user(element) for element in payload]
