"""Indexing filters sent with every change-feed request.

The repository evaluates the filters itself; the client only serializes them
to JSON and places the (form-encoded) result in the ``indexingFilters``
query parameter.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)


@dataclass
class IndexingFilters:
    """Filters restricting which nodes the change feed reports.

    Attributes:
        site_filters: Site short names whose content is included
        type_filters: Content model types to include (e.g., "cm:content")
        mimetype_filters: MIME types to include
        aspect_filters: Aspects a node must carry
        metadata_filters: Property name to required value

    Example:
        >>> filters = IndexingFilters(site_filters=["swsdp"])
        >>> filters.to_json_string()
        '{"siteFilters": ["swsdp"], "typeFilters": [], "mimetypeFilters": [], "aspectFilters": [], "metadataFilters": {}}'
    """
    site_filters: List[str] = field(default_factory=list)
    type_filters: List[str] = field(default_factory=list)
    mimetype_filters: List[str] = field(default_factory=list)
    aspect_filters: List[str] = field(default_factory=list)
    metadata_filters: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IndexingFilters":
        """Build filters from wire-format or snake_case keys."""
        def _list(wire_key: str, attr: str) -> List[str]:
            values = data.get(wire_key, data.get(attr)) or []
            return [str(v) for v in values]

        metadata = data.get('metadataFilters', data.get('metadata_filters')) or {}
        return cls(
            site_filters=_list('siteFilters', 'site_filters'),
            type_filters=_list('typeFilters', 'type_filters'),
            mimetype_filters=_list('mimetypeFilters', 'mimetype_filters'),
            aspect_filters=_list('aspectFilters', 'aspect_filters'),
            metadata_filters={str(k): str(v) for k, v in metadata.items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'siteFilters': list(self.site_filters),
            'typeFilters': list(self.type_filters),
            'mimetypeFilters': list(self.mimetype_filters),
            'aspectFilters': list(self.aspect_filters),
            'metadataFilters': dict(self.metadata_filters),
        }

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict())


FilterSpec = Union[IndexingFilters, Mapping[str, Any], str, None]


def filters_to_json(filters: FilterSpec) -> str:
    """Serialize any accepted filter form to its JSON string.

    A string is assumed to be JSON already and is passed through unchanged.
    """
    if filters is None:
        return "{}"
    if isinstance(filters, str):
        return filters
    if isinstance(filters, IndexingFilters):
        return filters.to_json_string()
    return json.dumps(dict(filters))


def encode_filters(filters: FilterSpec) -> str:
    """Return the value of the ``indexingFilters`` query parameter.

    If form-encoding fails the raw JSON string is returned instead, so the
    request still goes out with the filters in degraded form.
    """
    filters_json = filters_to_json(filters)
    try:
        return quote_plus(filters_json, encoding='utf-8')
    except UnicodeError as e:
        logger.warning(f"Could not URL-encode indexing filters, sending them raw: {e}")
        return filters_json
