"""Client library for repository indexing web scripts.

This package provides Python abstractions over the repository's change-feed,
node-action, node-details, authority-resolution and content web scripts,
with a typed error taxonomy separating transport failures from malformed
responses.
"""

from .auth import Authenticator, Credentials
from .client import WebScriptClient
from .content import ContentStream
from .endpoints import RepositoryEndpoints
from .errors import (
    WebScriptError,
    RepositoryUnavailableError,
    MalformedResponseError,
)
from .filters import IndexingFilters
from .models import ChangeBatch, Cursor, DocumentRecord, MetadataRecord, UserAuthority
from .result import ErrorKind, Result, attempt
from .transport import HttpTransport

__all__ = [
    "Authenticator",
    "Credentials",
    "WebScriptClient",
    "ContentStream",
    "RepositoryEndpoints",
    "WebScriptError",
    "RepositoryUnavailableError",
    "MalformedResponseError",
    "IndexingFilters",
    "ChangeBatch",
    "Cursor",
    "DocumentRecord",
    "MetadataRecord",
    "UserAuthority",
    "ErrorKind",
    "Result",
    "attempt",
    "HttpTransport",
]
