"""Data models for CLI operations.

This module defines the models used by the CLI module. All models use
dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from src.webscript_client.filters import IndexingFilters


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Config or state file problems, unexpected failures
    - NETWORK_ERROR (4): Repository unreachable or body could not be read
    - MALFORMED_RESPONSE (5): Repository answered with an unexpected shape

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NETWORK_ERROR = 4
    MALFORMED_RESPONSE = 5


@dataclass
class ConnectionConfig:
    """Repository connection settings loaded from .webscript-sync/config.yaml.

    Credentials are not part of this file; they come from the environment
    (see src.webscript_client.auth.Authenticator).

    Attributes:
        hostname: Repository host and optional port (e.g., "localhost:8080")
        protocol: URL scheme
        endpoint: Web script root path
        store_protocol: Store protocol of the indexed store
        store_id: Store id of the indexed store
        timeout: Transport timeout in seconds
        filters: Indexing filters sent with every change-feed request

    Example:
        >>> config = ConnectionConfig(hostname="localhost:8080")
    """
    hostname: str
    protocol: str = "http"
    endpoint: str = "/alfresco/service"
    store_protocol: str = "workspace"
    store_id: str = "SpacesStore"
    timeout: Optional[float] = 30
    filters: IndexingFilters = field(default_factory=IndexingFilters)
