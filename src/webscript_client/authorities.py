"""User authority resolution for security filtering."""

import logging
from typing import List

from .endpoints import RepositoryEndpoints
from .models import UserAuthority
from .parsing import parse_user, parse_users
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class AuthorityResolver:
    """Resolves the groups and roles of one or all repository users.

    Responses are validated strictly: a single malformed user object fails
    the whole call and no partial result is returned.
    """

    def __init__(self, endpoints: RepositoryEndpoints, transport: HttpTransport):
        self._endpoints = endpoints
        self._transport = transport

    def fetch_user_authorities(self, username: str) -> UserAuthority:
        """Fetch the authorities of ``username``.

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached
            MalformedResponseError: If the user object is invalid
        """
        url = self._endpoints.user_authorities_url(username)
        return parse_user(self._transport.read_json(url, identifier=username), identifier=username)

    def fetch_all_user_authorities(self) -> List[UserAuthority]:
        """Fetch the authorities of every known user.

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached
            MalformedResponseError: If the top level is not an array or any
                                    element is not a valid user object
        """
        users = parse_users(self._transport.read_json(self._endpoints.authorities_url))
        logger.info(f"Resolved authorities for {len(users)} users")
        return users
