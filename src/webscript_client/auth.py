"""Authentication module for loading repository credentials.

This module handles loading HTTP Basic credentials from environment variables
using python-dotenv. Credentials are optional: a repository that allows
anonymous web script access is reached without an Authorization header.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv


class Credentials(NamedTuple):
    """HTTP Basic credentials for the repository."""
    username: str
    password: Optional[str]

    @property
    def usable(self) -> bool:
        """Whether these credentials produce an Authorization header.

        A username must be non-empty and a password must be present; an
        empty password is still sent.
        """
        return bool(self.username) and self.password is not None


class Authenticator:
    """Loads repository credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Environment variables:
        WEBSCRIPT_USERNAME: Repository user name
        WEBSCRIPT_PASSWORD: Repository password

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> if creds is None:
        ...     print("Connecting anonymously")
    """

    USERNAME_VAR = 'WEBSCRIPT_USERNAME'
    PASSWORD_VAR = 'WEBSCRIPT_PASSWORD'

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Optional[Credentials]:
        """Get repository credentials from environment variables.

        Returns:
            Credentials, or None when no usable username/password pair is set
        """
        username = os.getenv(self.USERNAME_VAR)
        password = os.getenv(self.PASSWORD_VAR)

        creds = Credentials(username=username or "", password=password)
        if not creds.usable:
            return None
        return creds
