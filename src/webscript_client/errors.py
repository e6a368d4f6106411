"""Typed exception hierarchy for repository web script errors.

This module defines all custom exceptions raised by the web script client.
Transport failures and malformed responses are kept apart so callers can
decide whether a call is worth repeating later (the repository was down) or
whether the repository answered with something this client cannot read.
"""

from typing import Optional


class WebScriptError(Exception):
    """Base exception for all webscript-sync errors.

    Use this to catch any application-level error from the client or CLI.
    """
    pass


class RepositoryUnavailableError(WebScriptError):
    """Raised when the repository cannot be reached or the body cannot be read."""

    def __init__(self, url: str, reason: Optional[str] = None):
        message = f"Repository appears to be down (url: {url})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class MalformedResponseError(WebScriptError):
    """Raised when a response does not have the expected JSON shape.

    Attributes:
        field: Name of the offending field, if the violation concerns one
        identifier: Node id or username the response was fetched for
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        identifier: Optional[str] = None,
    ):
        super().__init__(message)
        self.field = field
        self.identifier = identifier
