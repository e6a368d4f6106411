"""Test helper modules for web script client testing.

- http_helpers: fake requests responses and sessions
"""

from .http_helpers import (
    make_response,
    json_response,
    make_session,
    requested_url,
    requested_headers,
)

__all__ = [
    'make_response',
    'json_response',
    'make_session',
    'requested_url',
    'requested_headers',
]
