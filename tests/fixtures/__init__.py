"""Test fixtures for web script client tests.

This module provides sample repository responses:
- Change-feed and node-action envelopes
- Node details with a properties list
- User authority objects
"""

from .sample_responses import (
    NODE_UUID,
    NODE_REF,
    CHANGES_ENVELOPE,
    EMPTY_ENVELOPE,
    TOMBSTONE_ENVELOPE,
    NODE_DETAILS,
    USER_ADMIN,
    ALL_USERS,
)

__all__ = [
    'NODE_UUID',
    'NODE_REF',
    'CHANGES_ENVELOPE',
    'EMPTY_ENVELOPE',
    'TOMBSTONE_ENVELOPE',
    'NODE_DETAILS',
    'USER_ADMIN',
    'ALL_USERS',
]
