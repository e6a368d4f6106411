"""Fake HTTP responses and sessions for transport-level tests.

Responses are MagicMocks restricted to the requests.Response interface so tests can assert on
close() and swap in failing properties.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock, Mock

import requests
from requests.structures import CaseInsensitiveDict


def make_response(
    body: bytes = b"",
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> MagicMock:
    """Create a fake streaming response carrying ``body``."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    response.content = body
    response.raw = Mock()

    def _iter_content(chunk_size=1, decode_unicode=False):
        return iter([body[i:i + chunk_size] for i in range(0, len(body), chunk_size)])

    response.iter_content.side_effect = _iter_content
    return response


def json_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Create a fake response whose body is ``payload`` serialized as JSON."""
    return make_response(
        json.dumps(payload).encode("utf-8"),
        status_code=status_code,
        headers={"Content-Type": "application/json"},
    )


def make_session(response: Any = None) -> Mock:
    """Create a fake session whose get() returns ``response``."""
    session = Mock(spec=requests.Session)
    if response is not None:
        session.get.return_value = response
    return session


def requested_url(session: Mock) -> str:
    """URL passed to the last session.get() call."""
    return session.get.call_args.args[0]


def requested_headers(session: Mock) -> Dict[str, str]:
    """Headers passed to the last session.get() call."""
    return session.get.call_args.kwargs["headers"]
