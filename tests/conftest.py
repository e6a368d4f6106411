"""Root pytest configuration for all tests.

Shared fixtures build the client components over a fake requests session so
no test touches the network.
"""

import logging

import pytest

from src.webscript_client.endpoints import RepositoryEndpoints
from src.webscript_client.transport import HttpTransport
from tests.helpers.http_helpers import make_session

# urllib3 logs every pooled connection at DEBUG; keep test output readable
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture
def endpoints() -> RepositoryEndpoints:
    """Endpoints of the default store on a local repository."""
    return RepositoryEndpoints(
        protocol="http",
        hostname="localhost:8080",
        endpoint="/alfresco/service",
        store_protocol="workspace",
        store_id="SpacesStore",
    )


@pytest.fixture
def session():
    """Fake requests session; set session.get.return_value per test."""
    return make_session()


@pytest.fixture
def transport(session) -> HttpTransport:
    """Anonymous transport over the fake session."""
    return HttpTransport(session=session)
