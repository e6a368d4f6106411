"""Unit tests for webscript_client.endpoints module."""

import pytest

from src.webscript_client.endpoints import RepositoryEndpoints

BASE = "http://localhost:8080/alfresco/service"


class TestRepositoryEndpoints:
    """Test cases for web script URL construction."""

    def test_base_url(self, endpoints):
        assert endpoints.base_url == BASE

    def test_changes_url(self, endpoints):
        assert endpoints.changes_url == f"{BASE}/node/changes/workspace/SpacesStore"

    def test_node_action_url(self, endpoints):
        assert endpoints.node_action_url("abc-123") == f"{BASE}/node/actions/workspace/SpacesStore/abc-123"

    def test_node_details_url(self, endpoints):
        assert endpoints.node_details_url("abc-123") == f"{BASE}/node/details/workspace/SpacesStore/abc-123"

    def test_authorities_url_has_trailing_slash(self, endpoints):
        assert endpoints.authorities_url == f"{BASE}/api/node/auth/resolve/"

    def test_user_authorities_url(self, endpoints):
        assert endpoints.user_authorities_url("bob") == f"{BASE}/api/node/auth/resolve/bob"

    def test_username_is_percent_encoded(self, endpoints):
        """Spaces and slashes cannot break out of the path segment; @ is kept."""
        url = endpoints.user_authorities_url("jane doe/x@corp.com")
        assert url == f"{BASE}/api/node/auth/resolve/jane%20doe%2Fx@corp.com"

    def test_node_id_is_percent_encoded(self, endpoints):
        assert endpoints.node_details_url("a/b").endswith("/SpacesStore/a%2Fb")

    def test_endpoints_are_immutable(self, endpoints):
        with pytest.raises(AttributeError):
            endpoints.store_id = "other"

    def test_other_store(self):
        endpoints = RepositoryEndpoints("https", "repo.example.com", "/alfresco/s", "archive", "SpacesStore")
        assert endpoints.changes_url == "https://repo.example.com/alfresco/s/node/changes/archive/SpacesStore"
