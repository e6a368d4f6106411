"""Unit tests for webscript_client.result module."""

import pytest

from src.webscript_client.errors import MalformedResponseError, RepositoryUnavailableError
from src.webscript_client.result import ErrorKind, Result, attempt


class TestResult:
    """Test cases for Result."""

    def test_success(self):
        result = Result(value=[1, 2])
        assert result.ok
        assert result.kind is None
        assert result.unwrap() == [1, 2]

    def test_unavailable(self):
        result = Result(error=RepositoryUnavailableError("http://repo"))
        assert not result.ok
        assert result.kind is ErrorKind.REPOSITORY_UNAVAILABLE

    def test_malformed(self):
        result = Result(error=MalformedResponseError("bad"))
        assert result.kind is ErrorKind.MALFORMED_RESPONSE

    def test_unwrap_raises_captured_error(self):
        error = MalformedResponseError("bad")
        with pytest.raises(MalformedResponseError) as exc_info:
            Result(error=error).unwrap()
        assert exc_info.value is error


class TestAttempt:
    """Test cases for attempt()."""

    def test_passes_arguments(self):
        result = attempt(lambda a, b=0: a + b, 1, b=2)
        assert result.ok
        assert result.value == 3

    def test_captures_unavailable(self):
        def fail():
            raise RepositoryUnavailableError("http://repo", "Connection refused")

        result = attempt(fail)

        assert result.kind is ErrorKind.REPOSITORY_UNAVAILABLE
        assert result.error.url == "http://repo"

    def test_captures_malformed(self):
        def fail():
            raise MalformedResponseError("properties is not a list", field="properties")

        assert attempt(fail).kind is ErrorKind.MALFORMED_RESPONSE

    def test_other_errors_propagate(self):
        def fail():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            attempt(fail)
