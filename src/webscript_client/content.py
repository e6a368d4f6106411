"""Raw binary content streaming."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Union

import requests

from .errors import RepositoryUnavailableError
from .transport import BINARY_MEDIA_TYPE, HttpTransport, sanitize_credentials

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class ContentStream:
    """An open content response owned by the caller.

    The stream holds a pooled connection until it is closed. Use it as a
    context manager so the connection is released on every exit path.

    Example:
        >>> with fetcher.fetch_content(url) as stream:
        ...     for chunk in stream.iter_content():
        ...         sink.write(chunk)
    """

    def __init__(self, url: str, response: requests.Response):
        self.url = url
        self._response = response
        self.closed = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self):
        return self._response.headers

    @property
    def content_type(self) -> Optional[str]:
        return self._response.headers.get('Content-Type')

    @property
    def content_length(self) -> Optional[int]:
        value = self._response.headers.get('Content-Length')
        if value is None or not value.isdigit():
            return None
        return int(value)

    def iter_content(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the body in chunks.

        Raises:
            RepositoryUnavailableError: If the connection breaks mid-stream
        """
        try:
            for chunk in self._response.iter_content(chunk_size=chunk_size):
                if chunk:
                    yield chunk
        except (requests.RequestException, OSError) as e:
            raise RepositoryUnavailableError(self.url, sanitize_credentials(str(e))) from e

    def read(self) -> bytes:
        """Read the remaining body into memory."""
        return b"".join(self.iter_content())

    def close(self) -> None:
        if not self.closed:
            self._response.close()
            self.closed = True

    def __enter__(self) -> "ContentStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ContentFetcher:
    """Streams the raw content of a node from a fully-qualified URL."""

    def __init__(self, transport: HttpTransport):
        self._transport = transport

    def fetch_content(self, url: str) -> ContentStream:
        """Open a content stream for ``url``.

        The caller owns the returned stream and must close it.

        Raises:
            RepositoryUnavailableError: If the request fails or yields no body stream
        """
        response = self._transport.send(url, BINARY_MEDIA_TYPE)
        if response.raw is None:
            response.close()
            raise RepositoryUnavailableError(url, "response has no content stream")
        return ContentStream(url, response)

    def download(self, url: str, destination: Union[str, Path]) -> int:
        """Copy the content at ``url`` to ``destination``.

        The body is written to a temporary file next to ``destination`` and
        moved into place only once the whole stream has been read, so a
        failed download never leaves a truncated file behind.

        Returns:
            Number of bytes written

        Raises:
            RepositoryUnavailableError: If the request or the stream fails
        """
        destination = Path(destination)
        written = 0
        with self.fetch_content(url) as stream:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".part",
                delete=False,
            ) as f:
                temp_path = f.name
                try:
                    for chunk in stream.iter_content():
                        f.write(chunk)
                        written += len(chunk)
                except Exception:
                    f.close()
                    os.unlink(temp_path)
                    raise
        os.replace(temp_path, destination)
        logger.info(f"Downloaded {written} bytes to {destination}")
        return written
