"""Protocol definitions for HTTP client abstraction."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Protocol

from ..models.request import KvPair
from .encoding import decode_content


@dataclass(frozen=True)
class HttpResponse:
    """
    Immutable HTTP response returned by HttpClient.

    Attributes:
        status_code: HTTP status code (200, 404, etc.)
        content: Raw response content as bytes
        content_type: Content-Type header value ("" when absent)
        headers: Header name/value pairs in the order received
        url: Final URL after any redirects
        reason: Reason phrase sent with the status code
        http_version: Protocol version, e.g. "HTTP/1.1"
    """

    status_code: int
    content: bytes
    content_type: str
    headers: tuple[tuple[str, str], ...]
    url: str
    reason: str = ""
    http_version: str = "HTTP/1.1"

    @cached_property
    def text(self) -> str:
        """Body decoded to text."""
        return decode_content(self.content, self.content_type)

    def get_header(self, name: str) -> str | None:
        """Return the first value of header ``name`` (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


class HttpClient(Protocol):
    """
    Protocol for HTTP clients.

    This abstraction allows for:
    - Mock implementations in tests
    - Different backends
    """

    async def get(self, url: str) -> HttpResponse:
        """
        Perform an HTTP GET request.

        Raises:
            TransportError: If no response was received
        """
        ...

    async def post(self, url: str, pairs: tuple[KvPair, ...] | list[KvPair]) -> HttpResponse:
        """
        POST ``pairs`` to ``url`` as a JSON object.

        Raises:
            TransportError: If no response was received
        """
        ...
