"""Async HTTP client issuing a single GET or POST per invocation."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

import aiohttp

from ..exceptions import TransportError
from ..models.config import ClientConfig
from ..models.request import KvPair, collapse_pairs
from .protocols import HttpResponse

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """
    Async HTTP client with configured default headers.

    One session is created on entry and closed on exit. Every response that
    arrives is returned as-is, whatever its status code; only failures to
    get a response at all raise.

    Example:
        async with AsyncHttpClient(ClientConfig()) as client:
            response = await client.get("https://example.com")
            print(response.status_code)
    """

    # Exceptions that mean no response was received
    TRANSPORT_EXCEPTIONS = (
        aiohttp.ClientError,
        asyncio.TimeoutError,
    )

    def __init__(self, config: ClientConfig | None = None) -> None:
        """
        Initialize the HTTP client.

        Args:
            config: Client configuration (default headers)
        """
        self._config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context and create session."""
        self._session = aiohttp.ClientSession(headers=self._config.default_headers)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and close session."""
        if self._session:
            await self._session.close()
            self._session = None

    def _require_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        return self._session

    @staticmethod
    async def _to_response(response: aiohttp.ClientResponse) -> HttpResponse:
        content = await response.read()
        version = response.version
        http_version = f"HTTP/{version.major}.{version.minor}" if version else "HTTP/1.1"
        return HttpResponse(
            status_code=response.status,
            content=content,
            content_type=response.headers.get("Content-Type", ""),
            headers=tuple(response.headers.items()),
            url=str(response.url),
            reason=response.reason or "",
            http_version=http_version,
        )

    async def get(self, url: str) -> HttpResponse:
        """
        Perform an HTTP GET request.

        Args:
            url: The URL to fetch

        Returns:
            HttpResponse with status, headers and content

        Raises:
            TransportError: On connection, DNS, TLS or timeout failure
        """
        session = self._require_session()
        logger.debug(f"GET {url}")
        try:
            async with session.get(url) as response:
                result = await self._to_response(response)
        except self.TRANSPORT_EXCEPTIONS as e:
            logger.debug(f"GET {url} failed: {e!r}")
            raise TransportError(url, f"GET {url} failed: {str(e) or type(e).__name__}") from e

        logger.debug(f"GET {url} -> {result.status_code} ({len(result.content)} bytes)")
        return result

    async def post(self, url: str, pairs: tuple[KvPair, ...] | list[KvPair]) -> HttpResponse:
        """
        POST ``pairs`` to ``url`` as a JSON object.

        Pairs are collapsed into a mapping first; a repeated key keeps its
        last value.

        Args:
            url: The URL to post to
            pairs: Body pairs in command-line order

        Returns:
            HttpResponse with status, headers and content

        Raises:
            TransportError: On connection, DNS, TLS or timeout failure
        """
        session = self._require_session()
        body = collapse_pairs(pairs)
        logger.debug(f"POST {url} with {len(body)} field(s)")
        try:
            async with session.post(url, json=body) as response:
                result = await self._to_response(response)
        except self.TRANSPORT_EXCEPTIONS as e:
            logger.debug(f"POST {url} failed: {e!r}")
            raise TransportError(url, f"POST {url} failed: {str(e) or type(e).__name__}") from e

        logger.debug(f"POST {url} -> {result.status_code} ({len(result.content)} bytes)")
        return result
