"""
reqview - Send an HTTP request and pretty-print the response.

Usage:
    from rich.console import Console
    from reqview import AsyncHttpClient, ClientConfig, ResponseRenderer

    async with AsyncHttpClient(ClientConfig()) as client:
        response = await client.get("https://example.com")

    ResponseRenderer(Console()).render(response)
"""

__version__ = "1.0.0"

from .exceptions import ParseError, RenderError, ReqviewError, TransportError
from .http import AsyncHttpClient, HttpResponse
from .models import ClientConfig, GetRequest, KvPair, PostRequest, RenderConfig, ReqviewConfig
from .parsing import UrlValidator, parse_kv_pair, parse_url
from .render import Highlighter, MimeType, ResponseRenderer

__all__ = [
    "__version__",
    # HTTP
    "AsyncHttpClient",
    "HttpResponse",
    # Config
    "ClientConfig",
    "RenderConfig",
    "ReqviewConfig",
    # Requests
    "GetRequest",
    "KvPair",
    "PostRequest",
    # Parsing
    "UrlValidator",
    "parse_kv_pair",
    "parse_url",
    # Rendering
    "Highlighter",
    "MimeType",
    "ResponseRenderer",
    # Errors
    "ParseError",
    "RenderError",
    "ReqviewError",
    "TransportError",
]
