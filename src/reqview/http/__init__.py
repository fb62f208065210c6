"""HTTP client for reqview."""

from .client import AsyncHttpClient
from .encoding import decode_content
from .protocols import HttpClient, HttpResponse

__all__ = [
    "AsyncHttpClient",
    "HttpClient",
    "HttpResponse",
    "decode_content",
]
