"""Exception types raised by reqview."""

from __future__ import annotations


class ReqviewError(Exception):
    """Base class for all reqview errors."""


class ParseError(ReqviewError, ValueError):
    """A command-line token could not be parsed."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Failed to parse {token!r}")


class TransportError(ReqviewError):
    """
    The request never produced a response.

    Raised for connection refused, DNS failure, TLS failure and timeouts.
    HTTP error statuses are not transport errors.
    """

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)


class RenderError(ReqviewError):
    """A syntax definition or color theme could not be loaded."""
