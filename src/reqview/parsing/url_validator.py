"""URL validation for command-line arguments."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from yarl import URL

logger = logging.getLogger(__name__)


@dataclass
class UrlValidationResult:
    """Result of URL validation."""

    is_valid: bool
    rejection_reason: str | None = None

    @staticmethod
    def valid() -> UrlValidationResult:
        """Create a valid result."""
        return UrlValidationResult(is_valid=True)

    @staticmethod
    def invalid(reason: str) -> UrlValidationResult:
        """Create an invalid result with reason."""
        return UrlValidationResult(is_valid=False, rejection_reason=reason)


class UrlValidator:
    """
    Checks that a string is an absolute URL the HTTP client can request.

    A URL is accepted when it parses, carries a scheme from
    ``allowed_schemes`` and names a host. The string itself is never
    normalized.

    Example:
        validator = UrlValidator()
        result = validator.validate("http://example.com/path")
        if not result.is_valid:
            print(f"Rejected: {result.rejection_reason}")
    """

    DEFAULT_ALLOWED_SCHEMES = frozenset({"http", "https"})

    def __init__(self, allowed_schemes: set[str] | frozenset[str] | None = None):
        """
        Initialize the URL validator.

        Args:
            allowed_schemes: Set of allowed URL schemes (default: http, https)
        """
        self.allowed_schemes = frozenset(allowed_schemes or self.DEFAULT_ALLOWED_SCHEMES)

    def validate(self, url: str) -> UrlValidationResult:
        """
        Validate a URL.

        Args:
            url: The URL to validate

        Returns:
            UrlValidationResult with is_valid and optional rejection_reason
        """
        try:
            parsed = URL(url)
            host = parsed.host
        except (ValueError, TypeError) as e:
            return UrlValidationResult.invalid(f"Invalid URL format: {e}")

        if not parsed.scheme:
            return UrlValidationResult.invalid("URL has no scheme")

        if parsed.scheme.lower() not in self.allowed_schemes:
            allowed = ", ".join(sorted(self.allowed_schemes))
            return UrlValidationResult.invalid(f"Scheme '{parsed.scheme}' not allowed (allowed: {allowed})")

        if not host:
            return UrlValidationResult.invalid("URL has no host")

        return UrlValidationResult.valid()


_default_validator = UrlValidator()


def parse_url(value: str) -> str:
    """
    argparse ``type=`` adapter that validates ``value`` as an absolute URL.

    Returns:
        ``value`` unchanged

    Raises:
        argparse.ArgumentTypeError: With the validation diagnostic
    """
    result = _default_validator.validate(value)
    if not result.is_valid:
        logger.debug(f"Rejected URL {value!r}: {result.rejection_reason}")
        raise argparse.ArgumentTypeError(f"invalid URL {value!r}: {result.rejection_reason}")
    return value
