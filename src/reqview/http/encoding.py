"""Response body decoding."""

from __future__ import annotations

import logging

from charset_normalizer import from_bytes as detect_encoding

logger = logging.getLogger(__name__)


def charset_from_content_type(content_type: str) -> str | None:
    """Return the ``charset`` parameter of a Content-Type value, if any."""
    for part in content_type.split(";")[1:]:
        part = part.strip()
        if part.lower().startswith("charset="):
            return part.split("=", 1)[1].strip().strip("\"'") or None
    return None


def decode_content(content: bytes, content_type: str) -> str:
    """
    Decode content with encoding detection.

    Fallback chain:
    1. Content-Type header charset
    2. Strict UTF-8
    3. charset-normalizer detection
    4. UTF-8 with replacement

    Args:
        content: Raw bytes content
        content_type: Content-Type header value

    Returns:
        Decoded string
    """
    if not content:
        return ""

    encoding = charset_from_content_type(content_type) if content_type else None
    if encoding:
        try:
            return content.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Failed to decode with declared encoding: {encoding}")

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        pass

    best_match = detect_encoding(content).best()
    if best_match is not None:
        logger.debug(f"Detected encoding: {best_match.encoding}")
        return str(best_match)

    return content.decode("utf-8", errors="replace")
