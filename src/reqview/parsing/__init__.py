"""Command-line token parsing for reqview."""

from .kv_pair import kv_pair_type, parse_kv_pair
from .url_validator import UrlValidationResult, UrlValidator, parse_url

__all__ = [
    "UrlValidationResult",
    "UrlValidator",
    "kv_pair_type",
    "parse_kv_pair",
    "parse_url",
]
