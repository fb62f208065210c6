"""Response rendering for reqview."""

from .highlight import Highlighter
from .mime import APPLICATION_JSON, TEXT_HTML, MimeType
from .renderer import ResponseRenderer

__all__ = [
    "APPLICATION_JSON",
    "TEXT_HTML",
    "Highlighter",
    "MimeType",
    "ResponseRenderer",
]
