"""Content-Type parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# RFC 7230 token
_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

APPLICATION_JSON = "application/json"
TEXT_HTML = "text/html"


@dataclass(frozen=True)
class MimeType:
    """
    A parsed media type such as ``application/json; charset=utf-8``.

    Type, subtype and parameter names are lower-cased.
    """

    type: str
    subtype: str
    parameters: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @classmethod
    def parse(cls, value: str | None) -> MimeType | None:
        """
        Parse a Content-Type header value.

        Returns:
            MimeType, or None if ``value`` is missing or malformed
        """
        if not value:
            return None

        essence, *params = split_parameters(value)
        type_, sep, subtype = essence.strip().partition("/")
        if not sep or not _TOKEN.match(type_) or not _TOKEN.match(subtype):
            return None

        parameters: dict[str, str] = {}
        for param in params:
            param = param.strip()
            if not param:
                continue
            name, sep, param_value = param.partition("=")
            name = name.strip()
            if not sep or not _TOKEN.match(name):
                return None
            parameters[name.lower()] = _unquote(param_value.strip())

        return cls(type=type_.lower(), subtype=subtype.lower(), parameters=parameters)


def split_parameters(value: str) -> list[str]:
    """Split a header value on ``;`` outside quoted strings."""
    parts: list[str] = []
    current: list[str] = []
    in_quotes = escaped = False
    for char in value:
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == ";" and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    return value
