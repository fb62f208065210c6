"""Request models built from the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class KvPair:
    """A ``key=value`` token from the command line."""

    key: str
    value: str


@dataclass(frozen=True)
class GetRequest:
    """A GET request for ``url``."""

    url: str


@dataclass(frozen=True)
class PostRequest:
    """
    A POST request for ``url`` with a JSON object body.

    Attributes:
        url: Validated absolute URL
        body: Pairs in command-line order
    """

    url: str
    body: tuple[KvPair, ...] = field(default_factory=tuple)

    def json_body(self) -> dict[str, str]:
        """
        Collapse the pairs into the mapping sent as the request body.

        A key given more than once keeps its last value.
        """
        return collapse_pairs(self.body)


RequestSpec = Union[GetRequest, PostRequest]


def collapse_pairs(pairs: tuple[KvPair, ...] | list[KvPair]) -> dict[str, str]:
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
