"""Parsing of ``key=value`` command-line tokens."""

from __future__ import annotations

import argparse

from ..exceptions import ParseError
from ..models.request import KvPair

SEPARATOR = "="


def parse_kv_pair(token: str) -> KvPair:
    """
    Split ``token`` on its first ``=``.

    Everything after the first separator is the value, so ``a=b=c`` gives
    key ``a`` and value ``b=c``.

    Args:
        token: Raw command-line token

    Returns:
        KvPair with key and value

    Raises:
        ParseError: If the token contains no ``=``
    """
    key, sep, value = token.partition(SEPARATOR)
    if not sep:
        raise ParseError(token)
    return KvPair(key=key, value=value)


def kv_pair_type(token: str) -> KvPair:
    """argparse ``type=`` adapter for :func:`parse_kv_pair`."""
    try:
        return parse_kv_pair(token)
    except ParseError as e:
        raise argparse.ArgumentTypeError(f"{e} (expected key=value)") from e
