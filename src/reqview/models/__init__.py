"""Reqview configuration and request models."""

from .config import DEFAULT_THEME, ClientConfig, RenderConfig, ReqviewConfig
from .request import GetRequest, KvPair, PostRequest, RequestSpec, collapse_pairs

__all__ = [
    # Config
    "DEFAULT_THEME",
    "ClientConfig",
    "RenderConfig",
    "ReqviewConfig",
    # Requests
    "GetRequest",
    "KvPair",
    "PostRequest",
    "RequestSpec",
    "collapse_pairs",
]
