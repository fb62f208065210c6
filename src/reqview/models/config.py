"""Pydantic configuration models for reqview."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .. import __version__

DEFAULT_THEME = "monokai"


def _default_headers() -> dict[str, str]:
    return {
        "X-Powered-By": "Python",
        "User-Agent": f"reqview/{__version__}",
    }


class ClientConfig(BaseModel):
    """Configuration for the HTTP client."""

    default_headers: dict[str, str] = Field(
        default_factory=_default_headers,
        description="Headers sent with every request",
    )

    model_config = {"extra": "forbid"}

    @field_validator("default_headers")
    @classmethod
    def _check_header_names(cls, value: dict[str, str]) -> dict[str, str]:
        for name in value:
            if not name or any(c in name for c in " \t\r\n:"):
                raise ValueError(f"Invalid header name: {name!r}")
        return value


class RenderConfig(BaseModel):
    """Configuration for response rendering."""

    theme: str = Field(DEFAULT_THEME, min_length=1, description="Pygments style used for highlighting")
    highlight: bool = Field(True, description="Highlight JSON and HTML bodies")

    model_config = {"extra": "forbid"}


class ReqviewConfig(BaseModel):
    """
    Root configuration model for reqview.

    Built once per invocation from the command line.

    Example:
        config = ReqviewConfig(render={"theme": "native"}, log_level="DEBUG")
    """

    client: ClientConfig = Field(default_factory=ClientConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )

    model_config = {"extra": "forbid"}
