"""Terminal rendering of HTTP responses."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

from ..exceptions import RenderError
from ..http.protocols import HttpResponse
from ..models.config import RenderConfig
from .highlight import Highlighter
from .mime import APPLICATION_JSON, TEXT_HTML, MimeType

logger = logging.getLogger(__name__)

STATUS_STYLE = "blue"
HEADER_NAME_STYLE = "green"

# Media type essence -> lexer extension
SYNTAX_BY_MIME = {
    APPLICATION_JSON: "json",
    TEXT_HTML: "html",
}


class ResponseRenderer:
    """
    Prints a response as status line, headers and body.

    GET and POST responses are rendered the same way. JSON and HTML bodies
    are highlighted; when the highlighter cannot load its lexer or theme the
    body is printed as plain text instead.

    Example:
        renderer = ResponseRenderer(Console())
        renderer.render(response)
    """

    def __init__(
        self,
        console: Console | None = None,
        config: RenderConfig | None = None,
        highlighter: Highlighter | None = None,
    ) -> None:
        self.console = console or Console()
        self.config = config or RenderConfig()
        self.highlighter = highlighter or Highlighter(theme=self.config.theme)

    def render(self, response: HttpResponse) -> None:
        """Print status, headers and body of ``response``."""
        self.print_status(response)
        self.print_headers(response)
        mime = self.get_content_type(response)
        self.print_body(mime, response.text)

    def print_status(self, response: HttpResponse) -> None:
        status = f"{response.http_version} {response.status_code} {response.reason}".rstrip()
        self.console.print(Text(status, style=STATUS_STYLE))
        self.console.print()

    def print_headers(self, response: HttpResponse) -> None:
        for name, value in response.headers:
            self.console.print(Text(name, style=HEADER_NAME_STYLE), end="")
            self.write_raw(f": {value}\n")
        self.console.print()

    @staticmethod
    def get_content_type(response: HttpResponse) -> MimeType | None:
        """Parse the Content-Type header; None if absent or malformed."""
        mime = MimeType.parse(response.get_header("Content-Type"))
        if mime is None and response.content_type:
            logger.debug(f"Unparseable Content-Type: {response.content_type!r}")
        return mime

    @staticmethod
    def syntax_for(mime: MimeType | None) -> str | None:
        """Lexer extension for ``mime``, or None for plain text."""
        if mime is None:
            return None
        return SYNTAX_BY_MIME.get(mime.essence)

    def print_body(self, mime: MimeType | None, body: str) -> None:
        extension = self.syntax_for(mime) if self.config.highlight else None
        if extension is not None:
            try:
                highlighted = self.highlighter.highlight(body, extension)
            except RenderError as e:
                logger.warning(f"{e}; printing body as plain text")
            else:
                self.console.print(highlighted, soft_wrap=True)
                return

        self.write_raw(body + "\n")

    def write_raw(self, text: str) -> None:
        """Write ``text`` to the console stream without rich processing."""
        # rich strips control characters and expands tabs
        self.console.file.write(text)
        self.console.file.flush()
