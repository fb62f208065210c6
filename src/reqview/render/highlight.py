"""Syntax highlighting of response bodies."""

from __future__ import annotations

import logging

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from rich.syntax import Syntax
from rich.text import Text

from ..exceptions import RenderError
from ..models.config import DEFAULT_THEME

logger = logging.getLogger(__name__)


class Highlighter:
    """
    Highlights text with a pygments lexer chosen by file extension.

    Lexers and the theme come from the definitions bundled with pygments.

    Example:
        highlighter = Highlighter(theme="monokai")
        console.print(highlighter.highlight('{"a": 1}', "json"), soft_wrap=True)
    """

    def __init__(self, theme: str = DEFAULT_THEME) -> None:
        self.theme = theme

    def get_lexer(self, extension: str) -> Lexer:
        """
        Find the lexer for ``extension``.

        Raises:
            RenderError: If pygments has no lexer for the extension
        """
        try:
            # body newlines are printed as received
            return get_lexer_for_filename(f"body.{extension}", stripnl=False, ensurenl=False)
        except ClassNotFound as e:
            raise RenderError(f"No syntax definition for extension '{extension}'") from e

    def check_theme(self) -> None:
        """
        Ensure the configured theme exists.

        Raises:
            RenderError: If pygments has no style with that name
        """
        try:
            get_style_by_name(self.theme)
        except ClassNotFound as e:
            raise RenderError(f"Unknown theme '{self.theme}'") from e

    def highlight(self, text: str, extension: str) -> Text:
        """
        Highlight ``text`` as the language for ``extension``.

        Line endings are kept as they are; a missing final newline is not
        added.

        Raises:
            RenderError: If the lexer or theme cannot be found
        """
        lexer = self.get_lexer(extension)
        self.check_theme()
        logger.debug(f"Highlighting {len(text)} chars with {lexer.name} lexer, theme {self.theme}")
        syntax = Syntax(text, lexer, theme=self.theme, background_color="default")
        return syntax.highlight(text)
