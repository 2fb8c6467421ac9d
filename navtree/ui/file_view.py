"""File view pane - shows the most recently loaded file."""

import logging
from pathlib import Path

from rich.syntax import Syntax
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import RichLog

from navtree.config.constants import DEFAULT_CODE_THEME

logger = logging.getLogger(__name__)

PLACEHOLDER = "Click a file to view its content"

# Lexers that add nothing over plain text
_PLAIN_LEXERS = {"default", "text"}


class FileView(Vertical):
    """Scrollable pane holding one file's text, replaced wholesale on update."""

    DEFAULT_CSS = """
    FileView {
        height: 100%;
        padding: 0 1;
    }

    #file-content {
        height: 1fr;
    }
    """

    def __init__(self, code_theme: str = DEFAULT_CODE_THEME, **kwargs):
        super().__init__(**kwargs)
        self.code_theme = code_theme

    def compose(self) -> ComposeResult:
        yield RichLog(id="file-content", wrap=True, markup=False, highlight=False)

    def on_mount(self) -> None:
        self.clear_file()

    def clear_file(self) -> None:
        """Show the placeholder instead of a file."""
        log = self.query_one("#file-content", RichLog)
        log.clear()
        log.write(Text(PLACEHOLDER, style="dim italic"))

    def show_file(self, path: Path, contents: str) -> None:
        """Replace whatever is shown with ``contents`` of ``path``."""
        log = self.query_one("#file-content", RichLog)
        log.clear()
        log.write(Text(f"File: {path}", style="bold cyan"))
        log.write("")

        lexer = Syntax.guess_lexer(str(path), code=contents)
        if lexer not in _PLAIN_LEXERS:
            logger.debug(f"Highlighting {path} as {lexer}")
            log.write(
                Syntax(contents, lexer, theme=self.code_theme, line_numbers=True, word_wrap=True)
            )
        else:
            log.write(Text(contents))
        log.scroll_home(animate=False)
