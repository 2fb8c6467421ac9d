"""navtree Textual application - listing on the left, file view on the right."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from navtree.config import NavtreeConfig
from navtree.config.constants import NAV_TREE_WIDTH

from .file_view import FileView
from .nav_tree import NavTree

logger = logging.getLogger(__name__)


class NavTreeApp(App[None]):
    """Owns the navigation tree and the currently displayed file."""

    TITLE = "Navigation Tree"
    AUTO_FOCUS = "#nav-entries"

    CSS = f"""
    #nav-tree {{
        width: {NAV_TREE_WIDTH};
        border-right: solid $primary;
    }}

    #file-view {{
        width: 1fr;
    }}
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, start_directory: Path, config: Optional[NavtreeConfig] = None):
        super().__init__()
        self.start_directory = start_directory
        self.settings = config or NavtreeConfig()
        # (path, contents) of the most recently loaded file
        self.file_view: Optional[Tuple[Path, str]] = None

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield NavTree(
                self.start_directory,
                refresh_interval=self.settings.refresh_interval,
                discard_stale_results=self.settings.discard_stale_results,
                max_file_bytes=self.settings.max_file_bytes,
                id="nav-tree",
            )
            yield FileView(code_theme=self.settings.code_theme, id="file-view")
        yield Footer()

    def on_nav_tree_file_opened(self, message: NavTree.FileOpened) -> None:
        logger.info(f"Showing {message.path} ({len(message.contents)} characters)")
        self.file_view = (message.path, message.contents)
        self.query_one(FileView).show_file(message.path, message.contents)
