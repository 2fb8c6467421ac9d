"""Navigation tree widget - renders the navigation state and runs its reads."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from navtree.config.constants import DEFAULT_REFRESH_INTERVAL_SECONDS
from navtree.core.entries import DirectoryEntry, parent_of
from navtree.core.messages import ChangeDirectory, RefreshDirectory
from navtree.core.messages import Message as NavMessage
from navtree.core.state import Loaded, Loading, NavigationState, Update, ViewState
from navtree.core.tasks import Task

logger = logging.getLogger(__name__)


class NavTree(Vertical):
    """Directory listing with an up row, driven by a NavigationState.

    Reads run as Textual workers; the blocking filesystem call happens in a
    thread via ``asyncio.to_thread`` and its result message is applied back
    on the event loop, so the state machine is only ever touched from one
    thread.
    """

    DEFAULT_CSS = """
    NavTree {
        height: 100%;
    }

    .nav-header {
        height: auto;
        background: $primary;
        color: $text;
        padding: 0 1;
        margin-bottom: 1;
    }

    #nav-entries {
        height: 1fr;
    }

    .nav-up, .nav-directory {
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("backspace", "parent_dir", "Parent", show=True),
        Binding("h", "parent_dir", "Parent", show=False),
        Binding("r", "refresh", "Refresh", show=True),
    ]

    class FileOpened(Message):
        """Posted when a selected file has finished loading."""

        def __init__(self, path: Path, contents: str) -> None:
            super().__init__()
            self.path = path
            self.contents = contents

    def __init__(
        self,
        start_directory: Path,
        *,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        discard_stale_results: bool = True,
        max_file_bytes: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.navigation = NavigationState(
            start_directory,
            discard_stale_results=discard_stale_results,
            max_file_bytes=max_file_bytes,
        )
        self.refresh_interval = refresh_interval
        # Parallel to the list rows: the message each row sends when selected
        self._row_messages: List[NavMessage] = []
        self._rendered_view: Optional[ViewState] = None
        self._header_text = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="nav-header", classes="nav-header")
        yield ListView(id="nav-entries")

    async def on_mount(self) -> None:
        logger.info(f"NavTree mounted, loading {self.navigation.view}")
        await self._render_view()
        self._run_update(self.navigation.start())
        if self.refresh_interval > 0:
            self.set_interval(self.refresh_interval, self.action_refresh)

    def dispatch_navigation(self, message: NavMessage) -> None:
        """Feed one message into the state machine and act on the outcome."""
        previous = self.navigation.view
        update = self.navigation.update(message)
        if self.navigation.view != previous:
            self.call_later(self._render_view)
        self._run_update(update)

    def _run_update(self, update: Update) -> None:
        if update.task is not None:
            self.run_worker(
                self._perform(update.task),
                group="navtree-io",
                description=f"{type(update.task).__name__} {update.task.path}",
            )
        if update.event is not None:
            self.post_message(self.FileOpened(update.event.path, update.event.contents))

    async def _perform(self, task: Task) -> None:
        try:
            message = await asyncio.to_thread(task.run)
        except Exception:
            logger.exception(f"Read task crashed: {task}")
            message = task.failed()
        self.dispatch_navigation(message)

    async def _render_view(self) -> None:
        """Rebuild the header and rows from the current view-state."""
        view = self.navigation.view
        if view == self._rendered_view:
            return

        header = self.query_one("#nav-header", Static)
        list_view = self.query_one("#nav-entries", ListView)
        previous = self._rendered_view
        keep_index = (
            list_view.index
            if isinstance(previous, Loaded)
            and isinstance(view, Loaded)
            and previous.directory == view.directory
            else None
        )

        await list_view.clear()
        self._row_messages = []
        self._rendered_view = view

        if isinstance(view, Loading):
            self._set_header(header, f"Loading {view.target}...")
            return

        self._set_header(header, f"Entries for {view.directory}")

        rows = []
        if view.parent is not None:
            rows.append(ListItem(Label(".."), classes="nav-up"))
            self._row_messages.append(ChangeDirectory(view.parent))

        for entry in view.entries:
            css_class = "nav-directory" if isinstance(entry, DirectoryEntry) else "nav-file"
            rows.append(ListItem(Label(Text(entry.label)), classes=css_class))
            self._row_messages.append(entry.activate())

        await list_view.extend(rows)
        if rows:
            list_view.index = min(keep_index or 0, len(rows) - 1)

    def _set_header(self, header: Static, text: str) -> None:
        if text == self._header_text:
            return
        self._header_text = text
        header.update(Text(text))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        index = event.list_view.index
        if index is not None and 0 <= index < len(self._row_messages):
            self.dispatch_navigation(self._row_messages[index])

    def action_parent_dir(self) -> None:
        """Go to the parent of the loaded directory."""
        directory = self.navigation.directory
        parent = parent_of(directory) if directory is not None else None
        if parent is not None:
            self.dispatch_navigation(ChangeDirectory(parent))

    def action_refresh(self) -> None:
        self.dispatch_navigation(RefreshDirectory())
