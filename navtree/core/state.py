"""Navigation state machine.

``NavigationState`` owns the current view-state (``Loading`` or ``Loaded``)
and is driven by messages: user intents (change directory, open file,
refresh) and completions of the reads it scheduled. ``update`` never blocks;
it returns the next task to run, if any, and the event to hand to the host
application, if any. All calls must come from a single thread.

Scheduled reads are tagged with a per-kind token. With
``discard_stale_results`` enabled a completion whose token is not the latest
issued one is dropped, so a slow earlier read cannot overwrite a faster
later one. With it disabled results apply in completion order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional, Tuple, Union

from .entries import Entry, parent_of
from .messages import (
    ChangeDirectory,
    DirectoryRead,
    FileRead,
    FileReadEvent,
    Message,
    ReadFile,
    RefreshDirectory,
)
from .tasks import ReadDirectoryTask, ReadFileTask, Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    """A directory read is in flight for ``target``."""

    target: Path


@dataclass(frozen=True)
class Loaded:
    """``entries`` are the result of the last successful read of ``directory``."""

    directory: Path
    entries: Tuple[Entry, ...]

    @property
    def parent(self) -> Optional[Path]:
        return parent_of(self.directory)


ViewState = Union[Loading, Loaded]


class Update(NamedTuple):
    """Outcome of applying one message."""

    task: Optional[Task] = None
    event: Optional[FileReadEvent] = None


class NavigationState:
    """Browsing state plus the bookkeeping for in-flight reads."""

    def __init__(
        self,
        start_directory: Path,
        *,
        discard_stale_results: bool = True,
        max_file_bytes: Optional[int] = None,
    ):
        self.view: ViewState = Loading(start_directory)
        self.discard_stale_results = discard_stale_results
        self.max_file_bytes = max_file_bytes
        self._directory_token = 0
        self._file_token = 0
        self._pending_directory_token: Optional[int] = None

    @property
    def directory(self) -> Optional[Path]:
        """The loaded directory, or None while still loading."""
        if isinstance(self.view, Loaded):
            return self.view.directory
        return None

    @property
    def directory_read_pending(self) -> bool:
        return self._pending_directory_token is not None

    def start(self) -> Update:
        """Schedule the initial read of the start directory."""
        if isinstance(self.view, Loading):
            return Update(task=self._schedule_directory(self.view.target))
        return Update()

    def update(self, message: Message) -> Update:
        """Apply ``message`` and return the follow-up task and event."""
        if isinstance(message, ChangeDirectory):
            if message.path.is_dir():
                return Update(task=self._schedule_directory(message.path))
            logger.debug(f"Ignoring ChangeDirectory to non-directory {message.path}")

        elif isinstance(message, DirectoryRead):
            self._apply_directory_read(message)

        elif isinstance(message, ReadFile):
            if message.path.is_file():
                return Update(task=self._schedule_file(message.path))
            logger.debug(f"Ignoring ReadFile of non-file {message.path}")

        elif isinstance(message, FileRead):
            if self._is_stale(message.token, self._file_token):
                logger.debug(f"Discarding stale file read (token {message.token})")
            elif message.result is not None:
                path, contents = message.result
                return Update(event=FileReadEvent(path, contents))

        elif isinstance(message, RefreshDirectory):
            directory = self.directory
            if directory is not None and not self.directory_read_pending:
                return Update(task=self._schedule_directory(directory))

        else:
            raise TypeError(f"Unknown navigation message: {message!r}")

        return Update()

    def _apply_directory_read(self, message: DirectoryRead) -> None:
        if message.token is not None and message.token == self._pending_directory_token:
            self._pending_directory_token = None

        if self._is_stale(message.token, self._directory_token):
            logger.debug(f"Discarding stale directory read (token {message.token})")
            return
        if message.result is None:
            return

        directory, entries = message.result
        self.view = Loaded(directory=directory, entries=tuple(entries))
        logger.debug(f"Loaded {directory} with {len(self.view.entries)} entries")

    def _is_stale(self, token: Optional[int], latest: int) -> bool:
        return self.discard_stale_results and token is not None and token != latest

    def _schedule_directory(self, path: Path) -> ReadDirectoryTask:
        self._directory_token += 1
        self._pending_directory_token = self._directory_token
        logger.debug(f"Scheduling directory read of {path} (token {self._directory_token})")
        return ReadDirectoryTask(path=path, token=self._directory_token)

    def _schedule_file(self, path: Path) -> ReadFileTask:
        self._file_token += 1
        logger.debug(f"Scheduling file read of {path} (token {self._file_token})")
        return ReadFileTask(path=path, token=self._file_token, max_bytes=self.max_file_bytes)
