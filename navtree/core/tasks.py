"""Filesystem reads scheduled by the navigation state machine.

A task captures an immutable path when it is created and, when run,
performs one blocking read and returns one message. Tasks share no mutable
state, so any number of them may run concurrently in worker threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .lister import list_directory
from .loader import load_file
from .messages import DirectoryRead, FileRead


@dataclass(frozen=True)
class ReadDirectoryTask:
    path: Path
    token: int

    def run(self) -> DirectoryRead:
        return DirectoryRead(list_directory(self.path), token=self.token)

    def failed(self) -> DirectoryRead:
        """Completion message for a run that raised instead of returning."""
        return DirectoryRead(None, token=self.token)


@dataclass(frozen=True)
class ReadFileTask:
    path: Path
    token: int
    max_bytes: Optional[int] = None

    def run(self) -> FileRead:
        return FileRead(load_file(self.path, max_bytes=self.max_bytes), token=self.token)

    def failed(self) -> FileRead:
        return FileRead(None, token=self.token)


Task = Union[ReadDirectoryTask, ReadFileTask]
