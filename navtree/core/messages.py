"""Messages into the navigation state machine and events out of it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .lister import DirectoryListing
    from .loader import LoadedFile


@dataclass(frozen=True)
class ChangeDirectory:
    """User asked to show ``path``."""

    path: Path


@dataclass(frozen=True)
class DirectoryRead:
    """A directory read finished; ``result`` is None when it failed.

    ``token`` identifies the task that produced the result. Results without
    a token come from outside the scheduler and are always applied.
    """

    result: Optional[DirectoryListing]
    token: Optional[int] = None


@dataclass(frozen=True)
class ReadFile:
    """User asked to open ``path``."""

    path: Path


@dataclass(frozen=True)
class FileRead:
    """A file read finished; ``result`` is None when it failed."""

    result: Optional[LoadedFile]
    token: Optional[int] = None


@dataclass(frozen=True)
class RefreshDirectory:
    """Re-read the loaded directory to pick up external changes."""


Message = Union[ChangeDirectory, DirectoryRead, ReadFile, FileRead, RefreshDirectory]


@dataclass(frozen=True)
class FileReadEvent:
    """Emitted to the host application when a file has been loaded."""

    path: Path
    contents: str
