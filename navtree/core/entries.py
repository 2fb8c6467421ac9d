"""Directory listing entries.

An entry is one child discovered by a directory read. There are exactly two
variants, ``DirectoryEntry`` and ``FileEntry``; both are immutable and each
knows its display label and the message that selecting it produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .messages import ChangeDirectory, ReadFile


@dataclass(frozen=True)
class DirectoryEntry:
    """A child directory."""

    path: Path
    name: str

    @property
    def label(self) -> str:
        return f"D - {self.name}"

    def activate(self) -> ChangeDirectory:
        return ChangeDirectory(self.path)


@dataclass(frozen=True)
class FileEntry:
    """A child regular file."""

    path: Path
    name: str

    @property
    def label(self) -> str:
        return f"F - {self.name}"

    def activate(self) -> ReadFile:
        return ReadFile(self.path)


Entry = Union[DirectoryEntry, FileEntry]


def entry_sort_key(entry: Entry) -> Tuple[int, str]:
    """Directories first, then codepoint order of the name."""
    return (0 if isinstance(entry, DirectoryEntry) else 1, entry.name)


def sort_entries(entries: Iterable[Entry]) -> Tuple[Entry, ...]:
    return tuple(sorted(entries, key=entry_sort_key))


def parent_of(directory: Path) -> Optional[Path]:
    """Return the parent of ``directory``, or None at a root.

    ``Path("/").parent`` and ``Path(".").parent`` are the path itself, which
    is how a root is recognised.
    """
    parent = directory.parent
    if parent == directory:
        return None
    return parent
