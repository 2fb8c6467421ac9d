"""Directory listing for the navigation tree."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from navtree.exceptions import DirectoryReadError

from .entries import DirectoryEntry, Entry, FileEntry, sort_entries

logger = logging.getLogger(__name__)

DirectoryListing = Tuple[Path, Tuple[Entry, ...]]


def display_name(child: Path) -> str:
    """Return the child's name with undecodable bytes replaced by U+FFFD."""
    return os.fsencode(child.name).decode("utf-8", "replace")


def classify_child(child: Path) -> Optional[Entry]:
    """Build an entry from the child's current type.

    Returns None when the type cannot be determined: the child vanished,
    stat failed, it is a dangling symlink, or it is neither a regular file
    nor a directory (FIFO, socket, device).
    """
    try:
        if child.is_file():
            return FileEntry(path=child, name=display_name(child))
        if child.is_dir():
            return DirectoryEntry(path=child, name=display_name(child))
    except OSError as e:
        logger.debug(f"Skipping {child}: {e}")
        return None
    logger.debug(f"Skipping {child}: not a regular file or directory")
    return None


def read_directory_entries(path: Path) -> Tuple[Entry, ...]:
    """List the direct children of ``path``, sorted for display.

    Args:
        path: Directory to enumerate (absolute or relative)

    Returns:
        Directory entries first, then file entries, each group in codepoint
        order of the name

    Raises:
        DirectoryReadError: The directory cannot be opened or enumerated
    """
    try:
        children = list(path.iterdir())
    except (OSError, ValueError) as e:
        raise DirectoryReadError(str(e) or "Failed to read directory", path=str(path)) from e

    entries = []
    for child in children:
        entry = classify_child(child)
        if entry is not None:
            entries.append(entry)

    return sort_entries(entries)


def list_directory(path: Path) -> Optional[DirectoryListing]:
    """Read ``path`` and return ``(path, entries)``, or None on failure.

    The returned path is the one given, unchanged. An empty directory yields
    an empty entry tuple, not None.
    """
    try:
        entries = read_directory_entries(path)
    except DirectoryReadError as e:
        logger.debug(f"Directory read failed: {e}")
        return None

    logger.debug(f"Listed {len(entries)} entries in {path}")
    return path, entries
