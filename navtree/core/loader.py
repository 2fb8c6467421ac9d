"""Whole-file text loading for the file view."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from navtree.exceptions import FileReadError

logger = logging.getLogger(__name__)

LoadedFile = Tuple[Path, str]


def read_text_file(path: Path, max_bytes: Optional[int] = None) -> str:
    """Read ``path`` fully and decode it as strict UTF-8.

    Args:
        path: File to read
        max_bytes: Refuse files larger than this many bytes (None = no limit)

    Returns:
        The complete file contents, byte-for-byte (no newline translation)

    Raises:
        FileReadError: The file cannot be read, is too large, or is not
            valid UTF-8
    """
    try:
        if max_bytes is not None:
            size = path.stat().st_size
            if size > max_bytes:
                raise FileReadError(
                    "File exceeds size limit", path=str(path), size=size, max_bytes=max_bytes
                )
        data = path.read_bytes()
    except (OSError, ValueError) as e:
        raise FileReadError(str(e) or "Failed to read file", path=str(path)) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError("File is not valid UTF-8 text", path=str(path)) from e


def load_file(path: Path, max_bytes: Optional[int] = None) -> Optional[LoadedFile]:
    """Return ``(path, contents)`` or None when the file cannot be loaded.

    I/O errors and decode errors are treated alike; no partial text is ever
    returned.
    """
    try:
        contents = read_text_file(path, max_bytes=max_bytes)
    except FileReadError as e:
        logger.debug(f"File load failed: {e}")
        return None

    logger.debug(f"Loaded {len(contents)} characters from {path}")
    return path, contents
