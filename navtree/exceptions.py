"""Custom exception hierarchy for navtree.

The navigation core never lets filesystem problems escape: the lenient
entry points (``list_directory``, ``load_file``) collapse failures into an
absent result. The strict helpers they are built on raise the exceptions
below so that callers who want the reason can still get it.

Exception Hierarchy:
    NavtreeError (base)
    ├── FileOperationError - File I/O
    │   ├── DirectoryReadError
    │   └── FileReadError
    └── ConfigurationError - Settings/CLI options

Usage:
    from navtree.exceptions import DirectoryReadError

    try:
        entries = read_directory_entries(path)
    except DirectoryReadError as e:
        logger.debug(f"Listing failed: {e}")
"""

from typing import Any, Optional


class NavtreeError(Exception):
    """Base exception for all navtree errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, settings)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# File Operation Errors
# =============================================================================


class FileOperationError(NavtreeError):
    """Base exception for file operations."""

    pass


class DirectoryReadError(FileOperationError):
    """A directory could not be opened or enumerated."""

    def __init__(
        self,
        message: str = "Failed to read directory",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class FileReadError(FileOperationError):
    """Failed to read or decode a file."""

    def __init__(
        self,
        message: str = "Failed to read file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NavtreeError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
