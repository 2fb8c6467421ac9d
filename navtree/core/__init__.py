"""Navigation core: listing, loading and the state machine that drives them."""

from .entries import DirectoryEntry, Entry, FileEntry, parent_of, sort_entries
from .lister import list_directory, read_directory_entries
from .loader import load_file, read_text_file
from .messages import (
    ChangeDirectory,
    DirectoryRead,
    FileRead,
    FileReadEvent,
    Message,
    ReadFile,
    RefreshDirectory,
)
from .state import Loaded, Loading, NavigationState, Update, ViewState
from .tasks import ReadDirectoryTask, ReadFileTask, Task

__all__ = [
    "ChangeDirectory",
    "DirectoryEntry",
    "DirectoryRead",
    "Entry",
    "FileEntry",
    "FileRead",
    "FileReadEvent",
    "Loaded",
    "Loading",
    "Message",
    "NavigationState",
    "ReadDirectoryTask",
    "ReadFile",
    "ReadFileTask",
    "RefreshDirectory",
    "Task",
    "Update",
    "ViewState",
    "list_directory",
    "load_file",
    "parent_of",
    "read_directory_entries",
    "read_text_file",
    "sort_entries",
]
