"""Textual user interface for navtree."""

from .app import NavTreeApp
from .file_view import FileView
from .nav_tree import NavTree

__all__ = ["FileView", "NavTree", "NavTreeApp"]
