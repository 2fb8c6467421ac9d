"""
navtree - a minimal terminal file-system browser
"""

__version__ = "0.1.0"
