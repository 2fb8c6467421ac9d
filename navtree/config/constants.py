"""
Centralized constants for navtree.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

CONFIG_DIR_ENV_VAR = "NAVTREE_CONFIG_DIR"


def get_config_dir() -> Path:
    """Return the navtree config directory (~/.config/navtree by default)."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "navtree"


CONFIG_FILENAME = "config.json"
LOG_FILENAME = "navtree.log"

# =============================================================================
# REFRESH & LOADING
# =============================================================================

DEFAULT_REFRESH_INTERVAL_SECONDS = 1.0  # Periodic directory re-read, 0 disables
DEFAULT_DISCARD_STALE_RESULTS = True  # Drop results of superseded reads
DEFAULT_MAX_FILE_BYTES = None  # No size limit on loaded files

# =============================================================================
# DISPLAY
# =============================================================================

DEFAULT_CODE_THEME = "monokai"
NAV_TREE_WIDTH = 40  # Columns reserved for the directory listing
