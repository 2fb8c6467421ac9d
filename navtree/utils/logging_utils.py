"""Logging setup for navtree.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and the application configures handlers once at startup with
`setup_logging()`. Output goes to a rotating file because the TUI owns the
terminal.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from navtree.config.constants import LOG_FILENAME, get_config_dir

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_path() -> Path:
    """Return the log file location inside the config directory."""
    return get_config_dir() / LOG_FILENAME


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Attach a rotating file handler to the ``navtree`` logger.

    Calling it again replaces the previous handler, so the level can be
    changed between runs (tests, repeated CLI invocations). When the log
    file cannot be created a warning goes to stderr and the logger is
    returned without a file handler.

    Args:
        verbose: Log at DEBUG instead of INFO
        log_file: Override for the log destination

    Returns:
        The configured ``navtree`` logger
    """
    logger = logging.getLogger("navtree")
    level = logging.DEBUG if verbose else logging.INFO

    for handler in list(logger.handlers):
        if getattr(handler, "_navtree_handler", False):
            logger.removeHandler(handler)
            handler.close()

    log_path = log_file or get_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_path, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        # Logging itself failed; warn on stderr instead
        print(f"Warning: navtree logging setup failed: {e}", file=sys.stderr)
        logger.setLevel(level)
        return logger

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    handler._navtree_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level)
    # Keep records out of the root logger's (terminal) handlers
    logger.propagate = False
    return logger
