"""
navtree configuration.

Settings are read from ~/.config/navtree/config.json (or the directory named
by NAVTREE_CONFIG_DIR), merged over the defaults, then overridden by any
command-line options.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from navtree.exceptions import ConfigurationError

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_CODE_THEME,
    DEFAULT_DISCARD_STALE_RESULTS,
    DEFAULT_MAX_FILE_BYTES,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    get_config_dir,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "refresh_interval": DEFAULT_REFRESH_INTERVAL_SECONDS,
    "discard_stale_results": DEFAULT_DISCARD_STALE_RESULTS,
    "max_file_bytes": DEFAULT_MAX_FILE_BYTES,
    "code_theme": DEFAULT_CODE_THEME,
}


@dataclass(frozen=True)
class NavtreeConfig:
    """Resolved settings for one navtree session."""

    refresh_interval: float = DEFAULT_REFRESH_INTERVAL_SECONDS
    discard_stale_results: bool = DEFAULT_DISCARD_STALE_RESULTS
    max_file_bytes: Optional[int] = DEFAULT_MAX_FILE_BYTES
    code_theme: str = DEFAULT_CODE_THEME

    def with_overrides(self, **overrides: Any) -> NavtreeConfig:
        """Return a copy with every non-None override applied and validated."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return validate_config(replace(self, **changes))


def get_config_path() -> Path:
    """
    Get path to the config file.

    Returns:
        Path to <config dir>/config.json
    """
    return get_config_dir() / CONFIG_FILENAME


def load_raw_config() -> dict[str, Any]:
    """
    Load the config file merged over defaults.

    Returns:
        Config dict, or defaults if the file doesn't exist or is invalid
    """
    path = get_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            return DEFAULT_CONFIG.copy()
        if not isinstance(config, dict):
            logger.warning(f"Ignoring config {path}: expected a JSON object")
            return DEFAULT_CONFIG.copy()
        # Merge with defaults to handle missing keys
        return {**DEFAULT_CONFIG, **config}
    return DEFAULT_CONFIG.copy()


def validate_config(config: NavtreeConfig) -> NavtreeConfig:
    """Check value ranges, raising ConfigurationError on the first bad one."""
    if isinstance(config.refresh_interval, bool) or not isinstance(
        config.refresh_interval, (int, float)
    ):
        raise ConfigurationError(
            "Refresh interval must be a number",
            setting="refresh_interval",
            value=config.refresh_interval,
        )
    if config.refresh_interval < 0:
        raise ConfigurationError(
            "Refresh interval cannot be negative",
            setting="refresh_interval",
            value=config.refresh_interval,
        )
    if config.max_file_bytes is not None and (
        isinstance(config.max_file_bytes, bool)
        or not isinstance(config.max_file_bytes, int)
        or config.max_file_bytes <= 0
    ):
        raise ConfigurationError(
            "File size limit must be a positive integer",
            setting="max_file_bytes",
            value=config.max_file_bytes,
        )
    if not isinstance(config.discard_stale_results, bool):
        raise ConfigurationError(
            "discard_stale_results must be true or false",
            setting="discard_stale_results",
            value=config.discard_stale_results,
        )
    if not isinstance(config.code_theme, str) or not config.code_theme:
        raise ConfigurationError(
            "Code theme must be a theme name",
            setting="code_theme",
            value=config.code_theme,
        )
    return config


def load_config() -> NavtreeConfig:
    """Load and validate the settings from the config file."""
    raw = load_raw_config()
    known = {key: raw[key] for key in DEFAULT_CONFIG}
    unknown = sorted(set(raw) - set(DEFAULT_CONFIG))
    if unknown:
        logger.info(f"Ignoring unknown config keys: {', '.join(unknown)}")
    return validate_config(NavtreeConfig(**known))

