"""Configuration for navtree."""

from .settings import (
    DEFAULT_CONFIG,
    NavtreeConfig,
    get_config_path,
    load_config,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "NavtreeConfig",
    "get_config_path",
    "load_config",
    "validate_config",
]
