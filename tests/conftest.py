"""Shared pytest fixtures for navtree tests."""

import logging
from pathlib import Path

import pytest

from navtree.config.constants import CONFIG_DIR_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point the config directory at a temp dir so tests never touch ~/.config."""
    config_dir = tmp_path / "navtree-config"
    monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(config_dir))
    return config_dir


@pytest.fixture(autouse=True)
def reset_navtree_logger():
    """Undo handlers and propagation changes made by setup_logging()."""
    logger = logging.getLogger("navtree")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """A small project tree: proj/src/ and proj/readme.txt containing "hi"."""
    proj = tmp_path / "proj"
    (proj / "src").mkdir(parents=True)
    (proj / "src" / "main.py").write_text("print('hello')\n")
    (proj / "readme.txt").write_text("hi")
    return proj
