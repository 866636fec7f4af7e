"""
Pytest configuration and fixtures for versionid tests
"""

import logging

import pytest

from versionid.logging_config import LOGGER_NAME
from versionid.settings import get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove VERSIONID_* variables and reset cached settings."""
    for var in ("VERSIONID_LOG_LEVEL", "VERSIONID_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Restore the versionid logger after tests that reconfigure it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
