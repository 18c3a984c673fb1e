"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import logging
import os

import pytest

os.environ["SANITIZER_ENVIRONMENT"] = "test"

from field_sanitizer import default_metadata_storage  # noqa: E402
from field_sanitizer.core.logging import LIBRARY_LOGGER_NAME  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metadata_storage():
    """
    Clear the process-wide metadata storage around each test.

    Rules are declared inside the tests, so every test starts from an
    empty registry and without a container.
    """
    default_metadata_storage.reset()
    default_metadata_storage.set_container(None)
    yield
    default_metadata_storage.reset()
    default_metadata_storage.set_container(None)


@pytest.fixture()
def restore_library_logger():
    """Restore handlers and level of the library logger after a test."""
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
