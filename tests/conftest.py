"""
Shared pytest fixtures.
"""

import logging

import pytest


@pytest.fixture
def restore_package_logger():
    """Undo setup_logging() changes to the envsettings logger after a test."""
    package_logger = logging.getLogger('envsettings')
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
