"""
Tests for logger configuration.
"""

import logging

from dashboard.utils.logging import get_logger


def test_get_logger_attaches_single_handler():
    """Repeated calls don't stack duplicate handlers."""
    logger = get_logger("dashboard.tests.single_handler")
    get_logger("dashboard.tests.single_handler")

    assert len(logger.handlers) == 1


def test_get_logger_uses_explicit_level():
    logger = get_logger("dashboard.tests.debug_level", level=logging.DEBUG)

    assert logger.level == logging.DEBUG


def test_get_logger_defaults_to_configured_level():
    logger = get_logger("dashboard.tests.default_level")

    assert logger.level == logging.INFO
