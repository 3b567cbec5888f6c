"""
Logging utilities for the dashboard data layer.

Provides standardized logger configuration.

Rules:
- NEVER log raw search terms typed by users (they may contain customer PII)
- NEVER log monetary amounts or customer emails
- NEVER log database credentials or connection strings

Acceptable logging:
- High-level events (e.g., "Fetched 6 invoices for page 2")
- Row counts, page numbers and query shapes
- Error messages from the database driver
"""

import logging
from typing import Optional

from dashboard.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from dashboard.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
