"""
Reporting context logger.

Provides logging interface for reporting context with automatic [report] prefix.
All reporting modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[report]"


def _log_debug(message: str) -> None:
    """Log debug message with [report] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
