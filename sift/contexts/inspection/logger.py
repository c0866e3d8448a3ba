"""
Inspection context logger.

Provides logging interface for inspection context with automatic [inspect] prefix.
All inspection modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[inspect]"


def _log_debug(message: str) -> None:
    """Log debug message with [inspect] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_rule_triggered(analyzer: str, message: str, sample: str = None) -> None:
    """
    Log that a rule fired, with the offending text when there is one.

    Args:
        analyzer: "formatting", "clarity" or "grammar"
        message: Issue message added to the report
        sample: Line or bullet that triggered the rule
    """
    if sample is None:
        _log_debug(f"{analyzer}: {message}")
    else:
        _log_debug(f'{analyzer}: {message} <- "{sample}"')


def log_analyzer_summary(analyzer: str, issues) -> None:
    """Log the number of distinct issues an analyzer produced."""
    _log_debug(f"{analyzer}: {len(issues)} issue(s)")
