"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_comparison_result(comparison, matched_high: int, total_high: int) -> None:
    """Log job comparison headline numbers."""
    _log_info(
        f"Job match {comparison.match_percentage}% "
        f"({matched_high}/{total_high} high-importance keywords present)"
    )
    _log_debug(f"{len(comparison.matches)} job keywords compared")
    if comparison.missing_keywords:
        _log_debug(f"Missing: {', '.join(comparison.missing_keywords)}")
