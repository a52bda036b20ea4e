"""
Targeting context logger.

Provides logging interface for the targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_role_ranking(role_matches) -> None:
    """Log the best role and the full ranking at debug level."""
    if not role_matches:
        _log_debug("No roles to rank")
        return
    best = role_matches[0]
    _log_debug(f"Best role match: {best.role} ({best.score}%)")
    ranking = ", ".join(f"{m.role}={m.score}" for m in role_matches)
    _log_debug(f"Role ranking: {ranking}")


def log_analysis_summary(analysis) -> None:
    """Log headline numbers of a KeywordAnalysis."""
    _log_info(
        f"Analyzed resume: {analysis.total_keywords} keyword occurrences, "
        f"{analysis.unique_keywords} unique"
    )
    for suggestion in analysis.suggestions:
        _log_info(f"  Suggestion: {suggestion}")
