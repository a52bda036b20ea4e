"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[document]"


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_result(num_sections: int, num_enabled: int, num_chars: int) -> None:
    """Log the size of an extracted corpus."""
    _log_debug(
        f"Extracted {num_chars} chars from {num_enabled}/{num_sections} enabled sections"
    )
