"""
Shared utilities for ATSIFT.

Common functionality used across contexts:
- Tokenization and keyword indexing
- Percentage scoring
- Result caching
- Logging and report formatting
"""

from atsift.utils.scoring import percentage
from atsift.utils.token_processing import KeywordIndexer, extract_keywords

__all__ = ["KeywordIndexer", "extract_keywords", "percentage"]
