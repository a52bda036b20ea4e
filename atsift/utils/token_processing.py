"""
Standardized keyword tokenization and frequency indexing.

Turns a text corpus into a frequency table of single tokens plus curated
multi-word phrases:
- Lowercasing (str.lower, locale-independent)
- Tokenization that keeps "+", "#", "." and "-" attached to word characters
- Edge punctuation stripping ("Django." -> "django", ".NET" -> "net")
- Min length filtering (tokens of 2 characters or fewer are dropped)
- Phrase counting (non-overlapping literal substring matches)

Designed to be domain-agnostic - the phrase list is passed in, with the
curated technical phrases used as the default.

Usage:
    from atsift.utils.token_processing import KeywordIndexer

    indexer = KeywordIndexer()
    table = indexer.index("Built C++ and Node.js services with machine learning")
    # {"built": 1, "c++": 1, "and": 1, "node.js": 1, "services": 1,
    #  "with": 1, "machine": 1, "learning": 1, "machine learning": 1}
"""

import re
from collections import Counter
from typing import Iterable, Optional

TOKEN_PATTERN = re.compile(r"[\w+#.\-]+")

# Characters that may only appear inside a token, never at its edges
EDGE_PUNCTUATION = ".-"

DEFAULT_MIN_TOKEN_LENGTH = 3

DEFAULT_PHRASES = (
    "machine learning",
    "deep learning",
    "data science",
    "full stack",
    "front end",
    "back end",
    "software engineer",
    "web development",
    "mobile development",
    "cloud computing",
    "rest api",
    "graphql",
    "ci/cd",
    "version control",
)


def whole_word_pattern(keyword: str) -> re.Pattern:
    """
    Compile a case-insensitive whole-word pattern for a literal keyword.

    Regex metacharacters in the keyword are escaped. Lookarounds are used
    instead of \\b so keywords ending in symbols (e.g., "C++") still match.

    Args:
        keyword: Literal keyword or phrase

    Returns:
        Compiled pattern
    """
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)


class KeywordIndexer:
    """
    Tokenizer and frequency indexer for keyword analysis.

    Pipeline order:
    1. Lowercase
    2. Tokenization (runs of word characters and + # . -)
    3. Edge punctuation stripping
    4. Min length filtering
    5. Phrase counting over the lowercased text

    Phrases are counted in addition to their constituent tokens, so
    "machine learning" contributes to "machine", "learning" and
    "machine learning". A phrase that is also a single token ("graphql")
    replaces the token count with its substring count.

    The indexer holds no mutable state; one instance can be shared freely.
    """

    def __init__(
        self,
        phrases: Optional[Iterable[str]] = None,
        min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    ):
        """
        Initialize indexer.

        Args:
            phrases: Curated phrases to count (defaults to DEFAULT_PHRASES)
            min_token_length: Minimum token length kept in the frequency table
        """
        source = DEFAULT_PHRASES if phrases is None else phrases
        self.phrases = tuple(phrase.lower() for phrase in source if phrase)
        self.min_token_length = min_token_length

    def tokenize(self, text: str) -> list[str]:
        """
        Split text into lowercased tokens, short ones included.

        Returns:
            List of tokens in corpus order
        """
        if not text:
            return []

        tokens = []
        for raw in TOKEN_PATTERN.findall(text.lower()):
            token = raw.strip(EDGE_PUNCTUATION)
            if token:
                tokens.append(token)
        return tokens

    def count_phrase(self, text: str, phrase: str) -> int:
        """Count non-overlapping, case-insensitive literal occurrences of phrase."""
        if not text or not phrase:
            return 0
        return text.lower().count(phrase.lower())

    def index(self, text: str) -> dict[str, int]:
        """
        Build the keyword frequency table for a corpus.

        Returns:
            Dict mapping token or phrase -> occurrence count
        """
        counts = Counter(
            token for token in self.tokenize(text) if len(token) >= self.min_token_length
        )
        table = dict(counts)

        for phrase in self.phrases:
            count = self.count_phrase(text, phrase)
            if count > 0:
                table[phrase] = count

        return table

    def __call__(self, text: str) -> dict[str, int]:
        """Make indexer callable."""
        return self.index(text)

    def get_config_dict(self) -> dict:
        """Return indexer settings as a dictionary."""
        return {
            "phrases": list(self.phrases),
            "min_token_length": self.min_token_length,
        }


def extract_keywords(text: str, indexer: Optional[KeywordIndexer] = None) -> dict[str, int]:
    """
    Build a frequency table with the default (or a supplied) indexer.

    Args:
        text: Corpus to index
        indexer: Optional preconfigured KeywordIndexer

    Returns:
        Dict mapping token or phrase -> occurrence count
    """
    return (indexer or KeywordIndexer()).index(text)


def count_whole_word(text: str, keyword: str) -> int:
    """
    Count case-insensitive whole-word (or whole-phrase) occurrences of keyword.

    Blank keywords never match.
    """
    keyword = keyword.strip() if keyword else ""
    if not text or not keyword:
        return 0
    return len(whole_word_pattern(keyword).findall(text))
