"""
Keyword Density Classification

Measures how often a keyword appears in a corpus relative to its length and
classifies the result:

    count == 0                  -> low
    density > high_percent      -> high   (keyword stuffing signal)
    density < low_percent       -> low
    otherwise                   -> good

The word count denominator is a plain whitespace split of the corpus, not
the keyword tokenizer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from atsift.contexts.targeting.role_dictionary import RoleDictionary, resolve_dictionary
from atsift.utils.token_processing import count_whole_word


class DensityStatus(str, Enum):
    """Density classification values (serialized verbatim)."""

    LOW = "low"
    GOOD = "good"
    HIGH = "high"


@dataclass(frozen=True)
class DensityThresholds:
    """
    Density classification boundaries, in percent.

    These are heuristics carried over unchanged from the editor's optimizer;
    pass a different instance to tune them.
    """

    low_percent: float = 0.5
    high_percent: float = 3.0


DEFAULT_THRESHOLDS = DensityThresholds()


@dataclass(frozen=True)
class KeywordDensity:
    """
    Density measurement for one keyword.

    Attributes:
        keyword: Keyword as requested
        count: Case-insensitive whole-word occurrences
        total_words: Whitespace-separated word count of the corpus
        density_percent: count / total_words * 100 (0 for an empty corpus)
        status: low, good or high
    """

    keyword: str
    count: int
    total_words: int
    density_percent: float
    status: DensityStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "count": self.count,
            "densityPercent": self.density_percent,
            "status": self.status.value,
        }


def count_words(corpus: str) -> int:
    """Coarse word count: number of whitespace-separated chunks."""
    return len(corpus.split()) if corpus else 0


def classify_density(
    count: int, density_percent: float, thresholds: DensityThresholds = DEFAULT_THRESHOLDS
) -> DensityStatus:
    """
    Classify a keyword's density.

    Args:
        count: Keyword occurrences
        density_percent: Occurrences per 100 words
        thresholds: Classification boundaries

    Returns:
        DensityStatus
    """
    if count == 0:
        return DensityStatus.LOW
    if density_percent > thresholds.high_percent:
        return DensityStatus.HIGH
    if density_percent < thresholds.low_percent:
        return DensityStatus.LOW
    return DensityStatus.GOOD


def analyze_keyword_density(
    corpus: str, keyword: str, thresholds: DensityThresholds = DEFAULT_THRESHOLDS
) -> KeywordDensity:
    """
    Compute count, density and status of a keyword in a corpus.

    The keyword is matched literally (regex metacharacters are escaped) and
    as a whole word or phrase, ignoring case. Never raises: an empty corpus
    or blank keyword yields a zero count and status low.

    Example:
        >>> d = analyze_keyword_density(
        ...     "Experienced React developer with Node.js and AWS experience.", "React"
        ... )
        >>> (d.count, d.total_words, d.density_percent, d.status.value)
        (1, 8, 12.5, 'high')
    """
    total_words = count_words(corpus)
    count = count_whole_word(corpus, keyword)
    density_percent = count / total_words * 100 if total_words else 0.0

    return KeywordDensity(
        keyword=keyword,
        count=count,
        total_words=total_words,
        density_percent=density_percent,
        status=classify_density(count, density_percent, thresholds),
    )


def role_keyword_density(
    corpus: str,
    role: str,
    dictionary: Optional[RoleDictionary] = None,
    thresholds: DensityThresholds = DEFAULT_THRESHOLDS,
) -> List[KeywordDensity]:
    """
    Measure density of every keyword a role expects.

    Keywords appearing in more than one category of the role are measured once.

    Args:
        corpus: Resume corpus
        role: Role name
        dictionary: Role dictionary (defaults to the packaged one)
        thresholds: Classification boundaries

    Returns:
        One KeywordDensity per distinct role keyword, in dictionary order

    Raises:
        InvalidRoleError: If role is not in the dictionary
    """
    keywords = resolve_dictionary(dictionary).keywords_for_role(role)
    return [
        analyze_keyword_density(corpus, keyword, thresholds)
        for keyword in dict.fromkeys(keywords)
    ]
