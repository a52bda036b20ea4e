"""
Resume Keyword Analyzer

Runs the full keyword pipeline over a Resume document:

    extract_resume_text -> KeywordIndexer.index -> match_roles -> suggestions

and packages the outcome as an immutable KeywordAnalysis snapshot.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from atsift.contexts.document import Resume, extract_resume_text
from atsift.contexts.targeting.logger import log_analysis_summary
from atsift.contexts.targeting.role_dictionary import RoleDictionary, resolve_dictionary
from atsift.contexts.targeting.role_matcher import RoleMatch, match_roles
from atsift.utils.cache import ResultCache
from atsift.utils.token_processing import KeywordIndexer

DEFAULT_TOP_N = 20

# Below this many unique keywords the resume is considered thin
MIN_UNIQUE_KEYWORDS = 30
# Best role score below this triggers a role-specific suggestion
MIN_ROLE_SCORE = 50

COVERAGE_SUGGESTION = "Add more technical skills and tools to increase keyword coverage"
ROLE_SUGGESTION = "Consider adding more {role} specific keywords"


@dataclass(frozen=True)
class KeywordCount:
    keyword: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"keyword": self.keyword, "count": self.count}


@dataclass(frozen=True)
class KeywordAnalysis:
    """
    Read-only snapshot of a resume's keyword profile.

    Attributes:
        total_keywords: Sum of all frequency-table counts (tokens and phrases)
        unique_keywords: Number of distinct frequency-table keys
        top_keywords: Most frequent keywords, count descending then alphabetical
        role_match: Role coverage scores, best first
        suggestions: Human-readable improvement hints
    """

    total_keywords: int
    unique_keywords: int
    top_keywords: Tuple[KeywordCount, ...]
    role_match: Tuple[RoleMatch, ...]
    suggestions: Tuple[str, ...]

    @property
    def best_role(self) -> Optional[RoleMatch]:
        return self.role_match[0] if self.role_match else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalKeywords": self.total_keywords,
            "uniqueKeywords": self.unique_keywords,
            "topKeywords": [k.to_dict() for k in self.top_keywords],
            "roleMatch": [m.to_dict() for m in self.role_match],
            "suggestions": list(self.suggestions),
        }


def top_keywords(frequency_table: Dict[str, int], n: int = DEFAULT_TOP_N) -> List[KeywordCount]:
    """Most frequent keywords, ties broken alphabetically."""
    ranked = sorted(frequency_table.items(), key=lambda item: (-item[1], item[0]))
    return [KeywordCount(keyword, count) for keyword, count in ranked[:n]]


def build_suggestions(unique_keywords: int, role_match: List[RoleMatch]) -> List[str]:
    """
    Generate coverage hints from the analysis numbers.

    Args:
        unique_keywords: Distinct keywords in the resume
        role_match: Ranked role scores (best first)

    Returns:
        Zero, one or two suggestion strings
    """
    suggestions = []
    if unique_keywords < MIN_UNIQUE_KEYWORDS:
        suggestions.append(COVERAGE_SUGGESTION)
    if role_match and role_match[0].score < MIN_ROLE_SCORE:
        suggestions.append(ROLE_SUGGESTION.format(role=role_match[0].role))
    return suggestions


def analyze_corpus(
    corpus: str,
    dictionary: Optional[RoleDictionary] = None,
    indexer: Optional[KeywordIndexer] = None,
    top_n: int = DEFAULT_TOP_N,
) -> KeywordAnalysis:
    """
    Analyze an already-extracted corpus.

    Never raises for an empty corpus; every count and score is then 0.
    """
    dictionary = resolve_dictionary(dictionary)
    frequency_table = (indexer or KeywordIndexer()).index(corpus)
    role_match = match_roles(corpus, dictionary)
    unique = len(frequency_table)

    analysis = KeywordAnalysis(
        total_keywords=sum(frequency_table.values()),
        unique_keywords=unique,
        top_keywords=tuple(top_keywords(frequency_table, top_n)),
        role_match=tuple(role_match),
        suggestions=tuple(build_suggestions(unique, role_match)),
    )
    log_analysis_summary(analysis)
    return analysis


def analyze_resume_keywords(
    resume: Resume,
    dictionary: Optional[RoleDictionary] = None,
    indexer: Optional[KeywordIndexer] = None,
    top_n: int = DEFAULT_TOP_N,
    cache: Optional[ResultCache] = None,
) -> KeywordAnalysis:
    """
    Analyze a resume's keyword profile.

    Args:
        resume: Resume document
        dictionary: Role dictionary (defaults to the packaged one)
        indexer: Keyword indexer (defaults to KeywordIndexer())
        top_n: Number of top keywords to report
        cache: Optional ResultCache keyed by the extracted corpus

    Returns:
        KeywordAnalysis
    """
    corpus = extract_resume_text(resume)
    if cache is None:
        return analyze_corpus(corpus, dictionary, indexer, top_n)

    dictionary = resolve_dictionary(dictionary)
    indexer = indexer or KeywordIndexer()
    key = ResultCache.make_key(
        "analyze_corpus", corpus, dictionary.to_dict(), indexer.get_config_dict(), top_n
    )
    return cache.get_or_compute(key, lambda: analyze_corpus(corpus, dictionary, indexer, top_n))
