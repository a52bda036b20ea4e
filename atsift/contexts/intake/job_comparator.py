"""
Job Description Comparison

Compares a resume corpus against a pasted job description. Both texts are
indexed with the same KeywordIndexer; every job keyword becomes a MatchRecord
with an importance tier:

    high    curated dictionary keyword, or >= high_frequency job occurrences
    medium  >= medium_frequency job occurrences
    low     everything else

matchPercentage is the share of high-importance job keywords present in the
resume. Neither frequency table is mutated, so results do not depend on call
order.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from atsift.contexts.intake.logger import log_comparison_result
from atsift.contexts.targeting.role_dictionary import RoleDictionary, resolve_dictionary
from atsift.utils.cache import ResultCache
from atsift.utils.scoring import percentage
from atsift.utils.token_processing import KeywordIndexer

DEFAULT_MISSING_LIMIT = 20


class Importance(str, Enum):
    """Importance tier of a job keyword (serialized verbatim)."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


IMPORTANCE_ORDER = {Importance.HIGH: 0, Importance.MEDIUM: 1, Importance.LOW: 2}


@dataclass(frozen=True)
class ImportanceThresholds:
    """
    Job-occurrence counts that promote a keyword's importance.

    Heuristics carried over unchanged from the editor's optimizer; pass a
    different instance to tune them.
    """

    high_frequency: int = 3
    medium_frequency: int = 2


DEFAULT_IMPORTANCE_THRESHOLDS = ImportanceThresholds()


@dataclass(frozen=True)
class MatchRecord:
    """
    One job-description keyword checked against the resume.

    Attributes:
        keyword: Token or phrase from the job description
        in_resume: Whether the resume's frequency table contains it
        count: Occurrences in the resume (0 if absent)
        importance: high, medium or low
        job_count: Occurrences in the job description
    """

    keyword: str
    in_resume: bool
    count: int
    importance: Importance
    job_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "inResume": self.in_resume,
            "count": self.count,
            "importance": self.importance.value,
        }


@dataclass(frozen=True)
class JobComparison:
    """
    Result of comparing a resume with a job description.

    Attributes:
        matches: Every job keyword, sorted by importance then resume count
        match_percentage: Share of high-importance keywords present, 0-100
        missing_keywords: Absent high/medium keywords, at most the configured limit
    """

    matches: Tuple[MatchRecord, ...]
    match_percentage: int
    missing_keywords: Tuple[str, ...]

    @property
    def high_importance(self) -> Tuple[MatchRecord, ...]:
        return tuple(m for m in self.matches if m.importance == Importance.HIGH)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matches": [m.to_dict() for m in self.matches],
            "matchPercentage": self.match_percentage,
            "missingKeywords": list(self.missing_keywords),
        }


def classify_importance(
    keyword: str,
    job_count: int,
    dictionary: RoleDictionary,
    thresholds: ImportanceThresholds = DEFAULT_IMPORTANCE_THRESHOLDS,
) -> Importance:
    """
    Assign the importance tier of a job keyword.

    Args:
        keyword: Lowercased token or phrase
        job_count: Occurrences in the job description
        dictionary: Curated dictionary for membership checks
        thresholds: Frequency thresholds

    Returns:
        Importance
    """
    if dictionary.is_curated(keyword) or job_count >= thresholds.high_frequency:
        return Importance.HIGH
    if job_count >= thresholds.medium_frequency:
        return Importance.MEDIUM
    return Importance.LOW


def _match_sort_key(record: MatchRecord) -> tuple:
    return (IMPORTANCE_ORDER[record.importance], -record.count, record.keyword)


def compare_with_job_description(
    resume_text: str,
    job_description: str,
    dictionary: Optional[RoleDictionary] = None,
    indexer: Optional[KeywordIndexer] = None,
    thresholds: ImportanceThresholds = DEFAULT_IMPORTANCE_THRESHOLDS,
    missing_limit: int = DEFAULT_MISSING_LIMIT,
    cache: Optional[ResultCache] = None,
) -> JobComparison:
    """
    Compare a resume corpus with a job description.

    Never raises for empty inputs: an empty job description produces no
    matches, no missing keywords and a 0% match.

    Args:
        resume_text: Resume corpus (from extract_resume_text)
        job_description: Raw job description text
        dictionary: Curated dictionary (defaults to the packaged one)
        indexer: Keyword indexer (defaults to KeywordIndexer())
        thresholds: Importance frequency thresholds
        missing_limit: Maximum number of missing keywords reported
        cache: Optional ResultCache for memoizing identical calls

    Returns:
        JobComparison
    """
    dictionary = resolve_dictionary(dictionary)
    indexer = indexer or KeywordIndexer()

    def compute() -> JobComparison:
        resume_index = indexer.index(resume_text)
        job_index = indexer.index(job_description)

        records = [
            MatchRecord(
                keyword=keyword,
                in_resume=keyword in resume_index,
                count=resume_index.get(keyword, 0),
                importance=classify_importance(keyword, job_count, dictionary, thresholds),
                job_count=job_count,
            )
            for keyword, job_count in job_index.items()
        ]
        records.sort(key=_match_sort_key)

        high = [r for r in records if r.importance == Importance.HIGH]
        matched_high = [r for r in high if r.in_resume]
        missing = [
            r.keyword for r in records if not r.in_resume and r.importance != Importance.LOW
        ]

        comparison = JobComparison(
            matches=tuple(records),
            match_percentage=percentage(len(matched_high), len(high)),
            missing_keywords=tuple(missing[: max(missing_limit, 0)]),
        )
        log_comparison_result(comparison, len(matched_high), len(high))
        return comparison

    if cache is None:
        return compute()

    key = ResultCache.make_key(
        "compare_with_job_description",
        resume_text,
        job_description,
        dictionary.to_dict(),
        indexer.get_config_dict(),
        asdict(thresholds),
        missing_limit,
    )
    return cache.get_or_compute(key, compute)
