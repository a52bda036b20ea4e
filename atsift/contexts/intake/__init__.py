"""
Intake Context

Responsibilities:
- Indexes pasted job descriptions
- Tiers job keywords by importance (curated dictionary + frequency)
- Compares job keywords against the resume's frequency table

Owns: Job description comparison, importance tiering
Never: Reads the structured resume document (works on the extracted corpus)
"""

from atsift.contexts.intake.job_comparator import (
    Importance,
    ImportanceThresholds,
    JobComparison,
    MatchRecord,
    classify_importance,
    compare_with_job_description,
)

__all__ = [
    "compare_with_job_description",
    "classify_importance",
    "JobComparison",
    "MatchRecord",
    "Importance",
    "ImportanceThresholds",
]
