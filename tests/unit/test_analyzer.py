"""
Unit tests for the aggregate resume keyword analysis.

Tests analyze_resume_keywords and its helpers in
atsift.contexts.targeting.analyzer.
"""

import pytest

from atsift.contexts.document import Resume
from atsift.contexts.targeting import RoleDictionary, analyze_corpus, analyze_resume_keywords
from atsift.contexts.targeting.analyzer import (
    COVERAGE_SUGGESTION,
    KeywordCount,
    build_suggestions,
    top_keywords,
)
from atsift.contexts.targeting.role_matcher import RoleMatch
from atsift.utils.cache import ResultCache


def _resume(summary: str) -> Resume:
    return Resume.from_dict(
        {"sections": [{"type": "summary", "title": "", "content": {"summary": summary}}]}
    )


@pytest.mark.unit
class TestTopKeywords:
    def test_ordered_by_count_then_keyword(self):
        table = {"react": 2, "aws": 2, "docker": 5, "vue": 1}
        assert top_keywords(table, 3) == [
            KeywordCount("docker", 5),
            KeywordCount("aws", 2),
            KeywordCount("react", 2),
        ]

    def test_fewer_than_n(self):
        assert top_keywords({"aws": 1}, 20) == [KeywordCount("aws", 1)]


@pytest.mark.unit
class TestBuildSuggestions:
    def test_thin_resume_and_weak_role(self):
        suggestions = build_suggestions(10, [RoleMatch("devops", 40)])
        assert suggestions == [
            COVERAGE_SUGGESTION,
            "Consider adding more devops specific keywords",
        ]

    def test_no_suggestions(self):
        assert build_suggestions(30, [RoleMatch("data", 50)]) == []

    def test_no_roles(self):
        assert build_suggestions(30, []) == []


@pytest.mark.unit
class TestAnalyzeResumeKeywords:
    def test_empty_resume(self):
        analysis = analyze_resume_keywords(Resume())
        assert analysis.total_keywords == 0
        assert analysis.unique_keywords == 0
        assert analysis.top_keywords == ()
        assert all(match.score == 0 for match in analysis.role_match)
        assert analysis.best_role.role == "backend"
        assert analysis.suggestions == (
            COVERAGE_SUGGESTION,
            "Consider adding more backend specific keywords",
        )

    def test_counts(self):
        analysis = analyze_resume_keywords(_resume("Python python Django developer"))
        assert analysis.total_keywords == 4
        assert analysis.unique_keywords == 3
        assert analysis.top_keywords[0] == KeywordCount("python", 2)

    def test_top_n(self):
        analysis = analyze_resume_keywords(_resume("one two three four five six"), top_n=2)
        assert len(analysis.top_keywords) == 2

    def test_to_dict_keys(self):
        data = analyze_resume_keywords(_resume("React developer")).to_dict()
        assert list(data) == [
            "totalKeywords",
            "uniqueKeywords",
            "topKeywords",
            "roleMatch",
            "suggestions",
        ]
        assert data["topKeywords"][0] == {"keyword": "developer", "count": 1}
        assert set(data["roleMatch"][0]) == {"role", "score"}

    def test_custom_dictionary(self):
        dictionary = RoleDictionary.from_dict({"roles": {"rustacean": {"l": ["Rust", "Cargo"]}}})
        analysis = analyze_corpus("Rust and Cargo", dictionary)
        assert [(m.role, m.score) for m in analysis.role_match] == [("rustacean", 100)]
        assert analysis.suggestions == (COVERAGE_SUGGESTION,)

    def test_cache_hit(self):
        cache = ResultCache()
        resume = _resume("Kubernetes operator")
        first = analyze_resume_keywords(resume, cache=cache)
        second = analyze_resume_keywords(resume, cache=cache)
        assert first is second
        assert cache.hits == 1

    def test_cached_and_uncached_agree(self):
        resume = _resume("Terraform on AWS")
        assert analyze_resume_keywords(resume, cache=ResultCache()) == analyze_resume_keywords(resume)
