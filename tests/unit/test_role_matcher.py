"""Unit tests for role and experience-level matching."""

import pytest

from atsift.contexts.targeting import (
    InvalidRoleError,
    RoleDictionary,
    match_experience_levels,
    match_roles,
)
from atsift.contexts.targeting.role_matcher import score_keywords

NATO = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf",
    "hotel", "india", "juliett", "kilo", "lima", "mike", "november",
    "oscar", "papa", "quebec", "romeo", "sierra", "tango",
]


@pytest.fixture
def twenty_keyword_dictionary():
    return RoleDictionary.from_dict(
        {
            "roles": {
                "frontend": {"first": NATO[:10], "second": NATO[10:]},
                "backend": {"languages": ["Go", "Rust"]},
            }
        }
    )


@pytest.mark.unit
class TestMatchRoles:
    def test_five_of_twenty_scores_25(self, twenty_keyword_dictionary):
        corpus = "Alpha bravo CHARLIE delta echo"
        matches = match_roles(corpus, twenty_keyword_dictionary, roles=["frontend"])
        assert len(matches) == 1
        assert matches[0].role == "frontend"
        assert matches[0].score == 25
        assert matches[0].matched_keywords == ("alpha", "bravo", "charlie", "delta", "echo")
        assert matches[0].total_keywords == 20

    def test_unknown_role_raises(self):
        with pytest.raises(InvalidRoleError):
            match_roles("anything", roles=["quantum-computing"])

    def test_unknown_role_fails_before_scoring(self, twenty_keyword_dictionary):
        with pytest.raises(InvalidRoleError):
            match_roles("alpha", twenty_keyword_dictionary, roles=["frontend", "nope"])

    def test_sorted_by_score_then_name(self, twenty_keyword_dictionary):
        matches = match_roles("Rust", twenty_keyword_dictionary)
        assert [(m.role, m.score) for m in matches] == [("backend", 50), ("frontend", 0)]

    def test_ties_broken_alphabetically(self):
        dictionary = RoleDictionary.from_dict(
            {"roles": {"zeta": {"a": ["Kafka"]}, "alpha": {"a": ["Spark"]}}}
        )
        assert [m.role for m in match_roles("", dictionary)] == ["alpha", "zeta"]

    def test_all_default_roles_scored(self):
        matches = match_roles("React developer")
        assert len(matches) == 7
        assert all(0 <= m.score <= 100 for m in matches)
        assert [m.score for m in matches] == sorted((m.score for m in matches), reverse=True)

    def test_substring_matching(self):
        """Multi-word curated entries match as plain substrings."""
        dictionary = RoleDictionary.from_dict({"roles": {"java": {"f": ["Spring Boot", "Java"]}}})
        match = match_roles("Spring Boot microservices in JavaScript", dictionary)[0]
        assert match.score == 100

    def test_duplicate_keywords_count_separately(self):
        dictionary = RoleDictionary.from_dict(
            {"roles": {"agile": {"a": ["Scrum", "Kanban"], "b": ["Scrum"]}}}
        )
        match = match_roles("Scrum master", dictionary)[0]
        assert match.total_keywords == 3
        assert match.score == 67

    def test_to_dict(self, twenty_keyword_dictionary):
        match = match_roles("alpha", twenty_keyword_dictionary, roles=["frontend"])[0]
        assert match.to_dict() == {"role": "frontend", "score": 5}


@pytest.mark.unit
def test_empty_keyword_list_scores_zero():
    assert score_keywords("Python", "empty", []).score == 0


@pytest.mark.unit
def test_experience_levels():
    levels = match_experience_levels("Senior Software Engineer")
    assert [(m.role, m.score) for m in levels] == [
        ("mid", 25),
        ("senior", 17),
        ("junior", 0),
        ("management", 0),
    ]


@pytest.mark.unit
def test_experience_levels_empty_when_undefined(twenty_keyword_dictionary):
    assert match_experience_levels("Senior", twenty_keyword_dictionary) == []
