"""Unit tests for keyword density classification."""

import pytest

from atsift.contexts.targeting import (
    DensityStatus,
    DensityThresholds,
    InvalidRoleError,
    RoleDictionary,
    analyze_keyword_density,
    role_keyword_density,
)
from atsift.contexts.targeting.density import classify_density, count_words

REACT_CORPUS = "Experienced React developer with Node.js and AWS experience."


@pytest.mark.unit
class TestAnalyzeKeywordDensity:
    def test_single_mention_in_short_corpus_is_high(self):
        result = analyze_keyword_density(REACT_CORPUS, "React")
        assert result.count == 1
        assert result.total_words == 8
        assert result.density_percent == 12.5
        assert result.status == DensityStatus.HIGH

    def test_empty_corpus(self):
        result = analyze_keyword_density("", "Python")
        assert result.count == 0
        assert result.total_words == 0
        assert result.density_percent == 0
        assert result.status == DensityStatus.LOW

    def test_absent_keyword_is_low(self):
        result = analyze_keyword_density(REACT_CORPUS, "Angular")
        assert result.count == 0
        assert result.status == DensityStatus.LOW

    def test_case_insensitive(self):
        assert analyze_keyword_density("react REACT React", "React").count == 3

    def test_whole_word_only(self):
        assert analyze_keyword_density("Reactive Preact", "React").count == 0

    def test_metacharacters_escaped(self):
        result = analyze_keyword_density("C++ developer, C developer", "C++")
        assert result.count == 1

    def test_multi_word_keyword(self):
        corpus = "Built a REST API and another rest api"
        assert analyze_keyword_density(corpus, "REST API").count == 2

    def test_good_density(self):
        corpus = " ".join(["Python"] + ["word"] * 99)
        result = analyze_keyword_density(corpus, "Python")
        assert result.density_percent == 1.0
        assert result.status == DensityStatus.GOOD

    def test_low_density(self):
        corpus = " ".join(["Python"] + ["word"] * 299)
        result = analyze_keyword_density(corpus, "Python")
        assert result.status == DensityStatus.LOW

    def test_custom_thresholds(self):
        result = analyze_keyword_density(
            REACT_CORPUS, "React", DensityThresholds(low_percent=1.0, high_percent=20.0)
        )
        assert result.status == DensityStatus.GOOD

    def test_density_never_decreases_with_more_mentions(self):
        base = " ".join(["filler"] * 50)
        densities = [
            analyze_keyword_density(" ".join([base] + ["Go"] * n), "Go").density_percent
            for n in range(5)
        ]
        assert densities == sorted(densities)

    def test_to_dict(self):
        assert analyze_keyword_density(REACT_CORPUS, "React").to_dict() == {
            "keyword": "React",
            "count": 1,
            "densityPercent": 12.5,
            "status": "high",
        }


@pytest.mark.unit
class TestClassifyDensity:
    @pytest.mark.parametrize(
        "count,density,expected",
        [
            (0, 0.0, DensityStatus.LOW),
            (1, 0.4, DensityStatus.LOW),
            (1, 0.5, DensityStatus.GOOD),
            (2, 3.0, DensityStatus.GOOD),
            (3, 3.1, DensityStatus.HIGH),
        ],
    )
    def test_boundaries(self, count, density, expected):
        assert classify_density(count, density) == expected


@pytest.mark.unit
def test_count_words_uses_whitespace():
    assert count_words("  Node.js,  AWS\tC++\n") == 3
    assert count_words("") == 0


@pytest.mark.unit
class TestRoleKeywordDensity:
    def test_one_result_per_distinct_keyword(self):
        dictionary = RoleDictionary.from_dict(
            {"roles": {"ops": {"tools": ["Docker", "Terraform"], "skills": ["Docker"]}}}
        )
        results = role_keyword_density("Docker on Terraform", "ops", dictionary)
        assert [r.keyword for r in results] == ["Docker", "Terraform"]
        assert [r.count for r in results] == [1, 1]

    def test_default_dictionary(self):
        results = role_keyword_density(REACT_CORPUS, "general")
        keywords = [r.keyword for r in results]
        assert len(keywords) == len(set(keywords)) == 15

    def test_unknown_role(self):
        with pytest.raises(InvalidRoleError):
            role_keyword_density(REACT_CORPUS, "quantum-computing")
