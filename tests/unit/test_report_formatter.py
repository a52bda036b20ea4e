"""Unit tests for text report formatting."""

import pytest

from atsift.contexts.intake import compare_with_job_description
from atsift.contexts.targeting import analyze_corpus, analyze_keyword_density
from atsift.utils.report_formatter import (
    Column,
    TableFormatter,
    format_analysis_report,
    format_comparison_report,
    format_density_report,
    truncate_display,
)


@pytest.mark.unit
class TestTableFormatter:
    def test_truncate_display(self):
        assert truncate_display("this is a very long string", 10) == "this is..."
        assert truncate_display("short", 10) == "short"

    def test_rows_are_aligned(self):
        table = TableFormatter([Column("Name", 6), Column("N", 3, ">")], total_width=10)
        table.add_table_header().add_row(["aws", 2])
        assert table.render() == "Name     N\n----------\naws      2"

    def test_row_length_mismatch(self):
        table = TableFormatter([Column("Name", 6)])
        with pytest.raises(ValueError):
            table.add_row(["a", "b"])


@pytest.mark.unit
def test_analysis_report():
    report = format_analysis_report(analyze_corpus("Python Python Django"))
    assert "RESUME KEYWORD ANALYSIS" in report
    assert "Total keyword occurrences: 3" in report
    assert "Unique keywords: 2" in report
    assert "Suggestions:" in report
    assert any(line.startswith("python") and line.endswith("2") for line in report.splitlines())


@pytest.mark.unit
def test_comparison_report():
    report = format_comparison_report(
        compare_with_job_description("Python engineer", "Python and Django")
    )
    assert "Match: 50% of high-importance keywords" in report
    assert "Missing keywords: django" in report


@pytest.mark.unit
def test_comparison_report_nothing_missing():
    report = format_comparison_report(compare_with_job_description("Docker", "Docker"))
    assert "Missing keywords: none" in report


@pytest.mark.unit
def test_density_report():
    densities = [
        analyze_keyword_density("Experienced React developer with Node.js and AWS experience.", "React")
    ]
    report = format_density_report(densities, title="KEYWORD DENSITY: frontend")
    assert "KEYWORD DENSITY: frontend" in report
    assert "12.50%" in report
    assert "high" in report
