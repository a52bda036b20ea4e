"""
Utility functions for formatting text-based keyword reports.

Provides a small aligned-column table builder plus report renderers for the
resume analysis, job comparison and density checklist.
"""

from typing import Any, List, Sequence


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        if isinstance(value, str):
            value = truncate_display(value, self.width)
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 72):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns).rstrip())
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: Sequence[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(
            " ".join(col.format_value(val) for col, val in zip(self.columns, values)).rstrip()
        )
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_analysis_report(analysis) -> str:
    """
    Format a KeywordAnalysis as a human-readable report.

    Args:
        analysis: KeywordAnalysis from analyze_resume_keywords()

    Returns:
        Formatted report string
    """
    report = TableFormatter([Column("Keyword", 40), Column("Count", 8, ">")])
    report.add_section_header("RESUME KEYWORD ANALYSIS")
    report.add_text(f"Total keyword occurrences: {analysis.total_keywords}")
    report.add_text(f"Unique keywords: {analysis.unique_keywords}")
    report.add_blank_line()

    report.add_table_header()
    for item in analysis.top_keywords:
        report.add_row([item.keyword, item.count])
    report.add_blank_line()

    roles = TableFormatter([Column("Role", 40), Column("Score", 8, ">")])
    roles.add_table_header()
    for match in analysis.role_match:
        roles.add_row([match.role, f"{match.score}%"])
    report.lines.extend(roles.lines)

    if analysis.suggestions:
        report.add_blank_line()
        report.add_text("Suggestions:")
        for suggestion in analysis.suggestions:
            report.add_text(f"  - {suggestion}")

    return report.render()


def format_comparison_report(comparison) -> str:
    """Format a JobComparison as a human-readable report."""
    report = TableFormatter(
        [
            Column("Keyword", 32),
            Column("Importance", 10),
            Column("In Resume", 10),
            Column("Count", 8, ">"),
        ]
    )
    report.add_section_header("JOB DESCRIPTION MATCH")
    report.add_text(f"Match: {comparison.match_percentage}% of high-importance keywords")
    report.add_blank_line()

    report.add_table_header()
    for record in comparison.matches:
        report.add_row(
            [
                record.keyword,
                record.importance.value,
                "yes" if record.in_resume else "no",
                record.count,
            ]
        )

    report.add_blank_line()
    if comparison.missing_keywords:
        report.add_text(f"Missing keywords: {', '.join(comparison.missing_keywords)}")
    else:
        report.add_text("Missing keywords: none")

    return report.render()


def format_density_report(densities: Sequence[Any], title: str = "KEYWORD DENSITY") -> str:
    """Format a list of KeywordDensity records as a checklist table."""
    report = TableFormatter(
        [
            Column("Keyword", 32),
            Column("Count", 8, ">"),
            Column("Density", 10, ">"),
            Column("Status", 8),
        ]
    )
    report.add_section_header(title)
    report.add_table_header()
    for density in densities:
        report.add_row(
            [
                density.keyword,
                density.count,
                f"{density.density_percent:.2f}%",
                density.status.value,
            ]
        )
    return report.render()
