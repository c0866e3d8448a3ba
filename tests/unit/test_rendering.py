"""Unit tests for console and Markdown report rendering."""

import pytest
from jinja2.exceptions import UndefinedError

from sift.contexts.inspection.patterns import FormattingMessages
from sift.contexts.reporting.console import Column, ReportTable, render_console_report
from sift.contexts.reporting.markdown import create_environment, render_markdown_report
from sift.contexts.reporting.report import AnalysisReport, assemble_report
from sift.contexts.targeting.job_fit import JobFitResult

JOB_FIT = JobFitResult(
    score=50,
    missing_keywords=("kubernetes", "docker"),
    recommendations=("Highlight experience with technical skills: kubernetes, docker",),
)


@pytest.fixture
def report():
    return assemble_report((FormattingMessages.BULLET_STYLE,), (), (), JOB_FIT)


@pytest.mark.unit
class TestReportTable:
    def test_row_alignment(self):
        table = ReportTable([Column("Category", 10), Column("Issues", 6, ">")], width=17)
        output = table.add_column_header().add_row(["Grammar", 3]).render()

        assert output.split("\n") == [
            "Category   Issues",
            "-" * 17,
            f"{'Grammar':<10} {3:>6}",
        ]

    def test_row_value_count_checked(self):
        table = ReportTable([Column("Category", 10), Column("Issues", 6)])
        with pytest.raises(ValueError):
            table.add_row(["Grammar"])

    def test_empty_list_placeholder(self):
        output = ReportTable([]).add_issue_list("Grammar", []).render()
        assert output.split("\n") == ["", "Grammar:", "  None"]


@pytest.mark.unit
class TestConsoleReport:
    def test_summary_and_lists(self, report):
        output = render_console_report(report)

        assert "RESUME ANALYSIS" in output
        assert f"  - {FormattingMessages.BULLET_STYLE}" in output
        assert "Job fit score: 50%" in output
        assert "  - kubernetes" in output
        assert "  - Consider adding keywords related to: kubernetes, docker" in output

    def test_no_job_fit_section_without_job(self):
        output = render_console_report(AnalysisReport())
        assert "Job fit score" not in output
        assert "Missing keywords" not in output


@pytest.mark.unit
class TestMarkdownReport:
    def test_sections(self, report):
        output = render_markdown_report(report)

        assert output.startswith("# Resume Analysis\n")
        assert "| Formatting | 1 |" in output
        assert f"- {FormattingMessages.BULLET_STYLE}" in output
        assert "_No issues._" in output
        assert "**Score:** 50%" in output
        assert "**Missing keywords:** kubernetes, docker" in output
        assert "- Highlight experience with technical skills: kubernetes, docker" in output

    def test_custom_title(self, report):
        assert render_markdown_report(report, title="Review").startswith("# Review\n")

    def test_job_fit_omitted_without_job(self):
        output = render_markdown_report(AnalysisReport())
        assert "## Job Fit" not in output
        assert "## Suggestions" in output

    def test_strict_undefined(self, tmp_path):
        """Template typos fail instead of rendering blanks."""
        (tmp_path / "report.md.jinja").write_text("{{ reprot.formatting }}")
        env = create_environment(tmp_path)

        with pytest.raises(UndefinedError):
            render_markdown_report(AnalysisReport(), env=env)
