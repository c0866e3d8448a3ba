"""
Plain-text rendering of analysis reports for the terminal.

ReportTable is a chainable builder for fixed-width text: banner, column
header, aligned rows and titled issue lists. render_console_report() prints an
issue-count summary followed by the issue lists themselves.
"""

from typing import Any, List, NamedTuple, Sequence

from sift.contexts.reporting.report import AnalysisReport

REPORT_WIDTH = 80


class Column(NamedTuple):
    """Fixed-width column; align is '<' (left), '>' (right) or '^' (center)."""

    name: str
    width: int
    align: str = "<"

    def cell(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class ReportTable:
    """Fixed-width text builder. Every add_* method returns self for chaining."""

    def __init__(self, columns: Sequence[Column], width: int = REPORT_WIDTH):
        self.columns = tuple(columns)
        self.width = width
        self.lines: List[str] = []

    def _rule(self, char: str) -> str:
        return char * self.width

    def add_banner(self, title: str) -> "ReportTable":
        self.lines.extend([self._rule("="), title, self._rule("=")])
        return self

    def add_column_header(self) -> "ReportTable":
        self.lines.append(" ".join(col.cell(col.name) for col in self.columns))
        self.lines.append(self._rule("-"))
        return self

    def add_row(self, values: Sequence[Any]) -> "ReportTable":
        """
        Raises:
            ValueError: If the number of values doesn't match the columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.cell(value) for col, value in zip(self.columns, values)))
        return self

    def add_issue_list(self, title: str, items: Sequence[str], empty_text: str = "None") -> "ReportTable":
        """Blank line, 'title:', then one '  - item' per item (or the empty text)."""
        self.lines.extend(["", f"{title}:"])
        self.lines.extend(f"  - {item}" for item in items)
        if not items:
            self.lines.append(f"  {empty_text}")
        return self

    def add_line(self, text: str = "") -> "ReportTable":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def render_console_report(report: AnalysisReport, title: str = "RESUME ANALYSIS") -> str:
    """
    Render a report as a plain-text summary table plus issue lists.

    Args:
        report: Finished analysis report
        title: Banner text above the summary

    Returns:
        Multi-line report string
    """
    categories = (
        ("Formatting", report.formatting),
        ("Clarity", report.clarity),
        ("Grammar", report.grammar),
    )

    table = ReportTable([Column("Category", 20), Column("Issues", 10, ">")])
    table.add_banner(title).add_column_header()
    for name, issues in categories:
        table.add_row([name, len(issues)])

    job_fit = report.job_fit
    if job_fit is not None:
        table.add_line().add_line(f"Job fit score: {job_fit.score}%")

    for name, issues in categories:
        table.add_issue_list(name, issues)

    if job_fit is not None:
        table.add_issue_list("Missing keywords", job_fit.missing_keywords)
        table.add_issue_list("Recommendations", job_fit.recommendations)

    return table.add_issue_list("Suggestions", report.suggestions).render()
