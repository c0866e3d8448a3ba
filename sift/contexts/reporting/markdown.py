"""
Markdown rendering of analysis reports.

Reports are rendered through a Jinja2 template stored next to this module
(templates/report.md.jinja). StrictUndefined makes a template typo fail
instead of silently rendering blanks.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from sift.contexts.reporting.report import AnalysisReport

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
REPORT_TEMPLATE = "report.md.jinja"


def create_environment(templates_path: Path = None) -> Environment:
    """
    Create the Jinja2 environment for report templates.

    Args:
        templates_path: Directory holding templates (defaults to the packaged templates)
    """
    if templates_path is None:
        templates_path = TEMPLATES_PATH

    return Environment(
        loader=FileSystemLoader(str(templates_path)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_markdown_report(
    report: AnalysisReport,
    title: str = "Resume Analysis",
    env: Environment = None,
) -> str:
    """
    Render a report as Markdown.

    Args:
        report: Finished analysis report
        title: Top-level heading
        env: Optional pre-built environment (defaults to create_environment())

    Returns:
        Markdown document string
    """
    if env is None:
        env = create_environment()

    template = env.get_template(REPORT_TEMPLATE)
    return template.render(report=report, title=title)
