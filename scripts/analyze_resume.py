#!/usr/bin/env python3
"""
Analyze a resume for formatting, clarity, grammar and job-fit issues.

Accepts a PDF (first page is extracted) or a plain-text resume.

Usage:
    # Console report
    python scripts/analyze_resume.py resume.pdf

    # With a job description file, as Markdown
    python scripts/analyze_resume.py resume.txt --job job.md --format markdown

    # JSON report with preview highlights, saved to a file
    python scripts/analyze_resume.py resume.pdf --job-text "Python, Kubernetes" \
        --format json --highlights --output report.json
"""

import asyncio
import json
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv
from loguru import logger

from sift.analyzer import ResumeAnalyzer
from sift.contexts.intake.exceptions import ResumeExtractionError
from sift.contexts.reporting.console import render_console_report
from sift.contexts.reporting.highlights import find_highlights
from sift.contexts.reporting.markdown import render_markdown_report
from sift.utils.config import InvalidAnalysisConfigError, load_analysis_config
from sift.utils.logger import new_session_dir, setup_logger

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Analyze a resume for formatting, clarity, grammar and job-fit issues.",
)

OUTPUT_FORMATS = ("text", "markdown", "json")


def _load_job_description(job: Optional[Path], job_text: Optional[str]) -> Optional[str]:
    if job is not None and job_text is not None:
        typer.secho("ERROR: Use either --job or --job-text, not both", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if job is not None:
        if not job.exists():
            typer.secho(f"ERROR: Job description not found: {job}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
        try:
            return job.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            typer.secho(f"ERROR: Could not read job description {job}: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    return job_text


@app.command()
def main(
    resume: Annotated[Path, typer.Argument(help="Resume file (.pdf or plain text)")],
    job: Annotated[
        Optional[Path], typer.Option("--job", "-j", help="Job description file")
    ] = None,
    job_text: Annotated[
        Optional[str], typer.Option("--job-text", help="Job description text")
    ] = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, markdown or json")
    ] = "text",
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write report to file instead of stdout")
    ] = None,
    highlights: Annotated[
        bool, typer.Option("--highlights", help="Include PDF word highlights (PDF input only)")
    ] = False,
    config_path: Annotated[
        Optional[Path], typer.Option("--config", help="YAML overriding analysis thresholds")
    ] = None,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Session log directory")
    ] = None,
):
    """Run the full analysis pipeline and print the report."""
    if output_format not in OUTPUT_FORMATS:
        typer.secho(
            f"ERROR: Unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    if not resume.exists():
        typer.secho(f"ERROR: Resume not found: {resume}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    job_description = _load_job_description(job, job_text)

    log_file = setup_logger(
        context_name="analyze",
        log_dir=log_dir or new_session_dir("analyze"),
        extra_provenance={"Resume": resume, "Job description": job or ("inline" if job_text else "none")},
    )

    try:
        config = load_analysis_config(config_path)
    except InvalidAnalysisConfigError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    content = None
    try:
        if resume.suffix.lower() == ".pdf":
            analyzer, content = ResumeAnalyzer.from_pdf(resume, config=config)
        else:
            analyzer = ResumeAnalyzer(resume.read_text(encoding="utf-8"), config=config)
    except ResumeExtractionError as e:
        logger.error(f"Error analyzing resume: {e}")
        raise typer.Exit(1)
    except (UnicodeDecodeError, OSError) as e:
        logger.error(f"Could not read resume {resume}: {e}")
        raise typer.Exit(1)

    logger.info(f"Sections: {', '.join(analyzer.sections) or '(none detected)'}")

    report = asyncio.run(analyzer.analyze_resume(job_description))
    logger.success(f"Analysis complete: {report.issue_count} issue(s)")

    if highlights and content is None:
        logger.warning("--highlights needs a PDF resume; skipping")

    if output_format == "json":
        payload = report.to_dict()
        if highlights and content is not None:
            payload["highlights"] = [
                {
                    "text": h.item.text,
                    "x": h.item.x,
                    "y": h.item.y,
                    "width": h.item.width,
                    "height": h.item.height,
                    "category": h.category,
                    "message": h.message,
                    "color": h.color,
                }
                for h in find_highlights(content.items, report)
            ]
        rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    elif output_format == "markdown":
        rendered = render_markdown_report(report, title=f"Resume Analysis: {resume.name}")
    else:
        rendered = render_console_report(report)
        if highlights and content is not None:
            marked = find_highlights(content.items, report)
            rendered += f"\n\nHighlighted words: {len(marked)}"

    if output is not None:
        output.write_text(rendered, encoding="utf-8")
        logger.info(f"Report written to {output}")
    else:
        typer.echo(rendered)

    logger.info(f"Log file: {log_file}")


if __name__ == "__main__":
    app()
