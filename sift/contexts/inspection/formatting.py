"""
Formatting analyzer for the Inspection context.

Each check is a small function taking a FormattingInput and returning an issue
message or None. FORMATTING_RULES lists them in reporting order; every rule runs
on every resume (no early exit), so the result holds between zero and one
message per rule.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from sift.contexts.inspection.bullets import (
    bullet_marker,
    collect_lines,
    indentation_width,
    is_formatting_bullet,
)
from sift.contexts.inspection.logger import log_analyzer_summary, log_rule_triggered
from sift.contexts.inspection.patterns import (
    DATE_FORMAT_MONTH_YEAR,
    DATE_FORMAT_NUMERIC,
    DATE_FORMAT_YEAR,
    HEADING_STYLE_ALL_CAPS,
    HEADING_STYLE_OTHER,
    HEADING_STYLE_TITLE_CASE,
    DatePatterns,
    DocumentPatterns,
    FormattingMessages,
)

DEFAULT_MAX_INDENT_LEVELS = 2


@dataclass(frozen=True)
class FormattingInput:
    """
    Everything the formatting rules look at, computed once per analysis.

    Attributes:
        resume: Full raw resume text
        sections: Section map from the segmenter
        bullet_lines: Raw bullet-like lines from every section body
        max_indent_levels: Distinct bullet indentation widths tolerated
    """

    resume: str
    sections: Dict[str, str]
    bullet_lines: Tuple[str, ...]
    max_indent_levels: int = DEFAULT_MAX_INDENT_LEVELS

    @classmethod
    def build(
        cls,
        resume: str,
        sections: Dict[str, str],
        max_indent_levels: int = DEFAULT_MAX_INDENT_LEVELS,
    ) -> "FormattingInput":
        lines = collect_lines(sections.values())
        bullets = tuple(line for line in lines if is_formatting_bullet(line))
        return cls(resume, sections, bullets, max_indent_levels)


# =============================================================================
# CLASSIFIERS
# =============================================================================


def classify_date(date: str) -> str:
    """Classify a matched date as MM/DD/YYYY, Month YYYY or YYYY."""
    if DatePatterns.NUMERIC.search(date):
        return DATE_FORMAT_NUMERIC
    if DatePatterns.MONTH_YEAR.match(date):
        return DATE_FORMAT_MONTH_YEAR
    return DATE_FORMAT_YEAR


def classify_heading(heading: str) -> str:
    """Classify a heading as ALL_CAPS, Title_Case or Other."""
    if heading == heading.upper():
        return HEADING_STYLE_ALL_CAPS
    if heading == heading[:1].upper() + heading[1:].lower():
        return HEADING_STYLE_TITLE_CASE
    return HEADING_STYLE_OTHER


# =============================================================================
# RULES
# =============================================================================


def check_blank_line_runs(data: FormattingInput) -> Optional[str]:
    """Flag two or more consecutive blank lines anywhere in the document."""
    previous_blank = False
    for line in data.resume.split("\n"):
        is_blank = not line.strip()
        if is_blank and previous_blank:
            return FormattingMessages.BLANK_LINE_RUN
        previous_blank = is_blank
    return None


def check_bullet_styles(data: FormattingInput) -> Optional[str]:
    """Flag more than one distinct bullet marker token."""
    markers = {bullet_marker(line) for line in data.bullet_lines}
    if len(markers) > 1:
        return FormattingMessages.BULLET_STYLE
    return None


def check_bullet_alignment(data: FormattingInput) -> Optional[str]:
    """Flag more indentation widths than max_indent_levels allows."""
    widths = {indentation_width(line) for line in data.bullet_lines}
    if len(widths) > data.max_indent_levels:
        return FormattingMessages.BULLET_ALIGNMENT
    return None


def check_bullet_endings(data: FormattingInput) -> Optional[str]:
    """
    Flag a mix of bullets with and without ending periods.

    The advice follows the majority: add periods when most bullets have one,
    remove them otherwise.
    """
    total = len(data.bullet_lines)
    with_periods = sum(1 for line in data.bullet_lines if line.strip().endswith("."))

    if 0 < with_periods < total:
        if with_periods > total / 2:
            return FormattingMessages.MISSING_PERIODS
        return FormattingMessages.REMOVE_PERIODS
    return None


def check_leading_character(data: FormattingInput) -> Optional[str]:
    """Flag a document that doesn't open with a word character."""
    if not DocumentPatterns.LEADING_WORD.match(data.resume):
        return FormattingMessages.LEADING_SPACING
    return None


def check_date_formats(data: FormattingInput) -> Optional[str]:
    """Flag more than one date format in the document."""
    formats = {classify_date(date) for date in DatePatterns.FIND.findall(data.resume)}
    if len(formats) > 1:
        return FormattingMessages.DATE_FORMATS
    return None


def check_heading_styles(data: FormattingInput) -> Optional[str]:
    """Flag section headings written in more than one style."""
    styles = {classify_heading(heading) for heading in data.sections}
    if len(styles) > 1:
        return FormattingMessages.HEADING_STYLES
    return None


FormattingRule = Callable[[FormattingInput], Optional[str]]

FORMATTING_RULES: Tuple[FormattingRule, ...] = (
    check_blank_line_runs,
    check_bullet_styles,
    check_bullet_alignment,
    check_bullet_endings,
    check_leading_character,
    check_date_formats,
    check_heading_styles,
)


def check_formatting(
    resume: str,
    sections: Dict[str, str],
    max_indent_levels: int = DEFAULT_MAX_INDENT_LEVELS,
) -> Tuple[str, ...]:
    """
    Run every formatting rule over a resume.

    Args:
        resume: Full raw resume text
        sections: Section map from parse_resume_sections()
        max_indent_levels: Distinct bullet indentation widths tolerated

    Returns:
        Tuple of distinct formatting issue messages, in rule order
    """
    data = FormattingInput.build(resume, sections, max_indent_levels)

    issues: List[str] = []
    for rule in FORMATTING_RULES:
        message = rule(data)
        if message is not None and message not in issues:
            log_rule_triggered("formatting", message)
            issues.append(message)

    log_analyzer_summary("formatting", issues)
    return tuple(issues)
