"""
Analysis report assembly for the Reporting context.

AnalysisReport is a frozen value: assemble_report() builds it from analyzer
output, and apply_positive_feedback() returns a new report instead of editing
lists in place.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from sift.contexts.reporting.logger import _log_debug
from sift.contexts.targeting.job_fit import JobFitResult

DEFAULT_PASSING_SCORE = 70


@dataclass(frozen=True)
class SuggestionMessages:
    FORMATTING: str = "Consider fixing formatting issues for better readability"
    CLARITY: str = "Improve clarity by using more specific and action-oriented language"
    GRAMMAR: str = "Fix grammar issues to maintain professionalism"
    MISSING_KEYWORDS: str = "Consider adding keywords related to: {keywords}"
    ALL_CLEAR: str = "Your resume is well-formatted and professionally written"


@dataclass(frozen=True)
class PositiveMessages:
    FORMATTING: str = "✓ Resume formatting is excellent"
    CLARITY: str = "✓ Content is clear and well-structured"
    GRAMMAR: str = "✓ No grammar issues detected"


@dataclass(frozen=True)
class AnalysisReport:
    """
    Structured result of one resume analysis.

    Attributes:
        formatting: Distinct formatting issues
        clarity: Distinct clarity issues
        grammar: Distinct grammar issues
        job_fit: Keyword overlap with a job description, or None without one
        suggestions: Overall advice derived from the issues above
    """

    formatting: Tuple[str, ...] = ()
    clarity: Tuple[str, ...] = ()
    grammar: Tuple[str, ...] = ()
    job_fit: Optional[JobFitResult] = None
    suggestions: Tuple[str, ...] = ()

    @property
    def issue_count(self) -> int:
        return len(self.formatting) + len(self.clarity) + len(self.grammar)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the external report shape.

        Job-fit recommendations are internal and left out.
        """
        job_fit = None
        if self.job_fit is not None:
            job_fit = {
                "score": self.job_fit.score,
                "missing_keywords": list(self.job_fit.missing_keywords),
            }

        return {
            "formatting": list(self.formatting),
            "clarity": list(self.clarity),
            "grammar": list(self.grammar),
            "job_fit": job_fit,
            "suggestions": list(self.suggestions),
        }


def _job_fit_passes(job_fit: Optional[JobFitResult], passing_score: int) -> bool:
    return job_fit is None or job_fit.score >= passing_score


def build_suggestions(
    formatting: Sequence[str],
    clarity: Sequence[str],
    grammar: Sequence[str],
    job_fit: Optional[JobFitResult],
    passing_score: int = DEFAULT_PASSING_SCORE,
) -> Tuple[str, ...]:
    """One suggestion per category with issues, plus one for a failing job fit."""
    suggestions = []

    if formatting:
        suggestions.append(SuggestionMessages.FORMATTING)
    if clarity:
        suggestions.append(SuggestionMessages.CLARITY)
    if grammar:
        suggestions.append(SuggestionMessages.GRAMMAR)
    # A keyword-less job description scores 0 but has nothing to name
    if not _job_fit_passes(job_fit, passing_score) and job_fit.missing_keywords:
        keywords = ", ".join(job_fit.missing_keywords)
        suggestions.append(SuggestionMessages.MISSING_KEYWORDS.format(keywords=keywords))

    _log_debug(f"{len(suggestions)} suggestion(s)")
    return tuple(suggestions)


def is_all_clear(report: AnalysisReport, passing_score: int = DEFAULT_PASSING_SCORE) -> bool:
    """True when no category has issues and the job fit (if any) passes."""
    return (
        not report.formatting
        and not report.clarity
        and not report.grammar
        and _job_fit_passes(report.job_fit, passing_score)
    )


def apply_positive_feedback(
    report: AnalysisReport, passing_score: int = DEFAULT_PASSING_SCORE
) -> AnalysisReport:
    """
    Fill an all-clear report with positive messages.

    Returns the report unchanged unless is_all_clear(); otherwise a new report
    with one positive message per category and an overall suggestion appended.
    """
    if not is_all_clear(report, passing_score):
        return report

    _log_debug("No issues found; adding positive feedback")
    return replace(
        report,
        formatting=report.formatting + (PositiveMessages.FORMATTING,),
        clarity=report.clarity + (PositiveMessages.CLARITY,),
        grammar=report.grammar + (PositiveMessages.GRAMMAR,),
        suggestions=report.suggestions + (SuggestionMessages.ALL_CLEAR,),
    )


def assemble_report(
    formatting: Sequence[str],
    clarity: Sequence[str],
    grammar: Sequence[str],
    job_fit: Optional[JobFitResult] = None,
    passing_score: int = DEFAULT_PASSING_SCORE,
) -> AnalysisReport:
    """
    Combine analyzer output into a finished report.

    Args:
        formatting: Formatting issues
        clarity: Clarity issues
        grammar: Grammar issues
        job_fit: Job-fit result, or None when no job description was given
        passing_score: Job-fit scores below this add a missing-keywords suggestion

    Returns:
        AnalysisReport with suggestions, and positive messages when all clear
    """
    report = AnalysisReport(
        formatting=tuple(formatting),
        clarity=tuple(clarity),
        grammar=tuple(grammar),
        job_fit=job_fit,
        suggestions=build_suggestions(formatting, clarity, grammar, job_fit, passing_score),
    )
    return apply_positive_feedback(report, passing_score)
