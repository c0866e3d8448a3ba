"""
Issue highlights for a rendered resume preview.

Correlates extracted PDF words with report issues by word overlap. This is a
display heuristic only: a word gets the first issue sharing a word with it,
which says nothing about whether that word caused the issue.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from sift.contexts.intake.pdf_extractor import TextItem
from sift.contexts.reporting.logger import _log_debug
from sift.contexts.reporting.report import AnalysisReport

CATEGORY_ORDER = ("formatting", "clarity", "grammar")

HIGHLIGHT_COLORS = {
    "formatting": "rgba(252, 165, 165, 0.3)",
    "clarity": "rgba(251, 191, 36, 0.3)",
    "grammar": "rgba(147, 197, 253, 0.3)",
}

# Item words longer than this may match issue words by containment
MIN_PARTIAL_MATCH_LENGTH = 4


@dataclass(frozen=True)
class Highlight:
    item: TextItem
    category: str
    message: str
    color: str


def words_overlap(text: str, issue: str) -> bool:
    """
    True if any word of text matches a word of issue.

    Words match when equal, or when the text word is longer than four
    characters and one contains the other. Comparison is case-insensitive.
    """
    text_words = text.lower().split()
    issue_words = issue.lower().split()

    return any(
        text_word == issue_word
        or (
            len(text_word) > MIN_PARTIAL_MATCH_LENGTH
            and (issue_word in text_word or text_word in issue_word)
        )
        for text_word in text_words
        for issue_word in issue_words
    )


def _bullet_issue(text: str, issues: Sequence[str]) -> Optional[str]:
    stripped = text.strip()
    if not (stripped.startswith("•") or stripped.startswith("-")):
        return None
    return next((issue for issue in issues if "bullet point" in issue.lower()), None)


def issue_for_text(text: str, report: AnalysisReport) -> Optional[Tuple[str, str]]:
    """
    First issue relevant to a piece of text, checking categories in order.

    Bullet-looking text is paired with a bullet-point formatting issue first.

    Returns:
        (category, message) of the matching issue, or None
    """
    for category in CATEGORY_ORDER:
        issues = getattr(report, category)

        if category == "formatting":
            bullet_issue = _bullet_issue(text, issues)
            if bullet_issue is not None:
                return category, bullet_issue

        match = next((issue for issue in issues if words_overlap(text, issue)), None)
        if match is not None:
            return category, match

    return None


def find_highlights(items: Iterable[TextItem], report: AnalysisReport) -> List[Highlight]:
    """
    Pair each extracted word with at most one issue.

    Args:
        items: Positioned words from extract_pdf_content()
        report: Finished analysis report

    Returns:
        Highlights for the words that matched an issue, in item order
    """
    highlights = []
    for item in items:
        found = issue_for_text(item.text, report)
        if found is not None:
            category, message = found
            highlights.append(Highlight(item, category, message, HIGHLIGHT_COLORS[category]))

    _log_debug(f"Highlighted {len(highlights)} word(s)")
    return highlights
