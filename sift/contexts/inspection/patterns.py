"""
Rule data for the formatting, clarity and grammar analyzers.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Module-level tuples for word lists and rule tables

Issue messages are collected in one place so the reporting context (and tests)
can refer to them by name instead of copying strings.
"""

import re
from dataclasses import dataclass
from typing import NamedTuple

# =============================================================================
# BULLET PATTERNS
# =============================================================================


@dataclass(frozen=True)
class BulletPatterns:
    """
    Regex patterns for recognizing bullet-like lines.

    GLYPH_START and NUMBERED_* are tested against the trimmed line; the
    INDENTED_* patterns are tested against the raw line.
    """

    # •, - or * as first character
    GLYPH_START: re.Pattern = re.compile(r"^[•\-\*]")

    # Whitespace followed by a bullet glyph
    INDENTED_GLYPH: re.Pattern = re.compile(r"^\s+[•\-\*]")

    # "1." style numbering
    NUMBERED: re.Pattern = re.compile(r"^\s*\d+\.")

    # Four or more leading whitespace characters
    DEEP_INDENT: re.Pattern = re.compile(r"^\s{4,}")

    # "1 " or "1. " style numbering (clarity bullet detection)
    NUMBERED_LOOSE: re.Pattern = re.compile(r"^\s*\d+\.?\s+")

    # "a " or "a. " style lettering (clarity bullet detection)
    LETTERED: re.Pattern = re.compile(r"^\s*[a-z]\.?\s+", re.IGNORECASE)

    # Marker token: glyph or digit, optional . or :, trailing whitespace
    MARKER: re.Pattern = re.compile(r"^\s*([•\-\*\d][\.:]?\s*)")

    LEADING_WHITESPACE: re.Pattern = re.compile(r"^\s*")

    # Glyphs, digits and whitespace before the bullet text
    CLARITY_PREFIX: re.Pattern = re.compile(r"^[\s•\-\*\d]+\.?\s*")

    # Glyphs and whitespace only (numbers are kept for capitalization checks)
    GLYPH_PREFIX: re.Pattern = re.compile(r"^[•\-\*\s]+")


# =============================================================================
# DOCUMENT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DocumentPatterns:
    """Regex patterns applied to the whole resume text."""

    # Document should open with a word character after optional whitespace
    LEADING_WORD: re.Pattern = re.compile(r"^\s*\w")


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for finding and classifying dates.

    FIND scans left to right, so "01/02/2020" is consumed whole before the
    bare-year alternative can match its year.
    """

    FIND: re.Pattern = re.compile(
        r"\b\d{2}/\d{2}/\d{4}"
        r"|\b\d{4}"
        r"|\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* \d{4}\b"
    )

    NUMERIC: re.Pattern = re.compile(r"\d{2}/\d{2}/\d{4}")
    MONTH_YEAR: re.Pattern = re.compile(r"^[A-Za-z]+ \d{4}$")


DATE_FORMAT_NUMERIC = "MM/DD/YYYY"
DATE_FORMAT_MONTH_YEAR = "Month YYYY"
DATE_FORMAT_YEAR = "YYYY"

HEADING_STYLE_ALL_CAPS = "ALL_CAPS"
HEADING_STYLE_TITLE_CASE = "Title_Case"
HEADING_STYLE_OTHER = "Other"


# =============================================================================
# CLARITY WORD LISTS
# =============================================================================

ACTION_VERBS = (
    "Led",
    "Developed",
    "Created",
    "Managed",
    "Implemented",
    "Designed",
    "Improved",
    "Increased",
    "Reduced",
    "Achieved",
    "Built",
    "Launched",
    "Coordinated",
    "Established",
    "Generated",
    "Delivered",
    "Spearheaded",
    "Orchestrated",
    "Streamlined",
    "Transformed",
    "Collaborated",
    "Explored",
    "Rewrote",
    "Used",
    "Wrote",
    "Made",
    "Worked",
)

WEAK_PHRASES = (
    "helped",
    "assisted",
    "worked on",
    "responsible for",
    "duties included",
    "participated in",
    "was involved in",
    "took part in",
    "was responsible",
    "had to",
    "needed to",
    "tried to",
)

METRIC_UNITS = (
    "users",
    "customers",
    "people",
    "students",
    "clients",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
    "dollars",
    "pounds",
    "team members",
)


@dataclass(frozen=True)
class MetricPatterns:
    """Quantifiable achievement: percentage, multiplier, dollar amount, or count + unit."""

    METRIC: re.Pattern = re.compile(
        r"\d+%|\d+x|\$\d+|\d+\s*(?:" + "|".join(METRIC_UNITS) + r")",
        re.IGNORECASE,
    )


# =============================================================================
# GRAMMAR PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SentencePatterns:
    """Patterns for sentence-line selection and capitalization checks."""

    # "Senior Engineer..." style job titles are not sentences
    TITLE_LIKE: re.Pattern = re.compile(r"^[A-Z][a-z]+\s+[A-Z]")

    OTHER_TERMINAL: re.Pattern = re.compile(r"[!?;]$")
    TERMINAL: re.Pattern = re.compile(r"[.!?]$")
    CAPITALIZED_START: re.Pattern = re.compile(r'^[A-Z0-9"]')

    # Lowercase-initial terms that are correctly written that way
    LOWERCASE_EXCEPTIONS: re.Pattern = re.compile(
        r"^(?:iOS|iPhone|iPad|macOS|e-commerce|m-commerce)"
    )


# Minimum length for a content line to count as a sentence
MIN_SENTENCE_LENGTH = 20


class TextRule(NamedTuple):
    """A regex scanned over the full resume text and the issue it raises."""

    pattern: re.Pattern
    message: str


# =============================================================================
# ISSUE MESSAGES
# =============================================================================


@dataclass(frozen=True)
class FormattingMessages:
    BLANK_LINE_RUN: str = (
        "Inconsistent spacing between sections - use single line breaks for consistency"
    )
    BULLET_STYLE: str = "Inconsistent bullet point formatting - use the same style throughout"
    BULLET_ALIGNMENT: str = "Inconsistent bullet point alignment"
    MISSING_PERIODS: str = (
        "Some bullet points are missing ending periods - add periods to all for consistency"
    )
    REMOVE_PERIODS: str = (
        "Inconsistent bullet point endings - remove all ending periods for consistency"
    )
    LEADING_SPACING: str = "Inconsistent spacing at the beginning of sections"
    DATE_FORMATS: str = "Inconsistent date formatting across the resume"
    HEADING_STYLES: str = "Inconsistent section heading styles"


@dataclass(frozen=True)
class ClarityMessages:
    NO_BULLETS: str = (
        "Consider using bullet points to highlight key achievements and responsibilities"
    )
    ACTION_VERBS: str = "Consider starting achievement statements with strong action verbs"
    METRICS: str = "Add specific metrics or quantifiable achievements to demonstrate impact"
    WEAK_PHRASES: str = "Replace passive or weak phrases with strong, active verbs"


@dataclass(frozen=True)
class GrammarMessages:
    MIXED_ENDINGS: str = (
        "Inconsistent sentence endings - some lines end with periods while others don't"
    )
    OTHER_PUNCTUATION: str = (
        "Use consistent punctuation (periods recommended) for sentence endings"
    )
    CAPITALIZATION: str = "Start sentences with capital letters"
    MULTIPLE_SPACES: str = "Multiple consecutive spaces detected"
    REPEATED_PUNCTUATION: str = "Multiple consecutive punctuation marks detected"
    CONFUSED_WORDS: str = "Review usage of commonly confused words"
    CONJUNCTION_PUNCTUATION: str = "Incorrect punctuation with conjunctions"


# Mechanical checks scanned over the entire raw resume text
COMMON_MISTAKE_RULES = (
    TextRule(re.compile(r"\s\s+"), GrammarMessages.MULTIPLE_SPACES),
    TextRule(re.compile(r"[,\.]{2,}"), GrammarMessages.REPEATED_PUNCTUATION),
    TextRule(
        re.compile(r"\b(its|it's|their|there|they're|your|you're|whose|who's)\b", re.IGNORECASE),
        GrammarMessages.CONFUSED_WORDS,
    ),
    TextRule(
        re.compile(r"\b(and|but|or|nor|for|yet|so)\s*[,;]", re.IGNORECASE),
        GrammarMessages.CONJUNCTION_PUNCTUATION,
    ),
)
