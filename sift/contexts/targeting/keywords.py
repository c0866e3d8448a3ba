"""
Keyword vocabulary for job-fit scoring.

Keywords are plain lowercase tokens: no stemming, no phrases, no weighting.
The technical and soft-skill sets only drive how missing keywords are grouped
into recommendations; they never affect the score.
"""

import re
from typing import List

# Words too common to count as keywords (tokens of 1-2 characters are dropped anyway)
STOPWORDS = frozenset(
    {
        "and",
        "the",
        "or",
        "a",
        "an",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "from",
        "up",
        "about",
        "into",
        "over",
        "after",
    }
)

TECHNICAL_TERMS = frozenset(
    {
        "python",
        "java",
        "javascript",
        "react",
        "angular",
        "vue",
        "node",
        "aws",
        "azure",
        "docker",
        "kubernetes",
        "sql",
        "nosql",
        "mongodb",
        "api",
        "rest",
        "graphql",
        "ci/cd",
        "git",
        "agile",
        "scrum",
    }
)

SOFT_SKILLS = frozenset(
    {
        "leadership",
        "communication",
        "teamwork",
        "collaboration",
        "problem-solving",
        "analytical",
        "creative",
        "initiative",
        "organized",
        "detail-oriented",
    }
)

MIN_KEYWORD_LENGTH = 3

_TOKEN_SEPARATOR = re.compile(r"\W+")
_NUMERIC = re.compile(r"\d+")


def extract_keywords(text: str) -> List[str]:
    """
    Extract keyword tokens from free text.

    Lowercases, splits on runs of non-word characters, and keeps tokens of at
    least three characters that are neither stopwords nor purely numeric.

    Args:
        text: Resume or job description text

    Returns:
        Keywords in order of appearance, repeats included

    Example:
        >>> extract_keywords("Python, SQL and 5 years of Docker")
        ['python', 'sql', 'years', 'docker']
    """
    return [
        token
        for token in _TOKEN_SEPARATOR.split(text.lower())
        if len(token) >= MIN_KEYWORD_LENGTH
        and token not in STOPWORDS
        and not _NUMERIC.fullmatch(token)
    ]


def is_technical_term(word: str) -> bool:
    return word.lower() in TECHNICAL_TERMS


def is_soft_skill(word: str) -> bool:
    return word.lower() in SOFT_SKILLS
