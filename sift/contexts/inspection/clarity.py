"""
Clarity analyzer for the Inspection context.

Looks at achievement bullets in experience-like sections and flags statements
that don't open with a strong verb, lack a measurable result, or lean on weak
phrasing. Messages are deduplicated, so the result says *what kind* of problem
exists, not how many bullets have it.
"""

from typing import Dict, List, Optional, Tuple

from sift.contexts.inspection.bullets import collect_lines, is_clarity_bullet, strip_bullet_prefix
from sift.contexts.inspection.logger import log_analyzer_summary, log_rule_triggered
from sift.contexts.inspection.patterns import (
    ACTION_VERBS,
    WEAK_PHRASES,
    ClarityMessages,
    MetricPatterns,
)
from sift.contexts.intake.segmenter import find_relevant_sections

DEFAULT_MIN_BULLET_LENGTH = 5

_ACTION_VERB_PREFIXES = tuple(verb.lower() for verb in ACTION_VERBS)


def starts_with_action_verb(text: str) -> bool:
    return text.lower().startswith(_ACTION_VERB_PREFIXES)


def has_metric(text: str) -> bool:
    return MetricPatterns.METRIC.search(text) is not None


def contains_weak_phrase(text: str) -> bool:
    lowered = text.lower()
    return any(phrase in lowered for phrase in WEAK_PHRASES)


def collect_achievement_bullets(sections: Dict[str, str]) -> List[str]:
    """Raw bullet lines from every experience-like section, in target order."""
    lines = collect_lines(find_relevant_sections(sections))
    return [line for line in lines if is_clarity_bullet(line)]


def check_bullet(text: str) -> List[str]:
    """
    Run the three clarity checks on one stripped bullet.

    Returns:
        Messages for every check the bullet fails (possibly empty)
    """
    issues = []
    if not starts_with_action_verb(text):
        issues.append(ClarityMessages.ACTION_VERBS)
    if not has_metric(text):
        issues.append(ClarityMessages.METRICS)
    if contains_weak_phrase(text):
        issues.append(ClarityMessages.WEAK_PHRASES)
    return issues


def analyze_clarity(
    sections: Dict[str, str],
    min_bullet_length: Optional[int] = None,
) -> Tuple[str, ...]:
    """
    Flag unclear achievement statements in experience-like sections.

    When no bullets exist at all, the only advice is to start using them.

    Args:
        sections: Section map from parse_resume_sections()
        min_bullet_length: Stripped bullets shorter than this are skipped

    Returns:
        Tuple of distinct clarity issue messages
    """
    if min_bullet_length is None:
        min_bullet_length = DEFAULT_MIN_BULLET_LENGTH

    bullets = collect_achievement_bullets(sections)
    if not bullets:
        log_rule_triggered("clarity", ClarityMessages.NO_BULLETS)
        return (ClarityMessages.NO_BULLETS,)

    issues: List[str] = []
    for bullet in bullets:
        text = strip_bullet_prefix(bullet)
        if len(text) < min_bullet_length:
            continue

        for message in check_bullet(text):
            log_rule_triggered("clarity", message, sample=text)
            issues.append(message)

    unique = tuple(dict.fromkeys(issues))
    log_analyzer_summary("clarity", unique)
    return unique
