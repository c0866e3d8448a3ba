"""
Grammar analyzer for the Inspection context.

Sentence-level checks look only at experience-like sections; mechanical checks
(spacing, repeated punctuation, confused words, conjunction punctuation) scan
the whole resume through COMMON_MISTAKE_RULES. The confused-words rule is a
reminder, not a correctness check: any occurrence of "its", "their", etc.
raises it.
"""

from typing import Dict, List, Tuple

from sift.contexts.inspection.bullets import strip_bullet_glyphs
from sift.contexts.inspection.logger import log_analyzer_summary, log_rule_triggered
from sift.contexts.inspection.patterns import (
    COMMON_MISTAKE_RULES,
    MIN_SENTENCE_LENGTH,
    GrammarMessages,
    SentencePatterns,
)
from sift.contexts.intake.segmenter import find_relevant_sections


def collect_content_lines(sections: Dict[str, str]) -> List[str]:
    """Trimmed, non-empty lines of every experience-like section."""
    lines = []
    for body in find_relevant_sections(sections):
        lines.extend(line.strip() for line in body.split("\n") if line.strip())
    return lines


def is_sentence_line(line: str) -> bool:
    """Long enough, no label colon, and not shaped like a job title."""
    return (
        len(line) > MIN_SENTENCE_LENGTH
        and ":" not in line
        and not SentencePatterns.TITLE_LIKE.match(line)
    )


def check_sentence_endings(lines: List[str]) -> List[str]:
    """Flag mixed period endings and non-period terminal punctuation."""
    sentences = [line for line in lines if is_sentence_line(line)]
    if not sentences:
        return []

    issues = []
    with_periods = sum(1 for line in sentences if line.endswith("."))
    if 0 < with_periods < len(sentences):
        issues.append(GrammarMessages.MIXED_ENDINGS)

    if any(SentencePatterns.OTHER_TERMINAL.search(line) for line in sentences):
        issues.append(GrammarMessages.OTHER_PUNCTUATION)

    return issues


def needs_capital(line: str) -> bool:
    """
    Check if a punctuated sentence starts lowercase.

    Bullet glyphs are ignored; terms like "iOS" and "e-commerce" are allowed.
    """
    clean = strip_bullet_glyphs(line)
    return bool(
        clean
        and SentencePatterns.TERMINAL.search(clean)
        and not SentencePatterns.CAPITALIZED_START.match(clean)
        and not SentencePatterns.LOWERCASE_EXCEPTIONS.match(clean)
    )


def check_common_mistakes(resume: str) -> List[str]:
    """Messages for every mechanical rule that matches anywhere in the resume."""
    return [rule.message for rule in COMMON_MISTAKE_RULES if rule.pattern.search(resume)]


def check_grammar(resume: str, sections: Dict[str, str]) -> Tuple[str, ...]:
    """
    Flag grammar and punctuation problems.

    Args:
        resume: Full raw resume text
        sections: Section map from parse_resume_sections()

    Returns:
        Tuple of distinct grammar issue messages
    """
    lines = collect_content_lines(sections)
    issues = check_sentence_endings(lines)

    for line in lines:
        if needs_capital(line):
            log_rule_triggered("grammar", GrammarMessages.CAPITALIZATION, sample=line)
            issues.append(GrammarMessages.CAPITALIZATION)

    for message in check_common_mistakes(resume):
        log_rule_triggered("grammar", message)
        issues.append(message)

    unique = tuple(dict.fromkeys(issues))
    log_analyzer_summary("grammar", unique)
    return unique
