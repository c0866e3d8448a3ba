"""
Resume section segmentation for the Intake context.

Splits plain resume text into a section map keyed by uppercased heading.
This module knows nothing about resume quality; the inspection analyzers
consume the section map it returns.
"""

from typing import Dict, Iterable, List

from sift.contexts.intake.logger import _log_debug
from sift.contexts.intake.section_patterns import (
    RELEVANT_SECTIONS,
    is_section_header,
    section_matches_target,
)


def parse_resume_sections(text: str) -> Dict[str, str]:
    """
    Segment resume text into sections in a single pass.

    Section headers are detected by is_section_header(). Each header starts a
    new section keyed by the trimmed, uppercased heading; a repeated heading
    replaces the earlier section's body. Non-empty lines after a header are
    appended raw (indentation kept) with a trailing newline. Blank lines and
    lines before the first header are dropped.

    Args:
        text: Plain resume text, newline-separated

    Returns:
        Dict mapping heading (e.g., "EXPERIENCE") to its raw body text
    """
    sections: Dict[str, str] = {}
    current_section = None

    for line in text.split("\n"):
        if is_section_header(line):
            current_section = line.strip().upper()
            sections[current_section] = ""
            _log_debug(f"Found section: {current_section}")
        elif current_section is not None and line.strip():
            sections[current_section] += line + "\n"

    _log_debug(f"Found sections: {list(sections.keys())}")
    return sections


def find_relevant_sections(
    sections: Dict[str, str], targets: Iterable[str] = RELEVANT_SECTIONS
) -> List[str]:
    """
    Collect the bodies of sections matching each target name.

    For every target, the first section whose key contains the target (or is
    contained in it) is selected. A section matching two targets is returned
    twice, once per target.

    Args:
        sections: Section map from parse_resume_sections()
        targets: Target section names, in lookup order

    Returns:
        List of matched section bodies in target order
    """
    bodies = []

    for target in targets:
        match = next(
            (
                body
                for name, body in sections.items()
                if section_matches_target(name, target)
            ),
            None,
        )
        if match is not None:
            _log_debug(f"Section matching '{target}' selected")
            bodies.append(match)

    return bodies
