"""
Pattern matching for resume section header identification.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# SECTION HEADER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderPatterns:
    """
    Regex patterns for detecting resume section headers.

    A header is either a line written entirely in capitals ("WORK EXPERIENCE")
    or a line starting with a well-known heading word in any case ("Skills").
    Both are tested against the trimmed line.
    """

    # At least two characters, capitals and whitespace only
    ALL_CAPS: re.Pattern = re.compile(r"^[A-Z][A-Z\s]+$")

    # Known heading word at start of line, case-insensitive
    KNOWN_HEADING: re.Pattern = re.compile(
        r"^(EDUCATION|EXPERIENCE|WORK|SKILLS?|PROJECTS?|ACHIEVEMENTS?|INTERESTS?"
        r"|SUMMARY|OBJECTIVE|QUALIFICATIONS)",
        re.IGNORECASE,
    )


# =============================================================================
# RELEVANT SECTION TARGETS
# =============================================================================

# Sections whose bullets and sentences the clarity/grammar analyzers inspect
RELEVANT_SECTIONS = (
    "EXPERIENCE",
    "WORK EXPERIENCE",
    "SELECTED ACHIEVEMENTS",
    "PROJECTS",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_section_header(line: str) -> bool:
    """
    Check whether a raw resume line starts a new section.

    Args:
        line: Untrimmed line of resume text

    Returns:
        True if the trimmed line is non-empty, looks like a heading, and the
        raw line is not indented with a space
    """
    trimmed = line.strip()
    if not trimmed or line.startswith(" "):
        return False

    return bool(
        SectionHeaderPatterns.ALL_CAPS.match(trimmed)
        or SectionHeaderPatterns.KNOWN_HEADING.match(trimmed)
    )


def section_matches_target(section_name: str, target: str) -> bool:
    """
    Check if a section key and a target name overlap by substring, either way.

    Case-sensitive: section keys are already uppercased by the segmenter.
    """
    return target in section_name or section_name in target
