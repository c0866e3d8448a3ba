"""
Bullet line detection and normalization shared by the inspection analyzers.

Two detectors exist because the analyzers look for different things:
formatting checks count deeply indented plain lines as bullets (for
alignment), while clarity checks also accept lettered lists.
"""

from typing import Iterable, List

from sift.contexts.inspection.patterns import BulletPatterns


def is_formatting_bullet(line: str) -> bool:
    """
    Check if a raw line is bullet-like for formatting consistency checks.

    Matches glyph bullets (indented or not), "1." numbering, and any line
    indented by four or more whitespace characters.
    """
    trimmed = line.strip()
    return bool(
        BulletPatterns.GLYPH_START.match(trimmed)
        or BulletPatterns.INDENTED_GLYPH.match(line)
        or BulletPatterns.NUMBERED.match(trimmed)
        or BulletPatterns.DEEP_INDENT.match(line)
    )


def is_clarity_bullet(line: str) -> bool:
    """
    Check if a raw line is an achievement bullet for clarity checks.

    Matches glyph bullets (indented or not), "1"/"1." numbering and
    "a"/"a." lettering followed by whitespace.
    """
    trimmed = line.strip()
    return bool(
        BulletPatterns.GLYPH_START.match(trimmed)
        or BulletPatterns.INDENTED_GLYPH.match(line)
        or BulletPatterns.NUMBERED_LOOSE.match(trimmed)
        or BulletPatterns.LETTERED.match(trimmed)
    )


def collect_lines(bodies: Iterable[str]) -> List[str]:
    """Split section bodies into raw lines, keeping the empty tail of each body."""
    return [line for body in bodies for line in body.split("\n")]


def bullet_marker(line: str) -> str:
    """
    Leading marker token of a bullet line, e.g. "• ", "- ", "1. ".

    Returns an empty string for lines without a glyph or digit marker.
    """
    match = BulletPatterns.MARKER.match(line)
    return match.group(1) if match else ""


def indentation_width(line: str) -> int:
    """Number of leading whitespace characters."""
    return len(BulletPatterns.LEADING_WHITESPACE.match(line).group(0))


def strip_bullet_prefix(line: str) -> str:
    """Remove glyphs, numbers and whitespace before the bullet text."""
    return BulletPatterns.CLARITY_PREFIX.sub("", line, count=1).strip()


def strip_bullet_glyphs(line: str) -> str:
    """Remove leading glyphs and whitespace, keeping numbers."""
    return BulletPatterns.GLYPH_PREFIX.sub("", line, count=1).strip()
