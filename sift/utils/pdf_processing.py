"""
PDF processing helpers for character grouping.

Helper functions:
    page_count: Quick page count without full extraction.
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
    group_line_into_words: Split one clustered line of characters into words.
    dedupe_words: Drop repeated words rendered at the same position.

Characters are pdfplumber char dicts (keys: text, x0, x1, top, bottom, height).
Words are plain dicts with text, x, y, width and height, where y is the distance
from the top of the page to the bottom of the glyphs.
"""

from pathlib import Path
from typing import Dict, List, Optional

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """
    Get page count from PDF, or None if unreadable.

    Malformed files can fail inside PyPDF2 with KeyError, TypeError or
    AttributeError rather than PdfReadError, so those count as unreadable too.
    """
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (PdfReadError, OSError, ValueError, KeyError, TypeError, AttributeError):
        return None


def cluster_by_y_tolerance(chars: List[Dict], tolerance: float = 3.0) -> List[List[Dict]]:
    """
    Group characters into lines by Y-coordinate proximity.

    Handles baseline shifts between bold/regular text that would otherwise split lines.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: c["top"])

    lines = []
    current_line = [sorted_chars[0]]
    current_y = sorted_chars[0]["top"]

    for char in sorted_chars[1:]:
        if abs(char["top"] - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = char["top"]

    if current_line:
        lines.append(current_line)

    return lines


def _char_height(char: Dict) -> float:
    return char.get("height") or (char["bottom"] - char["top"]) or 12.0


def group_line_into_words(line_chars: List[Dict], word_gap: float = 5.0) -> List[Dict]:
    """
    Split a single line of characters into positioned words.

    A word ends at a whitespace character or when the next character starts more
    than word_gap points to the right of the current word's right edge.

    Args:
        line_chars: Characters already clustered onto one line
        word_gap: Horizontal gap (points) that starts a new word

    Returns:
        List of word dicts in left-to-right order
    """
    words = []
    current = None

    for char in sorted(line_chars, key=lambda c: c["x0"]):
        text = char["text"]

        if current is not None and (
            not text.strip() or char["x0"] - (current["x"] + current["width"]) > word_gap
        ):
            words.append(current)
            current = None

        if not text.strip():
            continue

        if current is None:
            current = {
                "text": text,
                "x": char["x0"],
                "y": char["bottom"],
                "width": char["x1"] - char["x0"],
                "height": _char_height(char),
            }
        else:
            current["text"] += text
            current["width"] = char["x1"] - current["x"]
            current["height"] = max(current["height"], _char_height(char))

    if current is not None:
        words.append(current)

    return words


def dedupe_words(words: List[Dict], tolerance: float = 2.0) -> List[Dict]:
    """Keep the first of any words with identical text within tolerance points of each other."""
    kept: List[Dict] = []
    for word in words:
        duplicate = any(
            other["text"] == word["text"]
            and abs(other["x"] - word["x"]) < tolerance
            and abs(other["y"] - word["y"]) < tolerance
            for other in kept
        )
        if not duplicate:
            kept.append(word)
    return kept
