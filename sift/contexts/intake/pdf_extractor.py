"""
PDF text extraction for the Intake context.

Reads the first page of a resume PDF, groups characters into positioned words,
and rebuilds newline-preserving plain text for the segmenter. Positioned words
are kept so the reporting context can overlay highlights on a preview.

Multi-page documents are accepted but only page 1 is extracted.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from sift.contexts.intake.exceptions import ResumeExtractionError
from sift.contexts.intake.logger import _log_debug, _log_info, _log_warning
from sift.utils.pdf_processing import (
    cluster_by_y_tolerance,
    dedupe_words,
    group_line_into_words,
    page_count,
)


@dataclass(frozen=True)
class TextItem:
    """One grouped word on the page, in PDF points from the top-left corner."""

    text: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ParsedPdfContent:
    """
    Extracted first-page content of a resume PDF.

    Attributes:
        text: Plain text, one PDF line per text line, words joined by spaces
        items: Positioned words in reading order
        width: Page width in points
        height: Page height in points
        page_count: Total pages in the document (only the first is extracted)
    """

    text: str
    items: Tuple[TextItem, ...]
    width: float
    height: float
    page_count: int


def _page_words(chars: List[dict], y_tolerance: float, word_gap: float) -> List[List[dict]]:
    """Group page characters into lines of words, top to bottom."""
    lines = []
    for line_chars in cluster_by_y_tolerance(chars, tolerance=y_tolerance):
        words = group_line_into_words(line_chars, word_gap=word_gap)
        if words:
            lines.append(words)
    return lines


def extract_pdf_content(
    pdf_path: Union[str, Path],
    y_tolerance: float = 3.0,
    word_gap: float = 5.0,
) -> ParsedPdfContent:
    """
    Extract positioned words and plain text from page 1 of a PDF.

    Args:
        pdf_path: Path to the resume PDF
        y_tolerance: Max vertical distance (points) for characters on one line
        word_gap: Horizontal gap (points) that starts a new word

    Returns:
        ParsedPdfContent with text, word items and page dimensions

    Raises:
        FileNotFoundError: If pdf_path doesn't exist
        ResumeExtractionError: If the PDF can't be opened or has no pages
    """
    pdf_path = Path(pdf_path) if isinstance(pdf_path, str) else pdf_path
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    total_pages = page_count(pdf_path)
    if total_pages is None:
        raise ResumeExtractionError("Unable to read PDF", source_path=pdf_path)
    if total_pages > 1:
        _log_warning(f"{pdf_path.name} has {total_pages} pages; only page 1 is analyzed")

    try:
        with pdfplumber.open(pdf_path) as pdf:
            if not pdf.pages:
                raise ResumeExtractionError("PDF has no pages", source_path=pdf_path)
            page = pdf.pages[0]
            width, height = float(page.width), float(page.height)
            lines = _page_words(page.chars, y_tolerance, word_gap)
    except (PDFSyntaxError, PdfminerException) as e:
        raise ResumeExtractionError(
            "Unable to parse PDF", source_path=pdf_path, original_error=e
        ) from e

    words = dedupe_words([word for line in lines for word in line])
    kept = {id(word) for word in words}

    text_lines = []
    for line in lines:
        line_words = [word["text"] for word in line if id(word) in kept]
        if line_words:
            text_lines.append(" ".join(line_words))

    items = tuple(
        TextItem(
            text=word["text"],
            x=word["x"],
            y=word["y"],
            width=word["width"],
            height=word["height"],
        )
        for word in words
    )

    _log_info(f"Extracted {len(items)} words on {len(text_lines)} lines from {pdf_path.name}")
    _log_debug(f"Page size: {width} x {height}")

    return ParsedPdfContent(
        text="\n".join(text_lines),
        items=items,
        width=width,
        height=height,
        page_count=total_pages,
    )
