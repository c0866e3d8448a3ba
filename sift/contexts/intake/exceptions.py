"""Custom exceptions for intake context."""

from pathlib import Path
from typing import Optional


class ResumeExtractionError(Exception):
    """
    Exception raised when resume text cannot be extracted from a source file.

    Attributes:
        message: Error description
        source_path: The file that failed to extract
        original_error: The original PDF library error
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"\nSource: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
