"""
SIFT - Screening Inspector for Formatting and Text

A heuristic resume reviewer that segments plain resume text into sections and
reports formatting, clarity, grammar and job-fit issues.

Architecture:
- Intake Context: PDF text extraction and section segmentation
- Inspection Context: Rule-based formatting, clarity and grammar analyzers
- Targeting Context: Keyword extraction and job-fit scoring
- Reporting Context: Report assembly, highlights and rendering
"""

from loguru import logger

__version__ = "0.1.0"

# Library code stays quiet until a script opts in through setup_logger().
logger.disable("sift")
