"""
Inspection Context

Responsibilities:
- Detects formatting inconsistencies (spacing, bullets, dates, headings)
- Flags unclear achievement statements (action verbs, metrics, weak phrases)
- Flags grammar and punctuation problems with regex heuristics

Owns: Rule tables and the three issue analyzers
Never: Parses PDFs, segments text, or scores job fit
"""

from sift.contexts.inspection.clarity import analyze_clarity
from sift.contexts.inspection.formatting import check_formatting
from sift.contexts.inspection.grammar import check_grammar

__all__ = ["analyze_clarity", "check_formatting", "check_grammar"]
