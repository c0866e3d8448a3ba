"""
Reporting Context

Responsibilities:
- Assembles analyzer output into an immutable AnalysisReport with suggestions
- Correlates extracted PDF words with issues for preview highlighting
- Renders reports as console text, Markdown or JSON-ready dicts

Owns: Report structure, suggestion wording and presentation formats
Never: Runs analyzers or reads resume files
"""

from sift.contexts.reporting.report import AnalysisReport, apply_positive_feedback, assemble_report

__all__ = ["AnalysisReport", "apply_positive_feedback", "assemble_report"]
