"""
Intake Context

Responsibilities:
- Extracts newline-preserving resume text from PDF uploads (first page only)
- Segments raw resume text into named sections using header heuristics
- Selects the experience-like sections the inspection analyzers target

Owns: Resume text ingestion and section segmentation
Never: Judges resume quality or scores job fit
"""
