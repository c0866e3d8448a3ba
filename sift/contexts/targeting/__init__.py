"""
Targeting Context

Responsibilities:
- Extracts comparable keywords from resume and job description text
- Classifies keywords as technical terms, soft skills or domain vocabulary
- Scores how well a resume covers a job description's keywords

Owns: Keyword vocabulary, job-fit scoring and keyword recommendations
Never: Inspects formatting or grammar
"""

from sift.contexts.targeting.job_fit import JobFitResult, analyze_job_fit
from sift.contexts.targeting.keywords import extract_keywords

__all__ = ["JobFitResult", "analyze_job_fit", "extract_keywords"]
