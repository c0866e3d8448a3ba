"""
Job-fit scoring for the Targeting context.

Scores the share of job-description keywords that also appear in the resume.
Keywords are compared as raw lists: a keyword repeated in the job description
counts once per occurrence toward the score and appears once per occurrence in
missing_keywords. Issue lists elsewhere are deduplicated; this one deliberately
is not, so repeated requirements weigh more.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sift.contexts.targeting.keywords import extract_keywords, is_soft_skill, is_technical_term
from sift.contexts.targeting.logger import _log_debug, _log_warning


@dataclass(frozen=True)
class JobFitResult:
    """
    Keyword overlap between a resume and a job description.

    Attributes:
        score: Percentage of job keywords found in the resume (0-100, rounded half up)
        missing_keywords: Job keywords absent from the resume, repeats included
        recommendations: Grouped advice for the missing keywords (not serialized
            into the external report)
    """

    score: int
    missing_keywords: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def generate_recommendations(missing: Sequence[str]) -> List[str]:
    """
    Group missing keywords into technical, soft-skill and domain advice.

    Args:
        missing: Missing job keywords

    Returns:
        Up to three sentences, in technical / soft / domain order, omitting empty groups
    """
    technical = [kw for kw in missing if is_technical_term(kw)]
    soft = [kw for kw in missing if is_soft_skill(kw)]
    domain = [kw for kw in missing if not is_technical_term(kw) and not is_soft_skill(kw)]

    recommendations = []
    if technical:
        recommendations.append(f"Highlight experience with technical skills: {', '.join(technical)}")
    if soft:
        recommendations.append(f"Emphasize soft skills: {', '.join(soft)}")
    if domain:
        recommendations.append(f"Include domain-specific experience: {', '.join(domain)}")
    return recommendations


def analyze_job_fit(job_description: str, resume: str) -> JobFitResult:
    """
    Score keyword coverage of a job description by a resume.

    A job description with no extractable keywords scores 0 with nothing
    missing; there is nothing to match against, so nothing can be recommended.

    Args:
        job_description: Job description text
        resume: Full raw resume text

    Returns:
        JobFitResult with score, missing keywords and recommendations
    """
    job_keywords = extract_keywords(job_description)
    resume_keywords = set(extract_keywords(resume))

    if not job_keywords:
        _log_warning("Job description has no extractable keywords; scoring 0")
        return JobFitResult(score=0)

    matching = [kw for kw in job_keywords if kw in resume_keywords]
    missing = [kw for kw in job_keywords if kw not in resume_keywords]

    score = round_half_up(len(matching) / len(job_keywords) * 100)
    _log_debug(f"Job fit: {len(matching)}/{len(job_keywords)} keywords matched ({score}%)")

    return JobFitResult(
        score=score,
        missing_keywords=tuple(missing),
        recommendations=tuple(generate_recommendations(missing)),
    )
