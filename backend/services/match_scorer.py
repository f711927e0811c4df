"""Skill-set overlap scoring."""

import math
from typing import Iterable

from models.schemas.match_result import MatchResult


def _by_key(skills: Iterable[str]) -> dict[str, str]:
    """Map lowercase key -> first spelling seen, skipping blanks."""
    keyed: dict[str, str] = {}
    for skill in skills:
        if not skill or not skill.strip():
            continue
        keyed.setdefault(skill.strip().lower(), skill.strip())
    return keyed


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_match_score(
    resume_skills: Iterable[str], job_skills: Iterable[str]
) -> MatchResult:
    """Compare two skill lists case-insensitively.

    score is the share of job skills present in the resume (0-100).
    Returned lists keep the caller's spelling and are sorted.
    """
    resume = _by_key(resume_skills)
    job = _by_key(job_skills)

    if not job:
        return MatchResult(score=0, missing_skills=[], extra_skills=sorted(resume.values()))

    matched = job.keys() & resume.keys()
    missing = sorted(job[k] for k in job.keys() - resume.keys())
    extra = sorted(resume[k] for k in resume.keys() - job.keys())

    score = round_half_up(len(matched) / len(job) * 100)
    return MatchResult(
        score=max(0, min(100, score)),
        missing_skills=missing,
        extra_skills=extra,
    )
