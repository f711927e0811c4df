"""Recruiter appeal heuristics: first impression, narrative, language and red flags."""

import logging

from models.schemas.resume_document import ExperienceEntry
from models.schemas.scan_context import ScanContext
from models.schemas.signals import RecruiterAppealSignals, RedFlag
from services.signals.base import SignalSource
from services.signals.text_checks import (
    BULLET_RE,
    EMAIL_RE,
    METRICS_RE,
    PHONE_RE,
    SKILLS_HEADING_RE,
    find_words,
    has_employment_gap,
    latest_year,
    word_count,
)

logger = logging.getLogger(__name__)

STRONG_VERBS = [
    "led", "managed", "drove", "achieved", "built", "launched", "created",
    "developed", "improved", "increased", "optimized", "owned", "delivered",
]
WEAK_VERBS = [
    "helped", "assisted", "participated", "was responsible for", "worked on",
    "involved in", "contributed to",
]

SHORT_RESUME_WORDS = 300
LONG_RESUME_WORDS = 1500
JOB_HOPPING_MIN_ROLES = 3


def first_impression(text: str) -> tuple[float, list[RedFlag]]:
    """Six-second scan score (0-100) and the red flags it raised."""
    score = 70.0
    flags: list[RedFlag] = []

    if not EMAIL_RE.search(text):
        score -= 20
        flags.append(RedFlag(code="missing_contact", severity="high", message="Missing email address"))
    if not PHONE_RE.search(text):
        score -= 10

    words = word_count(text)
    if words < SHORT_RESUME_WORDS:
        score -= 15
    elif words > LONG_RESUME_WORDS:
        score -= 10
        flags.append(RedFlag(code="too_lengthy", severity="low", message="Resume may be too long"))

    if METRICS_RE.search(text):
        score += 10
    if SKILLS_HEADING_RE.search(text):
        score += 5
    return max(0.0, min(100.0, score)), flags


def narrative_coherence(text: str) -> float:
    score = 60.0
    if BULLET_RE.search(text):
        score += 10
    if METRICS_RE.search(text):
        score += 15
    if SKILLS_HEADING_RE.search(text):
        score += 10
    return max(0.0, min(100.0, score))


def is_job_hopping(experience: list[ExperienceEntry]) -> bool:
    """Three or more dated roles lasting under a year on average."""
    spans = [
        int(e.end_year) - int(e.start_year)
        for e in experience
        if e.start_year and e.end_year
    ]
    if len(spans) < JOB_HOPPING_MIN_ROLES:
        return False
    return sum(spans) / len(spans) < 1


class RecruiterAppealSource(SignalSource):
    group = "recruiter_appeal"

    def produce(self, context: ScanContext) -> RecruiterAppealSignals:
        text = context.resume_text
        impression, flags = first_impression(text)

        latest = latest_year(text, context.reference_year)
        if has_employment_gap(context.resume.experience, latest, context.reference_year):
            flags.append(RedFlag(
                code="employment_gap",
                severity="medium",
                message="Gap between roles or no recent dated activity",
            ))
            impression = max(0.0, impression - 15)

        if is_job_hopping(context.resume.experience):
            flags.append(RedFlag(code="job_hopping", severity="medium", message="Several short tenures"))

        return RecruiterAppealSignals(
            first_impression=impression,
            narrative_coherence=narrative_coherence(text),
            strong_verbs=find_words(text, STRONG_VERBS),
            weak_verbs=find_words(text, WEAK_VERBS),
            red_flags=flags,
        )
