"""Predictive readiness: hire probability, x-factor and automation risk."""

import logging
import re

from models.schemas.resume_document import ExperienceEntry
from models.schemas.scan_context import ScanContext
from models.schemas.signals import PredictiveSignals
from services.signals.base import SignalSource
from services.signals.market_context import IndustryProfile, detect_industry, load_market_table
from services.signals.recruiter_appeal import STRONG_VERBS, WEAK_VERBS
from services.signals.text_checks import (
    LEADERSHIP_RE,
    METRICS_RE,
    find_words,
    has_employment_gap,
    latest_year,
)

logger = logging.getLogger(__name__)

BASE_HIRE_PROBABILITY = 65
DEFAULT_AUTOMATION_RISK = 0.3
MIN_AUTOMATION_RISK = 0.05
X_FACTOR_MAX = 30

# (words, points) for each x-factor indicator
X_FACTOR_INDICATORS: list[tuple[list[str], int]] = [
    (["founded", "launched", "built", "created", "established", "pioneered"], 15),
    (["patent", "published", "research", "innovative", "breakthrough", "award"], 10),
    (["million", "billion", "thousand", "enterprise", "global", "international"], 8),
    (["harvard", "stanford", "mit", "berkeley", "yale", "princeton"], 5),
]
STRONG_LANGUAGE_POINTS = 7
STRONG_LANGUAGE_RATIO = 0.7

MODERN_SKILL_HINTS = ["ai", "machine learning", "cloud", "automation", "python", "data science", "analytics"]
LEADERSHIP_SKILL_RE = re.compile(r"management|leadership|strategy|team", re.IGNORECASE)


def hire_probability(
    text: str,
    skills: list[str],
    experience: list[ExperienceEntry],
    reference_year: int | None,
) -> float:
    probability = BASE_HIRE_PROBABILITY
    if len(skills) >= 8:
        probability += 5
    elif len(skills) <= 3:
        probability -= 8
    if LEADERSHIP_RE.search(text):
        probability += 8
    if METRICS_RE.search(text):
        probability += 6
    if has_employment_gap(experience, latest_year(text, reference_year), reference_year):
        probability -= 10
    else:
        probability += 3
    return float(max(5, min(95, probability)))


def x_factor(text: str) -> float:
    score = sum(points for words, points in X_FACTOR_INDICATORS if find_words(text, words))
    strong = len(find_words(text, STRONG_VERBS))
    weak = len(find_words(text, WEAK_VERBS))
    if strong / max(1, strong + weak) > STRONG_LANGUAGE_RATIO:
        score += STRONG_LANGUAGE_POINTS
    return float(min(X_FACTOR_MAX, score))


def automation_risk(profile: IndustryProfile | None, skills: list[str]) -> float:
    base = profile.automation_risk if profile else DEFAULT_AUTOMATION_RISK
    modern = sum(1 for s in skills if find_words(s, MODERN_SKILL_HINTS))
    reduction = modern * 0.05
    if any(LEADERSHIP_SKILL_RE.search(s) for s in skills):
        reduction += 0.1
    return round(max(MIN_AUTOMATION_RISK, base - reduction), 2)


class PredictiveSource(SignalSource):
    group = "predictive_readiness"

    def __init__(self):
        self.table: dict[str, IndustryProfile] = {}

    def load(self) -> None:
        self.table = load_market_table()

    def produce(self, context: ScanContext) -> PredictiveSignals:
        text = context.resume_text
        skills = context.resume.skills
        industry, _ = detect_industry(f"{text} {context.job_text}", self.table)
        return PredictiveSignals(
            hire_probability=hire_probability(text, skills, context.resume.experience, context.reference_year),
            automation_risk=automation_risk(self.table.get(industry) if industry else None, skills),
            x_factor=x_factor(text),
        )
