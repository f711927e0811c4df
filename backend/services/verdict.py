"""Template-based verdict: score interpretation, top fixes and summary.

No model involved; everything is derived from the ScoreBreakdown and the
match result.
"""

import logging

from models.schemas.match_result import MatchResult
from models.schemas.score_breakdown import ScoreBreakdown
from models.schemas.verdict import Interpretation, TopFix, Verdict
from services.score_engine import WEIGHTS

logger = logging.getLogger(__name__)

# (minimum score, level, description), checked top-down
INTERPRETATION_LEVELS: list[tuple[int, str, str]] = [
    (90, "Exceptional", "Outstanding ATS optimization with excellent recruiter appeal"),
    (80, "Strong", "Well-optimized resume with good ATS compatibility"),
    (70, "Good", "Solid foundation with some optimization opportunities"),
    (60, "Fair", "Basic ATS compatibility with significant improvement potential"),
    (0, "Needs Work", "Major optimization needed for ATS and recruiter success"),
]

COMPONENT_FIXES: dict[str, str] = {
    "A": "Improve file format, contact details, section headings and job title alignment",
    "B": "Add the job's required hard skills you genuinely have",
    "C": "Lead bullets with strong action verbs and quantified results",
    "D": "Highlight skills that are trending in your industry",
    "E": "Show leadership, scale and forward-looking skills",
}

SUBOPTIMAL_RATIO = 0.8
MAX_FIXES = 3


def interpret_score(score: int) -> Interpretation:
    for threshold, level, description in INTERPRETATION_LEVELS:
        if score >= threshold:
            return Interpretation(level=level, description=description)
    # Negative scores cannot occur; keep the lowest level as a floor
    _, level, description = INTERPRETATION_LEVELS[-1]
    return Interpretation(level=level, description=description)


def top_fixes(result: ScoreBreakdown) -> list[TopFix]:
    """Up to three components furthest below their maximum."""
    scale = 1.0
    if result.meta.reallocation_applied:
        scale = 100 / (100 - WEIGHTS["D"])

    fixes = []
    for component, description in COMPONENT_FIXES.items():
        if component == "D" and not result.meta.market_data_available:
            continue
        max_score = WEIGHTS[component] * (1.0 if component == "D" else scale)
        score = getattr(result.breakdown, component)
        if score >= SUBOPTIMAL_RATIO * max_score:
            continue
        fixes.append(TopFix(
            component=component,
            score=score,
            max_score=round(max_score, 1),
            impact=round(max_score - score, 1),
            description=description,
        ))

    fixes.sort(key=lambda f: (-f.impact, f.component))
    return fixes[:MAX_FIXES]


def _build_summary(result: ScoreBreakdown, match: MatchResult | None) -> str:
    parts = [f"Overall score: {result.overall}/100 (±{result.band}, {result.confidence}% confidence)."]
    if match is not None:
        if match.missing_skills:
            shown = ", ".join(match.missing_skills[:5])
            parts.append(f"Skill match {match.score}%; missing: {shown}.")
        else:
            parts.append(f"Skill match {match.score}%.")
    if result.breakdown.red_penalty:
        parts.append(f"Red flags cost {result.breakdown.red_penalty:g} points.")
    if result.meta.reallocation_applied:
        parts.append("Market data was unavailable; its weight was spread across the other components.")
    return " ".join(parts)


def build_verdict(result: ScoreBreakdown, match: MatchResult | None = None) -> Verdict:
    return Verdict(
        interpretation=interpret_score(result.overall),
        top_fixes=top_fixes(result),
        summary=_build_summary(result, match),
    )
