"""Composite score engine.

Combines the five signal groups into one 0-100 score:

    A  foundational          40
    B  skills relevancy      35
    C  recruiter appeal      10
    D  market context        10
    E  predictive readiness   5

Red flags are a direct point deduction applied once to the summed
components. When market data is missing, D is zero and A, B, C and E are
scaled up in proportion to their own weights so the ceiling stays at 100.
"""

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from models.schemas.score_breakdown import ComponentScores, ScoreBreakdown, ScoreMeta
from models.schemas.signals import (
    GROUP_MODELS,
    FoundationalSignals,
    MarketContextSignals,
    PredictiveSignals,
    RecruiterAppealSignals,
    SignalBundle,
    SkillsRelevancySignals,
)
from services.errors import MalformedSignalError
from services.match_scorer import round_half_up

logger = logging.getLogger(__name__)

WEIGHTS: dict[str, float] = {"A": 40, "B": 35, "C": 10, "D": 10, "E": 5}

# Group A point allocation (sums to 100)
FOUNDATIONAL_POINTS: dict[str, float] = {
    "email": 10,
    "phone": 10,
    "location": 5,
    "has_experience": 10,
    "has_education": 8,
    "has_skills": 8,
    "has_summary": 4,
    "dates_valid": 5,
    "file_type_ok": 5,
    "file_name_ok": 3,
    "linkedin": 4,
    "portfolio": 3,
}
WORD_COUNT_POINTS = {"optimal": 10, "acceptable": 5}
JOB_TITLE_POINTS = 15
FOUNDATIONAL_MAX_POINTS = (
    sum(FOUNDATIONAL_POINTS.values()) + WORD_COUNT_POINTS["optimal"] + JOB_TITLE_POINTS
)

WORD_COUNT_OPTIMAL = (400, 1200)
WORD_COUNT_ACCEPTABLE = (300, 1500)

# Group B
SKILLS_BASE = 6.0
HARD_SKILL_POINTS = 22.0
SOFT_SKILL_POINTS = 7.0
HIGH_VALUE_IMPACT = 2.0

# Group C
APPEAL_SCORE_POINTS = 8.0
AUTHORITY_POINTS = 2.0

# Group D
PERCENTILE_POINTS = 7.0
TRENDING_BONUS_MAX = 3.0
DECLINING_PENALTY_MAX = 3.0

# Group E
READINESS_POINTS = 4.0
X_FACTOR_POINTS = 1.0

RED_FLAG_POINTS: dict[str, float] = {"low": 1.0, "medium": 2.0, "high": 3.0}
RED_PENALTY_MAX = 5.0

MIN_BAND = 3

SIGNALS_TOTAL = sum(model.metrics_total() for model in GROUP_MODELS.values())


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round1(value: float) -> float:
    return round_half_up(value * 10) / 10


def word_count_status(word_count: int) -> str:
    """'optimal', 'acceptable' or 'poor'."""
    low, high = WORD_COUNT_OPTIMAL
    if low <= word_count <= high:
        return "optimal"
    low, high = WORD_COUNT_ACCEPTABLE
    if low <= word_count <= high:
        return "acceptable"
    return "poor"


def foundational_points(s: FoundationalSignals) -> float:
    """Points out of 100 for the checks that passed."""
    points = sum(pts for name, pts in FOUNDATIONAL_POINTS.items() if getattr(s, name))
    if s.word_count is not None:
        points += WORD_COUNT_POINTS.get(word_count_status(s.word_count), 0)
    if s.job_title_exact:
        points += JOB_TITLE_POINTS
    elif s.job_title_similarity is not None:
        points += s.job_title_similarity * JOB_TITLE_POINTS
    return points


def score_foundational(s: FoundationalSignals | None) -> float:
    if s is None:
        return 0.0
    return _clamp(foundational_points(s) / FOUNDATIONAL_MAX_POINTS * WEIGHTS["A"], 0, WEIGHTS["A"])


def hard_skill_coverage(s: SkillsRelevancySignals) -> float:
    """Share of required hard skills covered, transferable skills counting partially."""
    if s.required_count:
        # One credit per missing skill, however many skills transfer to it
        partial: dict[str, float] = {}
        for t in s.transferable or []:
            partial[t.towards] = max(partial.get(t.towards, 0.0), t.confidence)
        credited = (s.matched_count or 0) + sum(partial.values())
        return _clamp(credited / s.required_count, 0.0, 1.0)
    if s.match_score is not None:
        return s.match_score / 100
    return 0.0


def soft_skill_coverage(s: SkillsRelevancySignals) -> float:
    if s.soft_expected is None and s.soft_found is None:
        return 0.0
    if not s.soft_expected:
        return 1.0
    return _clamp((s.soft_found or 0) / s.soft_expected, 0.0, 1.0)


def missing_skill_penalty(s: SkillsRelevancySignals) -> float:
    """Sum of impact weights for missing high-value skills."""
    return sum(w for w in (s.impact_weights or {}).values() if w >= HIGH_VALUE_IMPACT)


def score_skills(s: SkillsRelevancySignals | None) -> float:
    if s is None:
        return 0.0
    value = (
        SKILLS_BASE
        + HARD_SKILL_POINTS * hard_skill_coverage(s)
        + SOFT_SKILL_POINTS * soft_skill_coverage(s)
        - missing_skill_penalty(s)
    )
    return _clamp(value, 0, WEIGHTS["B"])


def authority_ratio(s: RecruiterAppealSignals) -> float:
    strong = len(s.strong_verbs or [])
    weak = len(s.weak_verbs or [])
    if strong + weak == 0:
        return 0.0
    return strong / (strong + weak)


def score_recruiter_appeal(s: RecruiterAppealSignals | None) -> float:
    if s is None:
        return 0.0
    impression = ((s.first_impression or 0) + (s.narrative_coherence or 0)) / 2
    value = APPEAL_SCORE_POINTS * impression / 100 + AUTHORITY_POINTS * authority_ratio(s)
    return _clamp(value, 0, WEIGHTS["C"])


def red_flag_penalty(s: RecruiterAppealSignals | None) -> float:
    if s is None or not s.red_flags:
        return 0.0
    total = sum(RED_FLAG_POINTS[flag.severity] for flag in s.red_flags)
    return min(RED_PENALTY_MAX, total)


def score_market(s: MarketContextSignals | None) -> float:
    if s is None:
        return 0.0
    value = (
        PERCENTILE_POINTS * (s.percentile or 0) / 100
        + min(TRENDING_BONUS_MAX, len(s.trending_matches or []))
        - min(DECLINING_PENALTY_MAX, len(s.declining_matches or []))
    )
    return _clamp(value, 0, WEIGHTS["D"])


def score_predictive(s: PredictiveSignals | None) -> float:
    if s is None:
        return 0.0
    hire = (s.hire_probability or 0) / 100
    resistance = 1 - s.automation_risk if s.automation_risk is not None else 0.0
    value = READINESS_POINTS * (hire + resistance) / 2 + X_FACTOR_POINTS * (s.x_factor or 0) / 100
    return _clamp(value, 0, WEIGHTS["E"])


def coerce_group(name: str, value: Any) -> BaseModel | None:
    if name not in GROUP_MODELS:
        raise MalformedSignalError(name, "unknown signal group")
    if value is None:
        return None
    model = GROUP_MODELS[name]
    if isinstance(value, model):
        return value
    try:
        if isinstance(value, BaseModel):
            value = value.model_dump()
        return model.model_validate(value)
    except ValidationError as e:
        raise MalformedSignalError(name, str(e)) from e


def coerce_bundle(signals: SignalBundle | Mapping[str, Any]) -> SignalBundle:
    """Validate each group separately so errors name the offending group."""
    if isinstance(signals, SignalBundle):
        return signals
    if not isinstance(signals, Mapping):
        raise MalformedSignalError("bundle", f"expected a mapping, got {type(signals).__name__}")
    unknown = set(signals) - set(GROUP_MODELS)
    if unknown:
        raise MalformedSignalError(sorted(unknown)[0], "unknown signal group")
    return SignalBundle(**{
        name: coerce_group(name, signals.get(name)) for name in GROUP_MODELS
    })


def count_signals(bundle: SignalBundle) -> int:
    return sum(
        group.metrics_present()
        for group in (getattr(bundle, name) for name in GROUP_MODELS)
        if group is not None
    )


def band_for_confidence(confidence: float) -> int:
    """Uncertainty band in points; widens as confidence (0-1) drops."""
    return max(MIN_BAND, round_half_up((1 - confidence) * 10))


def compute_score(signals: SignalBundle | Mapping[str, Any]) -> ScoreBreakdown:
    """Turn the signal groups into a ScoreBreakdown.

    Missing groups contribute zero. A missing market group triggers
    reallocation. Raises MalformedSignalError for groups of the wrong shape.
    """
    bundle = coerce_bundle(signals)

    market_available = bundle.market_context is not None
    scale = 1.0
    if not market_available:
        scale = 100 / (100 - WEIGHTS["D"])
        logger.info("Market data unavailable, reallocating weight across A, B, C, E")

    a = score_foundational(bundle.foundational) * scale
    b = score_skills(bundle.skills_relevancy) * scale
    c = score_recruiter_appeal(bundle.recruiter_appeal) * scale
    d = score_market(bundle.market_context)
    e = score_predictive(bundle.predictive_readiness) * scale
    red_penalty = red_flag_penalty(bundle.recruiter_appeal)

    overall = round_half_up(_clamp(a + b + c + d + e - red_penalty, 0, 100))

    used = count_signals(bundle)
    confidence = used / SIGNALS_TOTAL

    return ScoreBreakdown(
        overall=int(_clamp(overall, 0, 100)),
        band=band_for_confidence(confidence),
        confidence=round_half_up(confidence * 100),
        breakdown=ComponentScores(
            A=_round1(a),
            B=_round1(b),
            C=_round1(c),
            D=_round1(d),
            E=_round1(e),
            red_penalty=_round1(red_penalty),
        ),
        meta=ScoreMeta(
            signals_used=used,
            signals_total=SIGNALS_TOTAL,
            market_data_available=market_available,
            reallocation_applied=not market_available,
        ),
    )
