"""Signal groups consumed by the composite score engine.

Every sub-metric is optional: None means the producer could not compute
it, which lowers confidence but never fails the scan. Unknown keys and
out-of-range values are rejected as malformed.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SignalStatus = Literal["ok", "unavailable"]
Severity = Literal["low", "medium", "high"]


class _SignalGroup(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def metrics_present(self) -> int:
        """Number of sub-metrics that carry a value."""
        return sum(1 for name in type(self).model_fields if getattr(self, name) is not None)

    @classmethod
    def metrics_total(cls) -> int:
        return len(cls.model_fields)


class FoundationalSignals(_SignalGroup):
    """Group A: parseability and searchability checks."""
    email: bool | None = None
    phone: bool | None = None
    location: bool | None = None
    has_experience: bool | None = None
    has_education: bool | None = None
    has_skills: bool | None = None
    has_summary: bool | None = None
    word_count: int | None = Field(None, ge=0)
    dates_valid: bool | None = None
    job_title_exact: bool | None = None
    job_title_similarity: float | None = Field(None, ge=0.0, le=1.0)
    file_type_ok: bool | None = None
    file_name_ok: bool | None = None
    linkedin: bool | None = None
    portfolio: bool | None = None


class TransferableSkill(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    towards: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class SkillsRelevancySignals(_SignalGroup):
    """Group B: how well the resume skills cover the job's skills."""
    match_score: int | None = Field(None, ge=0, le=100)
    required_count: int | None = Field(None, ge=0)
    matched_count: int | None = Field(None, ge=0)
    soft_expected: int | None = Field(None, ge=0)
    soft_found: int | None = Field(None, ge=0)
    transferable: list[TransferableSkill] | None = None
    impact_weights: dict[str, float] | None = None


class RedFlag(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: str
    severity: Severity = "medium"
    message: str = ""


class RecruiterAppealSignals(_SignalGroup):
    """Group C: first impression, narrative and language strength."""
    first_impression: float | None = Field(None, ge=0, le=100)
    narrative_coherence: float | None = Field(None, ge=0, le=100)
    strong_verbs: list[str] | None = None
    weak_verbs: list[str] | None = None
    red_flags: list[RedFlag] | None = None


class MarketContextSignals(_SignalGroup):
    """Group D: market positioning for the detected industry."""
    industry: str | None = None
    percentile: float | None = Field(None, ge=0, le=100)
    trending_matches: list[str] | None = None
    declining_matches: list[str] | None = None


class PredictiveSignals(_SignalGroup):
    """Group E: forward-looking estimates."""
    hire_probability: float | None = Field(None, ge=0, le=100)
    automation_risk: float | None = Field(None, ge=0.0, le=1.0)
    x_factor: float | None = Field(None, ge=0, le=100)


GROUP_MODELS: dict[str, type[_SignalGroup]] = {
    "foundational": FoundationalSignals,
    "skills_relevancy": SkillsRelevancySignals,
    "recruiter_appeal": RecruiterAppealSignals,
    "market_context": MarketContextSignals,
    "predictive_readiness": PredictiveSignals,
}


class SignalResult(BaseModel):
    """Outcome of one signal source, tagged ok or unavailable."""
    group: str
    status: SignalStatus = "ok"
    value: _SignalGroup | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "ok" and self.value is not None


class SignalBundle(BaseModel):
    """The five groups handed to the score engine. None = unavailable."""
    foundational: FoundationalSignals | None = None
    skills_relevancy: SkillsRelevancySignals | None = None
    recruiter_appeal: RecruiterAppealSignals | None = None
    market_context: MarketContextSignals | None = None
    predictive_readiness: PredictiveSignals | None = None
