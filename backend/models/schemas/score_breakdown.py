"""Composite score output."""

from pydantic import BaseModel, ConfigDict, Field


class ComponentScores(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    A: float = 0.0
    B: float = 0.0
    C: float = 0.0
    D: float = 0.0
    E: float = 0.0
    red_penalty: float = Field(0.0, alias="redPenalty")


class ScoreMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    signals_used: int = Field(0, alias="signalsUsed")
    signals_total: int = Field(0, alias="signalsTotal")
    market_data_available: bool = Field(False, alias="marketDataAvailable")
    reallocation_applied: bool = Field(False, alias="reallocationApplied")


class ScoreBreakdown(BaseModel):
    """overall = clamp(A + B + C + D + E - redPenalty, 0, 100)."""
    overall: int = Field(0, ge=0, le=100)
    band: int = Field(0, ge=0)
    confidence: int = Field(0, ge=0, le=100)
    breakdown: ComponentScores = ComponentScores()
    meta: ScoreMeta = ScoreMeta()
