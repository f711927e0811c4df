"""User-facing reading of a ScoreBreakdown."""

from pydantic import BaseModel


class Interpretation(BaseModel):
    level: str
    description: str


class TopFix(BaseModel):
    component: str
    score: float
    max_score: float
    impact: float  # points recoverable
    description: str


class Verdict(BaseModel):
    interpretation: Interpretation
    top_fixes: list[TopFix] = []
    summary: str = ""
