from pydantic import BaseModel, ConfigDict

from models.schemas.match_result import MatchResult
from models.schemas.resume_document import JobDescription, ResumeDocument
from models.schemas.score_breakdown import ComponentScores, ScoreMeta
from models.schemas.verdict import Interpretation, TopFix


class HealthResponse(BaseModel):
    status: str = "ok"
    skills_loaded: int = 0


class ScanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: ResumeDocument
    job: JobDescription
    match: MatchResult
    overall: int = 0
    band: int = 0
    confidence: int = 0
    breakdown: ComponentScores = ComponentScores()
    meta: ScoreMeta = ScoreMeta()
    interpretation: Interpretation | None = None
    summary: str = ""
    top_fixes: list[TopFix] = []
    sources: dict[str, str] = {}  # group -> "ok" | "unavailable"
