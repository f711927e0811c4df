"""Shape handed to the persistence layer after a scan."""

from datetime import datetime

from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from models.schemas.resume_document import ResumeDocument
from models.schemas.score_breakdown import ScoreBreakdown


class ScanRecord(BaseModel):
    id: str
    resume: ResumeDocument
    job_description: str = ""
    match: MatchResult
    score: ScoreBreakdown
    created_at: datetime
