"""Pydantic contracts shared by the extraction, signal and scoring stages."""

from models.schemas.match_result import MatchResult
from models.schemas.resume_document import EducationEntry, ExperienceEntry, JobDescription, ResumeDocument
from models.schemas.scan_context import FileMeta, ScanContext
from models.schemas.signals import SignalBundle, SignalResult
from models.schemas.score_breakdown import ComponentScores, ScoreBreakdown, ScoreMeta
from models.schemas.scan_record import ScanRecord
from models.schemas.verdict import Interpretation, TopFix, Verdict

__all__ = [
    "MatchResult",
    "EducationEntry",
    "ExperienceEntry",
    "JobDescription",
    "ResumeDocument",
    "FileMeta",
    "ScanContext",
    "SignalBundle",
    "SignalResult",
    "ComponentScores",
    "ScoreBreakdown",
    "ScoreMeta",
    "ScanRecord",
    "Interpretation",
    "TopFix",
    "Verdict",
]
