"""Inputs shared by every signal source for one scan."""

from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from models.schemas.resume_document import JobDescription, ResumeDocument


class FileMeta(BaseModel):
    filename: str = "resume.txt"
    mime: str = "text/plain"


class ScanContext(BaseModel):
    resume: ResumeDocument
    job: JobDescription
    match: MatchResult
    file_meta: FileMeta | None = None
    reference_year: int | None = None  # "current" year for gap checks

    @property
    def resume_text(self) -> str:
        return self.resume.raw_text

    @property
    def job_text(self) -> str:
        return self.job.raw_text
