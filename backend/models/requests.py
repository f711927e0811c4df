from typing import Any

from pydantic import BaseModel, Field

from config import settings
from models.schemas.scan_context import FileMeta


class MatchRequest(BaseModel):
    resume_skills: list[str] = Field(default_factory=list, description="Skills found on the resume")
    job_skills: list[str] = Field(default_factory=list, description="Skills required by the job")


class TextMatchRequest(BaseModel):
    resume_text: str = Field(..., max_length=settings.max_resume_chars, description="Plain text resume content")
    job_description: str = Field(..., max_length=settings.max_job_description_chars, description="Job description text")


class ScanRequest(BaseModel):
    resume_text: str = Field(..., max_length=settings.max_resume_chars, description="Plain text resume content")
    job_description: str = Field("", max_length=settings.max_job_description_chars, description="Job description text")
    file_meta: FileMeta | None = None
    job_title: str | None = Field(None, max_length=200, description="Overrides the title parsed from the job description")
    reference_year: int | None = Field(None, ge=1900, le=2100, description="Year used as 'now' for gap checks")
    # Pre-computed signal groups; validated by the score engine
    signals: dict[str, Any] | None = None
