"""Skill-overlap result between a resume and a job description."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(0, ge=0, le=100)
    missing_skills: list[str] = Field(default_factory=list, alias="missingSkills")
    extra_skills: list[str] = Field(default_factory=list, alias="extraSkills")
