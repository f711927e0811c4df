"""Structured fields extracted from resume and job-description text."""

from pydantic import BaseModel


class EducationEntry(BaseModel):
    degree: str = "Not specified"
    school: str = "Not specified"
    year: str = ""


class ExperienceEntry(BaseModel):
    title: str = "Not specified"
    company: str = "Not specified"
    start_year: str = ""
    end_year: str = ""
    description: str = ""


class ResumeDocument(BaseModel):
    """Parsed resume. `skills` is always sorted, deduplicated and lowercase."""
    raw_text: str = ""
    name: str = "Unknown"
    email: str = ""
    phone: str = ""
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    skills: list[str] = []


class JobDescription(BaseModel):
    raw_text: str = ""
    title: str = "Position"
    skills: list[str] = []
