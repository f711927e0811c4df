"""Foundational ATS checks: file, contact, sections, length, dates and title."""

import logging
import re

from rapidfuzz.distance import JaroWinkler

from models.schemas.scan_context import FileMeta, ScanContext
from models.schemas.signals import FoundationalSignals
from services.section_parser import detect_resume_sections
from services.signals.base import SignalSource
from services.signals.text_checks import EMAIL_RE, LOCATION_RE, PHONE_RE, word_count

logger = logging.getLogger(__name__)

FILE_TYPE_RE = re.compile(r"pdf|word|officedocument|text/plain", re.IGNORECASE)
FILE_NAME_BAD_CHARS_RE = re.compile(r"[^\w\-.]")
DATE_RE = re.compile(
    r"\b(?:19|20)\d{2}\b|\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s+\d{4}\b",
    re.IGNORECASE,
)
LINKEDIN_RE = re.compile(r"linkedin", re.IGNORECASE)
PORTFOLIO_RE = re.compile(
    r"portfolio|github\.com|behance|dribbble|personal\s+website|https?://[\w.-]+\.[a-z]{2,}",
    re.IGNORECASE,
)
_HEADING_RE = re.compile(r"^(?:education|experience|skills|summary|projects|certifications)", re.IGNORECASE)

TITLE_CANDIDATE_LINES = 10


def check_file_meta(file_meta: FileMeta | None) -> tuple[bool | None, bool | None]:
    """(file type ok, file name ok); both None without metadata."""
    if file_meta is None:
        return None, None
    type_ok = bool(FILE_TYPE_RE.search(file_meta.mime or ""))
    name_ok = bool(file_meta.filename) and not FILE_NAME_BAD_CHARS_RE.search(file_meta.filename)
    return type_ok, name_ok


def title_candidates(resume_text: str) -> list[str]:
    """Lines that could be a job title: capitalized, short, not a heading."""
    lines = [line.strip() for line in resume_text.split("\n")]
    candidates = [
        line for line in lines
        if 3 < len(line) < 100 and line[0].isupper() and not _HEADING_RE.match(line)
    ]
    return candidates[:TITLE_CANDIDATE_LINES]


def job_title_match(job_title: str, resume_text: str) -> tuple[bool, float]:
    """(exact, similarity 0-1) of the job title against the resume."""
    title = job_title.strip()
    if not title or not resume_text:
        return False, 0.0
    if re.search(rf"\b{re.escape(title)}\b", resume_text, re.IGNORECASE):
        return True, 1.0
    best = max(
        (JaroWinkler.normalized_similarity(title.lower(), line.lower()) for line in title_candidates(resume_text)),
        default=0.0,
    )
    return False, round(best, 2)


class FoundationalSource(SignalSource):
    group = "foundational"

    def produce(self, context: ScanContext) -> FoundationalSignals:
        text = context.resume_text
        sections = detect_resume_sections(text)
        file_type_ok, file_name_ok = check_file_meta(context.file_meta)

        title_exact: bool | None = None
        title_similarity: float | None = None
        if context.job.raw_text:
            title_exact, title_similarity = job_title_match(context.job.title, text)

        return FoundationalSignals(
            email=bool(EMAIL_RE.search(text)),
            phone=bool(PHONE_RE.search(text)),
            location=bool(LOCATION_RE.search(text)),
            has_experience=sections["experience"],
            has_education=sections["education"],
            has_skills=sections["skills"],
            has_summary=sections["summary"],
            word_count=word_count(text),
            dates_valid=bool(DATE_RE.search(text)),
            job_title_exact=title_exact,
            job_title_similarity=title_similarity,
            file_type_ok=file_type_ok,
            file_name_ok=file_name_ok,
            linkedin=bool(LINKEDIN_RE.search(text)),
            portfolio=bool(PORTFOLIO_RE.search(text)),
        )
