"""Regex checks shared by the heuristic signal sources."""

import re

from models.schemas.resume_document import ExperienceEntry
from services.field_extractor import EMAIL_RE, PHONE_RE

LOCATION_RE = re.compile(r"\b(?:USA|United States|Remote)\b|\b[A-Z][a-zA-Z]+,\s?[A-Z]{2}\b")
METRICS_RE = re.compile(r"\d+%|\$\d+|\bincreased\b|\bdecreased\b|\bimproved by\b", re.IGNORECASE)
LEADERSHIP_RE = re.compile(r"\b(?:led|managed|directed|supervised|mentored)\b", re.IGNORECASE)
BULLET_RE = re.compile(r"^\s*(?:[•\-*▪◦]|\d+\.)\s", re.MULTILINE)
SKILLS_HEADING_RE = re.compile(r"\b(?:skills|competencies|technical)\b", re.IGNORECASE)
RECENT_YEAR_RE = re.compile(r"\b20\d{2}\b")
ONGOING_RE = re.compile(r"\b(?:present|current)\b", re.IGNORECASE)

# Whole years allowed between one role ending and the next starting
MAX_ROLE_GAP = 1

__all__ = [
    "EMAIL_RE",
    "PHONE_RE",
    "LOCATION_RE",
    "METRICS_RE",
    "LEADERSHIP_RE",
    "BULLET_RE",
    "SKILLS_HEADING_RE",
    "word_count",
    "contains_word",
    "find_words",
    "mentioned_years",
    "latest_year",
    "has_employment_gap",
]


def word_count(text: str) -> int:
    return len(text.split())


def contains_word(text: str, word: str) -> bool:
    return re.search(rf"\b{re.escape(word)}\b", text, re.IGNORECASE) is not None


def find_words(text: str, words: list[str]) -> list[str]:
    """Words from the list that appear in text, in list order."""
    return [w for w in words if contains_word(text, w)]


def mentioned_years(text: str) -> list[int]:
    return sorted({int(y) for y in RECENT_YEAR_RE.findall(text)})


def latest_year(text: str, reference_year: int | None) -> int | None:
    """Most recent year the resume accounts for. An ongoing role ("Present")
    counts as reference_year."""
    if reference_year is not None and ONGOING_RE.search(text):
        return reference_year
    years = mentioned_years(text)
    return years[-1] if years else None


def _role_spans(experience: list[ExperienceEntry]) -> list[tuple[int, int]]:
    spans = []
    for entry in experience:
        if not entry.start_year:
            continue
        start = int(entry.start_year)
        end = int(entry.end_year) if entry.end_year else start
        spans.append((start, max(start, end)))
    return sorted(spans)


def has_employment_gap(
    experience: list[ExperienceEntry],
    latest: int | None,
    reference_year: int | None,
) -> bool:
    """True when a dated role starts more than MAX_ROLE_GAP years after the
    roles before it ended, or the latest year trails reference_year by more
    than one.

    A single long role is never a gap. Without a reference_year only the
    gaps between roles are checked.
    """
    spans = _role_spans(experience)
    if spans:
        covered_until = spans[0][1]
        for start, end in spans[1:]:
            if start - covered_until > MAX_ROLE_GAP:
                return True
            covered_until = max(covered_until, end)
    if reference_year is None or latest is None:
        return False
    return reference_year - latest > 1
