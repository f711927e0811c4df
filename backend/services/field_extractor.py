"""Resume field extraction: name, contact, education and experience.

Each field is an independent heuristic over the resume lines. None of them
raise; when nothing matches they fall back to a placeholder value.
"""

import re

from models.schemas.resume_document import (
    EducationEntry,
    ExperienceEntry,
    JobDescription,
    ResumeDocument,
)
from services.skill_dictionary import SkillDictionary
from services.skill_extractor import extract_skills

UNKNOWN_NAME = "Unknown"
NOT_SPECIFIED = "Not specified"
UNKNOWN_COMPANY = "Unknown Company"

NAME_SCAN_LINES = 5
NAME_MAX_LENGTH = 50

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(
    r"(?:\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})"
    r"(?:\s?(?:ext|x|extension)\.?\s?(\d+))?"
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Full words match in any case; abbreviations are case-sensitive so that
# ordinary words like "as" or "ma" do not count as degrees.
_ABBREV_START = r"(?<![A-Za-z.])"
_ABBREV_END = r"(?![A-Za-z])"

DEGREE_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"\b(?i:bachelor(?:'?s)?|undergraduate)\b"
        rf"|{_ABBREV_START}(?:B\.S\.|B\.A\.|B\.Sc\.|BSc|BS|BA){_ABBREV_END}"
    ),
    re.compile(
        r"\b(?i:master(?:'?s)?|graduate)\b"
        rf"|{_ABBREV_START}(?:M\.S\.|M\.A\.|M\.Sc\.|MBA|MSc|MS|MA){_ABBREV_END}"
    ),
    re.compile(
        r"\b(?i:phd|doctorate|doctoral)\b"
        rf"|{_ABBREV_START}(?:Ph\.D\.?|PhD){_ABBREV_END}"
    ),
    re.compile(
        r"\b(?i:associate)\b"
        rf"|{_ABBREV_START}(?:A\.A\.|A\.S\.|AA|AS){_ABBREV_END}"
    ),
]

SCHOOL_RE = re.compile(r"\b(?:university|college|institute|academy|school)\b", re.IGNORECASE)

TITLE_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"\b(?:senior|lead|principal|staff|junior)\s+"
        r"(?:software|web|mobile|full.?stack|front.?end|back.?end)\s+"
        r"(?:engineer|developer|programmer)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:software|web|mobile|full.?stack|front.?end|back.?end)\s+"
        r"(?:engineer|developer|programmer)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:data|machine learning|ml|ai)\s+(?:scientist|engineer|analyst)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:product|project|program|marketing|sales)\s+manager\b", re.IGNORECASE),
    re.compile(
        r"\b(?:ceo|cto|cfo|vp|director|coordinator|specialist|analyst|consultant)\b",
        re.IGNORECASE,
    ),
]

COMPANY_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"\b(?:inc|corp|llc|ltd|company|technologies|systems|solutions|group)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:google|microsoft|amazon|apple|facebook|meta|netflix|uber|airbnb)\b",
        re.IGNORECASE,
    ),
]

_LINE_SEGMENT_RE = re.compile(r"\s*(?:\||,|•|\s[-–—]\s|\s@\s|\sat\s)\s*")
_WORD_PUNCT = ",;:|()[]{}•-–—"

_JD_SKIP_RE = re.compile(r"^(?:job|position|role|about|company|description|overview)", re.IGNORECASE)
_JD_TITLE_PREFIX_RE = re.compile(r"^(?:title|position|role):\s*", re.IGNORECASE)


def split_lines(text: str | None) -> list[str]:
    if not text:
        return []
    return text.split("\n")


def extract_name(lines: list[str]) -> str:
    """Pick the first short, capitalized 2-3 word line near the top."""
    candidates = [line.strip() for line in lines if line.strip()][:NAME_SCAN_LINES]
    for line in candidates:
        if len(line) >= NAME_MAX_LENGTH:
            continue
        if EMAIL_RE.search(line) or PHONE_RE.search(line):
            continue
        words = line.split()
        if not 2 <= len(words) <= 3:
            continue
        capitalized = sum(1 for w in words if w[0].isupper())
        if capitalized * 2 > len(words):
            return line
    return UNKNOWN_NAME


def extract_email(text: str | None) -> str:
    match = EMAIL_RE.search(text or "")
    return match.group() if match else ""


def extract_phone(text: str | None) -> str:
    match = PHONE_RE.search(text or "")
    return match.group().strip() if match else ""


def _match_degree(line: str) -> str:
    for pattern in DEGREE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group()
    return ""


def _school_window(line: str) -> str:
    """School keyword with up to two neighbouring words."""
    words = line.split()
    index = next(
        (i for i, w in enumerate(words) if SCHOOL_RE.search(w.strip(_WORD_PUNCT))),
        -1,
    )
    if index < 0:
        return line
    if index > 0:
        window = words[max(0, index - 2):index + 1]
    else:
        window = words[:3]
    cleaned = [w.strip(_WORD_PUNCT) for w in window]
    # A trailing year is not part of the name
    cleaned = [w for w in cleaned if w and not YEAR_RE.fullmatch(w)]
    return " ".join(cleaned) or line


def extract_education(lines: list[str]) -> list[EducationEntry]:
    """One entry per line mentioning a degree or a school."""
    entries: list[EducationEntry] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        degree = _match_degree(line)
        has_school = bool(SCHOOL_RE.search(line))
        if not degree and not has_school:
            continue

        year_match = YEAR_RE.search(line)
        entries.append(EducationEntry(
            degree=degree or "Degree",
            school=_school_window(line) if has_school else line,
            year=year_match.group() if year_match else "",
        ))

    if not entries:
        return [EducationEntry(degree=NOT_SPECIFIED, school=NOT_SPECIFIED, year="")]
    return entries


def _match_title(line: str) -> str:
    for pattern in TITLE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group()
    return ""


def _is_company(text: str) -> bool:
    return any(p.search(text) for p in COMPANY_PATTERNS)


def _find_company(lines: list[str], index: int, title: str) -> str:
    """Company from the surrounding lines, then from the title line itself."""
    for j in range(max(0, index - 2), min(len(lines), index + 3)):
        if j == index:
            continue
        nearby = lines[j].strip()
        if nearby and _is_company(nearby):
            return nearby

    for segment in _LINE_SEGMENT_RE.split(lines[index].strip()):
        segment = segment.strip()
        if segment and title not in segment and _is_company(segment):
            return segment
    return UNKNOWN_COMPANY


def extract_experience(lines: list[str]) -> list[ExperienceEntry]:
    """One entry per line containing a recognizable job title."""
    entries: list[ExperienceEntry] = []
    for i, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        title = _match_title(line)
        if not title:
            continue

        years = YEAR_RE.findall(line)
        entries.append(ExperienceEntry(
            title=title,
            company=_find_company(lines, i, title),
            start_year=years[0] if years else "",
            end_year=years[1] if len(years) > 1 else "",
            description=line,
        ))

    if not entries:
        return [ExperienceEntry(
            title=NOT_SPECIFIED,
            company=NOT_SPECIFIED,
            start_year="",
            end_year="",
            description="",
        )]
    return entries


def extract_resume_fields(text: str | None, dictionary: SkillDictionary) -> ResumeDocument:
    """Parse every structured field out of raw resume text."""
    lines = split_lines(text)
    return ResumeDocument(
        raw_text=text or "",
        name=extract_name(lines),
        email=extract_email(text),
        phone=extract_phone(text),
        education=extract_education(lines),
        experience=extract_experience(lines),
        skills=extract_skills(text, dictionary),
    )


def extract_job_title(job_description: str | None) -> str:
    """Best-effort role title from the first lines of a job description."""
    lines = [line.strip() for line in split_lines(job_description) if line.strip()]
    for line in lines[:5]:
        if _JD_SKIP_RE.match(line):
            continue
        if 3 < len(line) < 100 and ".." not in line:
            return _JD_TITLE_PREFIX_RE.sub("", line)
    return "Position"


def extract_job_description(text: str | None, dictionary: SkillDictionary) -> JobDescription:
    return JobDescription(
        raw_text=text or "",
        title=extract_job_title(text),
        skills=extract_skills(text, dictionary),
    )
