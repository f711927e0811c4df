"""Section segmentation for resumes and job descriptions."""

import re

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|summary)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "requirements": [
        r"(?:minimum\s+|basic\s+|preferred\s+)?requirements?",
        r"(?:minimum\s+|basic\s+|preferred\s+)?qualifications?",
        r"must\s+haves?",
        r"what\s+you(?:'ll)?\s+(?:need|bring)",
    ],
}

# Headers may carry trailing text after a colon ("Requirements: Python, SQL")
_COMPILED: dict[str, re.Pattern] = {
    section: re.compile(rf"^\s*(?:{'|'.join(patterns)})\s*(?::\s*(?P<rest>.*))?$", re.IGNORECASE)
    for section, patterns in SECTION_PATTERNS.items()
}

RESUME_SECTIONS = ("experience", "education", "skills", "summary")


def _match_header(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        match = pattern.match(stripped)
        if match:
            return section_name, match.group("rest") or ""
    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split text into named sections.

    Returns a dict mapping section name -> section text content.
    Text before the first header goes into 'header'. A repeated header
    appends to the earlier section.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    def flush():
        content = "\n".join(current_lines).strip()
        if content:
            previous = sections.get(current_section)
            sections[current_section] = f"{previous}\n{content}" if previous else content

    for line in (text or "").split("\n"):
        header = _match_header(line)
        if header:
            flush()
            current_section, rest = header
            current_lines = [rest] if rest else []
        else:
            current_lines.append(line)
    flush()

    return sections


def detect_resume_sections(text: str) -> dict[str, bool]:
    """Which of the core resume sections have a recognizable header."""
    sections = parse_sections(text)
    return {name: name in sections for name in RESUME_SECTIONS}


def requirements_section(job_description: str) -> str:
    """Text under the job description's requirements/qualifications headers."""
    return parse_sections(job_description).get("requirements", "")
