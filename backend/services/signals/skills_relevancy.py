"""Skills relevancy group: hard/soft coverage, transferable skills and impact weights.

Computed in-process from the match result rather than by an external
source, so it is always available when a job description is given.
"""

import re

from models.schemas.scan_context import ScanContext
from models.schemas.signals import SkillsRelevancySignals, TransferableSkill
from services.section_parser import requirements_section
from services.signals.text_checks import find_words

SOFT_SKILLS = [
    "communication", "leadership", "teamwork", "problem solving", "critical thinking",
    "creativity", "adaptability", "time management", "organization", "attention to detail",
    "collaboration", "interpersonal skills", "presentation", "negotiation",
    "conflict resolution", "decision making", "strategic thinking", "mentoring",
    "coaching", "customer service", "ownership", "accountability", "initiative",
]
_SOFT_SET = frozenset(SOFT_SKILLS)

# (skill on the resume, missing job skill it transfers to, confidence)
TRANSFERABLE_MAPPINGS: list[tuple[str, str, float]] = [
    ("mysql", "postgresql", 0.8),
    ("postgresql", "mysql", 0.8),
    ("javascript", "typescript", 0.7),
    ("angular", "react", 0.6),
    ("vue", "react", 0.6),
    ("excel", "tableau", 0.5),
    ("tableau", "power bi", 0.7),
    ("aws", "azure", 0.6),
    ("aws", "gcp", 0.6),
    ("azure", "aws", 0.6),
    ("jenkins", "github actions", 0.7),
    ("tensorflow", "pytorch", 0.7),
    ("pytorch", "tensorflow", 0.7),
    ("flask", "fastapi", 0.7),
    ("jira", "kanban", 0.5),
]

BASE_IMPACT = 1.0
REPEATED_IMPACT = 0.5  # per repetition threshold passed
REQUIREMENTS_IMPACT = 1.0
EMPHASIS_IMPACT = 0.5
MAX_IMPACT = 3.0
EMPHASIS_WINDOW = 100
EMPHASIS_WORDS = ["required", "must have", "essential", "critical"]


def _skill_pattern(skill: str) -> re.Pattern:
    return re.compile(rf"(?<![\w]){re.escape(skill)}(?![\w])", re.IGNORECASE)


def impact_weight(skill: str, job_text: str, requirements: str) -> float:
    """How much a missing skill matters to this job, 1.0 to 3.0."""
    pattern = _skill_pattern(skill)
    mentions = list(pattern.finditer(job_text))
    weight = BASE_IMPACT
    if len(mentions) > 1:
        weight += REPEATED_IMPACT
    if len(mentions) > 3:
        weight += REPEATED_IMPACT
    if requirements and pattern.search(requirements):
        weight += REQUIREMENTS_IMPACT
    for m in mentions:
        context = job_text[max(0, m.start() - EMPHASIS_WINDOW):m.end() + EMPHASIS_WINDOW]
        if find_words(context, EMPHASIS_WORDS):
            weight += EMPHASIS_IMPACT
            break
    return min(MAX_IMPACT, weight)


def transferable_skills(resume_text: str, missing: list[str]) -> list[TransferableSkill]:
    """At most one transferable skill per missing skill, the most confident.
    Ties go to the mapping listed first."""
    missing_set = set(missing)
    best: dict[str, TransferableSkill] = {}
    for source, towards, confidence in TRANSFERABLE_MAPPINGS:
        if towards not in missing_set or not _skill_pattern(source).search(resume_text):
            continue
        if towards not in best or confidence > best[towards].confidence:
            best[towards] = TransferableSkill(source=source, towards=towards, confidence=confidence)
    return sorted(best.values(), key=lambda t: t.towards)


def build_skills_relevancy(context: ScanContext) -> SkillsRelevancySignals:
    job_text = context.job_text
    resume_text = context.resume_text

    job_hard = [s.lower() for s in context.job.skills if s.lower() not in _SOFT_SET]
    resume_skills = {s.lower() for s in context.resume.skills}
    missing_hard = [s for s in job_hard if s not in resume_skills]

    soft_expected = find_words(job_text, SOFT_SKILLS)
    soft_found = find_words(resume_text, soft_expected)

    requirements = requirements_section(job_text)
    transferable = transferable_skills(resume_text, missing_hard)
    # A skill covered by a transferable one is not also penalized
    covered = {t.towards for t in transferable}

    return SkillsRelevancySignals(
        match_score=context.match.score,
        required_count=len(job_hard),
        matched_count=len(job_hard) - len(missing_hard),
        soft_expected=len(soft_expected),
        soft_found=len(soft_found),
        transferable=transferable,
        impact_weights={
            skill: impact_weight(skill, job_text, requirements)
            for skill in missing_hard
            if skill not in covered
        },
    )
