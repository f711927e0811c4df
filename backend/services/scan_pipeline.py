"""Scan pipeline: wires extraction, matching, signals and scoring together.

Flow:
    resume_text + job_description
      ├─ extract_resume_fields / extract_job_description
      ├─ calculate_match_score(resume.skills, job.skills)   → MatchResult
      ├─ gather_signals(context)                            → SignalResult per group
      ├─ compute_score(merge_results(...))                  → ScoreBreakdown
      └─ build_verdict(...)                                 → interpretation + top fixes
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from models.responses import ScanResponse
from models.schemas.match_result import MatchResult
from models.schemas.scan_context import FileMeta, ScanContext
from models.schemas.scan_record import ScanRecord
from models.schemas.score_breakdown import ScoreBreakdown
from services.field_extractor import extract_job_description, extract_resume_fields
from services.match_scorer import calculate_match_score
from services.score_engine import compute_score
from services.signals.gatherer import gather_signals, merge_results
from services.skill_dictionary import SkillDictionary
from services.skill_extractor import extract_skills
from services.verdict import build_verdict

logger = logging.getLogger(__name__)


def match_texts(resume_text: str, job_description: str, dictionary: SkillDictionary) -> MatchResult:
    """Extract skills from both texts and compare them."""
    return calculate_match_score(
        extract_skills(resume_text, dictionary),
        extract_skills(job_description, dictionary),
    )


async def run_scan(
    resume_text: str,
    job_description: str,
    dictionary: SkillDictionary,
    file_meta: FileMeta | None = None,
    job_title: str | None = None,
    reference_year: int | None = None,
    signals: Mapping[str, Any] | None = None,
) -> ScanResponse:
    """Full scan. Raises MalformedSignalError for badly shaped `signals`."""

    # --- Stage 1: Extraction ---
    resume = extract_resume_fields(resume_text, dictionary)
    job = extract_job_description(job_description, dictionary)
    if job_title:
        job = job.model_copy(update={"title": job_title})

    # --- Stage 2: Matching ---
    match = calculate_match_score(resume.skills, job.skills)

    # --- Stage 3: Signals (concurrent, each may be unavailable) ---
    context = ScanContext(
        resume=resume,
        job=job,
        match=match,
        file_meta=file_meta,
        reference_year=reference_year,
    )
    results = await gather_signals(context, overrides=signals)
    unavailable = sorted(name for name, r in results.items() if not r.ok)
    if unavailable:
        logger.warning("Scoring without signal groups: %s", ", ".join(unavailable))

    # --- Stage 4: Scoring ---
    score = compute_score(merge_results(results))
    verdict = build_verdict(score, match)

    return ScanResponse(
        resume=resume,
        job=job,
        match=match,
        overall=score.overall,
        band=score.band,
        confidence=score.confidence,
        breakdown=score.breakdown,
        meta=score.meta,
        interpretation=verdict.interpretation,
        summary=verdict.summary,
        top_fixes=verdict.top_fixes,
        sources={name: results[name].status for name in sorted(results)},
    )


def build_scan_record(
    scan: ScanResponse,
    record_id: str | None = None,
    created_at: datetime | None = None,
) -> ScanRecord:
    """Shape a scan for storage. Id and timestamp default to fresh values."""
    return ScanRecord(
        id=record_id or uuid.uuid4().hex,
        resume=scan.resume,
        job_description=scan.job.raw_text,
        match=scan.match,
        score=ScoreBreakdown(
            overall=scan.overall,
            band=scan.band,
            confidence=scan.confidence,
            breakdown=scan.breakdown,
            meta=scan.meta,
        ),
        created_at=created_at or datetime.now(timezone.utc),
    )
