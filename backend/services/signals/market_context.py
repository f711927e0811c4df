"""Market positioning from a static per-industry trends table."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from config import settings
from models.schemas.scan_context import ScanContext
from models.schemas.signals import MarketContextSignals
from services.errors import SignalUnavailableError
from services.match_scorer import round_half_up
from services.signals.base import SignalSource

logger = logging.getLogger(__name__)

MARKET_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "market.json"

# Percentile factor weights
PERCENTILE_WEIGHTS = {
    "match_rate": 0.4,
    "hard_skill_coverage": 0.3,
    "industry_alignment": 0.2,
    "modern_skills": 0.1,
}
GOOD_SKILL_COUNT = 10


class IndustryProfile(BaseModel):
    keywords: list[str]
    trending: list[str] = []
    declining: list[str] = []
    automation_risk: float = 0.3


def load_market_table(path: Path = MARKET_DATA_PATH) -> dict[str, IndustryProfile]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return {name: IndustryProfile.model_validate(profile) for name, profile in raw.items()}


def detect_industry(text: str, table: dict[str, IndustryProfile]) -> tuple[str | None, float]:
    """Industry with the most keyword hits and its share of all hits.

    Ties go to the industry listed first. Returns (None, 0.0) when no
    keyword appears.
    """
    lowered = text.lower()
    hits = {
        name: sum(1 for kw in profile.keywords if kw in lowered)
        for name, profile in table.items()
    }
    total = sum(hits.values())
    if total == 0:
        return None, 0.0
    best = max(hits, key=lambda name: hits[name])
    return best, hits[best] / total


def modern_skill_score(skills: list[str], trending: list[str]) -> float:
    if not trending:
        return 0.5
    modern = [s for s in skills if any(s in t or t in s for t in trending)]
    return min(1.0, len(modern) / max(1.0, len(trending) * 0.5))


def market_percentile(match_rate: float, skill_count: int, alignment: float, modern: float) -> int:
    """Weighted blend of the four factors mapped onto 1-99."""
    score = (
        max(0.0, min(1.0, match_rate / 100)) * PERCENTILE_WEIGHTS["match_rate"]
        + min(1.0, skill_count / GOOD_SKILL_COUNT) * PERCENTILE_WEIGHTS["hard_skill_coverage"]
        + alignment * PERCENTILE_WEIGHTS["industry_alignment"]
        + modern * PERCENTILE_WEIGHTS["modern_skills"]
    )
    return max(1, min(99, round_half_up(score * 98) + 1))


class MarketContextSource(SignalSource):
    group = "market_context"

    def __init__(self):
        self.table: dict[str, IndustryProfile] = {}

    def load(self) -> None:
        self.table = load_market_table()
        logger.info("Loaded market trends for %d industries", len(self.table))

    def produce(self, context: ScanContext) -> MarketContextSignals:
        if not settings.market_data_enabled:
            raise SignalUnavailableError("market data disabled")

        industry, alignment = detect_industry(f"{context.resume_text} {context.job_text}", self.table)
        if industry is None:
            raise SignalUnavailableError("no industry detected")

        profile = self.table[industry]
        skills = context.resume.skills
        return MarketContextSignals(
            industry=industry,
            percentile=market_percentile(
                context.match.score,
                len(skills),
                alignment,
                modern_skill_score(skills, profile.trending),
            ),
            trending_matches=sorted(set(skills) & set(profile.trending)),
            declining_matches=sorted(set(skills) & set(profile.declining)),
        )
