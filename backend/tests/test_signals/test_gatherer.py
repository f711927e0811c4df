"""Tests for concurrent signal gathering."""

import time

import pytest

from models.schemas.scan_context import ScanContext
from models.schemas.signals import MarketContextSignals
from services.errors import MalformedSignalError
from services.field_extractor import extract_job_description, extract_resume_fields
from services.match_scorer import calculate_match_score
from services.signals import registry
from services.signals.base import SignalSource
from services.signals.gatherer import gather_signals, merge_results


class SlowSource(SignalSource):
    group = "market_context"

    def produce(self, context):
        time.sleep(0.5)
        return MarketContextSignals(industry="Technology", percentile=50)


class BrokenSource(SignalSource):
    group = "predictive_readiness"

    def produce(self, context):
        raise RuntimeError("lookup table corrupt")


def make_context(dictionary, resume_text, job_text):
    resume = extract_resume_fields(resume_text, dictionary)
    job = extract_job_description(job_text, dictionary)
    return ScanContext(
        resume=resume,
        job=job,
        match=calculate_match_score(resume.skills, job.skills),
        reference_year=2024,
    )


@pytest.fixture
def context(dictionary, sample_resume, sample_jd):
    return make_context(dictionary, sample_resume, sample_jd)


class TestGatherSignals:
    @pytest.mark.asyncio
    async def test_all_groups_ok(self, context):
        results = await gather_signals(context)
        assert sorted(results) == [
            "foundational", "market_context", "predictive_readiness",
            "recruiter_appeal", "skills_relevancy",
        ]
        assert all(r.ok for r in results.values())

    @pytest.mark.asyncio
    async def test_no_job_description(self, dictionary, sample_resume):
        results = await gather_signals(make_context(dictionary, sample_resume, ""))
        assert results["skills_relevancy"].status == "unavailable"
        assert results["skills_relevancy"].error == "no job description"

    @pytest.mark.asyncio
    async def test_slow_source_times_out(self, context):
        registry._registry["market_context"] = SlowSource()
        results = await gather_signals(context, timeout=0.05)
        assert results["market_context"].status == "unavailable"
        assert results["market_context"].error == "timeout"
        assert results["foundational"].ok

    @pytest.mark.asyncio
    async def test_failing_source_is_unavailable(self, context):
        registry._registry["predictive_readiness"] = BrokenSource()
        results = await gather_signals(context)
        assert results["predictive_readiness"].status == "unavailable"
        assert "corrupt" in results["predictive_readiness"].error
        assert results["recruiter_appeal"].ok

    @pytest.mark.asyncio
    async def test_overrides_replace_sources(self, context):
        registry._registry["market_context"] = BrokenSource()
        results = await gather_signals(context, overrides={
            "market_context": {"industry": "Data", "percentile": 80},
            "predictive_readiness": None,
        })
        assert results["market_context"].ok
        assert results["market_context"].value.percentile == 80
        assert results["predictive_readiness"].status == "unavailable"
        assert results["predictive_readiness"].error == "not supplied"

    @pytest.mark.asyncio
    async def test_malformed_override_raises(self, context):
        with pytest.raises(MalformedSignalError) as exc_info:
            await gather_signals(context, overrides={"foundational": {"email": "maybe"}})
        assert exc_info.value.group == "foundational"

    @pytest.mark.asyncio
    async def test_unknown_override_group_raises(self, context):
        with pytest.raises(MalformedSignalError):
            await gather_signals(context, overrides={"vibes": {}})


class TestMergeResults:
    @pytest.mark.asyncio
    async def test_only_ok_groups_merged(self, context):
        registry._registry["predictive_readiness"] = BrokenSource()
        bundle = merge_results(await gather_signals(context))
        assert bundle.predictive_readiness is None
        assert bundle.foundational is not None
        assert bundle.market_context.industry == "Technology"

    @pytest.mark.asyncio
    async def test_deterministic(self, context):
        first = merge_results(await gather_signals(context))
        second = merge_results(await gather_signals(context))
        assert first == second
