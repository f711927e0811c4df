"""Tests for the composite score engine."""

import pytest

from models.schemas.signals import (
    FoundationalSignals,
    MarketContextSignals,
    PredictiveSignals,
    RecruiterAppealSignals,
    RedFlag,
    SignalBundle,
    SkillsRelevancySignals,
    TransferableSkill,
)
from services.errors import MalformedSignalError
from services.score_engine import (
    SIGNALS_TOTAL,
    band_for_confidence,
    compute_score,
    foundational_points,
    hard_skill_coverage,
    score_foundational,
    score_market,
    score_predictive,
    score_recruiter_appeal,
    score_skills,
    word_count_status,
)


def perfect_foundational(**overrides) -> FoundationalSignals:
    values = dict(
        email=True, phone=True, location=True,
        has_experience=True, has_education=True, has_skills=True, has_summary=True,
        word_count=800, dates_valid=True,
        job_title_exact=True, job_title_similarity=1.0,
        file_type_ok=True, file_name_ok=True, linkedin=True, portfolio=True,
    )
    values.update(overrides)
    return FoundationalSignals(**values)


def perfect_bundle(**overrides) -> SignalBundle:
    groups = dict(
        foundational=perfect_foundational(),
        skills_relevancy=SkillsRelevancySignals(
            match_score=100, required_count=10, matched_count=10,
            soft_expected=2, soft_found=2, transferable=[], impact_weights={},
        ),
        recruiter_appeal=RecruiterAppealSignals(
            first_impression=100, narrative_coherence=100,
            strong_verbs=["led"], weak_verbs=[], red_flags=[],
        ),
        market_context=MarketContextSignals(
            industry="Technology", percentile=100,
            trending_matches=["react", "python", "kubernetes"], declining_matches=[],
        ),
        predictive_readiness=PredictiveSignals(hire_probability=100, automation_risk=0.0, x_factor=100),
    )
    groups.update(overrides)
    return SignalBundle(**groups)


class TestComponents:
    def test_foundational_full_marks(self):
        assert foundational_points(perfect_foundational()) == 100
        assert score_foundational(perfect_foundational()) == 40

    def test_foundational_partial(self):
        s = FoundationalSignals(email=True, phone=True)
        assert score_foundational(s) == pytest.approx(8.0)

    def test_foundational_word_count_and_similarity(self):
        s = FoundationalSignals(word_count=350, job_title_exact=False, job_title_similarity=0.6)
        assert foundational_points(s) == pytest.approx(5 + 9)

    def test_word_count_status(self):
        assert word_count_status(800) == "optimal"
        assert word_count_status(1300) == "acceptable"
        assert word_count_status(100) == "poor"

    def test_skills_coverage_and_penalty(self):
        s = SkillsRelevancySignals(
            required_count=4, matched_count=2,
            impact_weights={"redis": 2.5, "kafka": 1.5},
        )
        # 6 + 22 * 0.5 - 2.5; low-impact kafka is not penalized
        assert score_skills(s) == pytest.approx(14.5)

    def test_transferable_counts_toward_coverage(self):
        s = SkillsRelevancySignals(
            required_count=2, matched_count=1,
            transferable=[TransferableSkill(source="mysql", towards="postgresql", confidence=0.5)],
        )
        assert score_skills(s) == pytest.approx(6 + 22 * 0.75)

    def test_one_credit_per_transferred_skill(self):
        s = SkillsRelevancySignals(
            required_count=3, matched_count=0,
            transferable=[
                TransferableSkill(source="angular", towards="react", confidence=0.6),
                TransferableSkill(source="vue", towards="react", confidence=0.6),
            ],
        )
        assert hard_skill_coverage(s) == pytest.approx(0.2)

    def test_no_soft_skills_expected_is_full_credit(self):
        s = SkillsRelevancySignals(required_count=1, matched_count=1, soft_expected=0, soft_found=0)
        assert score_skills(s) == pytest.approx(35)

    def test_skills_clamped_at_zero(self):
        s = SkillsRelevancySignals(
            required_count=5, matched_count=0,
            impact_weights={f"s{i}": 3.0 for i in range(5)},
        )
        assert score_skills(s) == 0

    def test_recruiter_appeal(self):
        s = RecruiterAppealSignals(
            first_impression=80, narrative_coherence=60,
            strong_verbs=["led", "built", "drove"], weak_verbs=["helped"],
        )
        assert score_recruiter_appeal(s) == pytest.approx(8 * 0.7 + 2 * 0.75)

    def test_red_flags_not_deducted_inside_c(self):
        clean = RecruiterAppealSignals(first_impression=50, narrative_coherence=50)
        flagged = clean.model_copy(update={"red_flags": [RedFlag(code="gap", severity="high")]})
        assert score_recruiter_appeal(clean) == score_recruiter_appeal(flagged)

    def test_market(self):
        s = MarketContextSignals(
            percentile=50, trending_matches=["a", "b", "c", "d"], declining_matches=["x"],
        )
        assert score_market(s) == pytest.approx(3.5 + 3 - 1)

    def test_market_clamped(self):
        s = MarketContextSignals(percentile=0, declining_matches=["x", "y"])
        assert score_market(s) == 0

    def test_predictive(self):
        s = PredictiveSignals(hire_probability=60, automation_risk=0.2, x_factor=30)
        assert score_predictive(s) == pytest.approx(4 * 0.7 + 0.3)

    def test_missing_groups_score_zero(self):
        assert score_foundational(None) == 0
        assert score_skills(None) == 0
        assert score_recruiter_appeal(None) == 0
        assert score_market(None) == 0
        assert score_predictive(None) == 0


class TestComputeScore:
    def test_perfect_bundle(self):
        result = compute_score(perfect_bundle())
        assert result.overall == 100
        assert result.confidence == 100
        assert result.band == 3
        bd = result.breakdown
        assert (bd.A, bd.B, bd.C, bd.D, bd.E, bd.red_penalty) == (40, 35, 10, 10, 5, 0)
        assert result.meta.signals_used == SIGNALS_TOTAL
        assert result.meta.market_data_available is True
        assert result.meta.reallocation_applied is False

    def test_reallocation_keeps_ceiling_at_100(self):
        result = compute_score(perfect_bundle(market_context=None))
        assert result.overall == 100
        assert result.breakdown.D == 0
        assert result.meta.market_data_available is False
        assert result.meta.reallocation_applied is True
        assert result.breakdown.A == pytest.approx(44.4)
        assert result.breakdown.B == pytest.approx(38.9)
        assert result.confidence < 100

    def test_red_penalty_capped_and_applied_once(self):
        flags = [RedFlag(code="a", severity="high"), RedFlag(code="b", severity="high")]
        bundle = perfect_bundle(recruiter_appeal=RecruiterAppealSignals(
            first_impression=100, narrative_coherence=100,
            strong_verbs=["led"], weak_verbs=[], red_flags=flags,
        ))
        result = compute_score(bundle)
        assert result.breakdown.red_penalty == 5
        assert result.breakdown.C == 10
        assert result.overall == 95

    def test_empty_bundle(self):
        result = compute_score(SignalBundle())
        assert result.overall == 0
        assert result.confidence == 0
        assert result.band == 10
        assert result.meta.signals_used == 0
        assert result.meta.reallocation_applied is True

    def test_partial_group(self):
        result = compute_score({"foundational": {"email": True, "phone": True}})
        assert result.breakdown.A == pytest.approx(8.9)
        assert result.overall == 9
        assert result.meta.signals_used == 2
        assert result.confidence == round(2 / SIGNALS_TOTAL * 100)

    def test_overall_never_negative(self):
        flags = [RedFlag(code="gap", severity="high")] * 3
        result = compute_score({"recruiter_appeal": RecruiterAppealSignals(red_flags=flags)})
        assert result.overall == 0

    def test_fewer_signals_lower_confidence_wider_band(self):
        full = compute_score(perfect_bundle(foundational=perfect_foundational(location=False)))
        fewer = compute_score(perfect_bundle(foundational=perfect_foundational(location=None)))
        assert full.overall == fewer.overall
        assert fewer.meta.signals_used == full.meta.signals_used - 1
        assert fewer.confidence <= full.confidence
        assert fewer.band >= full.band

    def test_band_monotonic(self):
        bands = [band_for_confidence(c / 10) for c in range(11)]
        assert bands == sorted(bands, reverse=True)
        assert min(bands) == 3

    def test_deterministic(self):
        first = compute_score(perfect_bundle(market_context=None)).model_dump_json()
        second = compute_score(perfect_bundle(market_context=None)).model_dump_json()
        assert first == second

    def test_accepts_plain_dicts(self):
        data = perfect_bundle().model_dump()
        assert compute_score(data).overall == 100

    def test_serializes_with_camel_case_keys(self):
        data = compute_score(perfect_bundle()).model_dump(by_alias=True)
        assert set(data["breakdown"]) == {"A", "B", "C", "D", "E", "redPenalty"}
        assert set(data["meta"]) == {"signalsUsed", "signalsTotal", "marketDataAvailable", "reallocationApplied"}


class TestMalformedSignals:
    def test_wrong_type(self):
        with pytest.raises(MalformedSignalError) as exc:
            compute_score({"foundational": {"email": "maybe"}})
        assert exc.value.group == "foundational"

    def test_unknown_field(self):
        with pytest.raises(MalformedSignalError):
            compute_score({"predictive_readiness": {"salary": 100000}})

    def test_out_of_range(self):
        with pytest.raises(MalformedSignalError) as exc:
            compute_score({"market_context": {"percentile": 140}})
        assert exc.value.group == "market_context"

    def test_unknown_group(self):
        with pytest.raises(MalformedSignalError) as exc:
            compute_score({"weather": {}})
        assert exc.value.group == "weather"

    def test_not_a_mapping(self):
        with pytest.raises(MalformedSignalError):
            compute_score(["foundational"])
