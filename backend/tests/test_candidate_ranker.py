"""
Unit tests for candidate evaluation and pool ranking.
"""

import json

import pytest

from config.settings import FitThresholds, RankingSettings, ScoringWeights, Settings
from core.exceptions import ValidationException
from matching import CandidateRanker, fit_tier
from models import FitTier, RiskLevel
from tests.fixtures import AS_OF, BC_INTERIOR_PLACES, create_test_project, create_test_resolver, create_test_talent
from tests.utils import TestHelper


def _varied_pool():
    cities = ["Kelowna", "Vernon", "Penticton", "Kamloops", "Nelson", "Prince George"]
    pool = []
    for index in range(12):
        pool.append(create_test_talent(
            f"talent_{index:02d}",
            location={"city": cities[index % len(cities)], "province": "BC"},
            hourlyRate={"min": 40 + index * 5, "max": 60 + index * 5},
            availability={
                "hoursPerWeek": 10 + index * 3,
                "startDate": f"2025-{6 + index % 3:02d}-15",
                "workArrangement": ["hybrid", "remote", "onsite"][index % 3],
            },
            reputation={
                "rating": 3 + (index % 5) * 0.5,
                "reviewCount": index * 2,
                "responseTime": 1 + index * 3,
                "reliability": 60 + index * 3,
            },
        ))
    return pool


class TestCandidateEvaluation:
    """Test cases for evaluating a single candidate."""

    def setup_method(self):
        self.ranker = CandidateRanker(location_resolver=create_test_resolver())

    def test_evaluate_default_candidate(self):
        """Test the full evaluation of a well-matched candidate."""
        match = self.ranker.evaluate(create_test_talent(), create_test_project(), as_of=AS_OF)

        assert match.overall_score == 84
        assert match.fit_score == FitTier.GOOD
        assert match.ranking == 0
        assert match.risk_assessment.overall_risk == RiskLevel.LOW
        assert match.risk_assessment.confidence_level == 84
        assert len(match.strengths) == 4
        assert match.concerns == []
        TestHelper.assert_scores_in_range(match)

    def test_evaluate_is_idempotent(self):
        """Test that identical inputs always produce identical matches."""
        talent, project = create_test_talent(), create_test_project()

        first = self.ranker.evaluate(talent, project, as_of=AS_OF)
        second = self.ranker.evaluate(talent, project, as_of=AS_OF)

        assert first == second

    def test_custom_weights(self):
        """Test that injected weights drive the overall score."""
        weights = ScoringWeights(
            skills=1.0, location=0.0, budget=0.0, experience=0.0,
            reputation=0.0, availability=0.0, verification=0.0, portfolio=0.0
        )
        ranker = CandidateRanker(location_resolver=create_test_resolver(), weights=weights)

        match = ranker.evaluate(create_test_talent(), create_test_project(), as_of=AS_OF)

        assert match.overall_score == match.skills_match.overall_score == 88

    def test_custom_fit_thresholds(self):
        ranker = CandidateRanker(
            location_resolver=create_test_resolver(),
            fit_thresholds=FitThresholds(excellent=80, good=60, fair=40)
        )

        match = ranker.evaluate(create_test_talent(), create_test_project(), as_of=AS_OF)

        assert match.fit_score == FitTier.EXCELLENT

    def test_unresolved_location_still_evaluates(self):
        """Test that an unknown city zeroes only the location score."""
        ranker = CandidateRanker()

        match = ranker.evaluate(create_test_talent(), create_test_project(), as_of=AS_OF)

        assert match.location_match.match_score == 0
        assert match.overall_score == 64

    def test_invalid_candidate_raises(self):
        talent = create_test_talent(hourlyRate={"min": 100, "max": 50})

        with pytest.raises(ValidationException):
            self.ranker.evaluate(talent, create_test_project(), as_of=AS_OF)

    def test_invalid_project_raises(self):
        project = create_test_project(budget={"min": 100, "max": 50, "type": "hourly"})

        with pytest.raises(ValidationException):
            self.ranker.evaluate(create_test_talent(), project, as_of=AS_OF)


class TestFitTier:
    """Test cases for fit tier boundaries."""

    @pytest.mark.parametrize("score, tier", [
        (100, FitTier.EXCELLENT),
        (85, FitTier.EXCELLENT),
        (84, FitTier.GOOD),
        (70, FitTier.GOOD),
        (69, FitTier.FAIR),
        (55, FitTier.FAIR),
        (54, FitTier.POOR),
        (0, FitTier.POOR),
    ])
    def test_default_thresholds(self, score, tier):
        assert fit_tier(score) == tier


class TestCandidateRanking:
    """Test cases for ranking a pool of candidates."""

    def setup_method(self):
        self.ranker = CandidateRanker(location_resolver=create_test_resolver())

    def test_rank_orders_by_score(self):
        """Test that the pool is ordered by score with contiguous rankings."""
        strong = create_test_talent("strong")
        nearby = create_test_talent("nearby", location={"city": "Vernon", "province": "BC"})
        weak = create_test_talent("weak", skills=[
            {"skillName": "Vue", "experienceLevel": "expert", "yearsOfExperience": 6}
        ])

        matches = self.ranker.rank([weak, strong, nearby], create_test_project(), as_of=AS_OF)

        assert [match.talent.id for match in matches] == ["strong", "nearby", "weak"]
        TestHelper.assert_ranked(matches)

    def test_varied_pool_properties(self):
        """Test range and ordering properties over a varied pool."""
        pool = _varied_pool()

        matches = self.ranker.rank(pool, create_test_project(), as_of=AS_OF)

        assert len(matches) == len(pool)
        assert {match.talent.id for match in matches} == {talent.id for talent in pool}
        TestHelper.assert_ranked(matches)
        for match in matches:
            TestHelper.assert_scores_in_range(match)
            assert match.fit_score == fit_tier(match.overall_score)

    def test_ties_keep_input_order(self):
        """Test that equal scores keep their input order."""
        project = create_test_project()

        forward = self.ranker.rank([create_test_talent("a"), create_test_talent("b")], project, as_of=AS_OF)
        backward = self.ranker.rank([create_test_talent("b"), create_test_talent("a")], project, as_of=AS_OF)

        assert forward[0].overall_score == forward[1].overall_score
        assert [match.talent.id for match in forward] == ["a", "b"]
        assert [match.talent.id for match in backward] == ["b", "a"]

    def test_worker_count_does_not_change_results(self):
        """Test that serial and parallel evaluation agree."""
        pool = _varied_pool()
        project = create_test_project()

        serial = CandidateRanker(location_resolver=create_test_resolver(), max_workers=1)
        parallel = CandidateRanker(location_resolver=create_test_resolver(), max_workers=8)

        assert serial.rank(pool, project, as_of=AS_OF) == parallel.rank(pool, project, as_of=AS_OF)

    def test_invalid_candidate_is_skipped(self):
        """Test that one malformed candidate does not abort the ranking."""
        bad = create_test_talent("bad", hourlyRate={"min": 100, "max": 50})
        pool = [create_test_talent("first"), bad, create_test_talent("second")]

        outcome = self.ranker.rank_pool(pool, create_test_project(), as_of=AS_OF)

        assert [match.talent.id for match in outcome.matches] == ["first", "second"]
        assert [match.ranking for match in outcome.matches] == [1, 2]
        assert len(outcome.skipped) == 1
        assert outcome.skipped[0].talent_id == "bad"
        assert isinstance(outcome.skipped[0].error, ValidationException)

    def test_infinite_experience_is_skipped(self):
        """Test that a non-finite value skips that candidate instead of failing the pool."""
        good = create_test_talent("good")
        unbounded = create_test_talent("unbounded")
        unbounded = unbounded.model_copy(update={
            "experience": unbounded.experience.model_copy(update={"total_years": float("inf")})
        })

        outcome = self.ranker.rank_pool([good, unbounded], create_test_project(), as_of=AS_OF)

        assert [match.talent.id for match in outcome.matches] == ["good"]
        assert [skipped.talent_id for skipped in outcome.skipped] == ["unbounded"]
        assert outcome.skipped[0].error.details[0].field == "experience.total_years"

    def test_skipped_candidates_keep_input_position(self):
        """Test that skipped entries report their pool position even when ids repeat."""
        pool = [
            create_test_talent("dup"),
            create_test_talent("dup", hourlyRate={"min": 100, "max": 50}),
            create_test_talent("other"),
        ]

        outcome = self.ranker.rank_pool(pool, create_test_project(), as_of=AS_OF)

        assert [(skipped.index, skipped.talent_id) for skipped in outcome.skipped] == [(1, "dup")]

    def test_invalid_project_rejects_the_call(self):
        project = create_test_project(skills=[])

        with pytest.raises(ValidationException):
            self.ranker.rank([create_test_talent()], project, as_of=AS_OF)

    def test_empty_pool(self):
        assert self.ranker.rank([], create_test_project(), as_of=AS_OF) == []

    def test_inputs_are_not_mutated(self):
        """Test that ranking leaves the evaluated matches of evaluate untouched."""
        talent, project = create_test_talent(), create_test_project()
        single = self.ranker.evaluate(talent, project, as_of=AS_OF)

        ranked = self.ranker.rank([talent], project, as_of=AS_OF)

        assert single.ranking == 0
        assert ranked[0].ranking == 1
        assert ranked[0].overall_score == single.overall_score


class TestRankerFromSettings:
    """Test cases for building a ranker from settings."""

    def test_loads_location_table(self, tmp_path):
        path = tmp_path / "places.json"
        path.write_text(json.dumps(BC_INTERIOR_PLACES), encoding="utf-8")
        settings = Settings(ranking=RankingSettings(location_table_path=str(path), max_workers=2))

        ranker = CandidateRanker.from_settings(settings)

        assert ranker.max_workers == 2
        assert ranker.location_matcher.resolver.resolve("Kelowna") is not None

    def test_explicit_resolver_wins(self):
        settings = Settings(ranking=RankingSettings(location_table_path="/nonexistent/places.json"))
        resolver = create_test_resolver()

        ranker = CandidateRanker.from_settings(settings, location_resolver=resolver)

        assert ranker.location_matcher.resolver is resolver
