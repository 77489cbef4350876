"""
Integration tests for the matching service boundary.
"""

import pytest

from config import get_testing_settings
from core.exceptions import ValidationException
from schema import ErrorResponse, EvaluateCandidateRequest, RankCandidatesRequest
from matching import InputValidator
from services import MatchingService, ValidationService
from tests.fixtures import (
    AS_OF,
    create_test_project,
    create_test_project_payload,
    create_test_resolver,
    create_test_talent,
    create_test_talent_payload,
)
from tests.utils import TestHelper


class TestMatchingService:
    """Test cases for ranking and evaluation through the service."""

    def setup_method(self):
        self.service = MatchingService(get_testing_settings(), location_resolver=create_test_resolver())

    def test_rank_candidates(self):
        """Test ranking raw payloads end to end."""
        request = RankCandidatesRequest(
            project=create_test_project_payload(),
            candidates=[
                create_test_talent_payload("weak", skills=[
                    {"skillName": "Vue", "experienceLevel": "expert", "yearsOfExperience": 6}
                ]),
                create_test_talent_payload("strong"),
            ],
            as_of=AS_OF,
            trace_id="trace-123"
        )

        response = self.service.rank_candidates(request)

        TestHelper.assert_response_success(response)
        assert response.trace_id == "trace-123"
        assert response.project_id == "project_001"
        assert response.total_candidates == 2
        assert [match.talent.id for match in response.matches] == ["strong", "weak"]
        TestHelper.assert_ranked(response.matches)
        assert response.rejected == []

    def test_malformed_candidates_are_rejected_individually(self):
        """Test that malformed payloads are rejected while the rest are ranked."""
        missing_field = create_test_talent_payload("missing_field")
        del missing_field["hourlyRate"]
        inverted_rate = create_test_talent_payload("inverted_rate", hourlyRate={"min": 90, "max": 10})

        request = RankCandidatesRequest(
            project=create_test_project_payload(),
            candidates=[create_test_talent_payload("ok"), missing_field, inverted_rate],
            as_of=AS_OF
        )

        response = self.service.rank_candidates(request)

        assert [match.talent.id for match in response.matches] == ["ok"]
        assert [(r.index, r.talent_id) for r in response.rejected] == [(1, "missing_field"), (2, "inverted_rate")]
        assert response.rejected[0].details[0].field == "hourlyRate"
        assert response.rejected[1].details[0].field == "hourly_rate"

    def test_malformed_project_rejects_the_call(self):
        request = RankCandidatesRequest(
            project=create_test_project_payload(skills=[]),
            candidates=[create_test_talent_payload()],
        )

        with pytest.raises(ValidationException) as exc_info:
            self.service.rank_candidates(request)

        error = ErrorResponse.from_exception(exc_info.value)
        assert error.success is False
        assert error.error_code == "INVALID_INPUT"
        assert error.category == "validation"
        assert error.details[0].code == "EMPTY_COLLECTION"

    def test_evaluate_candidate(self):
        request = EvaluateCandidateRequest(
            project=create_test_project_payload(),
            candidate=create_test_talent_payload(),
            as_of=AS_OF
        )

        response = self.service.evaluate_candidate(request)

        TestHelper.assert_response_success(response)
        assert response.match.overall_score == 84
        assert len(response.cache_key) == 64

    def test_evaluate_candidate_invalid_payload(self):
        request = EvaluateCandidateRequest(
            project=create_test_project_payload(),
            candidate={"id": "broken"}
        )

        with pytest.raises(ValidationException):
            self.service.evaluate_candidate(request)

    def test_service_stats(self):
        stats = self.service.get_service_stats()

        assert stats["known_places"] == 6
        assert stats["weights"]["skills"] == 0.30


class TestEvaluationCacheKey:
    """Test cases for cache keys over candidate and project content."""

    def test_same_inputs_same_key(self):
        key = MatchingService.evaluation_cache_key(create_test_talent(), create_test_project())

        assert key == MatchingService.evaluation_cache_key(create_test_talent(), create_test_project())

    def test_swapped_skill_tiers_change_the_key(self):
        """Test that the same candidate against a project with swapped tiers is keyed separately."""
        talent = create_test_talent()
        original = create_test_project()
        swapped = create_test_project(skills=[
            {"skillName": "React", "importance": "preferred", "experienceLevel": "intermediate", "yearsRequired": 2},
            {"skillName": "TypeScript", "importance": "required"},
        ])

        assert original.id == swapped.id
        assert (MatchingService.evaluation_cache_key(talent, original)
                != MatchingService.evaluation_cache_key(talent, swapped))

    def test_candidate_change_changes_the_key(self):
        project = create_test_project()

        assert (MatchingService.evaluation_cache_key(create_test_talent(), project)
                != MatchingService.evaluation_cache_key(create_test_talent(hourlyRate={"min": 61, "max": 80}), project))


class _RateOnlyValidator(InputValidator):
    """Accepts inverted rate ranges so the ranker's own validator sees them."""

    def talent_errors(self, talent):
        return [error for error in super().talent_errors(talent) if error.field != "hourly_rate"]


class TestMatchingServiceComposition:
    """Test cases for service wiring."""

    def test_configures_logging_from_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "services.matching_service.setup_logging",
            lambda level, to_file, app_name: calls.append((level, to_file, app_name))
        )

        MatchingService(get_testing_settings(), location_resolver=create_test_resolver())

        assert calls == [("WARNING", False, "Candidate Matching Engine v1.0.0")]

    def test_ranker_skips_map_back_to_payload_index(self):
        """Test that ranker-side rejections report their payload index when ids repeat."""
        service = MatchingService(
            get_testing_settings(),
            location_resolver=create_test_resolver(),
            validation_service=ValidationService(_RateOnlyValidator())
        )
        request = RankCandidatesRequest(
            project=create_test_project_payload(),
            candidates=[
                {"id": "broken"},
                create_test_talent_payload("dup", hourlyRate={"min": 100, "max": 50}),
                create_test_talent_payload("dup"),
            ],
            as_of=AS_OF
        )

        response = service.rank_candidates(request)

        assert [match.talent.id for match in response.matches] == ["dup"]
        assert [(r.index, r.talent_id) for r in response.rejected] == [(0, "broken"), (1, "dup")]
        assert response.rejected[1].details[0].field == "hourly_rate"
