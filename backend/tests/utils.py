"""
Test utilities and helper functions.
"""

from models.results import CandidateMatch

SUB_SCORE_FIELDS = [
    ("skills_match", "overall_score"),
    ("skills_match", "required_skills_match"),
    ("skills_match", "preferred_skills_match"),
    ("location_match", "match_score"),
    ("budget_match", "budget_alignment"),
    ("budget_match", "cost_efficiency"),
    ("budget_match", "value_score"),
    ("availability_match", "schedule_alignment"),
    ("availability_match", "timeline_compatibility"),
    ("experience_match", "experience_score"),
    ("experience_match", "project_complexity_fit"),
    ("reputation_score", "overall_score"),
    ("verification_score", "overall_score"),
    ("portfolio_match", "relevance_score"),
    ("portfolio_match", "quality_score"),
    ("portfolio_match", "diversity_score"),
    ("risk_assessment", "confidence_level"),
]


class TestHelper:
    """Helper class for common test operations."""

    __test__ = False

    @staticmethod
    def assert_scores_in_range(match: CandidateMatch):
        """Assert that every sub-score and the overall score lie in [0, 100]."""
        assert 0 <= match.overall_score <= 100
        for section, field in SUB_SCORE_FIELDS:
            value = getattr(getattr(match, section), field)
            assert 0 <= value <= 100, f"{section}.{field} out of range: {value}"

    @staticmethod
    def assert_ranked(matches):
        """Assert that matches are sorted by score and ranked 1..N."""
        scores = [match.overall_score for match in matches]
        assert scores == sorted(scores, reverse=True)
        assert [match.ranking for match in matches] == list(range(1, len(matches) + 1))

    @staticmethod
    def assert_response_success(response):
        """Assert that a service response indicates success."""
        assert response.success is True
        assert response.message is not None
