"""
Reputation scoring: rating, reliability, responsiveness and review history.
"""
from typing import Optional

from core.scoring import round_half_up
from models.project import ProjectRequirements
from models.results import ReputationScore
from models.talent import TalentProfile
from .base import CandidateMatcher


class ReputationScorer(CandidateMatcher[ReputationScore]):
    name = "reputation"

    def evaluate(self, talent: TalentProfile, project: Optional[ProjectRequirements] = None) -> ReputationScore:
        recommendations = []
        reputation = talent.reputation

        rating_score = round_half_up(reputation.rating / 5 * 100)
        reliability_score = round_half_up(reputation.reliability)

        if reputation.response_time <= 1:
            responsiveness_score = 100
            recommendations.append("✓ Very responsive (< 1 hour)")
        elif reputation.response_time <= 4:
            responsiveness_score = 80
            recommendations.append("✓ Quick responder (< 4 hours)")
        elif reputation.response_time <= 24:
            responsiveness_score = 60
            recommendations.append("Responds within 24 hours")
        else:
            responsiveness_score = 30
            recommendations.append("Slower response time")

        track_record_score = min(100, round_half_up(reputation.review_count / 10 * 100))

        overall_score = round_half_up(
            rating_score * 0.4 +
            reliability_score * 0.3 +
            responsiveness_score * 0.2 +
            track_record_score * 0.1
        )

        if overall_score >= 90:
            recommendations.append("✓ Excellent reputation")
        elif overall_score >= 75:
            recommendations.append("✓ Good reputation")
        elif overall_score >= 60:
            recommendations.append("Moderate reputation")
        else:
            recommendations.append("⚠ Limited reputation data")

        return ReputationScore(
            overall_score=overall_score,
            rating_score=rating_score,
            reliability_score=reliability_score,
            responsiveness_score=responsiveness_score,
            track_record_score=track_record_score,
            recommendations=recommendations
        )
