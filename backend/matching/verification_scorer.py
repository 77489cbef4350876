"""
Verification scoring: identity, skills, background and reference checks.
"""
from typing import Optional

from models.base import RiskLevel
from models.project import ProjectRequirements
from models.results import VerificationScore
from models.talent import TalentProfile
from .base import CandidateMatcher

IDENTITY_POINTS = 30
SKILLS_POINTS = 25
BACKGROUND_POINTS = 25
REFERENCES_POINTS = 20


class VerificationScorer(CandidateMatcher[VerificationScore]):
    name = "verification"

    def evaluate(self, talent: TalentProfile, project: Optional[ProjectRequirements] = None) -> VerificationScore:
        recommendations = []
        score = 0
        verification = talent.verification

        if verification.identity_verified:
            score += IDENTITY_POINTS
            recommendations.append("✓ Identity verified")
        else:
            recommendations.append("⚠ Identity not verified")

        if verification.skills_verified:
            score += SKILLS_POINTS
            recommendations.append("✓ Skills verified")

        if verification.background_checked:
            score += BACKGROUND_POINTS
            recommendations.append("✓ Background checked")

        if verification.references_checked:
            score += REFERENCES_POINTS
            recommendations.append("✓ References checked")

        if score >= 75:
            risk_level = RiskLevel.LOW
        elif score >= 50:
            risk_level = RiskLevel.MEDIUM
        else:
            risk_level = RiskLevel.HIGH

        return VerificationScore(
            overall_score=score,
            trust_score=score,
            credibility_score=score,
            risk_level=risk_level,
            recommendations=recommendations
        )
