"""
Rule-based insight and risk generation on top of the matcher results.

Neither class produces a score that feeds the overall weighted sum; they
only explain and qualify a candidate's evaluation.
"""
from typing import Optional

from config.settings import RiskThresholds
from core.scoring import clamp_score, round_half_up
from models.base import RiskLevel
from models.project import ProjectRequirements
from models.results import (
    AvailabilityMatchResult,
    BudgetMatchResult,
    CandidateInsights,
    ExperienceMatchResult,
    LocationMatchResult,
    ReputationScore,
    RiskAssessment,
    SkillsMatchSummary,
)
from models.talent import TalentProfile

STRENGTH_THRESHOLD = 80


class InsightGenerator:
    """Turns matcher results into strengths, concerns and a recommendation."""

    def __init__(self, strength_threshold: int = STRENGTH_THRESHOLD):
        self.strength_threshold = strength_threshold

    def generate(
        self,
        skills: SkillsMatchSummary,
        location: LocationMatchResult,
        budget: BudgetMatchResult,
        availability: AvailabilityMatchResult,
        experience: ExperienceMatchResult,
        reputation: ReputationScore
    ) -> CandidateInsights:
        strengths = []
        concerns = []

        if skills.overall_score >= self.strength_threshold:
            strengths.append("Excellent technical skill match")
        if location.match_score >= self.strength_threshold:
            strengths.append("Great location fit for local collaboration")
        if reputation.overall_score >= self.strength_threshold:
            strengths.append("Strong reputation and track record")
        if experience.experience_score >= self.strength_threshold:
            strengths.append("Relevant experience level")

        if skills.missing_required_skills:
            concerns.append(f"Missing required skills: {', '.join(skills.missing_required_skills)}")
        if not budget.is_within_budget:
            concerns.append("Rate may be outside project budget")
        if not availability.can_start_on_time:
            concerns.append("May not be available for project start date")

        if len(strengths) >= 3:
            recommendation = "Strong candidate - recommend for interview"
        elif len(strengths) >= 2:
            recommendation = "Good candidate - worth considering"
        else:
            recommendation = "Review carefully - may need additional evaluation"

        return CandidateInsights(
            recommendations=[recommendation],
            strengths=strengths,
            concerns=concerns
        )


class RiskAssessor:
    """Derives a hiring risk tier and its mitigations."""

    def __init__(self, thresholds: Optional[RiskThresholds] = None):
        self.thresholds = thresholds or RiskThresholds()

    def assess(self, talent: TalentProfile, project: ProjectRequirements, overall_score: int) -> RiskAssessment:
        """
        Assess hiring risk for an evaluated candidate.

        The tier comes from the overall score alone; specific factors are
        appended afterwards and only lower the confidence level.
        """
        risk_factors = []
        mitigation_strategies = []

        if overall_score >= self.thresholds.low:
            overall_risk = RiskLevel.LOW
        elif overall_score >= self.thresholds.medium:
            overall_risk = RiskLevel.MEDIUM
            risk_factors.append("Moderate overall match score")
            mitigation_strategies.append("Conduct thorough interview to assess fit")
        else:
            overall_risk = RiskLevel.HIGH
            risk_factors.append("Low overall match score")
            mitigation_strategies.append("Consider alternative candidates")

        if not talent.verification.identity_verified:
            risk_factors.append("Identity not verified")
            mitigation_strategies.append("Require identity verification before hiring")

        if talent.experience.success_rate < self.thresholds.min_success_rate:
            risk_factors.append("Lower than average success rate")
            mitigation_strategies.append("Check references carefully")

        if talent.hourly_rate.min > project.budget.max:
            risk_factors.append("Rate above budget")
            mitigation_strategies.append("Negotiate rate or adjust project scope")

        confidence_level = round_half_up(clamp_score(
            overall_score - len(risk_factors) * self.thresholds.confidence_penalty_per_factor
        ))

        return RiskAssessment(
            overall_risk=overall_risk,
            risk_factors=risk_factors,
            mitigation_strategies=mitigation_strategies,
            confidence_level=confidence_level
        )
