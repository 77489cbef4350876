"""
Budget matching: rate-vs-budget alignment and value for money.
"""
from models.project import ProjectRequirements
from models.results import BudgetMatchResult
from models.talent import TalentProfile
from core.scoring import round_half_up
from .base import CandidateMatcher


class BudgetMatcher(CandidateMatcher[BudgetMatchResult]):
    """Scores rate-vs-budget alignment and value."""

    name = "budget"

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> BudgetMatchResult:
        recommendations = []
        rate = talent.hourly_rate
        budget = project.budget

        is_within_budget = rate.min <= budget.max and rate.max >= budget.min

        if is_within_budget:
            budget_alignment = 100
            recommendations.append("✓ Rate aligns with project budget")
        elif rate.min > budget.max:
            # measured from the talent's mid-range rate
            overage = (rate.midpoint - budget.max) / budget.max * 100
            if overage <= 20:
                budget_alignment = 70
                recommendations.append("Slightly above budget - may be negotiable")
            elif overage <= 50:
                budget_alignment = 40
                recommendations.append("Above budget - significant negotiation needed")
            else:
                budget_alignment = 20
                recommendations.append("Well above budget - unlikely to be affordable")
        else:
            budget_alignment = 80
            recommendations.append("Below budget - good value opportunity")

        avg_rate = rate.midpoint
        avg_budget = budget.midpoint

        if avg_rate <= avg_budget * 0.8:
            cost_efficiency = 90
            recommendations.append("Excellent cost efficiency")
        elif avg_rate <= avg_budget:
            cost_efficiency = 75
            recommendations.append("Good cost efficiency")
        elif avg_rate <= avg_budget * 1.2:
            cost_efficiency = 60
            recommendations.append("Moderate cost efficiency")
        else:
            cost_efficiency = 30
            recommendations.append("Lower cost efficiency")

        experience_multiplier = min(talent.experience.total_years / 5, 2)
        reputation_multiplier = talent.reputation.rating / 5
        value_score = min(100, round_half_up(cost_efficiency * experience_multiplier * reputation_multiplier / 2))

        return BudgetMatchResult(
            is_within_budget=is_within_budget,
            budget_alignment=budget_alignment,
            proposed_rate=avg_rate,
            cost_efficiency=cost_efficiency,
            value_score=value_score,
            recommendations=recommendations
        )
