"""
Portfolio matching: relevance, quality and diversity of past work.
"""
from core.scoring import round_half_up
from models.project import ProjectRequirements
from models.results import PortfolioMatchResult
from models.talent import TalentProfile
from .base import CandidateMatcher


class PortfolioMatcher(CandidateMatcher[PortfolioMatchResult]):
    name = "portfolio"

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> PortfolioMatchResult:
        portfolio = talent.portfolio
        recommendations = []

        if portfolio.has_relevant_work:
            relevance_score = min(100, round_half_up(
                portfolio.relevant_projects / max(1, portfolio.project_count) * 100
            ))
            recommendations.append("✓ Has relevant portfolio work")
        else:
            relevance_score = 0
            recommendations.append("No directly relevant portfolio work")

        quality_score = min(100, portfolio.project_count * 10)
        diversity_score = min(100, portfolio.project_count * 5)

        if portfolio.project_count >= 10:
            recommendations.append("✓ Substantial portfolio")
        elif portfolio.project_count == 0:
            recommendations.append("No portfolio projects to review")

        return PortfolioMatchResult(
            relevance_score=relevance_score,
            quality_score=quality_score,
            diversity_score=diversity_score,
            has_relevant_work=portfolio.has_relevant_work,
            recommendations=recommendations
        )
