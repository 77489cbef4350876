"""
Experience matching: seniority and track-record fit.

The talent's seniority tier is estimated from total years of experience
(`ceil(years / years_per_tier)`, capped at `max_tier`). This is a heuristic
and does not correspond exactly to the proficiency tiers used for skills.
"""
import math
from typing import Optional

from config.settings import ExperienceTierConfig
from models.project import ProjectRequirements
from models.results import ExperienceMatchResult
from models.talent import TalentProfile
from .base import CandidateMatcher


class ExperienceMatcher(CandidateMatcher[ExperienceMatchResult]):
    """Scores seniority and track-record fit."""

    name = "experience"

    def __init__(self, config: Optional[ExperienceTierConfig] = None):
        self.config = config or ExperienceTierConfig()

    def talent_tier(self, total_years: float) -> int:
        return min(self.config.max_tier, math.ceil(total_years / self.config.years_per_tier))

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> ExperienceMatchResult:
        recommendations = []
        score = 0
        experience = talent.experience

        required_tier = project.experience_level.tier
        talent_tier = self.talent_tier(experience.total_years)

        level_match = talent_tier >= required_tier
        if level_match:
            score += 40
            if talent_tier > required_tier:
                score += (talent_tier - required_tier) * 5
                recommendations.append("✓ Exceeds experience requirements")
            else:
                recommendations.append("✓ Meets experience requirements")
        else:
            score += max(0, 40 - (required_tier - talent_tier) * 15)
            recommendations.append("Below required experience level")

        if experience.relevant_years >= 3:
            score += 25
            recommendations.append("✓ Strong relevant experience")
        elif experience.relevant_years >= 1:
            score += 15
            recommendations.append("Some relevant experience")
        else:
            score += 5
            recommendations.append("Limited relevant experience")

        if experience.completed_projects >= 20:
            score += 20
            recommendations.append("✓ Extensive project history")
        elif experience.completed_projects >= 10:
            score += 15
            recommendations.append("Good project history")
        elif experience.completed_projects >= 5:
            score += 10
            recommendations.append("Moderate project history")
        else:
            score += 5
            recommendations.append("Limited project history")

        if experience.success_rate >= 95:
            score += 15
            recommendations.append("✓ Excellent success rate")
        elif experience.success_rate >= 85:
            score += 10
            recommendations.append("Good success rate")
        elif experience.success_rate >= 75:
            score += 5
            recommendations.append("Moderate success rate")
        else:
            recommendations.append("⚠ Lower success rate - review carefully")

        experience_score = min(100, score)
        project_complexity_fit = min(100, math.floor(experience_score + experience.total_years * 2))

        return ExperienceMatchResult(
            level_match=level_match,
            experience_score=experience_score,
            relevant_experience=experience.relevant_years,
            project_complexity_fit=project_complexity_fit,
            recommendations=recommendations
        )
