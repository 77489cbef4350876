"""
Skills matching: how well a talent's skills satisfy a project's requirements.

Each requirement is scored 0-100 against the talent's skill of the same
(case-insensitive) name. Absent skills score zero and are listed as missing;
there is no partial credit for a skill the talent does not have. Requirement
scores are combined as an importance-weighted average.
"""
from datetime import date
from typing import Dict, List, Optional, Sequence

from config.settings import SkillScoringConfig
from core.scoring import clamp_score, round_half_up
from models.base import Importance
from models.project import ProjectRequirements, SkillRequirement
from models.results import SkillDiversity, SkillMatchResult, SkillsMatchSummary, SkillSubstitute
from models.talent import TalentProfile, TalentSkill
from .base import CandidateMatcher
from .taxonomy import SkillsTaxonomy

DAYS_PER_MONTH = 30


def _skill_key(name: str) -> str:
    return name.strip().lower()


class SkillsMatcher(CandidateMatcher[SkillsMatchSummary]):
    """Scores skill-requirement satisfaction for one candidate."""

    name = "skills"

    def __init__(self, config: Optional[SkillScoringConfig] = None,
                 taxonomy: Optional[SkillsTaxonomy] = None):
        self.config = config or SkillScoringConfig()
        self.taxonomy = taxonomy

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements,
                 as_of: Optional[date] = None) -> SkillsMatchSummary:
        return self.match(talent.skills, project.skills, as_of=as_of)

    def match(
        self,
        talent_skills: Sequence[TalentSkill],
        requirements: Sequence[SkillRequirement],
        as_of: Optional[date] = None
    ) -> SkillsMatchSummary:
        """
        Score every requirement against the talent's skills.

        Args:
            talent_skills: Skills held by the talent
            requirements: Ordered project skill requirements
            as_of: Reference date for recency credit (defaults to today)

        Returns:
            Summary with per-requirement matches, missing and bonus skills
        """
        as_of = as_of or date.today()
        talent_skill_map: Dict[str, TalentSkill] = {}
        for skill in talent_skills:
            talent_skill_map[_skill_key(skill.skill_name)] = skill

        skill_matches: List[SkillMatchResult] = []
        missing_required: List[str] = []
        missing_preferred: List[str] = []
        total_weighted_score = 0.0
        max_possible_score = 0.0
        required_matched = 0
        preferred_matched = 0

        for requirement in requirements:
            weight = self.config.importance_weights[requirement.importance.value]
            max_possible_score += 100 * weight
            talent_skill = talent_skill_map.get(_skill_key(requirement.skill_name))

            if talent_skill is None:
                skill_matches.append(SkillMatchResult(
                    skill=requirement.skill_name,
                    required=requirement.importance == Importance.REQUIRED,
                    talent_has_skill=False,
                    match_score=0,
                    requirement=requirement
                ))
                if requirement.importance == Importance.REQUIRED:
                    missing_required.append(requirement.skill_name)
                elif requirement.importance == Importance.PREFERRED:
                    missing_preferred.append(requirement.skill_name)
                continue

            result = self.score_skill(talent_skill, requirement, as_of)
            skill_matches.append(result)
            total_weighted_score += result.match_score * weight

            if result.match_score >= self.config.match_threshold:
                if requirement.importance == Importance.REQUIRED:
                    required_matched += 1
                elif requirement.importance == Importance.PREFERRED:
                    preferred_matched += 1

        required_names = {_skill_key(requirement.skill_name) for requirement in requirements}
        bonus_skills = [
            skill.skill_name for skill in talent_skills
            if _skill_key(skill.skill_name) not in required_names
        ]

        total_required = sum(1 for r in requirements if r.importance == Importance.REQUIRED)
        total_preferred = sum(1 for r in requirements if r.importance == Importance.PREFERRED)

        overall_score = (
            round_half_up(total_weighted_score / max_possible_score * 100) if max_possible_score > 0 else 0
        )
        required_skills_match = (
            round_half_up(required_matched / total_required * 100) if total_required else 100
        )
        preferred_skills_match = (
            round_half_up(preferred_matched / total_preferred * 100) if total_preferred else 100
        )

        recommendations = self._generate_recommendations(
            overall_score, required_skills_match, missing_required, missing_preferred,
            bonus_skills, skill_matches
        )

        return SkillsMatchSummary(
            overall_score=overall_score,
            required_skills_match=required_skills_match,
            preferred_skills_match=preferred_skills_match,
            total_required_skills=total_required,
            total_preferred_skills=total_preferred,
            matched_required_skills=required_matched,
            matched_preferred_skills=preferred_matched,
            missing_required_skills=missing_required,
            missing_preferred_skills=missing_preferred,
            bonus_skills=bonus_skills,
            skill_matches=skill_matches,
            recommendations=recommendations
        )

    def score_skill(self, talent_skill: TalentSkill, requirement: SkillRequirement,
                    as_of: Optional[date] = None) -> SkillMatchResult:
        """Score one talent skill against one requirement (0-100)."""
        cfg = self.config
        as_of = as_of or date.today()
        score = float(cfg.possession_points)
        level_match = False
        years_match = False

        if requirement.experience_level is not None:
            required_tier = requirement.experience_level.tier
            talent_tier = talent_skill.experience_level.tier
            if talent_tier >= required_tier:
                level_match = True
                score += cfg.level_match_points + (talent_tier - required_tier) * cfg.level_bonus_per_tier
            else:
                score -= (required_tier - talent_tier) * cfg.level_penalty_per_tier
        else:
            score += cfg.level_unspecified_points

        if requirement.years_required:
            years = talent_skill.years_of_experience
            if years >= requirement.years_required:
                years_match = True
                score += cfg.years_match_points
                if years >= requirement.years_required * cfg.years_bonus_ratio:
                    score += cfg.years_bonus_points
            else:
                score -= (requirement.years_required - years) * cfg.years_penalty_per_year
        else:
            score += cfg.years_unspecified_points

        if talent_skill.verified:
            score += cfg.verified_points

        if talent_skill.endorsements > 0:
            score += min(talent_skill.endorsements * cfg.endorsement_points, cfg.endorsement_cap)

        if talent_skill.last_used is not None:
            months_since_used = (as_of - talent_skill.last_used).days / DAYS_PER_MONTH
            if months_since_used <= cfg.recent_use_months:
                score += cfg.recent_use_points
            elif months_since_used <= cfg.stale_use_months:
                score += cfg.stale_use_points

        return SkillMatchResult(
            skill=requirement.skill_name,
            required=requirement.importance == Importance.REQUIRED,
            talent_has_skill=True,
            experience_level_match=level_match,
            experience_years_match=years_match,
            match_score=round_half_up(clamp_score(score)),
            talent_skill=talent_skill,
            requirement=requirement
        )

    def _generate_recommendations(
        self,
        overall_score: int,
        required_skills_match: int,
        missing_required: List[str],
        missing_preferred: List[str],
        bonus_skills: List[str],
        skill_matches: List[SkillMatchResult]
    ) -> List[str]:
        recommendations = []

        if overall_score >= 90:
            recommendations.append("Excellent skill match! This candidate meets or exceeds most requirements.")
        elif overall_score >= 75:
            recommendations.append("Strong skill match with good alignment to project needs.")
        elif overall_score >= 60:
            recommendations.append("Moderate skill match. Consider if gaps can be filled through training.")
        elif overall_score >= 40:
            recommendations.append("Limited skill match. Significant training or mentoring may be required.")
        else:
            recommendations.append("Poor skill match. This candidate may not be suitable for the role.")

        if len(missing_required) == 1:
            recommendations.append(f"Missing critical skill: {missing_required[0]}")
        elif missing_required:
            listed = ", ".join(missing_required[:3])
            more = "..." if len(missing_required) > 3 else ""
            recommendations.append(f"Missing {len(missing_required)} critical skills: {listed}{more}")
        elif required_skills_match == 100:
            recommendations.append("✓ All required skills are present")

        if 0 < len(missing_preferred) <= 3:
            recommendations.append(f"Could benefit from: {', '.join(missing_preferred)}")

        if bonus_skills:
            recommendations.append(f"Additional valuable skills: {', '.join(bonus_skills[:3])}")

        below_level = [
            match.skill for match in skill_matches
            if match.talent_has_skill and match.required
            and match.requirement is not None and match.requirement.experience_level is not None
            and not match.experience_level_match
        ]
        if below_level:
            recommendations.append(f"Experience level may be below requirements for: {', '.join(below_level)}")

        return recommendations

    def find_skill_substitutes(self, missing_skills: Sequence[str],
                               talent_skills: Sequence[TalentSkill]) -> List[SkillSubstitute]:
        """Talent skills from the same taxonomy category as each missing skill."""
        if self.taxonomy is None:
            return []

        substitutes = []
        for missing in missing_skills:
            category = self.taxonomy.category_of(missing)
            if category is None:
                continue
            category_skills = {
                _skill_key(name) for name in self.taxonomy.skills_in_category(category)
            }
            related = [
                skill.skill_name for skill in talent_skills
                if _skill_key(skill.skill_name) in category_skills
                and _skill_key(skill.skill_name) != _skill_key(missing)
            ]
            if related:
                substitutes.append(SkillSubstitute(missing=missing, substitutes=related))
        return substitutes

    def calculate_skill_diversity(self, talent_skills: Sequence[TalentSkill]) -> SkillDiversity:
        """Breadth of the talent's skills across taxonomy categories."""
        if self.taxonomy is None or not self.taxonomy.categories():
            return SkillDiversity(diversity_score=0, category_coverage=0)

        unique_categories: List[str] = []
        for skill in talent_skills:
            category = self.taxonomy.category_of(skill.skill_name)
            if category is not None and category not in unique_categories:
                unique_categories.append(category)

        if not unique_categories:
            return SkillDiversity(diversity_score=0, category_coverage=0)

        category_coverage = round_half_up(len(unique_categories) / len(self.taxonomy.categories()) * 100)
        avg_skills_per_category = len(talent_skills) / len(unique_categories)
        diversity_score = round_half_up(clamp_score(
            category_coverage * 0.6 + min(avg_skills_per_category / 3, 1) * 40
        ))

        return SkillDiversity(
            diversity_score=diversity_score,
            category_coverage=min(100, category_coverage),
            unique_categories=unique_categories
        )
