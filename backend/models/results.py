"""
Result models produced by the matchers and the candidate ranker.

Every model here is frozen: results are created fresh per ranking run and
never mutated afterwards.
"""
from typing import Annotated, List, Optional
from pydantic import Field

from .base import CamelModel, FitTier, MarketSize, RiskLevel, TransportationMode
from .project import SkillRequirement
from .talent import TalentProfile, TalentSkill


Score = Annotated[int, Field(ge=0, le=100)]


class SkillMatchResult(CamelModel):
    """Score of one project requirement against the talent's skills."""
    skill: str
    required: bool
    talent_has_skill: bool
    experience_level_match: bool = False
    experience_years_match: bool = False
    match_score: Score
    talent_skill: Optional[TalentSkill] = None
    requirement: Optional[SkillRequirement] = None


class SkillsMatchSummary(CamelModel):
    overall_score: Score
    required_skills_match: Score
    preferred_skills_match: Score
    total_required_skills: int = 0
    total_preferred_skills: int = 0
    matched_required_skills: int = 0
    matched_preferred_skills: int = 0
    missing_required_skills: List[str] = Field(default_factory=list)
    missing_preferred_skills: List[str] = Field(default_factory=list)
    bonus_skills: List[str] = Field(default_factory=list)
    skill_matches: List[SkillMatchResult] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class SkillSubstitute(CamelModel):
    missing: str
    substitutes: List[str]


class SkillDiversity(CamelModel):
    diversity_score: Score
    category_coverage: Score
    unique_categories: List[str] = Field(default_factory=list)


class LocationMatchResult(CamelModel):
    distance: float = Field(ge=0.0, description="Kilometers, one decimal")
    match_score: Score
    is_within_radius: bool
    travel_time: Optional[int] = Field(default=None, description="Estimated minutes")
    transportation_mode: TransportationMode = TransportationMode.DRIVING
    work_arrangement_compatible: bool
    recommendations: List[str] = Field(default_factory=list)


class NearbyPlace(CamelModel):
    city: str
    distance: float
    population: int = 0


class RegionalMarketScore(CamelModel):
    market_score: Score
    market_size: MarketSize
    competition_level: RiskLevel
    recommendations: List[str] = Field(default_factory=list)


class BudgetMatchResult(CamelModel):
    is_within_budget: bool
    budget_alignment: Score
    proposed_rate: Optional[float] = None
    cost_efficiency: Score
    value_score: Score
    recommendations: List[str] = Field(default_factory=list)


class AvailabilityMatchResult(CamelModel):
    can_start_on_time: bool
    has_capacity: bool
    schedule_alignment: Score
    timeline_compatibility: Score
    recommendations: List[str] = Field(default_factory=list)


class ExperienceMatchResult(CamelModel):
    level_match: bool
    experience_score: Score
    relevant_experience: float
    project_complexity_fit: Score
    recommendations: List[str] = Field(default_factory=list)


class ReputationScore(CamelModel):
    overall_score: Score
    rating_score: Score
    reliability_score: Score
    responsiveness_score: Score
    track_record_score: Score
    recommendations: List[str] = Field(default_factory=list)


class VerificationScore(CamelModel):
    overall_score: Score
    trust_score: Score
    credibility_score: Score
    risk_level: RiskLevel
    recommendations: List[str] = Field(default_factory=list)


class PortfolioMatchResult(CamelModel):
    relevance_score: Score
    quality_score: Score
    diversity_score: Score
    has_relevant_work: bool
    recommendations: List[str] = Field(default_factory=list)


class RiskAssessment(CamelModel):
    overall_risk: RiskLevel
    risk_factors: List[str] = Field(default_factory=list)
    mitigation_strategies: List[str] = Field(default_factory=list)
    confidence_level: Score


class CandidateInsights(CamelModel):
    recommendations: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)


class CandidateMatch(CamelModel):
    """Complete evaluation of one talent against one project."""
    talent: TalentProfile
    overall_score: Score
    ranking: int = Field(default=0, ge=0, description="1-based position; 0 until the pool is sorted")
    skills_match: SkillsMatchSummary
    location_match: LocationMatchResult
    budget_match: BudgetMatchResult
    availability_match: AvailabilityMatchResult
    experience_match: ExperienceMatchResult
    reputation_score: ReputationScore
    verification_score: VerificationScore
    portfolio_match: PortfolioMatchResult
    risk_assessment: RiskAssessment
    recommendations: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    fit_score: FitTier

    def with_ranking(self, ranking: int) -> "CandidateMatch":
        """Copy of this match placed at the given 1-based position."""
        return self.model_copy(update={"ranking": ranking})
