"""
Candidate ranking: runs every matcher per candidate and orders the pool.

Evaluation of a pool fans out over a thread pool; each evaluation depends
only on its talent, the project and the ranker's configuration. Sorting and
ranking assignment happen once all evaluations have finished.
"""
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from config.logging_config import RankingLogger
from config.settings import (
    AvailabilityConfig,
    ExperienceTierConfig,
    FitThresholds,
    LocationScoringConfig,
    RiskThresholds,
    ScoringWeights,
    Settings,
    SkillScoringConfig,
)
from core.exceptions import ScoringException, ValidationException
from core.scoring import to_score
from models.base import FitTier
from models.project import ProjectRequirements
from models.results import CandidateMatch
from models.talent import TalentProfile
from .availability_matcher import AvailabilityMatcher
from .budget_matcher import BudgetMatcher
from .experience_matcher import ExperienceMatcher
from .insights import InsightGenerator, RiskAssessor
from .location_matcher import LocationMatcher
from .location_resolver import LocationResolver, StaticLocationResolver
from .portfolio_matcher import PortfolioMatcher
from .reputation_scorer import ReputationScorer
from .skills_matcher import SkillsMatcher
from .taxonomy import SkillsTaxonomy
from .verification_scorer import VerificationScorer
from .validation import InputValidator


@dataclass
class SkippedCandidate:
    """A pool entry excluded from ranking, with its input position and the reason."""
    index: int
    talent_id: str
    error: ValidationException


@dataclass
class RankingOutcome:
    """Ranked matches plus the candidates skipped by validation."""
    matches: List[CandidateMatch] = field(default_factory=list)
    skipped: List[SkippedCandidate] = field(default_factory=list)


def fit_tier(score: int, thresholds: Optional[FitThresholds] = None) -> FitTier:
    """Map an overall score onto its fit tier."""
    thresholds = thresholds or FitThresholds()
    if score >= thresholds.excellent:
        return FitTier.EXCELLENT
    if score >= thresholds.good:
        return FitTier.GOOD
    if score >= thresholds.fair:
        return FitTier.FAIR
    return FitTier.POOR


class CandidateRanker:
    """Composition root for the matchers: evaluates and ranks candidates."""

    def __init__(
        self,
        location_resolver: Optional[LocationResolver] = None,
        taxonomy: Optional[SkillsTaxonomy] = None,
        weights: Optional[ScoringWeights] = None,
        fit_thresholds: Optional[FitThresholds] = None,
        risk_thresholds: Optional[RiskThresholds] = None,
        skill_config: Optional[SkillScoringConfig] = None,
        location_config: Optional[LocationScoringConfig] = None,
        experience_config: Optional[ExperienceTierConfig] = None,
        availability_config: Optional[AvailabilityConfig] = None,
        max_workers: Optional[int] = None,
        validator: Optional[InputValidator] = None,
        logger: Optional[RankingLogger] = None
    ):
        self.weights = weights or ScoringWeights()
        self.fit_thresholds = fit_thresholds or FitThresholds()
        self.max_workers = max_workers or os.cpu_count() or 1
        self.validator = validator or InputValidator()
        self.logger = logger or RankingLogger()

        self.skills_matcher = SkillsMatcher(skill_config, taxonomy)
        self.location_matcher = LocationMatcher(
            location_resolver or StaticLocationResolver(), location_config, self.logger
        )
        self.budget_matcher = BudgetMatcher()
        self.availability_matcher = AvailabilityMatcher(availability_config)
        self.experience_matcher = ExperienceMatcher(experience_config)
        self.reputation_scorer = ReputationScorer()
        self.verification_scorer = VerificationScorer()
        self.portfolio_matcher = PortfolioMatcher()
        self.insight_generator = InsightGenerator()
        self.risk_assessor = RiskAssessor(risk_thresholds)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        location_resolver: Optional[LocationResolver] = None,
        taxonomy: Optional[SkillsTaxonomy] = None
    ) -> "CandidateRanker":
        """Build a ranker from application settings.

        When no resolver is given and the settings name a location table,
        the table is loaded into a StaticLocationResolver.
        """
        ranking = settings.ranking
        if location_resolver is None and ranking.location_table_path:
            location_resolver = StaticLocationResolver.from_json(ranking.location_table_path)

        return cls(
            location_resolver=location_resolver,
            taxonomy=taxonomy,
            weights=ranking.weights,
            fit_thresholds=ranking.fit_thresholds,
            risk_thresholds=ranking.risk_thresholds,
            skill_config=ranking.skills,
            location_config=ranking.location,
            experience_config=ranking.experience,
            availability_config=ranking.availability,
            max_workers=ranking.max_workers,
        )

    def evaluate(self, candidate: TalentProfile, project: ProjectRequirements,
                 as_of: Optional[date] = None) -> CandidateMatch:
        """
        Evaluate one candidate against a project.

        Args:
            candidate: Talent to evaluate
            project: Project requirements
            as_of: Reference date for skill recency (defaults to today)

        Returns:
            Complete CandidateMatch with ranking left at 0

        Raises:
            ValidationException: If either input breaks a business rule
        """
        self.validator.validate_project(project)
        self.validator.validate_talent(candidate)
        return self._evaluate(candidate, project, as_of or date.today())

    def _evaluate(self, candidate: TalentProfile, project: ProjectRequirements, as_of: date) -> CandidateMatch:
        skills = self.skills_matcher.evaluate(candidate, project, as_of=as_of)
        location = self.location_matcher.evaluate(candidate, project)
        budget = self.budget_matcher.evaluate(candidate, project)
        availability = self.availability_matcher.evaluate(candidate, project)
        experience = self.experience_matcher.evaluate(candidate, project)
        reputation = self.reputation_scorer.evaluate(candidate, project)
        verification = self.verification_scorer.evaluate(candidate, project)
        portfolio = self.portfolio_matcher.evaluate(candidate, project)

        overall_score = self.overall_score({
            "skills": skills.overall_score,
            "location": location.match_score,
            "budget": budget.value_score,
            "experience": experience.experience_score,
            "reputation": reputation.overall_score,
            "availability": availability.schedule_alignment,
            "verification": verification.overall_score,
            "portfolio": portfolio.relevance_score,
        })

        insights = self.insight_generator.generate(skills, location, budget, availability, experience, reputation)
        risk = self.risk_assessor.assess(candidate, project, overall_score)
        tier = fit_tier(overall_score, self.fit_thresholds)

        self.logger.log_candidate_scored(candidate.id, overall_score, tier.value)

        return CandidateMatch(
            talent=candidate,
            overall_score=overall_score,
            skills_match=skills,
            location_match=location,
            budget_match=budget,
            availability_match=availability,
            experience_match=experience,
            reputation_score=reputation,
            verification_score=verification,
            portfolio_match=portfolio,
            risk_assessment=risk,
            recommendations=insights.recommendations,
            strengths=insights.strengths,
            concerns=insights.concerns,
            fit_score=tier
        )

    def overall_score(self, scores: Dict[str, int]) -> int:
        """Weighted sum of the matcher sub-scores, rounded to an integer score."""
        weights = self.weights.as_dict()
        return to_score(sum(scores[name] * weight for name, weight in weights.items()))

    def rank(self, candidates: Sequence[TalentProfile], project: ProjectRequirements,
             as_of: Optional[date] = None) -> List[CandidateMatch]:
        """Rank a pool, returning only the successfully evaluated matches."""
        return self.rank_pool(candidates, project, as_of=as_of).matches

    def rank_pool(self, candidates: Sequence[TalentProfile], project: ProjectRequirements,
                  as_of: Optional[date] = None) -> RankingOutcome:
        """
        Evaluate every candidate and order the pool by overall score.

        Candidates failing validation are logged and skipped; the rest are
        ranked 1..N by descending score, ties kept in input order.

        Raises:
            ValidationException: If the project itself is invalid
            ScoringException: If evaluating a valid candidate fails unexpectedly
        """
        self.validator.validate_project(project)
        as_of = as_of or date.today()
        start_time = time.time()

        outcome = RankingOutcome()
        valid: List[TalentProfile] = []
        for index, candidate in enumerate(candidates):
            try:
                self.validator.validate_talent(candidate)
            except ValidationException as e:
                self.logger.log_candidate_skipped(candidate.id, e)
                outcome.skipped.append(SkippedCandidate(index=index, talent_id=candidate.id, error=e))
                continue
            valid.append(candidate)

        workers = max(1, min(self.max_workers, len(valid)))
        self.logger.log_ranking_start(project.id, len(valid), workers)

        try:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                evaluated = list(executor.map(lambda talent: self._evaluate(talent, project, as_of), valid))
        except Exception as e:
            raise ScoringException(
                f"Failed to rank candidates for project {project.id}: {str(e)}",
                original_exception=e
            )

        ordered = sorted(evaluated, key=lambda match: match.overall_score, reverse=True)
        outcome.matches = [match.with_ranking(position) for position, match in enumerate(ordered, start=1)]

        self.logger.log_ranking_complete(
            project.id,
            ranked=len(outcome.matches),
            skipped=len(outcome.skipped),
            duration=time.time() - start_time,
            top_score=outcome.matches[0].overall_score if outcome.matches else None
        )
        return outcome
