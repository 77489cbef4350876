"""
Matching module for the candidate matching engine.

This module provides the matchers that score one talent against one project,
the insight and risk rules layered on top of them, and the CandidateRanker
that composes everything into a ranked pool.

Usage:
    from matching import CandidateRanker, StaticLocationResolver
    ranker = CandidateRanker(location_resolver=StaticLocationResolver(places))
    matches = ranker.rank(candidates, project)
"""

from .base import CandidateMatcher
from .taxonomy import SkillsTaxonomy, StaticSkillsTaxonomy
from .location_resolver import LocationResolver, ResolvedPlace, StaticLocationResolver, normalize_place_name
from .skills_matcher import SkillsMatcher
from .location_matcher import LocationMatcher, haversine_distance, check_work_arrangement_compatibility
from .budget_matcher import BudgetMatcher
from .availability_matcher import AvailabilityMatcher
from .experience_matcher import ExperienceMatcher
from .reputation_scorer import ReputationScorer
from .verification_scorer import VerificationScorer
from .portfolio_matcher import PortfolioMatcher
from .insights import InsightGenerator, RiskAssessor
from .validation import InputValidator
from .candidate_ranker import CandidateRanker, RankingOutcome, SkippedCandidate, fit_tier

__all__ = [
    "CandidateMatcher",
    "SkillsTaxonomy",
    "StaticSkillsTaxonomy",
    "LocationResolver",
    "ResolvedPlace",
    "StaticLocationResolver",
    "normalize_place_name",
    "SkillsMatcher",
    "LocationMatcher",
    "haversine_distance",
    "check_work_arrangement_compatibility",
    "BudgetMatcher",
    "AvailabilityMatcher",
    "ExperienceMatcher",
    "ReputationScorer",
    "VerificationScorer",
    "PortfolioMatcher",
    "InsightGenerator",
    "RiskAssessor",
    "InputValidator",
    "CandidateRanker",
    "RankingOutcome",
    "SkippedCandidate",
    "fit_tier"
]
