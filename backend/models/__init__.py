"""
Models package for the candidate matching engine.
"""
from .base import (
    CamelModel,
    ExperienceLevel,
    Importance,
    WorkArrangement,
    BudgetType,
    ClientType,
    TransportationMode,
    FitTier,
    RiskLevel,
    MarketSize
)

from .location import Location, LocationPreference

from .talent import (
    TalentSkill,
    RateRange,
    Availability,
    ExperienceSummary,
    ReputationSummary,
    PortfolioSummary,
    VerificationStatus,
    TalentProfile
)

from .project import (
    SkillRequirement,
    Budget,
    Timeline,
    ProjectRequirements
)

from .results import (
    SkillMatchResult,
    SkillsMatchSummary,
    SkillSubstitute,
    SkillDiversity,
    LocationMatchResult,
    NearbyPlace,
    RegionalMarketScore,
    BudgetMatchResult,
    AvailabilityMatchResult,
    ExperienceMatchResult,
    ReputationScore,
    VerificationScore,
    PortfolioMatchResult,
    RiskAssessment,
    CandidateInsights,
    CandidateMatch
)

__all__ = [
    # Enumerations
    "CamelModel",
    "ExperienceLevel",
    "Importance",
    "WorkArrangement",
    "BudgetType",
    "ClientType",
    "TransportationMode",
    "FitTier",
    "RiskLevel",
    "MarketSize",

    # Inputs
    "Location",
    "LocationPreference",
    "TalentSkill",
    "RateRange",
    "Availability",
    "ExperienceSummary",
    "ReputationSummary",
    "PortfolioSummary",
    "VerificationStatus",
    "TalentProfile",
    "SkillRequirement",
    "Budget",
    "Timeline",
    "ProjectRequirements",

    # Results
    "SkillMatchResult",
    "SkillsMatchSummary",
    "SkillSubstitute",
    "SkillDiversity",
    "LocationMatchResult",
    "NearbyPlace",
    "RegionalMarketScore",
    "BudgetMatchResult",
    "AvailabilityMatchResult",
    "ExperienceMatchResult",
    "ReputationScore",
    "VerificationScore",
    "PortfolioMatchResult",
    "RiskAssessment",
    "CandidateInsights",
    "CandidateMatch"
]
