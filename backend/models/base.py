"""
Shared base model and enumerations for the matching data models.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting both snake_case names and camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        frozen=True
    )


class ExperienceLevel(str, Enum):
    """Proficiency / seniority tiers, ordered from lowest to highest."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def tier(self) -> int:
        return _LEVEL_TIERS[self]


_LEVEL_TIERS = {
    ExperienceLevel.BEGINNER: 1,
    ExperienceLevel.INTERMEDIATE: 2,
    ExperienceLevel.ADVANCED: 3,
    ExperienceLevel.EXPERT: 4,
}


class Importance(str, Enum):
    """Importance tier of a project skill requirement."""
    REQUIRED = "required"
    PREFERRED = "preferred"
    NICE_TO_HAVE = "nice-to-have"


class WorkArrangement(str, Enum):
    """Where the work happens."""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class BudgetType(str, Enum):
    HOURLY = "hourly"
    FIXED = "fixed"


class ClientType(str, Enum):
    STARTUP = "startup"
    SME = "sme"
    ENTERPRISE = "enterprise"
    GOVERNMENT = "government"
    NONPROFIT = "nonprofit"


class TransportationMode(str, Enum):
    DRIVING = "driving"
    TRANSIT = "transit"
    WALKING = "walking"


class FitTier(str, Enum):
    """Coarse bucket derived from the overall score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MarketSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
