"""
Talent data models for the candidate matching engine.
"""
from typing import List, Optional
from pydantic import Field
from datetime import date

from .base import CamelModel, ExperienceLevel, WorkArrangement
from .location import Location, LocationPreference


class TalentSkill(CamelModel):
    """A skill held by a talent."""
    skill_name: str
    experience_level: ExperienceLevel
    years_of_experience: float = Field(ge=0.0)
    verified: bool = False
    endorsements: int = Field(default=0, ge=0)
    last_used: Optional[date] = None


class RateRange(CamelModel):
    """Hourly rate range."""
    min: float = Field(ge=0.0)
    max: float = Field(ge=0.0)

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


class Availability(CamelModel):
    hours_per_week: float = Field(ge=0.0, le=168.0)
    start_date: date
    work_arrangement: WorkArrangement
    travel_radius: Optional[float] = Field(default=None, ge=0.0)


class ExperienceSummary(CamelModel):
    total_years: float = Field(ge=0.0)
    relevant_years: float = Field(ge=0.0)
    completed_projects: int = Field(ge=0)
    success_rate: float = Field(ge=0.0, le=100.0)


class ReputationSummary(CamelModel):
    rating: float = Field(ge=0.0, le=5.0)
    review_count: int = Field(ge=0)
    response_time: float = Field(ge=0.0, description="Average response time in hours")
    reliability: float = Field(ge=0.0, le=100.0)


class PortfolioSummary(CamelModel):
    project_count: int = Field(ge=0)
    relevant_projects: int = Field(ge=0)
    has_relevant_work: bool = False


class VerificationStatus(CamelModel):
    identity_verified: bool = False
    skills_verified: bool = False
    background_checked: bool = False
    references_checked: bool = False


class TalentProfile(CamelModel):
    """Complete talent snapshot; immutable input to a ranking run."""
    id: str
    first_name: str = ""
    last_name: str = ""
    display_name: str = ""
    avatar: Optional[str] = None
    location: Location
    skills: List[TalentSkill]
    hourly_rate: RateRange
    availability: Availability
    experience: ExperienceSummary
    reputation: ReputationSummary
    portfolio: PortfolioSummary
    verification: VerificationStatus = Field(default_factory=VerificationStatus)
    preferences: Optional[LocationPreference] = None
