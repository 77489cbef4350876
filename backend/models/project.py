"""
Project requirement models: the demand side of a ranking run.
"""
from typing import List, Optional
from pydantic import Field
from datetime import date

from .base import BudgetType, CamelModel, ClientType, ExperienceLevel, Importance, WorkArrangement
from .location import Location, LocationPreference


class SkillRequirement(CamelModel):
    """A skill the project asks for."""
    skill_name: str
    importance: Importance
    experience_level: Optional[ExperienceLevel] = None
    years_required: Optional[float] = Field(default=None, ge=0.0)


class Budget(CamelModel):
    min: float = Field(ge=0.0)
    max: float = Field(ge=0.0)
    type: BudgetType = BudgetType.HOURLY

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


class Timeline(CamelModel):
    start_date: date
    duration: float = Field(description="Duration in weeks")
    deadline: Optional[date] = None
    is_urgent: bool = False


class ProjectRequirements(CamelModel):
    """Everything a project asks of a candidate."""
    id: str
    title: str = ""
    skills: List[SkillRequirement]
    location: Location
    location_preferences: LocationPreference
    budget: Budget
    timeline: Timeline
    experience_level: ExperienceLevel
    work_arrangement: WorkArrangement
    industry_experience: List[str] = Field(default_factory=list)
    team_size: Optional[int] = Field(default=None, ge=1)
    client_type: ClientType = ClientType.SME
