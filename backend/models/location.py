"""
Location models shared by talent profiles and project requirements.
"""
from typing import List, Optional
from pydantic import Field

from .base import CamelModel, WorkArrangement


class Location(CamelModel):
    """Postal location with optional pre-resolved coordinates."""
    address: str = ""
    city: str
    province: str = ""
    postal_code: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    country: str = ""

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class LocationPreference(CamelModel):
    """Geographic and work-arrangement preferences."""
    max_radius: float = Field(description="Maximum radius in kilometers")
    preferred_cities: List[str] = Field(default_factory=list)
    work_arrangement: WorkArrangement
    hybrid_percentage: Optional[float] = Field(default=None, ge=0.0, le=100.0, description="Share of on-site time")
    travel_willingness: Optional[float] = Field(default=None, ge=0.0, description="Max km willing to travel")
