"""
Name -> coordinate resolution for locations without explicit coordinates.

The engine carries no geographic data of its own. A resolver is injected
into the location matcher; `StaticLocationResolver` is a table-backed
implementation that can be loaded from a JSON file.
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import Field, ValidationError

from core.exceptions import ConfigurationException, ErrorCode
from models.base import CamelModel


def normalize_place_name(name: str) -> str:
    return name.strip().lower()


class ResolvedPlace(CamelModel):
    """A known place with its coordinates and regional metadata."""
    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    population: int = Field(default=0, ge=0)
    region: Optional[str] = Field(default=None, description="Regional cluster the place belongs to")
    is_transit_hub: bool = False


class LocationResolver(ABC):
    """Strategy for resolving place names to coordinates."""

    @abstractmethod
    def resolve(self, name: str) -> Optional[ResolvedPlace]:
        """Resolve a place name, or None when it is unknown."""
        pass

    def places(self) -> List[ResolvedPlace]:
        """Enumerate known places. Resolvers backed by open-ended services return nothing."""
        return []


class StaticLocationResolver(LocationResolver):
    """Resolver backed by an in-memory table of places."""

    def __init__(self, places: Iterable[ResolvedPlace] = ()):
        self._places: Dict[str, ResolvedPlace] = {}
        for place in places:
            self._places[normalize_place_name(place.name)] = place

    def resolve(self, name: str) -> Optional[ResolvedPlace]:
        if not name:
            return None
        return self._places.get(normalize_place_name(name))

    def places(self) -> List[ResolvedPlace]:
        return list(self._places.values())

    def __len__(self) -> int:
        return len(self._places)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "StaticLocationResolver":
        """Load a resolver from a JSON list of place records."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f)
            return cls(ResolvedPlace.model_validate(record) for record in records)
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            raise ConfigurationException(
                f"Failed to load location table from {path}: {str(e)}",
                error_code=ErrorCode.LOCATION_TABLE_ERROR,
                original_exception=e
            )
