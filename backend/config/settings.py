"""
Configuration management system for the candidate matching engine.

This module provides:
- Environment-specific configuration (dev/staging/prod)
- Pydantic-based settings validation
- Scoring tables as named configuration structs
- Centralized configuration access
"""

import math
import os
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Available log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ScoringWeights(BaseModel):
    """Weights of each matcher in the overall score. Must sum to 1.0."""

    skills: float = Field(default=0.30, ge=0.0, le=1.0)
    location: float = Field(default=0.20, ge=0.0, le=1.0)
    budget: float = Field(default=0.15, ge=0.0, le=1.0)
    experience: float = Field(default=0.12, ge=0.0, le=1.0)
    reputation: float = Field(default=0.10, ge=0.0, le=1.0)
    availability: float = Field(default=0.08, ge=0.0, le=1.0)
    verification: float = Field(default=0.03, ge=0.0, le=1.0)
    portfolio: float = Field(default=0.02, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_total(self):
        if not math.isclose(self.total(), 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {self.total():.4f}")
        return self

    def as_dict(self) -> Dict[str, float]:
        """Weights keyed by matcher name."""
        return self.model_dump()

    def total(self) -> float:
        return math.fsum(self.model_dump().values())


class FitThresholds(BaseModel):
    """Overall-score floors for each fit tier."""

    excellent: int = Field(default=85, ge=0, le=100)
    good: int = Field(default=70, ge=0, le=100)
    fair: int = Field(default=55, ge=0, le=100)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self):
        if not self.excellent >= self.good >= self.fair:
            raise ValueError("Fit thresholds must be non-increasing: excellent >= good >= fair")
        return self


class RiskThresholds(BaseModel):
    """Overall-score floors for risk tiers and the risk-factor rules."""

    low: int = Field(default=75, ge=0, le=100)
    medium: int = Field(default=55, ge=0, le=100)
    min_success_rate: float = Field(default=80.0, ge=0.0, le=100.0)
    confidence_penalty_per_factor: int = Field(default=10, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self):
        if self.low < self.medium:
            raise ValueError("Low-risk threshold must not be below the medium-risk threshold")
        return self


class SkillScoringConfig(BaseModel):
    """Point table for single-skill scoring."""

    importance_weights: Dict[str, float] = Field(
        default_factory=lambda: {"required": 1.0, "preferred": 0.7, "nice-to-have": 0.3}
    )
    possession_points: int = 40
    level_match_points: int = 30
    level_bonus_per_tier: int = 5
    level_penalty_per_tier: int = 10
    level_unspecified_points: int = 15
    years_match_points: int = 20
    years_bonus_points: int = 10
    years_bonus_ratio: float = 1.5
    years_penalty_per_year: int = 5
    years_unspecified_points: int = 10
    verified_points: int = 10
    endorsement_points: int = 2
    endorsement_cap: int = 10
    recent_use_points: int = 5
    recent_use_months: int = 6
    stale_use_points: int = 2
    stale_use_months: int = 12
    match_threshold: int = 70

    model_config = {"frozen": True}


class LocationScoringConfig(BaseModel):
    """Distance and travel tables for location scoring."""

    # (upper bound km, points); the last band catches everything beyond
    distance_bands: List[Tuple[float, int]] = Field(
        default_factory=lambda: [(0, 40), (5, 35), (15, 30), (30, 25), (50, 20), (100, 15), (200, 10)]
    )
    beyond_distance_points: int = 5
    walking_max_km: float = 2.0
    transit_max_km: float = 50.0
    onsite_hybrid_max_km: float = 50.0
    speeds_kmh: Dict[str, float] = Field(
        default_factory=lambda: {"driving": 60.0, "transit": 35.0, "walking": 5.0}
    )
    travel_buffers: Dict[str, float] = Field(
        default_factory=lambda: {"driving": 1.2, "transit": 1.5, "walking": 1.1}
    )
    regional_bonus: int = 5
    same_city_bonus: int = 5

    model_config = {"frozen": True}


class ExperienceTierConfig(BaseModel):
    """Years-of-experience to seniority tier heuristic."""

    years_per_tier: float = Field(default=2.0, gt=0)
    max_tier: int = Field(default=4, ge=1)

    model_config = {"frozen": True}


class AvailabilityConfig(BaseModel):
    """Capacity assumptions for availability scoring."""

    full_time_hours: float = Field(default=40.0, gt=0)

    model_config = {"frozen": True}


class RankingSettings(BaseSettings):
    """Candidate ranking runtime settings."""

    max_workers: Optional[int] = Field(default=None, description="Worker threads for pool evaluation (None = CPU count)")
    location_table_path: Optional[str] = Field(default=None, description="JSON file with known places for name lookup")

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    fit_thresholds: FitThresholds = Field(default_factory=FitThresholds)
    risk_thresholds: RiskThresholds = Field(default_factory=RiskThresholds)
    skills: SkillScoringConfig = Field(default_factory=SkillScoringConfig)
    location: LocationScoringConfig = Field(default_factory=LocationScoringConfig)
    experience: ExperienceTierConfig = Field(default_factory=ExperienceTierConfig)
    availability: AvailabilityConfig = Field(default_factory=AvailabilityConfig)

    @field_validator('max_workers')
    def validate_max_workers(cls, v):
        if v is not None and v < 1:
            raise ValueError('max_workers must be at least 1')
        return v

    model_config = {
        "env_prefix": "RANKING_",
        "env_nested_delimiter": "__"
    }


class Settings(BaseSettings):
    """Main application settings."""

    app_name: str = Field(default="Candidate Matching Engine", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Application environment")

    # Logging settings
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    log_file: bool = Field(default=True, description="Enable file logging")

    ranking: RankingSettings = Field(default_factory=RankingSettings)

    @field_validator('environment', mode='before')
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_level', mode='before')
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()


def get_development_settings() -> Settings:
    """Get development-specific settings."""
    settings = Settings()
    settings.log_level = LogLevel.DEBUG
    return settings


def get_production_settings() -> Settings:
    """Get production-specific settings."""
    settings = Settings()
    settings.log_level = LogLevel.INFO
    return settings


def get_testing_settings() -> Settings:
    """Get testing-specific settings."""
    settings = Settings()
    settings.log_level = LogLevel.WARNING
    settings.log_file = False
    return settings


def create_settings(environment: Optional[str] = None) -> Settings:
    """Create settings based on environment."""
    env = Environment((environment or os.getenv("ENVIRONMENT", Environment.DEVELOPMENT.value)).lower())

    if env == Environment.DEVELOPMENT:
        return get_development_settings()
    elif env == Environment.PRODUCTION:
        return get_production_settings()
    elif env == Environment.TESTING:
        return get_testing_settings()
    else:
        return get_settings()
