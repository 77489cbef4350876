"""
Configuration module for the candidate matching engine.

This module provides centralized configuration management with:
- Environment-specific settings
- Scoring tables as injectable configuration structs
- Validation and defaults
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    RankingSettings,
    ScoringWeights,
    FitThresholds,
    RiskThresholds,
    SkillScoringConfig,
    LocationScoringConfig,
    ExperienceTierConfig,
    AvailabilityConfig,
    get_settings,
    create_settings,
    get_development_settings,
    get_production_settings,
    get_testing_settings
)

from .logging_config import (
    setup_logging,
    RankingLogger,
    get_matching_logger,
    get_service_logger
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "RankingSettings",
    "ScoringWeights",
    "FitThresholds",
    "RiskThresholds",
    "SkillScoringConfig",
    "LocationScoringConfig",
    "ExperienceTierConfig",
    "AvailabilityConfig",
    "get_settings",
    "create_settings",
    "get_development_settings",
    "get_production_settings",
    "get_testing_settings",
    "setup_logging",
    "RankingLogger",
    "get_matching_logger",
    "get_service_logger"
]
