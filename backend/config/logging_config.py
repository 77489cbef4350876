"""
Logging configuration for the candidate matching engine.
Provides logging setup for tracking ranking runs and per-candidate scoring.
"""
import logging
import logging.config
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Dict, Any


def get_log_directory() -> str:
    """Get the logs directory path."""
    project_root = Path(__file__).parent.parent.parent
    log_dir = project_root / "logs"
    log_dir.mkdir(exist_ok=True)
    return str(log_dir)


def get_logging_config(log_to_file: bool = True) -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)-8s | %(message)s",
                "datefmt": "%H:%M:%S"
            },
            "matching": {
                "format": "%(asctime)s | MATCHING | %(levelname)-8s | %(message)s",
                "datefmt": "%H:%M:%S"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "simple",
                "stream": sys.stdout
            }
        },
        "loggers": {
            "": {  # Root logger
                "level": "INFO",
                "handlers": ["console"]
            },
            "matching": {
                "level": "DEBUG",
                "handlers": ["console"],
                "propagate": False
            },
            "services": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if log_to_file:
        log_dir = get_log_directory()
        timestamp = datetime.now().strftime("%Y%m%d")
        config["handlers"].update({
            "file_all": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, f"app_{timestamp}.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "encoding": "utf8"
            },
            "file_matching": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "matching",
                "filename": os.path.join(log_dir, f"matching_{timestamp}.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "encoding": "utf8"
            },
            "file_error": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "ERROR",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, f"error_{timestamp}.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 10,
                "encoding": "utf8"
            }
        })
        config["loggers"][""]["handlers"] += ["file_all", "file_error"]
        config["loggers"]["matching"]["handlers"] += ["file_matching", "file_error"]
        config["loggers"]["services"]["handlers"] += ["file_all", "file_error"]

    return config


def setup_logging(log_level: str = "INFO", log_to_file: bool = True,
                  app_name: str = "Candidate Matching Engine") -> None:
    """Setup logging configuration for the application."""
    config = get_logging_config(log_to_file)
    level = getattr(log_level, "value", log_level).upper()

    if level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        config["loggers"][""]["level"] = level
        config["loggers"]["matching"]["level"] = level
        config["loggers"]["services"]["level"] = level

    logging.config.dictConfig(config)

    logger = logging.getLogger("app")
    logger.info("=" * 60)
    logger.info(f"🚀 {app_name} - Logging Initialized")
    logger.info(f"📝 Log Level: {level}")
    if log_to_file:
        logger.info(f"📁 Log Directory: {get_log_directory()}")
    logger.info("=" * 60)


def get_matching_logger() -> logging.Logger:
    """Get logger specifically for matching operations."""
    return logging.getLogger("matching")


def get_service_logger() -> logging.Logger:
    """Get logger specifically for service operations."""
    return logging.getLogger("services")


class RankingLogger:
    """Utility class for structured ranking logging."""

    def __init__(self, run_name: str = "CandidateRanking"):
        self.logger = get_matching_logger()
        self.run_name = run_name

    def log_ranking_start(self, project_id: str, pool_size: int, workers: int):
        """Log the start of a ranking run."""
        self.logger.info(
            f"🚀 [{self.run_name}] Ranking {pool_size} candidates for project: {project_id} | Workers: {workers}"
        )

    def log_candidate_scored(self, talent_id: str, overall_score: int, fit_score: str):
        """Log a completed candidate evaluation."""
        self.logger.debug(
            f"✅ [{self.run_name}] Scored talent: {talent_id} | Score: {overall_score} | Fit: {fit_score}"
        )

    def log_candidate_skipped(self, talent_id: str, error: Exception):
        """Log a candidate excluded from the ranking."""
        self.logger.warning(f"⚠️ [{self.run_name}] Skipped talent: {talent_id} | Reason: {str(error)}")

    def log_ranking_complete(self, project_id: str, ranked: int, skipped: int, duration: float,
                             top_score: int = None):
        """Log the completion of a ranking run."""
        msg = (f"🎉 [{self.run_name}] Ranking completed for project: {project_id} | "
               f"Ranked: {ranked} | Skipped: {skipped} | Duration: {duration:.3f}s")
        if top_score is not None:
            msg += f" | Top score: {top_score}"
        self.logger.info(msg)

    def log_location_unresolved(self, city: str):
        """Log a location that could not be resolved to coordinates."""
        self.logger.debug(f"🔍 [{self.run_name}] No coordinates for location: {city!r}")


__all__ = [
    "setup_logging",
    "get_matching_logger",
    "get_service_logger",
    "RankingLogger"
]
