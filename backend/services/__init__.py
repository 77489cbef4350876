"""
Services module for the candidate matching engine.

This module provides the service layer that sits between raw payloads and
the matching engine.

Available services:
- MatchingService: Candidate ranking and single-candidate evaluation
- ValidationService: Payload parsing and input business rules
"""

from .validation_service import ValidationService
from .matching_service import MatchingService

__all__ = [
    "MatchingService",
    "ValidationService"
]
