"""
Schema module for the candidate matching engine.

This module provides the request/response envelopes used at the in-process
service boundary:
- Base classes and the standardized error payload
- Ranking and single-candidate evaluation schemas

Usage:
    from schema import RankCandidatesRequest, RankingResponse
    from schema.base import ErrorResponse
"""

# Base schemas and common utilities
from .base import (
    BaseSchema,
    BaseRequest,
    BaseResponse,
    ValidationErrorDetail,
    ErrorResponse
)

# Matching schemas
from .matching import (
    RankCandidatesRequest,
    EvaluateCandidateRequest,
    RejectedCandidate,
    RankingResponse,
    EvaluationResponse
)

__all__ = [
    # Base schemas
    "BaseSchema",
    "BaseRequest",
    "BaseResponse",
    "ValidationErrorDetail",
    "ErrorResponse",

    # Matching schemas
    "RankCandidatesRequest",
    "EvaluateCandidateRequest",
    "RejectedCandidate",
    "RankingResponse",
    "EvaluationResponse"
]
