"""
Request and response schemas for candidate ranking and evaluation.

Candidates arrive as raw payloads so that one malformed record can be
rejected on its own without failing the request.
"""

from datetime import date
from typing import Any, Dict, List, Optional
from pydantic import Field

from models.results import CandidateMatch
from .base import BaseRequest, BaseResponse, BaseSchema, ValidationErrorDetail


class RankCandidatesRequest(BaseRequest):
    """Rank a pool of candidates against one project."""
    project: Dict[str, Any] = Field(..., description="Project requirements payload")
    candidates: List[Dict[str, Any]] = Field(default_factory=list, description="Talent profile payloads")
    as_of: Optional[date] = Field(None, description="Reference date for skill recency (defaults to today)")


class EvaluateCandidateRequest(BaseRequest):
    """Evaluate a single candidate against one project."""
    project: Dict[str, Any] = Field(..., description="Project requirements payload")
    candidate: Dict[str, Any] = Field(..., description="Talent profile payload")
    as_of: Optional[date] = Field(None, description="Reference date for skill recency (defaults to today)")


class RejectedCandidate(BaseSchema):
    """A candidate excluded from ranking because its input was malformed."""
    index: int = Field(..., ge=0, description="Position of the candidate in the request")
    talent_id: Optional[str] = Field(None, description="Talent ID, when present in the payload")
    message: str = Field(..., description="Why the candidate was rejected")
    details: List[ValidationErrorDetail] = Field(default_factory=list)


class RankingResponse(BaseResponse):
    """Ranked matches plus the rejected candidates."""
    project_id: str = Field(..., description="Project the pool was ranked against")
    matches: List[CandidateMatch] = Field(default_factory=list)
    rejected: List[RejectedCandidate] = Field(default_factory=list)
    total_candidates: int = Field(0, ge=0)
    processing_time: float = Field(0.0, ge=0.0, description="Seconds spent ranking")


class EvaluationResponse(BaseResponse):
    """Evaluation of one candidate."""
    match: CandidateMatch
    cache_key: str = Field(..., description="Fingerprint of the evaluated talent and project")
