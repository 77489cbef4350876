"""
Matching Service: the in-process boundary around the candidate ranker.

This service provides:
- Parsing of raw talent/project payloads with per-candidate rejection
- Ranking and single-candidate evaluation
- Cache keys covering both candidate and project content
"""

import hashlib
import time
from typing import Any, Dict, List, Optional

from config import Settings, get_service_logger, get_settings, setup_logging
from core.exceptions import ValidationException
from matching import CandidateRanker, LocationResolver, SkillsTaxonomy
from models.project import ProjectRequirements
from models.talent import TalentProfile
from schema import (
    EvaluateCandidateRequest,
    EvaluationResponse,
    RankCandidatesRequest,
    RankingResponse,
    RejectedCandidate,
    ValidationErrorDetail
)
from .validation_service import ValidationService

logger = get_service_logger()


def _rejection(index: int, talent_id: Optional[str], error: ValidationException) -> RejectedCandidate:
    return RejectedCandidate(
        index=index,
        talent_id=talent_id,
        message=error.message,
        details=[
            ValidationErrorDetail(field=d.field, message=d.message, value=d.value, code=d.code)
            for d in error.details
        ]
    )


class MatchingService:
    """
    Service for ranking and evaluating candidates against a project.

    The service owns no state between calls apart from its configured ranker;
    callers that cache results should key them with evaluation_cache_key.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        location_resolver: Optional[LocationResolver] = None,
        taxonomy: Optional[SkillsTaxonomy] = None,
        validation_service: Optional[ValidationService] = None
    ):
        self.settings = settings or get_settings()
        setup_logging(
            self.settings.log_level.value,
            self.settings.log_file,
            app_name=f"{self.settings.app_name} v{self.settings.app_version}"
        )
        self.ranker = CandidateRanker.from_settings(self.settings, location_resolver, taxonomy)
        self.validation_service = validation_service or ValidationService(self.ranker.validator)

    def rank_candidates(self, request: RankCandidatesRequest) -> RankingResponse:
        """
        Rank raw candidate payloads against a raw project payload.

        Args:
            request: Project payload and candidate payloads

        Returns:
            RankingResponse with ranked matches and rejected candidates

        Raises:
            ValidationException: If the project payload is malformed
        """
        start_time = time.time()
        project = self.validation_service.parse_project(request.project)

        candidates: List[TalentProfile] = []
        positions: List[int] = []
        rejected: List[RejectedCandidate] = []

        for index, payload in enumerate(request.candidates):
            try:
                candidates.append(self.validation_service.parse_talent(payload))
                positions.append(index)
            except ValidationException as e:
                talent_id = payload.get("id")
                logger.warning(f"Rejected candidate #{index} ({talent_id}) for project {project.id}: {e.message}")
                rejected.append(_rejection(index, talent_id, e))

        outcome = self.ranker.rank_pool(candidates, project, as_of=request.as_of)

        # candidates skipped by the ranker's own validator
        for skipped in outcome.skipped:
            rejected.append(_rejection(positions[skipped.index], skipped.talent_id, skipped.error))

        processing_time = time.time() - start_time
        logger.info(
            f"Ranked {len(outcome.matches)} of {len(request.candidates)} candidates "
            f"for project {project.id} in {processing_time:.3f}s"
        )

        return RankingResponse(
            message=f"Ranked {len(outcome.matches)} candidates",
            trace_id=request.trace_id,
            project_id=project.id,
            matches=outcome.matches,
            rejected=sorted(rejected, key=lambda r: r.index),
            total_candidates=len(request.candidates),
            processing_time=processing_time
        )

    def evaluate_candidate(self, request: EvaluateCandidateRequest) -> EvaluationResponse:
        """
        Evaluate one raw candidate payload against a raw project payload.

        Raises:
            ValidationException: If either payload is malformed
        """
        project = self.validation_service.parse_project(request.project)
        talent = self.validation_service.parse_talent(request.candidate)

        match = self.ranker.evaluate(talent, project, as_of=request.as_of)
        logger.info(f"Evaluated talent {talent.id} for project {project.id}: {match.overall_score}")

        return EvaluationResponse(
            message="Candidate evaluated",
            trace_id=request.trace_id,
            match=match,
            cache_key=self.evaluation_cache_key(talent, project)
        )

    @staticmethod
    def evaluation_cache_key(talent: TalentProfile, project: ProjectRequirements) -> str:
        """Generate a cache key from the full talent and project content."""
        content = f"{talent.model_dump_json()}|{project.model_dump_json()}"
        return hashlib.sha256(content.encode()).hexdigest()

    def get_service_stats(self) -> Dict[str, Any]:
        """Get service configuration summary."""
        return {
            "max_workers": self.ranker.max_workers,
            "weights": self.ranker.weights.as_dict(),
            "fit_thresholds": self.ranker.fit_thresholds.model_dump(),
            "known_places": len(self.ranker.location_matcher.resolver.places())
        }
