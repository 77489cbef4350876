"""
Availability matching: start date, capacity and timeline fit.
"""
from typing import Optional

from config.settings import AvailabilityConfig
from core.scoring import round_half_up
from models.base import WorkArrangement
from models.project import ProjectRequirements
from models.results import AvailabilityMatchResult
from models.talent import TalentProfile
from .base import CandidateMatcher

_PARTIAL_ARRANGEMENTS = {
    (WorkArrangement.HYBRID, WorkArrangement.REMOTE),
    (WorkArrangement.REMOTE, WorkArrangement.HYBRID),
}


class AvailabilityMatcher(CandidateMatcher[AvailabilityMatchResult]):
    """Scores start-date and capacity fit."""

    name = "availability"

    def __init__(self, config: Optional[AvailabilityConfig] = None):
        self.config = config or AvailabilityConfig()

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> AvailabilityMatchResult:
        recommendations = []
        schedule_alignment = 0
        availability = talent.availability

        can_start_on_time = availability.start_date <= project.timeline.start_date
        if can_start_on_time:
            schedule_alignment += 50
            recommendations.append("✓ Can start on time")
        else:
            delay_days = (availability.start_date - project.timeline.start_date).days
            if delay_days <= 7:
                schedule_alignment += 40
                recommendations.append(f"Minor delay: {delay_days} days")
            elif delay_days <= 14:
                schedule_alignment += 25
                recommendations.append(f"Moderate delay: {delay_days} days")
            else:
                schedule_alignment += 10
                recommendations.append(f"Significant delay: {delay_days} days")

        # TODO: take required hours from the project once it declares a weekly workload
        required_hours = self.config.full_time_hours
        has_capacity = availability.hours_per_week >= required_hours
        if has_capacity:
            schedule_alignment += 30
            recommendations.append("✓ Has sufficient capacity")
        else:
            capacity_percentage = availability.hours_per_week / required_hours * 100
            schedule_alignment += round_half_up(capacity_percentage * 0.3)
            recommendations.append(f"Limited capacity: {availability.hours_per_week:g}h/week")

        pair = (availability.work_arrangement, project.work_arrangement)
        if availability.work_arrangement == project.work_arrangement:
            schedule_alignment += 20
            recommendations.append("✓ Work arrangement matches")
        elif pair in _PARTIAL_ARRANGEMENTS:
            schedule_alignment += 15
            recommendations.append("Work arrangement compatible")
        else:
            schedule_alignment += 5
            recommendations.append("Work arrangement mismatch")

        if not project.timeline.is_urgent:
            timeline_compatibility = 80
            recommendations.append("Standard timeline - good fit")
        elif talent.reputation.response_time <= 2:
            timeline_compatibility = 90
            recommendations.append("✓ Fast responder - good for urgent project")
        elif talent.reputation.response_time <= 8:
            timeline_compatibility = 70
            recommendations.append("Moderate response time for urgent project")
        else:
            timeline_compatibility = 40
            recommendations.append("Slow response time - may not suit urgent project")

        return AvailabilityMatchResult(
            can_start_on_time=can_start_on_time,
            has_capacity=has_capacity,
            schedule_alignment=min(100, schedule_alignment),
            timeline_compatibility=timeline_compatibility,
            recommendations=recommendations
        )
