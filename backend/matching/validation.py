"""
Business-rule validation of talent and project inputs.

Field-level ranges (non-negative rates, rating bounds, ...) are enforced by
the pydantic models themselves; the rules here span several fields and run
at the ranker boundary before any scoring begins.
"""
import math
from typing import Iterable, List, Tuple

from core.exceptions import ErrorCode, ErrorDetail, ValidationException, create_validation_error
from models.project import ProjectRequirements
from models.talent import TalentProfile


class InputValidator:
    """Collects rule violations and raises them as one ValidationException."""

    @staticmethod
    def _non_finite(values: Iterable[Tuple[str, float]]) -> List[ErrorDetail]:
        return [
            create_validation_error(name, "Value must be a finite number", value=str(value), code=ErrorCode.OUT_OF_RANGE)
            for name, value in values
            if value is not None and not math.isfinite(value)
        ]

    def talent_errors(self, talent: TalentProfile) -> List[ErrorDetail]:
        errors = self._non_finite([
            ("hourly_rate.min", talent.hourly_rate.min),
            ("hourly_rate.max", talent.hourly_rate.max),
            ("availability.hours_per_week", talent.availability.hours_per_week),
            ("experience.total_years", talent.experience.total_years),
            ("experience.relevant_years", talent.experience.relevant_years),
            ("experience.success_rate", talent.experience.success_rate),
            ("reputation.rating", talent.reputation.rating),
            ("reputation.response_time", talent.reputation.response_time),
            ("reputation.reliability", talent.reputation.reliability),
        ] + [
            (f"skills[{index}].years_of_experience", skill.years_of_experience)
            for index, skill in enumerate(talent.skills)
        ])

        if talent.hourly_rate.min > talent.hourly_rate.max:
            errors.append(create_validation_error(
                "hourly_rate",
                "Minimum rate cannot exceed maximum rate",
                value=talent.hourly_rate.model_dump(),
                code=ErrorCode.OUT_OF_RANGE
            ))

        if not talent.skills:
            errors.append(create_validation_error(
                "skills",
                "Talent must list at least one skill",
                code=ErrorCode.EMPTY_COLLECTION
            ))

        for index, skill in enumerate(talent.skills):
            if not skill.skill_name.strip():
                errors.append(create_validation_error(
                    f"skills[{index}].skill_name",
                    "Skill name cannot be blank",
                    value=skill.skill_name,
                    code=ErrorCode.MISSING_REQUIRED_FIELD
                ))

        return errors

    def project_errors(self, project: ProjectRequirements) -> List[ErrorDetail]:
        errors = self._non_finite([
            ("budget.min", project.budget.min),
            ("budget.max", project.budget.max),
            ("location_preferences.max_radius", project.location_preferences.max_radius),
            ("timeline.duration", project.timeline.duration),
        ] + [
            (f"skills[{index}].years_required", requirement.years_required)
            for index, requirement in enumerate(project.skills)
        ])

        if project.budget.min > project.budget.max:
            errors.append(create_validation_error(
                "budget",
                "Minimum budget cannot exceed maximum budget",
                value=project.budget.model_dump(mode="json"),
                code=ErrorCode.OUT_OF_RANGE
            ))

        if project.budget.max <= 0:
            errors.append(create_validation_error(
                "budget.max",
                "Maximum budget must be positive",
                value=project.budget.max,
                code=ErrorCode.OUT_OF_RANGE
            ))

        if project.location_preferences.max_radius <= 0:
            errors.append(create_validation_error(
                "location_preferences.max_radius",
                "Maximum radius must be positive",
                value=project.location_preferences.max_radius,
                code=ErrorCode.OUT_OF_RANGE
            ))

        if project.timeline.duration <= 0:
            errors.append(create_validation_error(
                "timeline.duration",
                "Duration must be positive",
                value=project.timeline.duration,
                code=ErrorCode.OUT_OF_RANGE
            ))

        if not project.skills:
            errors.append(create_validation_error(
                "skills",
                "Project must require at least one skill",
                code=ErrorCode.EMPTY_COLLECTION
            ))

        seen = set()
        for index, requirement in enumerate(project.skills):
            key = requirement.skill_name.strip().lower()
            if not key:
                errors.append(create_validation_error(
                    f"skills[{index}].skill_name",
                    "Skill name cannot be blank",
                    value=requirement.skill_name,
                    code=ErrorCode.MISSING_REQUIRED_FIELD
                ))
            elif key in seen:
                errors.append(create_validation_error(
                    f"skills[{index}].skill_name",
                    "Skill requirement listed more than once",
                    value=requirement.skill_name,
                    code=ErrorCode.DUPLICATE_VALUE
                ))
            seen.add(key)

        return errors

    def validate_talent(self, talent: TalentProfile) -> None:
        errors = self.talent_errors(talent)
        if errors:
            raise ValidationException(f"Invalid talent profile: {talent.id}", details=errors)

    def validate_project(self, project: ProjectRequirements) -> None:
        errors = self.project_errors(project)
        if errors:
            raise ValidationException(f"Invalid project requirements: {project.id}", details=errors)
