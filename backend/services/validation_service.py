"""
Validation Service for raw talent and project payloads.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from core.exceptions import ErrorCode, ErrorDetail, ValidationException
from matching.validation import InputValidator
from models.project import ProjectRequirements
from models.talent import TalentProfile

_PYDANTIC_ERROR_CODES = {
    "missing": ErrorCode.MISSING_REQUIRED_FIELD,
    "greater_than": ErrorCode.OUT_OF_RANGE,
    "greater_than_equal": ErrorCode.OUT_OF_RANGE,
    "less_than": ErrorCode.OUT_OF_RANGE,
    "less_than_equal": ErrorCode.OUT_OF_RANGE,
    "finite_number": ErrorCode.OUT_OF_RANGE,
}


class ValidationService:
    """Service for parsing payloads and enforcing input business rules."""

    def __init__(self, validator: Optional[InputValidator] = None):
        self.validator = validator or InputValidator()

    def parse_talent(self, payload: Dict[str, Any]) -> TalentProfile:
        """Parse and validate a talent payload, raising ValidationException on any error."""
        try:
            talent = TalentProfile.model_validate(payload)
        except ValidationError as e:
            raise ValidationException(
                f"Malformed talent profile: {payload.get('id', '<unknown>')}",
                details=self.convert_errors(e),
                original_exception=e
            )
        self.validator.validate_talent(talent)
        return talent

    def parse_project(self, payload: Dict[str, Any]) -> ProjectRequirements:
        """Parse and validate a project payload, raising ValidationException on any error."""
        try:
            project = ProjectRequirements.model_validate(payload)
        except ValidationError as e:
            raise ValidationException(
                f"Malformed project requirements: {payload.get('id', '<unknown>')}",
                details=self.convert_errors(e),
                original_exception=e
            )
        self.validator.validate_project(project)
        return project

    def validate_talent(self, talent: TalentProfile) -> List[ErrorDetail]:
        """Return the business-rule violations of a parsed talent."""
        return self.validator.talent_errors(talent)

    def validate_project(self, project: ProjectRequirements) -> List[ErrorDetail]:
        """Return the business-rule violations of a parsed project."""
        return self.validator.project_errors(project)

    @staticmethod
    def convert_errors(error: ValidationError) -> List[ErrorDetail]:
        """Convert pydantic errors into error details."""
        details = []
        for item in error.errors():
            code = _PYDANTIC_ERROR_CODES.get(item["type"], ErrorCode.INVALID_FORMAT)
            details.append(ErrorDetail(
                field=".".join(str(part) for part in item["loc"]),
                message=item["msg"],
                code=code.code,
                value=item.get("input") if item["type"] != "missing" else None
            ))
        return details
