"""
Base schema classes for the candidate matching service boundary.

This module provides:
- Base request/response models
- Standardized error response format
- Conversion from engine exceptions to response payloads
"""

from datetime import datetime, timezone
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.exceptions import MatchingException


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name and alias
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid"
    )


class BaseRequest(BaseSchema):
    """Base request schema."""
    trace_id: Optional[str] = Field(None, description="Request trace ID for debugging")


class BaseResponse(BaseSchema):
    """Base response schema."""
    success: bool = Field(True, description="Whether the request was successful")
    message: str = Field("", description="Response message")
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    timestamp: datetime = Field(default_factory=_utc_now, description="Response timestamp")


class ValidationErrorDetail(BaseSchema):
    """Validation error detail schema."""
    field: Optional[str] = Field(None, description="Field with validation error")
    message: str = Field(..., description="Validation error message")
    value: Optional[Any] = Field(None, description="Invalid value")
    code: Optional[str] = Field(None, description="Error code")


class ErrorResponse(BaseResponse):
    """Error response schema."""
    success: bool = Field(False, description="Always false for errors")
    error_code: str = Field("", description="Error code")
    error_number: int = Field(0, description="Error number")
    category: str = Field("", description="Error category")
    details: List[ValidationErrorDetail] = Field(default_factory=list, description="Error details")

    @classmethod
    def from_exception(cls, exc: MatchingException) -> "ErrorResponse":
        """Build an error payload from an engine exception."""
        return cls(
            message=exc.message,
            trace_id=exc.trace_id,
            error_code=exc.error_code.code,
            error_number=exc.error_code.number,
            category=exc.category.value,
            details=[
                ValidationErrorDetail(field=d.field, message=d.message, value=d.value, code=d.code)
                for d in exc.details
            ]
        )
