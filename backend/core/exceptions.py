"""
Exception taxonomy for the candidate matching engine.

Every engine failure is a MatchingException carrying an ErrorCode triple
(code, number, default message), an ErrorCategory and optional per-field
ErrorDetail entries. Subclasses only pin the category and default code.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, asdict, field as dataclass_field
from datetime import datetime, timezone


class ErrorCategory(Enum):
    """Error categories."""
    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Engine error codes."""
    # Input validation (1000-1999)
    INVALID_INPUT = ("INVALID_INPUT", 1001, "Invalid input provided")
    MISSING_REQUIRED_FIELD = ("MISSING_REQUIRED_FIELD", 1002, "Required field is missing")
    INVALID_FORMAT = ("INVALID_FORMAT", 1003, "Invalid format")
    OUT_OF_RANGE = ("OUT_OF_RANGE", 1004, "Value out of allowed range")
    EMPTY_COLLECTION = ("EMPTY_COLLECTION", 1005, "Collection must not be empty")
    DUPLICATE_VALUE = ("DUPLICATE_VALUE", 1006, "Duplicate value")

    # Scoring (2000-2999)
    SCORING_FAILED = ("SCORING_FAILED", 2001, "Candidate scoring failed")

    # Configuration (3000-3999)
    INVALID_CONFIGURATION = ("INVALID_CONFIGURATION", 3001, "Invalid engine configuration")
    LOCATION_TABLE_ERROR = ("LOCATION_TABLE_ERROR", 3002, "Location table could not be loaded")

    # System (7000-7999)
    INTERNAL_SERVER_ERROR = ("INTERNAL_SERVER_ERROR", 7001, "Internal server error")

    def __init__(self, code: str, number: int, message: str):
        self.code = code
        self.number = number
        self.message = message


@dataclass
class ErrorDetail:
    """A single field-level problem."""
    field: Optional[str] = None
    message: str = ""
    code: Optional[str] = None
    value: Optional[Any] = None


@dataclass
class ErrorResponse:
    """Plain error payload, serializable with to_dict."""
    success: bool = False
    error_code: str = ""
    error_number: int = 0
    message: str = ""
    details: List[ErrorDetail] = dataclass_field(default_factory=list)
    category: str = ""
    timestamp: str = dataclass_field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    trace_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MatchingException(Exception):
    """Base class for matching-engine failures."""

    category: ErrorCategory = ErrorCategory.SYSTEM
    default_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[List[ErrorDetail]] = None,
        error_code: Optional[ErrorCode] = None,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.error_code = error_code or self.default_code
        self.message = message or self.error_code.message
        self.details = details or []
        self.trace_id = trace_id
        self.original_exception = original_exception

        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code.code,
            error_number=self.error_code.number,
            message=self.message,
            details=list(self.details),
            category=self.category.value,
            trace_id=self.trace_id
        )


class ValidationException(MatchingException):
    """Malformed or rule-violating talent or project input."""

    category = ErrorCategory.VALIDATION
    default_code = ErrorCode.INVALID_INPUT


class ScoringException(MatchingException):
    """Unexpected failure while scoring or ranking candidates."""

    category = ErrorCategory.BUSINESS_LOGIC
    default_code = ErrorCode.SCORING_FAILED


class ConfigurationException(MatchingException):
    """Invalid engine configuration or lookup table."""

    category = ErrorCategory.CONFIGURATION
    default_code = ErrorCode.INVALID_CONFIGURATION


def create_validation_error(
    field: str,
    message: str,
    value: Any = None,
    code: ErrorCode = ErrorCode.INVALID_FORMAT
) -> ErrorDetail:
    """Build an ErrorDetail for one offending field."""
    return ErrorDetail(field=field, message=message, code=code.code, value=value)
