"""
Custom exceptions for the fitness derivation engine.

Missing biometric data is never an error: scorers degrade instead of raising.
The exceptions below cover the two remaining cases:
- Malformed caller input that cannot be clamped into shape (unknown goal
  category, allocation snapshot that does not sum to 100)
- A broken allocation postcondition, which always means an internal bug
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error payloads."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Allocation errors
    UNKNOWN_GOAL_CATEGORY = "UNKNOWN_GOAL_CATEGORY"
    INVALID_ALLOCATION = "INVALID_ALLOCATION"
    ALLOCATION_INVARIANT_VIOLATED = "ALLOCATION_INVARIANT_VIOLATED"


class FitnessEngineError(Exception):
    """
    Base exception for all fitness engine errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for error payloads."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(FitnessEngineError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


class UnknownGoalCategoryError(ValidationError):
    """Raised when a goal category name is not one of the four known ones."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message=f"Unknown goal category '{name}'",
            field="category",
            details=details,
        )
        self.code = ErrorCode.UNKNOWN_GOAL_CATEGORY


class InvalidAllocationError(ValidationError):
    """Raised when an allocation snapshot is out of range or does not sum to 100."""

    def __init__(
        self,
        message: str,
        values: Optional[Dict[str, int]] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if values is not None:
            details["values"] = dict(values)
        super().__init__(message=message, field="allocation", details=details)
        self.code = ErrorCode.INVALID_ALLOCATION


# ============================================================================
# Internal Errors
# ============================================================================

class AllocationInvariantError(FitnessEngineError, AssertionError):
    """Raised when an adjusted allocation fails its sum-to-100 postcondition."""

    def __init__(self, values: Dict[str, int]) -> None:
        total = sum(values.values())
        super().__init__(
            message=f"Allocation sums to {total} after adjustment, expected 100",
            code=ErrorCode.ALLOCATION_INVARIANT_VIOLATED,
            details={"values": dict(values), "total": total},
        )
