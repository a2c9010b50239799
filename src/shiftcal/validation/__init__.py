"""Validation module for checking resolved schedules."""

from shiftcal.validation.validator import (
    ScheduleValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    is_valid_time,
)

__all__ = [
    "ScheduleValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "is_valid_time",
]
