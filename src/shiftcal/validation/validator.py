"""Validation module for checking resolved day schedules.

The resolver normalizes what it can (OFF days lose colleagues and time),
but some problems can only be reported: malformed time text, duplicate task
ids, and colleagues who are no longer in the pool. The latter is tolerated
by the resolver and surfaces here as a warning only.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from shiftcal.domain.calendar import format_date_key
from shiftcal.domain.models import DaySchedule

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ValidationErrorType(Enum):
    """Types of validation errors."""

    KEY_DATE_MISMATCH = "key_date_mismatch"
    OFF_DAY_HAS_COLLEAGUES = "off_day_has_colleagues"
    OFF_DAY_HAS_SHIFT_TIME = "off_day_has_shift_time"
    MALFORMED_SHIFT_TIME = "malformed_shift_time"
    DUPLICATE_COLLEAGUE = "duplicate_colleague"
    EMPTY_TASK_TITLE = "empty_task_title"
    DUPLICATE_TASK_ID = "duplicate_task_id"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    key: Optional[str] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.key:
            parts.append(f"{self.key}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating one or more schedules."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> None:
        """Fold another result into this one."""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)


def is_valid_time(text: str) -> bool:
    """Check a 24-hour ``HH:MM`` string."""
    return bool(_TIME_PATTERN.match(text))


class ScheduleValidator:
    """Validates resolved day schedules.

    Example:
        >>> validator = ScheduleValidator()
        >>> result = validator.validate(schedule, service.colleague_pool)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def __init__(self, warn_unknown_colleagues: bool = True):
        self.warn_unknown_colleagues = warn_unknown_colleagues

    def validate(
        self,
        schedule: DaySchedule,
        colleague_pool: Optional[Iterable[str]] = None,
    ) -> ValidationResult:
        """Validate a single schedule.

        Args:
            schedule: The resolved schedule to check.
            colleague_pool: Current pool; when given, colleagues missing
                from it produce warnings.

        Returns:
            ValidationResult with is_valid flag, errors and warnings.
        """
        result = ValidationResult(is_valid=True)

        self._validate_key(schedule, result)
        self._validate_shift(schedule, result)
        self._validate_colleagues(schedule, colleague_pool, result)
        self._validate_tasks(schedule, result)

        return result

    def validate_many(
        self,
        schedules: Iterable[DaySchedule],
        colleague_pool: Optional[Iterable[str]] = None,
    ) -> ValidationResult:
        """Validate several schedules into a single result."""
        pool = tuple(colleague_pool) if colleague_pool is not None else None
        combined = ValidationResult(is_valid=True)
        for schedule in schedules:
            combined.merge(self.validate(schedule, pool))
        return combined

    def _validate_key(self, schedule: DaySchedule, result: ValidationResult) -> None:
        expected = format_date_key(schedule.date)
        if schedule.key != expected:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.KEY_DATE_MISMATCH,
                    message=f"Key does not match date {expected}",
                    key=schedule.key,
                )
            )

    def _validate_shift(self, schedule: DaySchedule, result: ValidationResult) -> None:
        if not schedule.shift.is_work:
            if schedule.colleagues:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.OFF_DAY_HAS_COLLEAGUES,
                        message=f"Off day lists {len(schedule.colleagues)} colleagues",
                        key=schedule.key,
                    )
                )
            if schedule.shift_time is not None:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.OFF_DAY_HAS_SHIFT_TIME,
                        message=f"Off day has shift time {schedule.shift_time!r}",
                        key=schedule.key,
                    )
                )
            return

        if schedule.shift_time is None:
            return

        parts = [part.strip() for part in schedule.shift_time.split("-")]
        if len(parts) != 2 or not all(is_valid_time(part) for part in parts):
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.MALFORMED_SHIFT_TIME,
                    message=f"Shift time {schedule.shift_time!r} is not 'HH:MM - HH:MM'",
                    key=schedule.key,
                )
            )

    def _validate_colleagues(
        self,
        schedule: DaySchedule,
        colleague_pool: Optional[Iterable[str]],
        result: ValidationResult,
    ) -> None:
        seen: set[str] = set()
        for name in schedule.colleagues:
            if name in seen:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_COLLEAGUE,
                        message=f"Colleague {name!r} listed twice",
                        key=schedule.key,
                    )
                )
            seen.add(name)

        if colleague_pool is None or not self.warn_unknown_colleagues:
            return

        pool = set(colleague_pool)
        for name in schedule.colleagues:
            if name not in pool:
                result.add_warning(f"{schedule.key}: colleague {name!r} is not in the pool")

    def _validate_tasks(self, schedule: DaySchedule, result: ValidationResult) -> None:
        seen_ids: set[str] = set()
        for task in schedule.tasks:
            if not task.title.strip():
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.EMPTY_TASK_TITLE,
                        message=f"Task {task.id!r} has an empty title",
                        key=schedule.key,
                    )
                )
            if task.id in seen_ids:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_TASK_ID,
                        message=f"Task id {task.id!r} is used more than once",
                        key=schedule.key,
                        details={"task_id": task.id},
                    )
                )
            seen_ids.add(task.id)
