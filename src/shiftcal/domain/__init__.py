"""Domain models, calendar helpers and derivation policies."""

from shiftcal.domain.calendar import (
    WEEKDAY_LABELS,
    build_calendar_days,
    days_in_month,
    format_date_key,
    format_full_date,
    is_valid_date_key,
    iter_month_days,
    monday_first_index,
    native_weekday,
    parse_date_key,
    shift_month,
)
from shiftcal.domain.models import (
    DEFAULT_SHIFT_TIMES,
    OVERRIDE_FIELDS,
    SHIFT_CONFIG,
    SHIFT_OPTIONS,
    WORK_SHIFTS,
    CalendarDay,
    DaySchedule,
    ScheduleLookup,
    ShiftConfig,
    ShiftTimeRange,
    ShiftType,
    Task,
    default_shift_time,
)
from shiftcal.domain.policies import (
    DEMO_COLLEAGUES,
    DEMO_SEED_SCHEDULE,
    DEMO_SEED_YEARS,
    FACTORY_COLLEAGUES,
    ColleagueRotation,
    DefaultColleagueRotation,
    NoColleagueRotation,
    NoTaskGenerator,
    PeriodicTaskGenerator,
    TaskGenerator,
)

__all__ = [
    # Models
    "CalendarDay",
    "DaySchedule",
    "ShiftConfig",
    "ShiftTimeRange",
    "ShiftType",
    "Task",
    "DEFAULT_SHIFT_TIMES",
    "OVERRIDE_FIELDS",
    "SHIFT_CONFIG",
    "SHIFT_OPTIONS",
    "WORK_SHIFTS",
    "default_shift_time",
    "ScheduleLookup",
    # Calendar
    "WEEKDAY_LABELS",
    "build_calendar_days",
    "days_in_month",
    "format_date_key",
    "format_full_date",
    "is_valid_date_key",
    "iter_month_days",
    "monday_first_index",
    "native_weekday",
    "parse_date_key",
    "shift_month",
    # Policies
    "ColleagueRotation",
    "DefaultColleagueRotation",
    "NoColleagueRotation",
    "NoTaskGenerator",
    "PeriodicTaskGenerator",
    "TaskGenerator",
    "DEMO_COLLEAGUES",
    "DEMO_SEED_SCHEDULE",
    "DEMO_SEED_YEARS",
    "FACTORY_COLLEAGUES",
]
