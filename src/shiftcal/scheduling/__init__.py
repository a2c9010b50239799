"""Schedule derivation, override storage and resolution."""

from shiftcal.scheduling.deriver import (
    DefaultScheduleDeriver,
    DeriverConfig,
    format_shift_time,
)
from shiftcal.scheduling.editing import (
    DayEdit,
    create_task_id,
    default_time_for,
    sanitize_tasks,
)
from shiftcal.scheduling.resolver import ScheduleResolver, merge_override
from shiftcal.scheduling.service import ScheduleService
from shiftcal.scheduling.settings import ColleaguePool, ScheduleContext, ShiftTimeSettings
from shiftcal.scheduling.store import OverrideStore, normalize_override

__all__ = [
    # Service
    "ScheduleService",
    # Resolution
    "DefaultScheduleDeriver",
    "DeriverConfig",
    "ScheduleResolver",
    "format_shift_time",
    "merge_override",
    # State
    "ColleaguePool",
    "OverrideStore",
    "ScheduleContext",
    "ShiftTimeSettings",
    "normalize_override",
    # Editing
    "DayEdit",
    "create_task_id",
    "default_time_for",
    "sanitize_tasks",
]
