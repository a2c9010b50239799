"""shiftcal - personal shift calendar core.

Resolves the effective schedule of any day by layering user edits over
deterministic defaults, and aggregates yearly statistics.
"""

from shiftcal.domain.models import DaySchedule, ShiftTimeRange, ShiftType, Task
from shiftcal.exceptions import InvalidOverrideError, MalformedKeyError, ShiftCalError
from shiftcal.scheduling.service import ScheduleService

__version__ = "0.1.0"

__all__ = [
    "DaySchedule",
    "InvalidOverrideError",
    "MalformedKeyError",
    "ScheduleService",
    "ShiftCalError",
    "ShiftTimeRange",
    "ShiftType",
    "Task",
]
