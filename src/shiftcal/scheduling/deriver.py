"""Baseline schedules for days without user edits.

The deriver is a pure function of the date, the seed table and the
current configuration. It never looks at stored overrides.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from shiftcal.domain.models import (
    DaySchedule,
    ShiftTimeRange,
    ShiftType,
    default_shift_time,
)
from shiftcal.domain.policies import (
    ColleagueRotation,
    DefaultColleagueRotation,
    PeriodicTaskGenerator,
    TaskGenerator,
)


@dataclass
class DeriverConfig:
    """Configuration for default schedule derivation.

    Attributes:
        seed_schedule: Fixed per-date values keyed by date key. Each entry
            uses override field names and wins over every derived value.
        colleague_rotation: Policy producing default colleagues.
        task_generator: Policy producing default tasks.
    """

    seed_schedule: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    colleague_rotation: ColleagueRotation = field(default_factory=DefaultColleagueRotation)
    task_generator: TaskGenerator = field(default_factory=PeriodicTaskGenerator)


def format_shift_time(
    shift: ShiftType,
    shift_times: Mapping[ShiftType, Optional[ShiftTimeRange]],
) -> Optional[str]:
    """Time label for a shift from the configured map.

    Uses the configured range when both ends are set, otherwise the
    built-in default. OFF always yields None.
    """
    if not shift.is_work:
        return None
    configured = shift_times.get(shift)
    if configured is not None and configured.is_complete:
        return configured.format()
    return default_shift_time(shift)


class DefaultScheduleDeriver:
    """Computes the baseline DaySchedule for a date.

    Priority for each field is: seed table, then derived value. OFF days
    always come out with no colleagues and no shift time.

    Example:
        >>> deriver = DefaultScheduleDeriver()
        >>> baseline = deriver.derive("2025-09-10", date(2025, 9, 10), {}, ["A", "B"])
        >>> baseline.shift
        <ShiftType.OFF: 'off'>
    """

    def __init__(self, config: Optional[DeriverConfig] = None):
        self.config = config or DeriverConfig()

    def derive(
        self,
        key: str,
        day: date,
        shift_times: Mapping[ShiftType, Optional[ShiftTimeRange]],
        colleague_pool: Sequence[str],
        shift: Optional[ShiftType] = None,
    ) -> DaySchedule:
        """Derive the baseline schedule.

        Args:
            key: Date key for ``day``.
            day: Calendar date.
            shift_times: Current shift time map.
            colleague_pool: Current colleague pool.
            shift: Effective shift when already decided by an override;
                the seed table (or OFF) decides otherwise.

        Returns:
            A fresh DaySchedule with no override applied.
        """
        seed = self.config.seed_schedule.get(key, {})
        if shift is None:
            shift = ShiftType.coerce(seed.get("shift", ShiftType.OFF))

        if shift.is_work:
            if "shift_time" in seed:
                shift_time = seed["shift_time"]
            else:
                shift_time = format_shift_time(shift, shift_times)

            if "colleagues" in seed:
                colleagues = list(seed["colleagues"])
            else:
                colleagues = self.config.colleague_rotation.colleagues_for(day, colleague_pool)
        else:
            shift_time = None
            colleagues = []

        if "tasks" in seed:
            tasks = list(seed["tasks"])
        else:
            tasks = self.config.task_generator.tasks_for(key, day)

        return DaySchedule(
            key=key,
            date=day,
            shift=shift,
            shift_time=shift_time,
            colleagues=colleagues,
            tasks=tasks,
            notes=seed.get("notes"),
        )
