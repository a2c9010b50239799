"""Main schedule service interface.

This module provides the high-level ScheduleService that owns the override
store and configuration state and exposes every operation the calendar,
day editor, settings and statistics screens need.
"""

import logging
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from shiftcal.domain.calendar import build_calendar_days
from shiftcal.domain.models import CalendarDay, DaySchedule, ShiftTimeRange, ShiftType
from shiftcal.domain.policies import (
    DEMO_COLLEAGUES,
    DEMO_SEED_SCHEDULE,
    DEMO_SEED_YEARS,
    FACTORY_COLLEAGUES,
)
from shiftcal.scheduling.deriver import DefaultScheduleDeriver, DeriverConfig
from shiftcal.scheduling.editing import DayEdit
from shiftcal.scheduling.resolver import ScheduleResolver
from shiftcal.scheduling.settings import ColleaguePool, ScheduleContext, ShiftTimeSettings
from shiftcal.scheduling.store import OverrideStore, OverrideUpdater
from shiftcal.statistics.aggregator import (
    MonthlyShiftDistribution,
    MonthlyWorkRest,
    WeeklyWorkPattern,
    YearlySummary,
    available_years,
    monthly_shift_distribution,
    monthly_work_rest,
    weekly_work_pattern,
    yearly_summary,
)

logger = logging.getLogger(__name__)


class ScheduleService:
    """In-memory schedule state for one user session.

    The service coordinates the override store, the configuration context
    and the resolver. Reads go through ``get_schedule_for_date``; writes go
    through the mutation methods below, one at a time.

    Example:
        >>> service = ScheduleService()
        >>> service.update_override("2025-09-10", lambda prev: {"shift": ShiftType.EARLY})
        >>> service.get_schedule_for_date("2025-09-10").shift_time
        '07:30 - 14:30'
    """

    def __init__(
        self,
        deriver: Optional[DefaultScheduleDeriver] = None,
        overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
        shift_times: Optional[Mapping[ShiftType, Optional[ShiftTimeRange]]] = None,
        colleagues: Optional[Iterable[str]] = None,
        factory_colleagues: Iterable[str] = FACTORY_COLLEAGUES,
        seed_years: Iterable[int] = (),
    ):
        """Initialize the service.

        Args:
            deriver: Default schedule deriver (empty seed table if omitted).
            overrides: Initial overrides keyed by date key.
            shift_times: Initial custom shift times.
            colleagues: Initial colleague pool (factory list if omitted).
            factory_colleagues: List restored by ``reset_colleagues``.
            seed_years: Extra years offered by ``available_years``.
        """
        self.deriver = deriver or DefaultScheduleDeriver()
        self.store = OverrideStore(overrides)
        self.context = ScheduleContext(
            shift_times=ShiftTimeSettings(shift_times),
            colleague_pool=ColleaguePool(colleagues, factory=factory_colleagues),
        )
        self.resolver = ScheduleResolver(self.store, self.context, self.deriver)
        self.seed_years = tuple(seed_years)

    @classmethod
    def demo(cls) -> "ScheduleService":
        """Service loaded with the demo seed dates and demo colleagues."""
        return cls(
            deriver=DefaultScheduleDeriver(DeriverConfig(seed_schedule=DEMO_SEED_SCHEDULE)),
            colleagues=DEMO_COLLEAGUES,
            factory_colleagues=DEMO_COLLEAGUES,
            seed_years=DEMO_SEED_YEARS,
        )

    # Calendar and resolution

    def build_calendar_days(self, month_anchor: date) -> list[CalendarDay]:
        """Month grid for the month containing ``month_anchor``."""
        return build_calendar_days(month_anchor)

    def get_schedule_for_date(self, key: str, day: Optional[date] = None) -> DaySchedule:
        """Authoritative schedule for a date key."""
        return self.resolver.resolve(key, day)

    def get_month_schedules(self, month_anchor: date) -> list[DaySchedule]:
        """Resolved schedules for every cell of a month grid."""
        return [
            self.resolver.resolve(cell.key, cell.date)
            for cell in build_calendar_days(month_anchor)
        ]

    # Overrides

    @property
    def overrides(self) -> Mapping[str, Mapping[str, Any]]:
        """Read-only snapshot of stored overrides (see OverrideStore.snapshot)."""
        return self.store.snapshot()

    def update_override(self, key: str, updater: OverrideUpdater) -> None:
        """Transform the override for ``key``; empty results delete it."""
        self.store.update(key, updater)

    def clear_override(self, key: str) -> None:
        """Drop any user edit for ``key``."""
        self.store.update(key, lambda previous: None)

    def edit_day(self, key: str, day: Optional[date] = None) -> DayEdit:
        """Start an editable draft for a day."""
        return DayEdit.from_schedule(self.get_schedule_for_date(key, day))

    def save_day(self, edit: DayEdit) -> DaySchedule:
        """Save a day draft and return the freshly resolved schedule."""
        key = edit.original.key
        self.store.update(key, edit.as_updater())
        logger.debug("Day %s saved as %s", key, edit.shift.value)
        return self.get_schedule_for_date(key, edit.original.date)

    # Shift times

    @property
    def shift_times(self) -> Mapping[ShiftType, Optional[ShiftTimeRange]]:
        """Read-only snapshot of the shift time map."""
        return self.context.shift_times.snapshot()

    def set_shift_time(self, shift: ShiftType, value: Optional[ShiftTimeRange]) -> bool:
        """Set the custom range of one work shift."""
        return self.context.shift_times.set_shift_time(shift, value)

    def reset_shift_times(self) -> None:
        """Restore factory shift ranges."""
        self.context.shift_times.reset()

    # Colleague pool

    @property
    def colleague_pool(self) -> tuple[str, ...]:
        """Current colleague pool."""
        return self.context.colleague_pool.names

    def add_colleague(self, name: str) -> bool:
        """Append a colleague unless blank or already present."""
        return self.context.colleague_pool.add(name)

    def update_colleague(self, index: int, name: str) -> bool:
        """Rename the colleague at ``index`` (see ColleaguePool.update_at)."""
        return self.context.colleague_pool.update_at(index, name)

    def remove_colleague(self, index: int) -> bool:
        """Remove the colleague at ``index``."""
        return self.context.colleague_pool.remove_at(index)

    def reset_colleagues(self) -> None:
        """Restore the factory colleague list."""
        self.context.colleague_pool.reset()

    # Statistics

    def monthly_work_rest(self, year: int) -> list[MonthlyWorkRest]:
        """Work and rest days per month of ``year``."""
        return monthly_work_rest(year, self.resolver)

    def monthly_shift_distribution(self, year: int) -> list[MonthlyShiftDistribution]:
        """Work shift counts per month of ``year``."""
        return monthly_shift_distribution(year, self.resolver)

    def weekly_work_pattern(self, year: int, month: int) -> list[WeeklyWorkPattern]:
        """Work days per weekday in one month."""
        return weekly_work_pattern(year, month, self.resolver)

    def yearly_summary(self, year: int) -> YearlySummary:
        """Totals for ``year``."""
        return yearly_summary(year, self.resolver)

    def available_years(self, today: Optional[date] = None) -> list[int]:
        """Years offered by the statistics year picker."""
        return available_years(self.store.keys(), today, self.seed_years)
