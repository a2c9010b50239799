"""Yearly statistics over resolved schedules.

All functions take a schedule lookup (``(key, date) -> DaySchedule``),
walk every real day of the period and reduce with counters. They never
mutate state, and the totals do not depend on the order days are visited.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from shiftcal.domain.calendar import (
    WEEKDAY_LABELS,
    format_date_key,
    is_valid_date_key,
    iter_month_days,
    monday_first_index,
    native_weekday,
    parse_date_key,
)
from shiftcal.domain.models import WORK_SHIFTS, ScheduleLookup, ShiftType

MONTHS = range(1, 13)

# Native (Sunday=0) weekday numbers in Monday-first order
MONDAY_FIRST_WEEKDAY_ORDER: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 0)


@dataclass(frozen=True)
class MonthlyWorkRest:
    """Work and rest day counts for one month."""

    month: int
    work_days: int
    rest_days: int


@dataclass(frozen=True)
class MonthlyShiftDistribution:
    """Work shift counts for one month (OFF days excluded)."""

    month: int
    early: int
    mid: int
    late: int

    @property
    def total(self) -> int:
        return self.early + self.mid + self.late


@dataclass(frozen=True)
class WeeklyWorkPattern:
    """Work days falling on one weekday of a month.

    Attributes:
        weekday: Native weekday number (Sunday=0 ... Saturday=6).
        label: Display label (周一 ... 周日).
        work_days: Number of work days on that weekday.
    """

    weekday: int
    label: str
    work_days: int


@dataclass
class YearlySummary:
    """Totals across a whole year.

    Attributes:
        year: The year summarized.
        work_days: Total work days.
        rest_days: Total rest days.
        shift_counts: Count per shift type, OFF included.
    """

    year: int
    work_days: int = 0
    rest_days: int = 0
    shift_counts: dict[ShiftType, int] = field(default_factory=dict)

    @property
    def total_days(self) -> int:
        return self.work_days + self.rest_days

    @property
    def work_ratio(self) -> float:
        """Share of days worked, 0.0 - 1.0."""
        return self.work_days / self.total_days if self.total_days else 0.0


def count_month(year: int, month: int, resolver: ScheduleLookup) -> Counter:
    """Count shift types over every day of a month.

    Returns:
        Counter keyed by ShiftType; every shift type is present.
    """
    counts: Counter = Counter({shift: 0 for shift in ShiftType})
    for day in iter_month_days(year, month):
        schedule = resolver(format_date_key(day), day)
        counts[schedule.shift] += 1
    return counts


def monthly_work_rest(year: int, resolver: ScheduleLookup) -> list[MonthlyWorkRest]:
    """Work and rest days for each of the 12 months of ``year``.

    ``work_days + rest_days`` equals the month length for every entry.
    """
    stats = []
    for month in MONTHS:
        counts = count_month(year, month, resolver)
        stats.append(
            MonthlyWorkRest(
                month=month,
                work_days=sum(counts[shift] for shift in WORK_SHIFTS),
                rest_days=counts[ShiftType.OFF],
            )
        )
    return stats


def monthly_shift_distribution(
    year: int,
    resolver: ScheduleLookup,
) -> list[MonthlyShiftDistribution]:
    """Early, mid and late counts for each of the 12 months of ``year``."""
    stats = []
    for month in MONTHS:
        counts = count_month(year, month, resolver)
        stats.append(
            MonthlyShiftDistribution(
                month=month,
                early=counts[ShiftType.EARLY],
                mid=counts[ShiftType.MID],
                late=counts[ShiftType.LATE],
            )
        )
    return stats


def weekly_work_pattern(
    year: int,
    month: int,
    resolver: ScheduleLookup,
) -> list[WeeklyWorkPattern]:
    """Work days per weekday in one month, Monday first."""
    by_weekday: Counter = Counter()
    for day in iter_month_days(year, month):
        schedule = resolver(format_date_key(day), day)
        if schedule.shift.is_work:
            by_weekday[native_weekday(day)] += 1

    return [
        WeeklyWorkPattern(
            weekday=weekday,
            label=WEEKDAY_LABELS[monday_first_index(weekday)],
            work_days=by_weekday[weekday],
        )
        for weekday in MONDAY_FIRST_WEEKDAY_ORDER
    ]


def yearly_summary(year: int, resolver: ScheduleLookup) -> YearlySummary:
    """Totals for the whole year."""
    totals: Counter = Counter({shift: 0 for shift in ShiftType})
    for month in MONTHS:
        totals.update(count_month(year, month, resolver))

    return YearlySummary(
        year=year,
        work_days=sum(totals[shift] for shift in WORK_SHIFTS),
        rest_days=totals[ShiftType.OFF],
        shift_counts=dict(totals),
    )


def available_years(
    override_keys: Iterable[str],
    today: Optional[date] = None,
    seed_years: Iterable[int] = (),
) -> list[int]:
    """Years offered by a statistics year picker.

    The current and previous year, any seed data years, and every year
    with a stored override. Malformed keys are skipped.
    """
    today = today or date.today()
    years = {today.year, today.year - 1, *seed_years}
    for key in override_keys:
        if is_valid_date_key(key):
            years.add(parse_date_key(key).year)
    return sorted(years)
