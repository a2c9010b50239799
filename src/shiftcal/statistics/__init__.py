"""Statistics aggregated from resolved schedules."""

from shiftcal.statistics.aggregator import (
    MONDAY_FIRST_WEEKDAY_ORDER,
    MonthlyShiftDistribution,
    MonthlyWorkRest,
    WeeklyWorkPattern,
    YearlySummary,
    available_years,
    count_month,
    monthly_shift_distribution,
    monthly_work_rest,
    weekly_work_pattern,
    yearly_summary,
)

__all__ = [
    "MONDAY_FIRST_WEEKDAY_ORDER",
    "MonthlyShiftDistribution",
    "MonthlyWorkRest",
    "WeeklyWorkPattern",
    "YearlySummary",
    "available_years",
    "count_month",
    "monthly_shift_distribution",
    "monthly_work_rest",
    "weekly_work_pattern",
    "yearly_summary",
]
