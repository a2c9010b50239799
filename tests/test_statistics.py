"""Tests for the statistics aggregator."""

from datetime import date

import pytest

from shiftcal.domain.calendar import days_in_month
from shiftcal.domain.models import DaySchedule, ShiftType
from shiftcal.scheduling.service import ScheduleService
from shiftcal.statistics import (
    MONDAY_FIRST_WEEKDAY_ORDER,
    available_years,
    monthly_shift_distribution,
    monthly_work_rest,
    weekly_work_pattern,
    yearly_summary,
)


def assign(service, assignments):
    """Apply {key: shift} overrides."""
    for key, shift in assignments.items():
        service.update_override(key, lambda previous, shift=shift: {"shift": shift})


@pytest.fixture
def service():
    """Service with a handful of 2024 and 2025 work days."""
    service = ScheduleService(colleagues=["A", "B", "C"])
    assign(
        service,
        {
            "2024-02-29": ShiftType.EARLY,
            "2024-03-01": ShiftType.LATE,
            "2024-03-02": ShiftType.LATE,
            "2025-09-01": ShiftType.EARLY,
            "2025-09-08": ShiftType.MID,
            "2025-09-13": ShiftType.LATE,
        },
    )
    return service


class TestMonthlyWorkRest:
    """Tests for monthly_work_rest."""

    def test_no_overrides_all_rest(self):
        """Without overrides every day is a rest day."""
        stats = ScheduleService().monthly_work_rest(2025)

        assert len(stats) == 12
        assert stats[8].month == 9
        assert stats[8].work_days == 0
        assert stats[8].rest_days == 30

    def test_counts(self, service):
        """Work days come from overrides, the rest are rest days."""
        stats = service.monthly_work_rest(2024)
        assert (stats[1].work_days, stats[1].rest_days) == (1, 28)
        assert (stats[2].work_days, stats[2].rest_days) == (2, 29)

    def test_conservation(self, service):
        """Work plus rest equals the month length, for every month."""
        for year in (2024, 2025):
            for stat in service.monthly_work_rest(year):
                assert stat.work_days + stat.rest_days == days_in_month(year, stat.month)


class TestMonthlyShiftDistribution:
    """Tests for monthly_shift_distribution."""

    def test_counts(self, service):
        """Each work shift is counted separately."""
        stats = service.monthly_shift_distribution(2025)
        september = stats[8]

        assert (september.early, september.mid, september.late) == (1, 1, 1)
        assert september.total == 3

    def test_total_matches_work_days(self, service):
        """Shift totals equal work days for every month."""
        work_rest = service.monthly_work_rest(2024)
        distribution = service.monthly_shift_distribution(2024)
        for wr, dist in zip(work_rest, distribution):
            assert dist.total == wr.work_days


class TestWeeklyWorkPattern:
    """Tests for weekly_work_pattern."""

    def test_monday_first_order(self, service):
        """Entries run Monday to Sunday with matching labels."""
        pattern = service.weekly_work_pattern(2025, 9)

        assert [entry.weekday for entry in pattern] == list(MONDAY_FIRST_WEEKDAY_ORDER)
        assert [entry.label for entry in pattern] == [
            "周一", "周二", "周三", "周四", "周五", "周六", "周日",
        ]

    def test_counts(self, service):
        """Two Mondays and one Saturday were worked."""
        pattern = service.weekly_work_pattern(2025, 9)

        assert pattern[0].work_days == 2  # Monday
        assert pattern[5].work_days == 1  # Saturday
        assert pattern[6].work_days == 0  # Sunday
        assert sum(entry.work_days for entry in pattern) == 3


class TestYearlySummary:
    """Tests for yearly_summary."""

    def test_leap_year(self, service):
        """Leap years have 366 days."""
        summary = service.yearly_summary(2024)

        assert summary.work_days == 3
        assert summary.rest_days == 363
        assert summary.total_days == 366
        assert summary.shift_counts[ShiftType.EARLY] == 1
        assert summary.shift_counts[ShiftType.LATE] == 2
        assert summary.shift_counts[ShiftType.MID] == 0
        assert summary.work_ratio == pytest.approx(3 / 366)

    def test_matches_monthly_totals(self, service):
        """Yearly totals equal the sum of the monthly figures."""
        summary = service.yearly_summary(2025)
        monthly = service.monthly_work_rest(2025)

        assert summary.work_days == sum(m.work_days for m in monthly)
        assert summary.rest_days == sum(m.rest_days for m in monthly)


class TestWithLookupFunction:
    """Aggregators work with any lookup callable."""

    def test_every_day_visited_once(self):
        """Each day of the year is looked up exactly once per month walk."""
        seen = []

        def lookup(key, day):
            seen.append(key)
            shift = ShiftType.EARLY if day.weekday() < 5 else ShiftType.OFF
            return DaySchedule(key=key, date=day, shift=shift)

        stats = monthly_work_rest(2025, lookup)

        assert len(seen) == 365
        assert len(set(seen)) == 365
        assert sum(s.work_days for s in stats) == 261

    def test_lookup_order_does_not_matter(self):
        """Totals are the same whichever way the data was assembled."""
        work_days = {"2025-01-03", "2025-06-15", "2025-12-31"}

        def lookup(key, day):
            shift = ShiftType.MID if key in work_days else ShiftType.OFF
            return DaySchedule(key=key, date=day, shift=shift)

        assert yearly_summary(2025, lookup).work_days == 3
        assert sum(d.mid for d in monthly_shift_distribution(2025, lookup)) == 3
        assert sum(w.work_days for w in weekly_work_pattern(2025, 6, lookup)) == 1


class TestAvailableYears:
    """Tests for available_years."""

    def test_includes_today_and_previous(self):
        """The current and previous year are always offered."""
        assert available_years([], today=date(2026, 10, 17)) == [2025, 2026]

    def test_includes_override_and_seed_years(self):
        """Override and seed years are added; malformed keys are skipped."""
        years = available_years(
            ["2023-05-01", "bogus", "2030-01-01"],
            today=date(2026, 10, 17),
            seed_years=(2020,),
        )
        assert years == [2020, 2023, 2025, 2026, 2030]

    def test_no_seed_years_by_default(self):
        """Without seed data only today, last year and override years count."""
        assert ScheduleService().available_years(today=date(2030, 1, 1)) == [2029, 2030]
        assert available_years([], today=date(2030, 1, 1)) == [2029, 2030]

    def test_service_uses_store(self, service):
        """The service offers override years."""
        assert service.available_years(today=date(2026, 10, 17)) == [2024, 2025, 2026]

    def test_demo_seed_year(self):
        """The demo service offers its seed year."""
        years = ScheduleService.demo().available_years(today=date(2030, 1, 1))
        assert years == [2025, 2029, 2030]
