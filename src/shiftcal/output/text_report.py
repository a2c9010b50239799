"""Plain-text output for calendars and statistics.

This module creates text reports showing:
- A Monday-first month grid with the shift of every day
- Per-day details (time, colleagues, tasks, notes)
- Yearly work/rest and shift distribution tables
"""

from datetime import date
from pathlib import Path
from typing import Optional, Union

from shiftcal.domain.calendar import WEEKDAY_LABELS, build_calendar_days
from shiftcal.domain.models import SHIFT_CONFIG, WORK_SHIFTS, DaySchedule
from shiftcal.scheduling.service import ScheduleService

CELL_WIDTH = 9


class TextReportGenerator:
    """Generates text reports from a schedule service.

    Example:
        >>> generator = TextReportGenerator()
        >>> print(generator.month_to_string(service, date(2025, 9, 1)))
    """

    def __init__(self, width: int = 80):
        self.width = width

    def generate_month(
        self,
        service: ScheduleService,
        month_anchor: date,
        output_path: Union[str, Path],
    ) -> str:
        """Write the month report to a file and return its text."""
        content = self.month_to_string(service, month_anchor)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def generate_stats(
        self,
        service: ScheduleService,
        year: int,
        output_path: Union[str, Path],
        month: Optional[int] = None,
    ) -> str:
        """Write the statistics report to a file and return its text."""
        content = self.stats_to_string(service, year, month)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def month_to_string(self, service: ScheduleService, month_anchor: date) -> str:
        """Month grid followed by details of customized and busy days."""
        lines = []
        lines.append("=" * self.width)
        lines.append(f"SHIFT CALENDAR - {month_anchor.year}-{month_anchor.month:02d}")
        lines.append("=" * self.width)
        lines.append("")

        lines.append("".join(f"{label:<{CELL_WIDTH}}" for label in WEEKDAY_LABELS))
        cells = build_calendar_days(month_anchor)
        schedules = [service.get_schedule_for_date(cell.key, cell.date) for cell in cells]

        for week_start in range(0, len(cells), 7):
            week = slice(week_start, week_start + 7)
            row = []
            for cell, schedule in zip(cells[week], schedules[week]):
                if cell.is_current_month:
                    text = f"{cell.date.day:>2} {schedule.config.short_label}"
                else:
                    text = f"({cell.date.day:>2})"
                row.append(f"{text:<{CELL_WIDTH}}")
            lines.append("".join(row).rstrip())
        lines.append("")

        lines.append("-" * self.width)
        lines.append("DAY DETAILS")
        lines.append("-" * self.width)
        in_month = [
            schedule
            for cell, schedule in zip(cells, schedules)
            if cell.is_current_month
        ]
        detailed = [s for s in in_month if s.is_work_day or s.tasks or s.notes]
        if not detailed:
            lines.append("No shifts, tasks or notes this month.")
        for schedule in detailed:
            lines.extend(self._day_lines(schedule))

        lines.append("")
        lines.append("=" * self.width)
        return "\n".join(lines)

    def stats_to_string(
        self,
        service: ScheduleService,
        year: int,
        month: Optional[int] = None,
    ) -> str:
        """Yearly statistics report, optionally with one month's weekday pattern."""
        work_rest = service.monthly_work_rest(year)
        distribution = service.monthly_shift_distribution(year)
        summary = service.yearly_summary(year)

        lines = []
        lines.append("=" * self.width)
        lines.append(f"SHIFT STATISTICS - {year}")
        lines.append("=" * self.width)
        lines.append("")
        lines.append(f"Work days: {summary.work_days}")
        lines.append(f"Rest days: {summary.rest_days}")
        lines.append(f"Work ratio: {summary.work_ratio * 100:.1f}%")
        lines.append("")

        lines.append("-" * self.width)
        lines.append("MONTHLY WORK / REST")
        lines.append("-" * self.width)
        header = f"{'Month':>5} {'Work':>6} {'Rest':>6} " + "".join(
            f"{SHIFT_CONFIG[shift].label:>8}" for shift in WORK_SHIFTS
        )
        lines.append(header)
        for wr, dist in zip(work_rest, distribution):
            lines.append(
                f"{wr.month:>5} {wr.work_days:>6} {wr.rest_days:>6} "
                f"{dist.early:>8} {dist.mid:>8} {dist.late:>8}"
            )
        lines.append("")

        if month is not None:
            lines.append("-" * self.width)
            lines.append(f"WEEKDAY PATTERN - {year}-{month:02d}")
            lines.append("-" * self.width)
            for entry in service.weekly_work_pattern(year, month):
                bar = "#" * entry.work_days
                lines.append(f"{entry.label}: {bar or '.'} ({entry.work_days})")
            lines.append("")

        lines.append("=" * self.width)
        return "\n".join(lines)

    def _day_lines(self, schedule: DaySchedule) -> list[str]:
        """Detail lines for one day."""
        header = f"{schedule.key} {schedule.config.label}"
        if schedule.shift_time:
            header += f" {schedule.shift_time}"
        lines = [header]
        if schedule.colleagues:
            lines.append(f"    Colleagues: {', '.join(schedule.colleagues)}")
        for task in schedule.tasks:
            when = f"[{task.time_range}] " if task.time_range else ""
            lines.append(f"    - {when}{task.title}")
        if schedule.notes:
            lines.append(f"    Notes: {schedule.notes}")
        return lines
