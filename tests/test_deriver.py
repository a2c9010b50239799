"""Tests for default schedule derivation."""

from datetime import date

import pytest

from shiftcal.domain.models import DEFAULT_SHIFT_TIMES, ShiftTimeRange, ShiftType, Task
from shiftcal.domain.policies import (
    DEMO_SEED_SCHEDULE,
    NoColleagueRotation,
    NoTaskGenerator,
)
from shiftcal.scheduling.deriver import (
    DefaultScheduleDeriver,
    DeriverConfig,
    format_shift_time,
)

POOL = ["A", "B", "C", "D"]


class TestFormatShiftTime:
    """Tests for format_shift_time."""

    def test_default_ranges(self):
        """Factory ranges format with ' - '."""
        assert format_shift_time(ShiftType.EARLY, DEFAULT_SHIFT_TIMES) == "07:30 - 14:30"
        assert format_shift_time(ShiftType.LATE, DEFAULT_SHIFT_TIMES) == "22:30 - 08:30"

    def test_off_has_no_time(self):
        """OFF never has a time."""
        assert format_shift_time(ShiftType.OFF, DEFAULT_SHIFT_TIMES) is None

    def test_custom_range(self):
        """A configured range wins."""
        times = {ShiftType.EARLY: ShiftTimeRange("08:00", "15:00")}
        assert format_shift_time(ShiftType.EARLY, times) == "08:00 - 15:00"

    def test_missing_or_incomplete_falls_back(self):
        """None and half-empty ranges fall back to the built-in default."""
        assert format_shift_time(ShiftType.MID, {ShiftType.MID: None}) == "16:00 - 22:30"
        assert format_shift_time(ShiftType.MID, {}) == "16:00 - 22:30"
        incomplete = {ShiftType.MID: ShiftTimeRange("17:00", "")}
        assert format_shift_time(ShiftType.MID, incomplete) == "16:00 - 22:30"


class TestDefaultScheduleDeriver:
    """Tests for DefaultScheduleDeriver."""

    @pytest.fixture
    def deriver(self):
        """Deriver with an empty seed table."""
        return DefaultScheduleDeriver()

    def test_unseeded_day_is_off(self, deriver):
        """Days without seed data are rest days."""
        baseline = deriver.derive("2025-09-10", date(2025, 9, 10), DEFAULT_SHIFT_TIMES, POOL)

        assert baseline.shift == ShiftType.OFF
        assert baseline.shift_time is None
        assert baseline.colleagues == []
        assert baseline.notes is None

    def test_default_task_on_period_day(self, deriver):
        """Default tasks appear on period days even when off."""
        baseline = deriver.derive("2025-09-12", date(2025, 9, 12), DEFAULT_SHIFT_TIMES, POOL)
        assert [t.id for t in baseline.tasks] == ["2025-09-12-task"]

    def test_explicit_work_shift(self, deriver):
        """A given work shift gets its time and rotated colleagues."""
        baseline = deriver.derive(
            "2025-09-10", date(2025, 9, 10), DEFAULT_SHIFT_TIMES, POOL, shift=ShiftType.MID
        )

        assert baseline.shift == ShiftType.MID
        assert baseline.shift_time == "16:00 - 22:30"
        assert baseline.colleagues == ["A", "B", "C"]

    def test_seed_values_win(self):
        """Seed values take priority over derived ones."""
        deriver = DefaultScheduleDeriver(
            DeriverConfig(
                seed_schedule={
                    "2025-09-10": {
                        "shift": "late",
                        "shift_time": "23:00 - 07:00",
                        "colleagues": ["Z"],
                        "tasks": [],
                        "notes": "seeded",
                    }
                }
            )
        )

        baseline = deriver.derive("2025-09-10", date(2025, 9, 10), DEFAULT_SHIFT_TIMES, POOL)

        assert baseline.shift == ShiftType.LATE
        assert baseline.shift_time == "23:00 - 07:00"
        assert baseline.colleagues == ["Z"]
        assert baseline.tasks == []
        assert baseline.notes == "seeded"

    def test_seed_colleagues_dropped_on_off_day(self):
        """Seeded colleagues do not survive a rest day."""
        deriver = DefaultScheduleDeriver(DeriverConfig(seed_schedule=DEMO_SEED_SCHEDULE))

        baseline = deriver.derive("2025-09-08", date(2025, 9, 8), DEFAULT_SHIFT_TIMES, POOL)

        assert baseline.shift == ShiftType.OFF
        assert baseline.colleagues == []
        assert baseline.notes == "今天整体排班较轻松，记得巡场时顺手检查物资。"

    def test_seed_tasks_replace_generated(self):
        """Seeded tasks replace the periodic task."""
        seeded = [Task(id="s1", title="Seeded")]
        deriver = DefaultScheduleDeriver(
            DeriverConfig(seed_schedule={"2025-09-12": {"tasks": seeded}})
        )

        baseline = deriver.derive("2025-09-12", date(2025, 9, 12), DEFAULT_SHIFT_TIMES, POOL)

        assert baseline.tasks == seeded

    def test_policies_can_be_disabled(self):
        """Null policies derive nothing."""
        deriver = DefaultScheduleDeriver(
            DeriverConfig(
                colleague_rotation=NoColleagueRotation(),
                task_generator=NoTaskGenerator(),
            )
        )

        baseline = deriver.derive(
            "2025-09-12", date(2025, 9, 12), DEFAULT_SHIFT_TIMES, POOL, shift=ShiftType.EARLY
        )

        assert baseline.colleagues == []
        assert baseline.tasks == []

    def test_empty_pool(self, deriver):
        """Work days with an empty pool have no colleagues."""
        baseline = deriver.derive(
            "2025-09-10", date(2025, 9, 10), DEFAULT_SHIFT_TIMES, [], shift=ShiftType.EARLY
        )
        assert baseline.colleagues == []

    def test_seed_lists_are_copied(self):
        """Mutating a derived schedule does not touch the seed table."""
        seed = {"2025-09-10": {"shift": "early", "colleagues": ["Z"]}}
        deriver = DefaultScheduleDeriver(DeriverConfig(seed_schedule=seed))

        baseline = deriver.derive("2025-09-10", date(2025, 9, 10), DEFAULT_SHIFT_TIMES, POOL)
        baseline.colleagues.append("Y")

        assert seed["2025-09-10"]["colleagues"] == ["Z"]
