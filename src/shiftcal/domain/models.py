"""Domain models for the shift calendar.

This module contains the core data structures shared by every other part
of the system: shift types and their display configuration, time ranges,
tasks, resolved day schedules and calendar grid cells.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional

from shiftcal.exceptions import InvalidOverrideError


class ShiftType(Enum):
    """Shift assigned to a single day.

    The three work shifts are mutually exclusive; OFF means no work.
    """

    EARLY = "early"
    MID = "mid"
    LATE = "late"
    OFF = "off"

    @property
    def is_work(self) -> bool:
        """True for EARLY, MID and LATE."""
        return self is not ShiftType.OFF

    @classmethod
    def coerce(cls, value: Any) -> "ShiftType":
        """Accept a ShiftType or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidOverrideError(f"Unknown shift type: {value!r}") from None


WORK_SHIFTS: tuple[ShiftType, ...] = (ShiftType.EARLY, ShiftType.MID, ShiftType.LATE)

# Order used by shift pickers
SHIFT_OPTIONS: tuple[ShiftType, ...] = (
    ShiftType.OFF,
    ShiftType.EARLY,
    ShiftType.MID,
    ShiftType.LATE,
)


@dataclass(frozen=True)
class ShiftTimeRange:
    """Wall-clock range for a work shift.

    Both ends are opaque ``HH:MM`` strings. An overnight shift has
    ``end < start`` (e.g. 22:30 - 08:30) and is perfectly valid.

    Attributes:
        start: Start time, ``HH:MM``.
        end: End time, ``HH:MM``.
    """

    start: str
    end: str

    @property
    def is_complete(self) -> bool:
        """Both start and end are non-empty."""
        return bool(self.start.strip()) and bool(self.end.strip())

    @property
    def is_overnight(self) -> bool:
        """The range crosses midnight."""
        return self.end < self.start

    def format(self) -> str:
        """Format as ``"{start} - {end}"``."""
        return f"{self.start} - {self.end}"

    @classmethod
    def parse(cls, text: str) -> Optional["ShiftTimeRange"]:
        """Parse ``"07:30 - 14:30"`` into a range.

        Returns None if the text does not contain two non-empty parts.
        """
        start, sep, end = text.partition("-")
        start, end = start.strip(), end.strip()
        if not sep or not start or not end:
            return None
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class ShiftConfig:
    """Display metadata and factory default time for one shift type.

    Attributes:
        label: Full display label.
        short_label: Compact label for calendar cells.
        accent_color: Accent color (hex).
        text_color: Foreground text color (hex).
        soft_background_color: Translucent background color.
        default_time: Factory time range, None for OFF.
    """

    label: str
    short_label: str
    accent_color: str
    text_color: str
    soft_background_color: str
    default_time: Optional[ShiftTimeRange] = None


SHIFT_CONFIG: dict[ShiftType, ShiftConfig] = {
    ShiftType.EARLY: ShiftConfig(
        label="早班",
        short_label="早班",
        accent_color="#FFAE58",
        text_color="#FF8A00",
        soft_background_color="rgba(255, 174, 88, 0.18)",
        default_time=ShiftTimeRange("07:30", "14:30"),
    ),
    ShiftType.MID: ShiftConfig(
        label="中班",
        short_label="中班",
        accent_color="#735BF2",
        text_color="#5236EB",
        soft_background_color="rgba(115, 91, 242, 0.18)",
        default_time=ShiftTimeRange("16:00", "22:30"),
    ),
    ShiftType.LATE: ShiftConfig(
        label="晚班",
        short_label="晚班",
        accent_color="#146BC2",
        text_color="#0E56A0",
        soft_background_color="rgba(20, 107, 194, 0.18)",
        default_time=ShiftTimeRange("22:30", "08:30"),
    ),
    ShiftType.OFF: ShiftConfig(
        label="休息日",
        short_label="休",
        accent_color="#2EBD59",
        text_color="#228B43",
        soft_background_color="rgba(46, 189, 89, 0.16)",
        default_time=None,
    ),
}

# Factory shift time map; OFF never has an entry
DEFAULT_SHIFT_TIMES: dict[ShiftType, Optional[ShiftTimeRange]] = {
    shift: SHIFT_CONFIG[shift].default_time for shift in WORK_SHIFTS
}


def default_shift_time(shift: ShiftType) -> Optional[str]:
    """Built-in time label for a shift, None for OFF."""
    default_time = SHIFT_CONFIG[shift].default_time
    return default_time.format() if default_time else None


@dataclass(frozen=True)
class Task:
    """An ad-hoc task attached to a day.

    Attributes:
        id: Identifier, unique among the tasks of the same day.
        title: Task title. Blank titles are dropped when saving.
        time_range: Optional free-form time text (e.g. "18:30").
        description: Optional longer description.
    """

    id: str
    title: str
    time_range: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DaySchedule:
    """Resolved schedule for one calendar day.

    Attributes:
        key: Date key, ``YYYY-MM-DD``.
        date: Calendar date.
        shift: Assigned shift type.
        shift_time: Time label for the shift, None on OFF days.
        colleagues: Colleagues working that day (no duplicates).
        tasks: Tasks for the day, in display order.
        notes: Optional free-form notes.
    """

    key: str
    date: date
    shift: ShiftType = ShiftType.OFF
    shift_time: Optional[str] = None
    colleagues: list[str] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    notes: Optional[str] = None

    @property
    def is_work_day(self) -> bool:
        """True when the shift is a work shift."""
        return self.shift.is_work

    @property
    def config(self) -> ShiftConfig:
        """Display configuration for this day's shift."""
        return SHIFT_CONFIG[self.shift]


@dataclass(frozen=True)
class CalendarDay:
    """A single cell in a month grid.

    Attributes:
        key: Date key, ``YYYY-MM-DD``.
        date: Calendar date.
        is_current_month: True if the date lies in the displayed month.
    """

    key: str
    date: date
    is_current_month: bool


# Fields an override may carry
OVERRIDE_FIELDS: tuple[str, ...] = ("shift", "shift_time", "colleagues", "tasks", "notes")

# A resolver: (date key, optional date) -> resolved DaySchedule
ScheduleLookup = Callable[[str, Optional[date]], DaySchedule]
