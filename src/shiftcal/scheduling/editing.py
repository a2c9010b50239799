"""Day editing: turning an edited day into an override update.

The editor works on a draft copy of a resolved day. Saving normalizes the
draft (blank tasks dropped, colleagues de-duplicated, OFF days cleared)
and merges it into whatever override the day already had.
"""

import random
import string
import time
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from shiftcal.domain.models import DaySchedule, ShiftTimeRange, ShiftType, Task
from shiftcal.scheduling.deriver import format_shift_time
from shiftcal.scheduling.store import Override, OverrideUpdater

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def create_task_id(key: str, seed: Optional[int] = None) -> str:
    """Create a task id, unique in practice, for a task on ``key``.

    Format: ``task-{key}-{seed36}-{millis36}-{random4}``.
    """
    seed_segment = _to_base36(seed) if seed is not None else ""
    time_segment = _to_base36(int(time.time() * 1000))
    random_segment = "".join(random.choices(_BASE36, k=4))
    return f"task-{key}-{seed_segment}-{time_segment}-{random_segment}"


def sanitize_tasks(tasks: Iterable[Task], key: str) -> list[Task]:
    """Prepare tasks for saving.

    Tasks with blank titles are dropped, titles are trimmed, and tasks
    without an id get a fresh one. Ids already used earlier in the list are
    replaced so they stay unique within the day.
    """
    result: list[Task] = []
    used_ids: set[str] = set()
    auto_index = 0
    for task in tasks:
        title = (task.title or "").strip()
        if not title:
            continue

        task_id = (task.id or "").strip()
        if not task_id or task_id in used_ids:
            task_id = create_task_id(key, auto_index)
            auto_index += 1
        used_ids.add(task_id)

        result.append(
            Task(
                id=task_id,
                title=title,
                time_range=task.time_range,
                description=task.description,
            )
        )
    return result


def task_signature(tasks: Iterable[Task]) -> str:
    """Signature of the non-blank titles, used to detect task edits."""
    titles = [(task.title or "").strip() for task in tasks]
    return "||".join(title for title in titles if title)


def default_time_for(
    shift: ShiftType,
    shift_times: Mapping[ShiftType, Optional[ShiftTimeRange]],
) -> Optional[str]:
    """Time label the editor shows when a shift is picked."""
    return format_shift_time(shift, shift_times)


@dataclass
class DayEdit:
    """Editable draft of a single day.

    Attributes:
        original: The resolved schedule the draft started from.
        shift: Selected shift.
        shift_time: Selected time label.
        colleagues: Selected colleagues.
        tasks: Draft tasks (may contain blank titles until saved).
        notes: Draft notes.
    """

    original: DaySchedule
    shift: ShiftType
    shift_time: Optional[str] = None
    colleagues: list[str] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    notes: Optional[str] = None

    @classmethod
    def from_schedule(cls, schedule: DaySchedule) -> "DayEdit":
        """Start a draft from a resolved schedule."""
        return cls(
            original=schedule,
            shift=schedule.shift,
            shift_time=schedule.shift_time,
            colleagues=list(schedule.colleagues),
            tasks=list(schedule.tasks),
            notes=schedule.notes,
        )

    @property
    def tasks_dirty(self) -> bool:
        """True if the non-blank task titles differ from the original."""
        return task_signature(self.tasks) != task_signature(self.original.tasks)

    @property
    def is_dirty(self) -> bool:
        """True if anything differs from the original schedule."""
        return (
            self.shift != self.original.shift
            or self.shift_time != self.original.shift_time
            or self.colleagues != self.original.colleagues
            or self.notes != self.original.notes
            or self.tasks_dirty
        )

    def change_shift(
        self,
        shift: ShiftType,
        shift_times: Mapping[ShiftType, Optional[ShiftTimeRange]],
    ) -> None:
        """Pick a new shift and update the time label to match.

        Going back to the original shift restores its original time. OFF
        clears the time and the colleagues.
        """
        shift = ShiftType.coerce(shift)
        if shift == self.shift:
            return

        self.shift = shift
        if not shift.is_work:
            self.shift_time = None
            self.colleagues = []
        elif shift == self.original.shift and self.original.shift_time:
            self.shift_time = self.original.shift_time
        else:
            self.shift_time = default_time_for(shift, shift_times)

    def add_task(self, title: str = "") -> Task:
        """Append a draft task and return it."""
        task = Task(id=create_task_id(self.original.key, len(self.tasks)), title=title)
        self.tasks.append(task)
        return task

    def rename_task(self, task_id: str, title: str) -> None:
        """Change the title of a draft task."""
        self.tasks = [
            Task(id=t.id, title=title, time_range=t.time_range, description=t.description)
            if t.id == task_id
            else t
            for t in self.tasks
        ]

    def remove_task(self, task_id: str) -> None:
        """Drop a draft task."""
        self.tasks = [t for t in self.tasks if t.id != task_id]

    def as_updater(self) -> OverrideUpdater:
        """Build the ``update_override`` updater that saves this draft."""
        shift = self.shift
        is_work = shift.is_work
        colleagues = list(dict.fromkeys(self.colleagues)) if is_work else []
        shift_time = self.shift_time if is_work else None
        tasks = sanitize_tasks(self.tasks, self.original.key)
        tasks_dirty = self.tasks_dirty
        notes_changed = self.notes != self.original.notes
        notes = self.notes.strip() if self.notes else None

        def updater(previous: Optional[Override]) -> Override:
            override: Override = dict(previous or {})
            override["shift"] = shift
            override["shift_time"] = shift_time
            override["colleagues"] = colleagues
            if tasks_dirty:
                override["tasks"] = tasks
            if notes_changed:
                override["notes"] = notes or None
            return override

        return updater
