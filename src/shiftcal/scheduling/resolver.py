"""Resolution of the authoritative schedule for a date.

The resolver layers a stored override over the derived baseline, field by
field, then enforces the OFF-day invariant. Every consumer reads schedules
through here.
"""

from datetime import date
from typing import Any, Mapping, Optional

from shiftcal.domain.calendar import parse_date_key
from shiftcal.domain.models import DaySchedule, ShiftType
from shiftcal.exceptions import MalformedKeyError
from shiftcal.scheduling.deriver import DefaultScheduleDeriver
from shiftcal.scheduling.settings import ScheduleContext
from shiftcal.scheduling.store import OverrideStore


def _dedupe(names: list[str]) -> list[str]:
    seen: list[str] = []
    for name in names:
        if name not in seen:
            seen.append(name)
    return seen


def merge_override(
    baseline: DaySchedule,
    override: Optional[Mapping[str, Any]],
) -> DaySchedule:
    """Overlay an override on a baseline schedule.

    Fields present in the override win, including explicit None and empty
    lists. The OFF-day invariant is enforced on the result regardless of
    what the override asked for.

    Args:
        baseline: Derived schedule for the date.
        override: Stored override, or None.

    Returns:
        A new DaySchedule; the inputs are left untouched.
    """
    override = override or {}

    shift = ShiftType.coerce(override.get("shift", baseline.shift))
    shift_time = override["shift_time"] if "shift_time" in override else baseline.shift_time
    colleagues = override["colleagues"] if "colleagues" in override else baseline.colleagues
    tasks = override["tasks"] if "tasks" in override else baseline.tasks
    notes = override["notes"] if "notes" in override else baseline.notes

    if not shift.is_work:
        shift_time = None
        colleagues = []

    return DaySchedule(
        key=baseline.key,
        date=baseline.date,
        shift=shift,
        shift_time=shift_time,
        colleagues=_dedupe(list(colleagues or [])),
        tasks=list(tasks or []),
        notes=notes,
    )


class ScheduleResolver:
    """Resolves schedules from the override store and current configuration.

    The resolver holds no state of its own; it reads the store and the
    context at call time, so two calls with no mutation in between return
    equal schedules.

    Example:
        >>> resolver = ScheduleResolver(OverrideStore(), ScheduleContext())
        >>> resolver.resolve("2025-09-10").shift
        <ShiftType.OFF: 'off'>
    """

    def __init__(
        self,
        store: OverrideStore,
        context: ScheduleContext,
        deriver: Optional[DefaultScheduleDeriver] = None,
    ):
        self.store = store
        self.context = context
        self.deriver = deriver or DefaultScheduleDeriver()

    def resolve(self, key: str, day: Optional[date] = None) -> DaySchedule:
        """Get the authoritative schedule for a date key.

        Args:
            key: Date key, ``YYYY-MM-DD``.
            day: The date for ``key``; parsed from the key when omitted.

        Raises:
            MalformedKeyError: If ``key`` is malformed or names a different
                date than ``day``.
        """
        parsed = parse_date_key(key)
        if day is None:
            day = parsed
        elif day != parsed:
            raise MalformedKeyError(key)

        override = self.store.snapshot().get(key)
        # Derive for the shift the override settles on, so a day switched
        # to work still gets its default time and colleagues
        shift = ShiftType.coerce(override["shift"]) if override and "shift" in override else None

        baseline = self.deriver.derive(
            key,
            day,
            self.context.shift_times.snapshot(),
            self.context.colleague_pool.names,
            shift=shift,
        )
        return merge_override(baseline, override)

    __call__ = resolve
