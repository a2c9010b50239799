"""Mutable configuration that feeds schedule derivation.

Two independent settings live here: the shift time map (custom time
ranges for the work shifts) and the colleague pool. Both replace their
whole backing container on every change, so a snapshot handed to a reader
never changes underneath it.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from shiftcal.domain.models import (
    DEFAULT_SHIFT_TIMES,
    WORK_SHIFTS,
    ShiftTimeRange,
    ShiftType,
)
from shiftcal.domain.policies import FACTORY_COLLEAGUES

logger = logging.getLogger(__name__)


class ShiftTimeSettings:
    """Custom time ranges for EARLY, MID and LATE.

    A value of None means "use the built-in default" from the shift
    configuration table. OFF never has a time range.

    Example:
        >>> settings = ShiftTimeSettings()
        >>> settings.set_shift_time(ShiftType.EARLY, ShiftTimeRange("08:00", "15:00"))
        True
    """

    def __init__(
        self,
        initial: Optional[Mapping[ShiftType, Optional[ShiftTimeRange]]] = None,
    ):
        values = dict(DEFAULT_SHIFT_TIMES)
        if initial:
            for shift, value in initial.items():
                values[self._check_work_shift(shift)] = value
        self._times: Mapping[ShiftType, Optional[ShiftTimeRange]] = MappingProxyType(values)

    @staticmethod
    def _check_work_shift(shift: ShiftType) -> ShiftType:
        shift = ShiftType.coerce(shift)
        if not shift.is_work:
            raise ValueError("OFF has no shift time")
        return shift

    def get(self, shift: ShiftType) -> Optional[ShiftTimeRange]:
        """Get the configured range for a shift (None for OFF)."""
        shift = ShiftType.coerce(shift)
        if not shift.is_work:
            return None
        return self._times[shift]

    def set_shift_time(
        self,
        shift: ShiftType,
        value: Optional[ShiftTimeRange],
    ) -> bool:
        """Replace the range for one work shift.

        Args:
            shift: EARLY, MID or LATE.
            value: New range, or None to fall back to the built-in default.

        Returns:
            True if the stored value changed, False for a field-wise equal value.

        Raises:
            ValueError: If ``shift`` is OFF.
        """
        shift = self._check_work_shift(shift)
        current = self._times[shift]
        if current == value:
            return False

        updated = dict(self._times)
        updated[shift] = value
        self._times = MappingProxyType(updated)
        logger.debug("Shift time for %s set to %s", shift.value, value)
        return True

    def reset(self) -> None:
        """Restore all work shifts to their factory ranges."""
        self._times = MappingProxyType(dict(DEFAULT_SHIFT_TIMES))
        logger.debug("Shift times reset to defaults")

    def snapshot(self) -> Mapping[ShiftType, Optional[ShiftTimeRange]]:
        """Read-only view of the current map. It is never mutated afterwards."""
        return self._times

    def is_default(self) -> bool:
        """True when every work shift uses its factory range."""
        return all(self._times[shift] == DEFAULT_SHIFT_TIMES[shift] for shift in WORK_SHIFTS)


class ColleaguePool:
    """Ordered, duplicate-free roster of colleague names.

    Names are trimmed before being stored. Matching is exact and
    case-sensitive. No operation ever raises for bad input: empty names and
    duplicates are ignored, and out-of-range indexes leave the pool alone.
    """

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        factory: Iterable[str] = FACTORY_COLLEAGUES,
    ):
        self._factory = self._dedupe(factory)
        self._names: tuple[str, ...] = (
            self._dedupe(names) if names is not None else self._factory
        )

    @staticmethod
    def _dedupe(names: Iterable[str]) -> tuple[str, ...]:
        result: list[str] = []
        for name in names:
            trimmed = name.strip()
            if trimmed and trimmed not in result:
                result.append(trimmed)
        return tuple(result)

    @property
    def names(self) -> tuple[str, ...]:
        """Current pool. Tuples are immutable, so this is a safe snapshot."""
        return self._names

    @property
    def factory(self) -> tuple[str, ...]:
        """The list ``reset()`` restores."""
        return self._factory

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self):
        return iter(self._names)

    def add(self, name: str) -> bool:
        """Append a name unless it is empty or already present.

        Returns:
            True if the pool changed.
        """
        trimmed = name.strip()
        if not trimmed or trimmed in self._names:
            return False
        self._names = self._names + (trimmed,)
        logger.debug("Colleague added: %s", trimmed)
        return True

    def update_at(self, index: int, name: str) -> bool:
        """Rename the entry at ``index``.

        A blank name removes the entry. Renaming to a name held by another
        entry also removes the entry at ``index`` instead of duplicating it.

        Returns:
            True if the pool changed.
        """
        if not 0 <= index < len(self._names):
            return False

        trimmed = name.strip()
        if not trimmed:
            return self.remove_at(index)

        if trimmed in self._names and self._names.index(trimmed) != index:
            return self.remove_at(index)

        if self._names[index] == trimmed:
            return False

        updated = list(self._names)
        updated[index] = trimmed
        self._names = tuple(updated)
        logger.debug("Colleague %d renamed to %s", index, trimmed)
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the entry at ``index``; out-of-range is a no-op."""
        if not 0 <= index < len(self._names):
            return False
        removed = self._names[index]
        self._names = self._names[:index] + self._names[index + 1:]
        logger.debug("Colleague removed: %s", removed)
        return True

    def reset(self) -> None:
        """Restore the factory list."""
        self._names = self._factory
        logger.debug("Colleague pool reset (%d names)", len(self._factory))


@dataclass
class ScheduleContext:
    """Configuration threaded into the deriver and resolver.

    Attributes:
        shift_times: Custom shift time ranges.
        colleague_pool: Colleague roster.
    """

    shift_times: ShiftTimeSettings = field(default_factory=ShiftTimeSettings)
    colleague_pool: ColleaguePool = field(default_factory=ColleaguePool)
