"""Sparse storage for user edits ("overrides").

An override is a partial day schedule: a mapping whose keys are a subset
of ``OVERRIDE_FIELDS``. Stored overrides are frozen (read-only mappings
with tuple-valued lists); callers receive mutable copies. A date with no
user edit has no entry, and an entry is never kept once it has no fields
left.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from shiftcal.domain.calendar import parse_date_key
from shiftcal.domain.models import OVERRIDE_FIELDS, ShiftType, Task
from shiftcal.exceptions import InvalidOverrideError

logger = logging.getLogger(__name__)

Override = dict[str, Any]
OverrideUpdater = Callable[[Optional[Override]], Optional[Override]]


def normalize_override(override: Mapping[str, Any]) -> Override:
    """Validate an override and return a detached, frozen copy.

    Shift strings are coerced to ShiftType and the colleague and task
    sequences are copied into tuples, so neither the caller nor a reader of
    the stored value can change it afterwards.

    Raises:
        InvalidOverrideError: On unknown field names, unknown shift values,
            or list fields that are not sequences of the right type.
    """
    unknown = set(override) - set(OVERRIDE_FIELDS)
    if unknown:
        raise InvalidOverrideError(f"Unknown override fields: {sorted(unknown)}")

    normalized: Override = {}
    for name, value in override.items():
        if name == "shift":
            if value is None:
                raise InvalidOverrideError("shift cannot be None")
            value = ShiftType.coerce(value)
        elif name == "colleagues" and value is not None:
            value = _freeze_sequence(name, value)
            for colleague in value:
                if not isinstance(colleague, str):
                    raise InvalidOverrideError(f"Not a colleague name: {colleague!r}")
        elif name == "tasks" and value is not None:
            value = _freeze_sequence(name, value)
            for task in value:
                if not isinstance(task, Task):
                    raise InvalidOverrideError(f"Not a Task: {task!r}")
        normalized[name] = value
    return normalized


def _freeze_sequence(name: str, value: Any) -> tuple:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidOverrideError(f"{name} must be a list, got {value!r}")
    return tuple(value)


def _copy_override(override: Mapping[str, Any]) -> Override:
    return {
        name: list(value) if isinstance(value, (list, tuple)) else value
        for name, value in override.items()
    }


class OverrideStore:
    """Map of date key to override with delete-when-empty semantics.

    Every mutation builds a new dict and swaps it in (copy-on-write), so a
    ``snapshot()`` taken by a reader stays consistent while a writer keeps
    going. The store expects a single writer.

    Example:
        >>> store = OverrideStore()
        >>> store.update("2025-09-10", lambda prev: {**(prev or {}), "shift": "early"})
        >>> store.has_override("2025-09-10")
        True
    """

    def __init__(self, initial: Optional[Mapping[str, Mapping[str, Any]]] = None):
        entries: dict[str, Override] = {}
        for key, override in (initial or {}).items():
            parse_date_key(key)
            normalized = normalize_override(override)
            if normalized:
                entries[key] = MappingProxyType(normalized)
        self._overrides: Mapping[str, Mapping[str, Any]] = MappingProxyType(entries)

    def get(self, key: str) -> Optional[Override]:
        """Get a copy of the override for ``key``, or None."""
        current = self._overrides.get(key)
        if current is None:
            return None
        return _copy_override(current)

    def update(self, key: str, updater: OverrideUpdater) -> None:
        """Apply ``updater`` to the override for ``key`` and store the result.

        The updater receives a copy of the current override (None if there
        is none). Returning None or an empty dict deletes the entry.

        Raises:
            MalformedKeyError: If ``key`` is not a valid date key.
            InvalidOverrideError: If the updater returns unknown fields.
        """
        parse_date_key(key)
        current = self._overrides.get(key)
        result = updater(_copy_override(current) if current is not None else None)

        if not result:
            if current is None:
                return
            updated = dict(self._overrides)
            del updated[key]
            self._overrides = MappingProxyType(updated)
            logger.debug("Override pruned for %s", key)
            return

        normalized = normalize_override(result)
        updated = dict(self._overrides)
        updated[key] = MappingProxyType(normalized)
        self._overrides = MappingProxyType(updated)
        logger.debug("Override stored for %s: %s", key, sorted(normalized))

    def has_override(self, key: str) -> bool:
        """True if the user has customized ``key``."""
        return key in self._overrides

    def snapshot(self) -> Mapping[str, Mapping[str, Any]]:
        """Read-only view of the current map. It is never mutated afterwards.

        Each override in it is itself read-only, with tuples in place of
        lists.
        """
        return self._overrides

    def keys(self) -> list[str]:
        """Stored keys in date order."""
        return sorted(self._overrides)

    def years(self) -> set[int]:
        """Distinct years that have at least one override."""
        return {parse_date_key(key).year for key in self._overrides}

    def clear(self) -> None:
        """Drop every override."""
        self._overrides = MappingProxyType({})
        logger.debug("All overrides cleared")

    def __contains__(self, key: object) -> bool:
        return key in self._overrides

    def __len__(self) -> int:
        return len(self._overrides)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
