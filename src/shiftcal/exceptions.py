"""Exceptions raised by the shift calendar core."""


class ShiftCalError(Exception):
    """Base class for all shiftcal errors."""


class MalformedKeyError(ShiftCalError, ValueError):
    """A date key is not a valid zero-padded ``YYYY-MM-DD`` string."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"Malformed date key: {key!r} (expected YYYY-MM-DD)")


class InvalidOverrideError(ShiftCalError, ValueError):
    """An override contains unknown fields or an unknown shift value."""
