"""Calendar helpers: date keys, month iteration and month grids."""

import calendar
import re
from datetime import date, timedelta
from typing import Iterator

from shiftcal.domain.models import CalendarDay
from shiftcal.exceptions import MalformedKeyError

_KEY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

# Labels indexed by Monday-first position (Monday=0 ... Sunday=6)
WEEKDAY_LABELS: tuple[str, ...] = ("周一", "周二", "周三", "周四", "周五", "周六", "周日")


def format_date_key(d: date) -> str:
    """Format a date as a zero-padded ``YYYY-MM-DD`` key."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key.

    Raises:
        MalformedKeyError: If the key is not a zero-padded valid date.
    """
    if not isinstance(key, str):
        raise MalformedKeyError(key)
    match = _KEY_PATTERN.fullmatch(key)
    if match is None:
        raise MalformedKeyError(key)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise MalformedKeyError(key) from None


def is_valid_date_key(key: str) -> bool:
    """Check whether a string is a well-formed date key."""
    try:
        parse_date_key(key)
    except MalformedKeyError:
        return False
    return True


def monday_first_index(native_weekday: int) -> int:
    """Map Sunday=0 weekday numbering to Monday=0 ... Sunday=6."""
    return (native_weekday + 6) % 7


def native_weekday(d: date) -> int:
    """Weekday with Sunday=0 ... Saturday=6."""
    return d.isoweekday() % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def iter_month_days(year: int, month: int) -> Iterator[date]:
    """Yield every date of a month, first to last."""
    for day in range(1, days_in_month(year, month) + 1):
        yield date(year, month, day)


def shift_month(anchor: date, delta: int) -> date:
    """First day of the month ``delta`` months away from ``anchor``."""
    index = anchor.year * 12 + (anchor.month - 1) + delta
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def build_calendar_days(month_anchor: date) -> list[CalendarDay]:
    """Build the Monday-first grid for the month containing ``month_anchor``.

    The grid starts on the Monday on or before the 1st and ends on the
    Sunday on or after the last day, so its length is always a multiple
    of 7. Cells outside the month have ``is_current_month`` False.

    Args:
        month_anchor: Any date inside the target month.

    Returns:
        Ordered list of calendar cells.
    """
    year, month = month_anchor.year, month_anchor.month
    first_day = date(year, month, 1)
    month_length = days_in_month(year, month)

    offset_from_monday = monday_first_index(native_weekday(first_day))
    total_cells = -(-(offset_from_monday + month_length) // 7) * 7
    start = first_day - timedelta(days=offset_from_monday)

    cells = []
    for index in range(total_cells):
        current = start + timedelta(days=index)
        cells.append(
            CalendarDay(
                key=format_date_key(current),
                date=current,
                is_current_month=(current.year == year and current.month == month),
            )
        )
    return cells


def format_full_date(d: date) -> str:
    """Long label used by the day editor, e.g. ``2025年09月08日 · 周一``."""
    weekday = WEEKDAY_LABELS[d.weekday()]
    return f"{d.year}年{d.month:02d}月{d.day:02d}日 · {weekday}"
