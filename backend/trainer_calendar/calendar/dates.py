"""Date helpers for calendar building.

All calendar dates travel through the package as canonical ``YYYY-MM-DD``
strings. Weekdays use the Sunday=0 convention of the trainer portal, not
Python's Monday=0.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional


_DATE_PREFIX = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})(?=$|[T\s])")

SHORT_WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def normalize_date(value: Any) -> Optional[str]:
    """Return ``value`` as a ``YYYY-MM-DD`` string, or None if it can't be read.

    Accepts ``date``/``datetime`` objects and ISO strings with or without a
    time component ("2024-01-10", "2024-01-10T09:30:00Z",
    "2024-01-10 09:30"). The time of day is cut off at the date boundary
    without any timezone conversion.
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    if not isinstance(value, str):
        return None

    match = _DATE_PREFIX.match(value)
    if not match:
        return None

    try:
        return date.fromisoformat(match.group(1)).isoformat()
    except ValueError:
        # e.g. "2024-02-30"
        return None


def to_date(value: Any) -> Optional[date]:
    normalized = normalize_date(value)
    if normalized is None:
        return None
    return date.fromisoformat(normalized)


def sunday_weekday(day: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def expand_date_range(start: Any, end: Any) -> list[str]:
    """All dates from ``start`` to ``end`` inclusive, in ascending order.

    Returns an empty list when either bound is unreadable or ``end`` is
    before ``start``.
    """
    start_day = to_date(start)
    end_day = to_date(end)
    if start_day is None or end_day is None or end_day < start_day:
        return []

    days: list[str] = []
    current = start_day
    while current <= end_day:
        days.append(current.isoformat())
        current += timedelta(days=1)
    return days


def month_date_range(year: int, month: int) -> tuple[str, str]:
    """First and last date of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1).isoformat(), date(year, month, last_day).isoformat()


def clean_weekdays(weekdays: Optional[Iterable[Any]]) -> frozenset[int]:
    """Coerce a stored weekday list into a set of ints in 0..6.

    Values that are not integers in range are dropped.
    """
    if not weekdays:
        return frozenset()

    cleaned: set[int] = set()
    for raw in weekdays:
        if isinstance(raw, bool):
            continue
        try:
            value = int(raw)
        except (TypeError, ValueError):
            continue
        if 0 <= value <= 6:
            cleaned.add(value)
    return frozenset(cleaned)


def expand_blocked_weekdays(
    start: Any,
    end: Any,
    weekdays: Optional[Iterable[Any]],
) -> list[str]:
    """Every date in ``[start, end]`` whose Sunday=0 weekday is in ``weekdays``."""
    blocked = clean_weekdays(weekdays)
    if not blocked:
        return []

    return [
        day
        for day in expand_date_range(start, end)
        if sunday_weekday(date.fromisoformat(day)) in blocked
    ]
