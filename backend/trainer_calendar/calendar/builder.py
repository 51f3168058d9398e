from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence

from trainer_calendar.calendar.adapters import (
    availability_from_source,
    booking_from_source,
    event_to_booking,
)
from trainer_calendar.calendar.dates import (
    expand_blocked_weekdays,
    expand_date_range,
    normalize_date,
)
from trainer_calendar.calendar.records import AvailabilityRecord, BookingRecord, CalendarDay
from trainer_calendar.calendar.resolver import (
    bookings_for_date,
    deduplicate_bookings,
    resolve_day_status,
)


@dataclass
class CalendarInputs:
    """Upstream payloads after field mapping.

    ``dropped`` counts payloads whose date could not be read.
    """

    bookings: list[BookingRecord] = field(default_factory=list)
    event_bookings: list[BookingRecord] = field(default_factory=list)
    availability: list[AvailabilityRecord] = field(default_factory=list)
    dropped: int = 0


def adapt_inputs(
    bookings: Iterable[Mapping[str, Any]] = (),
    events: Iterable[Mapping[str, Any]] = (),
    availability: Iterable[Mapping[str, Any]] = (),
) -> CalendarInputs:
    inputs = CalendarInputs()

    for row in bookings:
        record = booking_from_source(row)
        if record is None:
            inputs.dropped += 1
        else:
            inputs.bookings.append(record)

    for row in events:
        record = event_to_booking(row)
        if record is None:
            inputs.dropped += 1
        else:
            inputs.event_bookings.append(record)

    for row in availability:
        record = availability_from_source(row)
        if record is None:
            inputs.dropped += 1
        else:
            inputs.availability.append(record)

    return inputs


def build_calendar_days(
    start: Any,
    end: Any,
    bookings: Sequence[BookingRecord] = (),
    event_bookings: Sequence[BookingRecord] = (),
    availability: Sequence[AvailabilityRecord] = (),
    blocked_weekdays: Optional[Iterable[Any]] = None,
    blocked_dates: Optional[Iterable[Any]] = None,
) -> list[CalendarDay]:
    """Resolve one ``CalendarDay`` per date in ``[start, end]`` from canonical records."""
    merged = deduplicate_bookings(bookings, event_bookings)

    # Later rows win when a date has more than one availability record
    availability_by_date = {record.date: record for record in availability}

    blocked = set(expand_blocked_weekdays(start, end, blocked_weekdays))
    for raw in blocked_dates or ():
        day = normalize_date(raw)
        if day is not None:
            blocked.add(day)

    days: list[CalendarDay] = []
    for day in expand_date_range(start, end):
        day_bookings = bookings_for_date(day, merged)
        day_availability = availability_by_date.get(day)
        is_blocked = day in blocked
        days.append(
            CalendarDay(
                date=day,
                status=resolve_day_status(
                    is_blocked,
                    day_bookings,
                    day_availability.status if day_availability else None,
                ),
                bookings=tuple(day_bookings),
                availability=day_availability,
                is_blocked=is_blocked,
            )
        )
    return days


def build_calendar(
    start: Any,
    end: Any,
    bookings: Iterable[Mapping[str, Any]] = (),
    events: Iterable[Mapping[str, Any]] = (),
    availability: Iterable[Mapping[str, Any]] = (),
    blocked_weekdays: Optional[Iterable[Any]] = None,
    blocked_dates: Optional[Iterable[Any]] = None,
) -> list[CalendarDay]:
    """Build calendar days straight from upstream payloads."""
    inputs = adapt_inputs(bookings, events, availability)
    return build_calendar_days(
        start,
        end,
        bookings=inputs.bookings,
        event_bookings=inputs.event_bookings,
        availability=inputs.availability,
        blocked_weekdays=blocked_weekdays,
        blocked_dates=blocked_dates,
    )


def leading_blank_days(days: Sequence[CalendarDay]) -> int:
    """Empty cells to draw before the first day in a Sunday-first 7-column grid."""
    if not days:
        return 0
    return days[0].weekday
