"""Field mapping from upstream payloads to calendar records.

Each upstream store has its own naming: booking requests are snake_case,
events and availability rows are camelCase. Every adapter maps its source
once, here, so nothing past this module looks at raw payload keys.
Sources may be mappings or objects carrying the same attribute names.

Adapters return None when the record's date can't be normalized; such
records are left out of the calendar.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from trainer_calendar.calendar.dates import normalize_date
from trainer_calendar.calendar.records import (
    EVENT_SOURCE,
    BOOKING_SOURCE,
    AvailabilityRecord,
    BookingRecord,
    DayStatus,
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_status(value: Any) -> str:
    return _text(value).strip().lower()


def _field(source: Any, name: str) -> Any:
    # payload dicts, or ORM rows carrying the same attribute names
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def booking_from_source(row: Any) -> Optional[BookingRecord]:
    """Map a booking-request payload (``requested_date``, ``course_id``...)."""
    start_date = normalize_date(_field(row, "requested_date"))
    if start_date is None:
        return None

    return BookingRecord(
        id=_text(_field(row, "id")),
        course_id=_text(_field(row, "course_id")),
        trainer_id=_text(_field(row, "trainer_id")),
        start_date=start_date,
        end_date=normalize_date(_field(row, "end_date")),
        status=normalize_status(_field(row, "status")),
        title=_optional_text(_field(row, "title")),
        source=BOOKING_SOURCE,
    )


def event_to_booking(event: Any) -> Optional[BookingRecord]:
    """Map an event payload (``eventDate``, ``courseId``...) to a booked record.

    The event's own lifecycle status is not carried over; on the calendar an
    event always reads as ``booked``.
    """
    start_date = normalize_date(_field(event, "eventDate"))
    if start_date is None:
        return None

    return BookingRecord(
        id=_text(_field(event, "id")),
        course_id=_text(_field(event, "courseId")),
        trainer_id=_text(_field(event, "trainerId")),
        start_date=start_date,
        end_date=normalize_date(_field(event, "endDate")),
        status=DayStatus.BOOKED.value,
        title=_optional_text(_field(event, "title")),
        source=EVENT_SOURCE,
    )


def availability_from_source(row: Any) -> Optional[AvailabilityRecord]:
    """Map an availability payload (``trainerId``, ``date``, ``startTime``...)."""
    day = normalize_date(_field(row, "date"))
    if day is None:
        return None

    return AvailabilityRecord(
        id=_text(_field(row, "id")),
        trainer_id=_text(_field(row, "trainerId")),
        date=day,
        status=normalize_status(_field(row, "status")),
        start_time=_optional_text(_field(row, "startTime")),
        end_time=_optional_text(_field(row, "endTime")),
    )
