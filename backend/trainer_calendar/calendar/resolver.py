from __future__ import annotations

from typing import Iterable, Optional, Sequence

from trainer_calendar.calendar.records import BookingRecord, DayStatus


BOOKED_STATUSES = frozenset({"booked", "confirmed"})
TENTATIVE_STATUSES = frozenset({"approved", "tentative"})


def deduplicate_bookings(
    bookings: Sequence[BookingRecord],
    event_bookings: Sequence[BookingRecord],
) -> list[BookingRecord]:
    """Drop confirmed bookings that already have an event for the same course and day.

    Bookings in any other status are kept even when an event matches. The
    result is the kept bookings followed by every event booking, each group
    in input order.
    """
    event_keys = {event.dedup_key for event in event_bookings}

    kept = [
        booking
        for booking in bookings
        if not (
            booking.status.lower() == "confirmed"
            and booking.dedup_key in event_keys
        )
    ]
    return kept + list(event_bookings)


def bookings_for_date(target: str, bookings: Iterable[BookingRecord]) -> list[BookingRecord]:
    """Bookings that cover ``target``; multi-day bookings match every day in their span."""
    matches: list[BookingRecord] = []
    for booking in bookings:
        if booking.end_date:
            if booking.start_date <= target <= booking.end_date:
                matches.append(booking)
        elif booking.start_date == target:
            matches.append(booking)
    return matches


def resolve_day_status(
    is_blocked: bool,
    bookings: Iterable[BookingRecord],
    availability_status: Optional[str] = None,
) -> DayStatus:
    """Pick the single display status for a day.

    Precedence: blocked, booked, tentative, available, not_available.
    """
    if is_blocked:
        return DayStatus.BLOCKED

    statuses = {booking.status.lower() for booking in bookings}
    if statuses & BOOKED_STATUSES:
        return DayStatus.BOOKED
    if statuses & TENTATIVE_STATUSES:
        return DayStatus.TENTATIVE

    if availability_status and availability_status.strip().lower() == DayStatus.AVAILABLE.value:
        return DayStatus.AVAILABLE
    return DayStatus.NOT_AVAILABLE
