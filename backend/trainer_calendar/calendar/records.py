from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from trainer_calendar.calendar.dates import sunday_weekday


class DayStatus(str, Enum):
    """Display status of one calendar day, highest precedence first."""

    BLOCKED = "blocked"
    BOOKED = "booked"
    TENTATIVE = "tentative"
    AVAILABLE = "available"
    NOT_AVAILABLE = "not_available"


BOOKING_SOURCE = "booking"
EVENT_SOURCE = "event"


@dataclass(frozen=True)
class BookingRecord:
    """Booking or event in the one shape the calendar understands.

    Dates are canonical ``YYYY-MM-DD`` strings and ``status`` is lower-case.
    Events always carry ``status="booked"`` and ``source="event"``.
    """

    id: str
    course_id: str
    trainer_id: str
    start_date: str
    status: str
    end_date: Optional[str] = None
    title: Optional[str] = None
    source: str = BOOKING_SOURCE

    @property
    def dedup_key(self) -> str:
        return f"{self.course_id}:{self.start_date}"


@dataclass(frozen=True)
class AvailabilityRecord:
    id: str
    trainer_id: str
    date: str
    status: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass(frozen=True)
class CalendarDay:
    date: str
    status: DayStatus
    bookings: tuple[BookingRecord, ...] = field(default_factory=tuple)
    availability: Optional[AvailabilityRecord] = None
    is_blocked: bool = False

    @property
    def availability_status(self) -> Optional[str]:
        return self.availability.status if self.availability else None

    @property
    def weekday(self) -> int:
        """Sunday=0 .. Saturday=6."""
        return sunday_weekday(date.fromisoformat(self.date))
