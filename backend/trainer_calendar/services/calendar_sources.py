from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from trainer_calendar.core.database import AsyncSessionLocal
from trainer_calendar.models import BookingRequest, Event, TrainerAvailability
from trainer_calendar.services.db_service import DBService


@dataclass
class TrainerSummary:
    id: str
    full_name: str


@dataclass
class BlockedDays:
    weekdays: List[int] = field(default_factory=list)  # 0=Sunday .. 6=Saturday
    dates: List[str] = field(default_factory=list)


class CalendarSource(Protocol):
    """Read side of the calendar.

    The four ``fetch_*`` reads are independent and may run concurrently.
    Payload shapes follow the upstream stores: booking requests are
    snake_case, events and availability rows are camelCase.
    """

    async def get_trainer(self, trainer_id: str) -> Optional[TrainerSummary]:
        ...

    async def fetch_bookings(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        ...

    async def fetch_events(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        ...

    async def fetch_availability(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        ...

    async def fetch_blocked_days(self, trainer_id: str, start: date, end: date) -> BlockedDays:
        ...


def _iso(value: Any) -> Optional[str]:
    return value.isoformat() if value is not None else None


def booking_payload(booking: BookingRequest) -> dict[str, Any]:
    return {
        "id": str(booking.id),
        "course_id": str(booking.course_id),
        "trainer_id": str(booking.trainer_id),
        "requested_date": _iso(booking.requested_date),
        "end_date": _iso(booking.end_date),
        "status": booking.status,
        "title": booking.course_title,
    }


def event_payload(event: Event) -> dict[str, Any]:
    return {
        "id": str(event.id),
        "courseId": str(event.course_id),
        "trainerId": str(event.trainer_id),
        "eventDate": _iso(event.event_date),
        "endDate": _iso(event.end_date),
        "title": event.title,
        "status": event.status,
    }


def availability_payload(row: TrainerAvailability) -> dict[str, Any]:
    return {
        "id": str(row.id),
        "trainerId": str(row.trainer_id),
        "date": _iso(row.date),
        "status": row.status,
        "startTime": row.start_time,
        "endTime": row.end_time,
    }


class DatabaseCalendarSource:
    """CalendarSource backed by the primary database.

    Every read opens its own session: an AsyncSession can't be shared by
    coroutines running under ``asyncio.gather``.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession] = AsyncSessionLocal):
        self._session_factory = session_factory

    async def get_trainer(self, trainer_id: str) -> Optional[TrainerSummary]:
        async with self._session_factory() as session:
            trainer = await DBService(session).get_trainer(trainer_id)
        if not trainer:
            return None
        return TrainerSummary(id=str(trainer.id), full_name=trainer.full_name)

    async def fetch_bookings(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        async with self._session_factory() as session:
            rows = await DBService(session).get_booking_requests_in_range(trainer_id, start, end)
        return [booking_payload(row) for row in rows]

    async def fetch_events(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        async with self._session_factory() as session:
            rows = await DBService(session).get_active_events_in_range(trainer_id, start, end)
        return [event_payload(row) for row in rows]

    async def fetch_availability(self, trainer_id: str, start: date, end: date) -> List[dict[str, Any]]:
        async with self._session_factory() as session:
            rows = await DBService(session).get_availability_in_range(trainer_id, start, end)
        return [availability_payload(row) for row in rows]

    async def fetch_blocked_days(self, trainer_id: str, start: date, end: date) -> BlockedDays:
        async with self._session_factory() as session:
            db_service = DBService(session)
            weekdays = await db_service.get_blocked_weekdays(trainer_id)
            dates = await db_service.get_blocked_dates_in_range(trainer_id, start, end)
        return BlockedDays(weekdays=weekdays, dates=[d.isoformat() for d in dates])
