from __future__ import annotations

from datetime import date
from typing import Any, Optional

from trainer_calendar.services.calendar_sources import BlockedDays, TrainerSummary

TRAINER_ID = "0b6c3f5e-2f6d-4b8e-9d55-1f8f7c0e2a11"
COURSE_A = "course-a"
COURSE_B = "course-b"


def booking_row(
    booking_id: str,
    requested_date: Any,
    status: str = "pending",
    course_id: str = COURSE_A,
    end_date: Any = None,
    title: Optional[str] = None,
) -> dict[str, Any]:
    return {
        "id": booking_id,
        "course_id": course_id,
        "trainer_id": TRAINER_ID,
        "requested_date": requested_date,
        "end_date": end_date,
        "status": status,
        "title": title,
    }


def event_row(
    event_id: str,
    event_date: Any,
    course_id: str = COURSE_A,
    end_date: Any = None,
    title: str = "Course delivery",
) -> dict[str, Any]:
    return {
        "id": event_id,
        "courseId": course_id,
        "trainerId": TRAINER_ID,
        "eventDate": event_date,
        "endDate": end_date,
        "title": title,
        "status": "ACTIVE",
    }


def availability_row(
    row_id: str,
    day: Any,
    status: str = "available",
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> dict[str, Any]:
    return {
        "id": row_id,
        "trainerId": TRAINER_ID,
        "date": day,
        "status": status,
        "startTime": start_time,
        "endTime": end_time,
    }


class FakeCalendarSource:
    """In-memory CalendarSource; set ``fail`` to make one of the reads raise."""

    def __init__(
        self,
        bookings=None,
        events=None,
        availability=None,
        blocked=None,
        trainers=None,
        fail: Optional[str] = None,
    ):
        self.bookings = bookings or []
        self.events = events or []
        self.availability = availability or []
        self.blocked = blocked or BlockedDays()
        self.trainers = trainers if trainers is not None else {TRAINER_ID: "Dana Reyes"}
        self.fail = fail
        self.calls: list[tuple[str, date, date]] = []

    def _maybe_fail(self, name: str) -> None:
        if self.fail == name:
            raise RuntimeError(f"{name} store is down")

    async def get_trainer(self, trainer_id: str) -> Optional[TrainerSummary]:
        name = self.trainers.get(trainer_id)
        if name is None:
            return None
        return TrainerSummary(id=trainer_id, full_name=name)

    async def fetch_bookings(self, trainer_id, start, end):
        self.calls.append(("bookings", start, end))
        self._maybe_fail("bookings")
        return list(self.bookings)

    async def fetch_events(self, trainer_id, start, end):
        self.calls.append(("events", start, end))
        self._maybe_fail("events")
        return list(self.events)

    async def fetch_availability(self, trainer_id, start, end):
        self.calls.append(("availability", start, end))
        self._maybe_fail("availability")
        return list(self.availability)

    async def fetch_blocked_days(self, trainer_id, start, end):
        self.calls.append(("blocked", start, end))
        self._maybe_fail("blocked")
        return self.blocked
