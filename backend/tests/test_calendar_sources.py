from __future__ import annotations

import uuid
from datetime import date, datetime
from types import SimpleNamespace

import pytest

from trainer_calendar.calendar import availability_from_source, booking_from_source, event_to_booking
from trainer_calendar.models import BookingRequest, Event, TrainerAvailability
from trainer_calendar.services.calendar_sources import (
    availability_payload,
    booking_payload,
    event_payload,
)
from trainer_calendar.services.db_service import DBService

TRAINER_UUID = uuid.UUID("0b6c3f5e-2f6d-4b8e-9d55-1f8f7c0e2a11")
COURSE_UUID = uuid.UUID("6a1f0f0e-5c7b-4f57-8d0e-3c9e0b9f1d22")


def test_booking_row_maps_to_calendar_record():
    row = BookingRequest(
        id=uuid.uuid4(),
        course_id=COURSE_UUID,
        trainer_id=TRAINER_UUID,
        requested_date=datetime(2024, 1, 10, 9, 0),
        end_date=datetime(2024, 1, 12, 17, 0),
        status="Confirmed",
        course_title="Negotiation Skills",
    )

    record = booking_from_source(booking_payload(row))

    assert record.course_id == str(COURSE_UUID)
    assert (record.start_date, record.end_date) == ("2024-01-10", "2024-01-12")
    assert record.status == "confirmed"
    assert record.title == "Negotiation Skills"


def test_event_row_maps_to_booked_record():
    row = Event(
        id=uuid.uuid4(),
        course_id=COURSE_UUID,
        trainer_id=TRAINER_UUID,
        title="Negotiation Skills",
        event_date=datetime(2024, 1, 10, 9, 0),
        end_date=None,
        status="ACTIVE",
    )

    payload = event_payload(row)
    record = event_to_booking(payload)

    assert payload["courseId"] == str(COURSE_UUID)
    assert record.status == "booked"
    assert record.end_date is None
    assert record.dedup_key == f"{COURSE_UUID}:2024-01-10"


def test_availability_row_maps_to_record():
    row = TrainerAvailability(
        id=uuid.uuid4(),
        trainer_id=TRAINER_UUID,
        date=date(2024, 1, 10),
        status="AVAILABLE",
        start_time="09:00",
        end_time=None,
    )

    record = availability_from_source(availability_payload(row))

    assert record.date == "2024-01-10"
    assert record.status == "available"
    assert (record.start_time, record.end_time) == ("09:00", None)


def test_adapters_read_attributes_from_objects():
    booking = SimpleNamespace(
        id="bk-1",
        course_id="course-a",
        trainer_id="trainer-1",
        requested_date=datetime(2024, 1, 10, 9, 0),
        end_date=None,
        status="Approved",
        title="Negotiation Skills",
    )
    event = SimpleNamespace(id="ev-1", courseId="course-a", trainerId="trainer-1", eventDate="2024-01-11")
    slot = SimpleNamespace(id="av-1", trainerId="trainer-1", date=date(2024, 1, 12), status="Available")

    record = booking_from_source(booking)
    assert (record.start_date, record.status, record.title) == ("2024-01-10", "approved", "Negotiation Skills")

    from_event = event_to_booking(event)
    assert (from_event.start_date, from_event.status, from_event.title) == ("2024-01-11", "booked", None)

    availability = availability_from_source(slot)
    assert (availability.date, availability.status, availability.start_time) == ("2024-01-12", "available", None)


@pytest.mark.asyncio
async def test_malformed_trainer_id_short_circuits_queries():
    db_service = DBService(session=None)

    assert await db_service.get_trainer("not-a-uuid") is None
    assert await db_service.get_blocked_weekdays("not-a-uuid") == []
    assert await db_service.get_booking_requests_in_range("not-a-uuid", date(2024, 1, 1), date(2024, 1, 31)) == []
    assert await db_service.get_active_events_in_range("not-a-uuid", date(2024, 1, 1), date(2024, 1, 31)) == []
    assert await db_service.get_availability_in_range("not-a-uuid", date(2024, 1, 1), date(2024, 1, 31)) == []
    assert await db_service.get_blocked_dates_in_range("not-a-uuid", date(2024, 1, 1), date(2024, 1, 31)) == []
