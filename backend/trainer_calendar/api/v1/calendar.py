from __future__ import annotations

import logging
from datetime import date
from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from trainer_calendar.calendar import (
    SHORT_WEEKDAY_NAMES,
    BookingRecord,
    CalendarBuildError,
    CalendarDay,
    InvalidDateRangeError,
    TrainerNotFoundError,
    normalize_date,
)
from trainer_calendar.services.calendar_service import (
    CalendarService,
    get_calendar_service,
    resolve_range,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calendar"])


class CalendarBookingOut(BaseModel):
    id: str
    course_id: str
    title: Optional[str] = None
    status: str
    start_date: str
    end_date: Optional[str] = None
    source: str


class CalendarDayOut(BaseModel):
    date: str
    status: str
    is_blocked: bool
    availability_status: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    bookings: List[CalendarBookingOut] = Field(default_factory=list)


class TrainerCalendarOut(BaseModel):
    trainer_id: str
    start: str
    end: str
    leading_blank_days: int
    weekday_names: List[str]
    days: List[CalendarDayOut]


def _booking_out(booking: BookingRecord) -> CalendarBookingOut:
    return CalendarBookingOut(
        id=booking.id,
        course_id=booking.course_id,
        title=booking.title,
        status=booking.status,
        start_date=booking.start_date,
        end_date=booking.end_date,
        source=booking.source,
    )


def _day_out(day: CalendarDay) -> CalendarDayOut:
    availability = day.availability
    return CalendarDayOut(
        date=day.date,
        status=day.status.value,
        is_blocked=day.is_blocked,
        availability_status=day.availability_status,
        start_time=availability.start_time if availability else None,
        end_time=availability.end_time if availability else None,
        bookings=[_booking_out(b) for b in day.bookings],
    )


def _raise_for_calendar_error(trainer_id: str, exc: Exception) -> NoReturn:
    if isinstance(exc, TrainerNotFoundError):
        raise HTTPException(status_code=404, detail="Trainer not found")
    if isinstance(exc, InvalidDateRangeError):
        raise HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, CalendarBuildError):
        logger.error(f"Calendar build failed for trainer {trainer_id}: {exc}")
        raise HTTPException(status_code=503, detail="Calendar data is temporarily unavailable")
    raise exc


@router.get("/trainers/{trainer_id}/calendar", response_model=TrainerCalendarOut)
async def get_trainer_calendar(
    trainer_id: str,
    year: Optional[int] = Query(None, description="Year, used together with month"),
    month: Optional[int] = Query(None, description="Month (1-12)"),
    start: Optional[str] = Query(None, description="Range start, YYYY-MM-DD"),
    end: Optional[str] = Query(None, description="Range end, YYYY-MM-DD (inclusive)"),
    service: CalendarService = Depends(get_calendar_service),
):
    """Resolved calendar for a trainer: one entry per day with its display status.

    Defaults to the current month when no range is given.
    """
    try:
        range_start, range_end = resolve_range(year=year, month=month, start=start, end=end)
        calendar = await service.build_calendar(trainer_id, range_start, range_end)
    except (TrainerNotFoundError, InvalidDateRangeError, CalendarBuildError) as exc:
        _raise_for_calendar_error(trainer_id, exc)

    return TrainerCalendarOut(
        trainer_id=calendar.trainer_id,
        start=calendar.start,
        end=calendar.end,
        leading_blank_days=calendar.leading_blank_days,
        weekday_names=list(SHORT_WEEKDAY_NAMES),
        days=[_day_out(day) for day in calendar.days],
    )


@router.get("/trainers/{trainer_id}/calendar/{day}", response_model=CalendarDayOut)
async def get_trainer_calendar_day(
    trainer_id: str,
    day: str,
    service: CalendarService = Depends(get_calendar_service),
):
    """Detail for a single day (the bookings behind a clicked calendar cell)."""
    normalized = normalize_date(day)
    if normalized is None:
        raise HTTPException(status_code=400, detail="Invalid date format; expected YYYY-MM-DD")

    try:
        calendar_day = await service.get_day(trainer_id, date.fromisoformat(normalized))
    except (TrainerNotFoundError, InvalidDateRangeError, CalendarBuildError) as exc:
        _raise_for_calendar_error(trainer_id, exc)

    return _day_out(calendar_day)
