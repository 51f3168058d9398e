from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from trainer_calendar.calendar import (
    CalendarBuildError,
    CalendarDay,
    InvalidDateRangeError,
    TrainerNotFoundError,
    adapt_inputs,
    build_calendar_days,
    leading_blank_days,
    month_date_range,
    normalize_date,
)
from trainer_calendar.services.calendar_sources import (
    BlockedDays,
    CalendarSource,
    DatabaseCalendarSource,
)

logger = logging.getLogger(__name__)

MAX_RANGE_DAYS = int(os.getenv("CALENDAR_MAX_RANGE_DAYS", "62"))


@dataclass
class TrainerCalendar:
    trainer_id: str
    start: str
    end: str
    days: List[CalendarDay] = field(default_factory=list)

    @property
    def leading_blank_days(self) -> int:
        return leading_blank_days(self.days)


def resolve_range(
    year: Optional[int] = None,
    month: Optional[int] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    max_days: int = MAX_RANGE_DAYS,
) -> tuple[date, date]:
    """Turn either a year/month pair or an explicit start/end into a date range.

    Raises InvalidDateRangeError when the arguments are mixed, incomplete,
    unreadable, reversed, or span more than ``max_days`` days.
    """
    month_given = year is not None or month is not None
    range_given = start is not None or end is not None

    if month_given and range_given:
        raise InvalidDateRangeError("Use either year/month or start/end, not both")

    if month_given:
        if year is None or month is None:
            raise InvalidDateRangeError("Both year and month are required")
        if not 1 <= month <= 12:
            raise InvalidDateRangeError("Month must be between 1 and 12")
        if not 1 <= year <= 9999:
            raise InvalidDateRangeError("Year is out of range")
        first, last = month_date_range(year, month)
        return date.fromisoformat(first), date.fromisoformat(last)

    if not range_given:
        today = date.today()
        first, last = month_date_range(today.year, today.month)
        return date.fromisoformat(first), date.fromisoformat(last)

    if start is None or end is None:
        raise InvalidDateRangeError("Both start and end are required")

    start_str = normalize_date(start)
    end_str = normalize_date(end)
    if start_str is None or end_str is None:
        raise InvalidDateRangeError("Invalid date format; expected YYYY-MM-DD")

    start_day = date.fromisoformat(start_str)
    end_day = date.fromisoformat(end_str)
    if end_day < start_day:
        raise InvalidDateRangeError("End date is before start date")
    if (end_day - start_day).days + 1 > max_days:
        raise InvalidDateRangeError(f"Range is longer than {max_days} days")
    return start_day, end_day


class CalendarService:
    """
    Builds a trainer's calendar from the four upstream reads
    """

    def __init__(self, source: CalendarSource):
        self.source = source

    async def build_calendar(self, trainer_id: str, start: date, end: date) -> TrainerCalendar:
        if end < start:
            raise InvalidDateRangeError("End date is before start date")

        trainer = await self.source.get_trainer(trainer_id)
        if not trainer:
            raise TrainerNotFoundError(trainer_id)

        results = await asyncio.gather(
            self.source.fetch_bookings(trainer_id, start, end),
            self.source.fetch_events(trainer_id, start, end),
            self.source.fetch_availability(trainer_id, start, end),
            self.source.fetch_blocked_days(trainer_id, start, end),
            return_exceptions=True,
        )

        for name, result in zip(("bookings", "events", "availability", "blocked days"), results):
            if isinstance(result, Exception):
                logger.error(f"Failed to fetch {name} for trainer {trainer_id}: {result}")
                raise CalendarBuildError(
                    f"Could not load {name} for trainer {trainer_id}"
                ) from result
            if isinstance(result, BaseException):
                raise result

        bookings, events, availability, blocked = results
        blocked = blocked or BlockedDays()

        inputs = adapt_inputs(bookings or [], events or [], availability or [])
        if inputs.dropped:
            logger.debug(
                f"Dropped {inputs.dropped} record(s) with unreadable dates for trainer {trainer_id}"
            )

        days = build_calendar_days(
            start,
            end,
            bookings=inputs.bookings,
            event_bookings=inputs.event_bookings,
            availability=inputs.availability,
            blocked_weekdays=blocked.weekdays,
            blocked_dates=blocked.dates,
        )
        logger.info(
            f"Built calendar for trainer {trainer_id} "
            f"{start.isoformat()}..{end.isoformat()} ({len(days)} days)"
        )
        return TrainerCalendar(
            trainer_id=trainer_id,
            start=start.isoformat(),
            end=end.isoformat(),
            days=days,
        )

    async def get_day(self, trainer_id: str, day: date) -> CalendarDay:
        calendar = await self.build_calendar(trainer_id, day, day)
        return calendar.days[0]


def get_calendar_service() -> CalendarService:
    """FastAPI dependency: calendar service over the primary database."""
    return CalendarService(DatabaseCalendarSource())
