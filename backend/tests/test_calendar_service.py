from __future__ import annotations

from datetime import date

import pytest
from tests.utils.calendar_builders import (
    FakeCalendarSource,
    availability_row,
    booking_row,
    event_row,
)

from trainer_calendar.calendar import (
    CalendarBuildError,
    DayStatus,
    InvalidDateRangeError,
    TrainerNotFoundError,
)
from trainer_calendar.services.calendar_service import CalendarService, resolve_range
from trainer_calendar.services.calendar_sources import BlockedDays


@pytest.mark.asyncio
async def test_build_calendar_reads_every_source_for_the_range(trainer_id) -> None:
    source = FakeCalendarSource(
        bookings=[booking_row("bk-1", "2024-03-05", "approved")],
        events=[event_row("ev-1", "2024-03-04")],
        availability=[availability_row("av-1", "2024-03-06", "Available")],
        blocked=BlockedDays(weekdays=[0, 6], dates=["2024-03-07"]),
    )
    service = CalendarService(source)

    calendar = await service.build_calendar(trainer_id, date(2024, 3, 1), date(2024, 3, 31))

    assert sorted(name for name, _, _ in source.calls) == [
        "availability",
        "blocked",
        "bookings",
        "events",
    ]
    assert {(start, end) for _, start, end in source.calls} == {(date(2024, 3, 1), date(2024, 3, 31))}

    assert calendar.trainer_id == trainer_id
    assert (calendar.start, calendar.end) == ("2024-03-01", "2024-03-31")
    assert len(calendar.days) == 31
    assert calendar.leading_blank_days == 5

    days = {day.date: day.status for day in calendar.days}
    assert days["2024-03-04"] is DayStatus.BOOKED
    assert days["2024-03-05"] is DayStatus.TENTATIVE
    assert days["2024-03-06"] is DayStatus.AVAILABLE
    assert days["2024-03-07"] is DayStatus.BLOCKED
    assert days["2024-03-02"] is DayStatus.BLOCKED
    assert days["2024-03-11"] is DayStatus.NOT_AVAILABLE


@pytest.mark.asyncio
@pytest.mark.parametrize("failing", ["bookings", "events", "availability", "blocked"])
async def test_any_failed_read_fails_the_whole_build(trainer_id, failing) -> None:
    source = FakeCalendarSource(fail=failing)
    service = CalendarService(source)

    with pytest.raises(CalendarBuildError) as excinfo:
        await service.build_calendar(trainer_id, date(2024, 3, 1), date(2024, 3, 31))

    assert isinstance(excinfo.value.__cause__, RuntimeError)
    # every read was started before the failure was surfaced
    assert len(source.calls) == 4


@pytest.mark.asyncio
async def test_unknown_trainer_raises_before_fetching(fake_source) -> None:
    service = CalendarService(fake_source)

    with pytest.raises(TrainerNotFoundError):
        await service.build_calendar("missing", date(2024, 3, 1), date(2024, 3, 31))

    assert fake_source.calls == []


@pytest.mark.asyncio
async def test_reversed_range_is_rejected(trainer_id, fake_source) -> None:
    service = CalendarService(fake_source)

    with pytest.raises(InvalidDateRangeError):
        await service.build_calendar(trainer_id, date(2024, 3, 2), date(2024, 3, 1))


@pytest.mark.asyncio
async def test_get_day_returns_single_resolved_day(trainer_id) -> None:
    source = FakeCalendarSource(
        bookings=[booking_row("bk-1", "2024-01-10", "pending", end_date="2024-01-12")],
    )
    service = CalendarService(source)

    day = await service.get_day(trainer_id, date(2024, 1, 11))

    assert day.date == "2024-01-11"
    assert day.status is DayStatus.NOT_AVAILABLE
    assert [b.id for b in day.bookings] == ["bk-1"]


def test_resolve_range_for_month():
    assert resolve_range(year=2024, month=2) == (date(2024, 2, 1), date(2024, 2, 29))


def test_resolve_range_for_explicit_dates():
    assert resolve_range(start="2024-01-10", end="2024-01-12T10:00:00Z") == (
        date(2024, 1, 10),
        date(2024, 1, 12),
    )


def test_resolve_range_defaults_to_current_month():
    start, end = resolve_range()
    today = date.today()

    assert start == today.replace(day=1)
    assert start <= today <= end


@pytest.mark.parametrize(
    "kwargs",
    [
        {"year": 2024},
        {"month": 3},
        {"year": 2024, "month": 13},
        {"year": 2024, "month": 3, "start": "2024-03-01"},
        {"start": "2024-03-01"},
        {"start": "2024-03-10", "end": "2024-03-01"},
        {"start": "March 1st", "end": "2024-03-10"},
        {"start": "2024-01-01", "end": "2024-12-31"},
    ],
)
def test_resolve_range_rejects_bad_arguments(kwargs):
    with pytest.raises(InvalidDateRangeError):
        resolve_range(**kwargs)


def test_resolve_range_honours_max_days():
    assert resolve_range(start="2024-01-01", end="2024-01-07", max_days=7)
    with pytest.raises(InvalidDateRangeError):
        resolve_range(start="2024-01-01", end="2024-01-08", max_days=7)
