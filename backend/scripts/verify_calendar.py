from __future__ import annotations

import argparse
import asyncio
import sys
from collections import Counter
from datetime import date
from pathlib import Path

# Ensure the backend project root (the directory containing the "trainer_calendar"
# package) is on sys.path so this script can be executed from the repo root or backend/.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from trainer_calendar.calendar import CalendarError, DayStatus
from trainer_calendar.core.database import engine
from trainer_calendar.services.calendar_service import CalendarService, resolve_range
from trainer_calendar.services.calendar_sources import DatabaseCalendarSource


async def verify_calendar(trainer_id: str, year: int, month: int) -> int:
    """Build a trainer's month calendar from the database and print it.

    Output is a per-status summary followed by one line per day, e.g.:

        2024-03-04 Mon  booked         Python Fundamentals (event)
    """

    service = CalendarService(DatabaseCalendarSource())
    try:
        start, end = resolve_range(year=year, month=month)
        calendar = await service.build_calendar(trainer_id, start, end)
    except CalendarError as e:
        print(f"❌ Could not build calendar: {e}")
        return 1
    finally:
        await engine.dispose()

    counts = Counter(day.status for day in calendar.days)

    print(f"📅 Trainer {trainer_id}: {calendar.start} .. {calendar.end}")
    print("=" * 60)
    for status in DayStatus:
        print(f"   {status.value:<14} {counts.get(status, 0)}")
    print("=" * 60)

    for day in calendar.days:
        weekday = date.fromisoformat(day.date).strftime("%a")
        titles = ", ".join(
            f"{booking.title or booking.course_id} ({booking.source})"
            for booking in day.bookings
        )
        print(f"{day.date} {weekday}  {day.status.value:<14} {titles}".rstrip())

    print(f"\n✅ {len(calendar.days)} days resolved")
    return 0


def parse_args() -> argparse.Namespace:
    today = date.today()
    parser = argparse.ArgumentParser(
        description="Print a trainer's resolved month calendar from the database."
    )
    parser.add_argument("--trainer-id", required=True, help="Trainer UUID")
    parser.add_argument("--year", type=int, default=today.year, help="Calendar year")
    parser.add_argument("--month", type=int, default=today.month, help="Calendar month (1-12)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(verify_calendar(args.trainer_id, args.year, args.month)))


if __name__ == "__main__":
    main()
