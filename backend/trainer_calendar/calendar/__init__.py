"""Trainer calendar day resolution"""

from .adapters import availability_from_source, booking_from_source, event_to_booking
from .builder import (
    CalendarInputs,
    adapt_inputs,
    build_calendar,
    build_calendar_days,
    leading_blank_days,
)
from .dates import (
    SHORT_WEEKDAY_NAMES,
    expand_blocked_weekdays,
    expand_date_range,
    month_date_range,
    normalize_date,
)
from .errors import (
    CalendarBuildError,
    CalendarError,
    InvalidDateRangeError,
    TrainerNotFoundError,
)
from .records import AvailabilityRecord, BookingRecord, CalendarDay, DayStatus
from .resolver import bookings_for_date, deduplicate_bookings, resolve_day_status

__all__ = [
    "AvailabilityRecord",
    "BookingRecord",
    "CalendarBuildError",
    "CalendarDay",
    "CalendarError",
    "CalendarInputs",
    "DayStatus",
    "InvalidDateRangeError",
    "SHORT_WEEKDAY_NAMES",
    "TrainerNotFoundError",
    "adapt_inputs",
    "availability_from_source",
    "booking_from_source",
    "bookings_for_date",
    "build_calendar",
    "build_calendar_days",
    "deduplicate_bookings",
    "event_to_booking",
    "expand_blocked_weekdays",
    "expand_date_range",
    "leading_blank_days",
    "month_date_range",
    "normalize_date",
    "resolve_day_status",
]
