class CalendarError(Exception):
    """Base class for calendar build failures."""


class InvalidDateRangeError(CalendarError, ValueError):
    """Raised when a requested calendar range is malformed or too long."""


class TrainerNotFoundError(CalendarError, LookupError):
    """Raised when the calendar is requested for an unknown trainer."""

    def __init__(self, trainer_id: str):
        super().__init__(f"Trainer not found: {trainer_id}")
        self.trainer_id = trainer_id


class CalendarBuildError(CalendarError):
    """Raised when one of the upstream reads fails; no partial calendar is built."""
