from trainer_calendar.models.trainer import Trainer
from trainer_calendar.models.booking_request import BookingRequest
from trainer_calendar.models.event import Event
from trainer_calendar.models.availability import TrainerAvailability, TrainerBlockedDate

__all__ = ["Trainer", "BookingRequest", "Event", "TrainerAvailability", "TrainerBlockedDate"]
