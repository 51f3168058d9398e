from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from trainer_calendar.models import (
    BookingRequest,
    Event,
    Trainer,
    TrainerAvailability,
    TrainerBlockedDate,
)
from typing import Optional, List
from datetime import date, datetime, time
import uuid

class DBService:
    """
    Read queries behind the trainer calendar
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # ==================== TRAINERS ====================

    async def get_trainer(self, trainer_id: str) -> Optional[Trainer]:
        """Get trainer by ID"""
        try:
            t_uuid = uuid.UUID(trainer_id)
        except ValueError:
            return None

        result = await self.session.execute(
            select(Trainer).where(Trainer.id == t_uuid)
        )
        return result.scalar_one_or_none()

    async def get_blocked_weekdays(self, trainer_id: str) -> List[int]:
        """Get the trainer's recurring blocked weekdays (0=Sunday)"""
        trainer = await self.get_trainer(trainer_id)
        if not trainer:
            return []
        return list(trainer.blocked_weekdays or [])

    # ==================== BOOKING REQUESTS ====================

    async def get_booking_requests_in_range(
        self,
        trainer_id: str,
        start: date,
        end: date,
    ) -> List[BookingRequest]:
        """Get booking requests that touch any day in [start, end]"""
        try:
            t_uuid = uuid.UUID(trainer_id)
        except ValueError:
            return []

        range_start = datetime.combine(start, time.min)
        range_end = datetime.combine(end, time.max)

        result = await self.session.execute(
            select(BookingRequest)
            .where(
                BookingRequest.trainer_id == t_uuid,
                BookingRequest.requested_date <= range_end,
                or_(
                    BookingRequest.end_date >= range_start,
                    and_(
                        BookingRequest.end_date.is_(None),
                        BookingRequest.requested_date >= range_start,
                    ),
                ),
            )
            .order_by(BookingRequest.requested_date.asc(), BookingRequest.created_at.asc())
        )
        return result.scalars().all()

    # ==================== EVENTS ====================

    async def get_active_events_in_range(
        self,
        trainer_id: str,
        start: date,
        end: date,
    ) -> List[Event]:
        """Get ACTIVE events that touch any day in [start, end]"""
        try:
            t_uuid = uuid.UUID(trainer_id)
        except ValueError:
            return []

        range_start = datetime.combine(start, time.min)
        range_end = datetime.combine(end, time.max)

        result = await self.session.execute(
            select(Event)
            .where(
                Event.trainer_id == t_uuid,
                Event.status == "ACTIVE",
                Event.event_date <= range_end,
                or_(
                    Event.end_date >= range_start,
                    and_(
                        Event.end_date.is_(None),
                        Event.event_date >= range_start,
                    ),
                ),
            )
            .order_by(Event.event_date.asc(), Event.created_at.asc())
        )
        return result.scalars().all()

    # ==================== AVAILABILITY ====================

    async def get_availability_in_range(
        self,
        trainer_id: str,
        start: date,
        end: date,
    ) -> List[TrainerAvailability]:
        """Get per-date availability rows for the trainer"""
        try:
            t_uuid = uuid.UUID(trainer_id)
        except ValueError:
            return []

        result = await self.session.execute(
            select(TrainerAvailability)
            .where(
                TrainerAvailability.trainer_id == t_uuid,
                TrainerAvailability.date >= start,
                TrainerAvailability.date <= end,
            )
            .order_by(TrainerAvailability.date.asc(), TrainerAvailability.updated_at.asc())
        )
        return result.scalars().all()

    async def get_blocked_dates_in_range(
        self,
        trainer_id: str,
        start: date,
        end: date,
    ) -> List[date]:
        """Get explicit one-off blocked dates for the trainer"""
        try:
            t_uuid = uuid.UUID(trainer_id)
        except ValueError:
            return []

        result = await self.session.execute(
            select(TrainerBlockedDate.date)
            .where(
                TrainerBlockedDate.trainer_id == t_uuid,
                TrainerBlockedDate.date >= start,
                TrainerBlockedDate.date <= end,
            )
            .order_by(TrainerBlockedDate.date.asc())
        )
        return list(result.scalars().all())
