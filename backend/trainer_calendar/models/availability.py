from sqlalchemy import Column, Date, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from trainer_calendar.core.database import Base


class TrainerAvailability(Base):
    __tablename__ = "trainer_availability"
    __table_args__ = (
        UniqueConstraint("trainer_id", "date", name="uq_trainer_availability_trainer_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trainer_id = Column(UUID(as_uuid=True), ForeignKey("trainers.id"), nullable=False)

    date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default="available")  # available, not_available, booked, tentative
    start_time = Column(String, nullable=True)  # "HH:MM"
    end_time = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    trainer = relationship("Trainer", backref="availability")

    def __repr__(self):
        return f"<TrainerAvailability(trainer={self.trainer_id}, date={self.date}, status={self.status})>"


class TrainerBlockedDate(Base):
    __tablename__ = "trainer_blocked_dates"
    __table_args__ = (
        UniqueConstraint("trainer_id", "date", name="uq_trainer_blocked_dates_trainer_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trainer_id = Column(UUID(as_uuid=True), ForeignKey("trainers.id"), nullable=False)

    date = Column(Date, nullable=False)
    reason = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    trainer = relationship("Trainer", backref="blocked_dates")

    def __repr__(self):
        return f"<TrainerBlockedDate(trainer={self.trainer_id}, date={self.date})>"
