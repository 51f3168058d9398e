from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from trainer_calendar.core.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    course_id = Column(UUID(as_uuid=True), nullable=False)
    trainer_id = Column(UUID(as_uuid=True), ForeignKey("trainers.id"), nullable=False)
    booking_request_id = Column(UUID(as_uuid=True), ForeignKey("booking_requests.id"), nullable=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    venue = Column(String, nullable=True)

    event_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=True)

    status = Column(String, default="ACTIVE")  # ACTIVE, COMPLETED, CANCELLED

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    trainer = relationship("Trainer", backref="events")
    booking_request = relationship("BookingRequest", backref="events")

    def __repr__(self):
        return f"<Event(id={self.id}, title={self.title}, status={self.status})>"
