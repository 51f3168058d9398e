from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from trainer_calendar.core.database import Base

class BookingRequest(Base):
    __tablename__ = "booking_requests"
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    course_id = Column(UUID(as_uuid=True), nullable=False)
    trainer_id = Column(UUID(as_uuid=True), ForeignKey("trainers.id"), nullable=False)
    
    # Client Info
    client_name = Column(String, nullable=True)
    client_email = Column(String, nullable=True)
    
    # Booking Details
    course_title = Column(String, nullable=True)
    requested_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=True)  # set for multi-day requests
    
    # Status
    status = Column(String, default="pending")  # pending, approved, confirmed, denied, tentative, booked, canceled
    
    notes = Column(Text, nullable=True)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    trainer = relationship("Trainer", backref="booking_requests")
    
    def __repr__(self):
        return f"<BookingRequest(id={self.id}, course={self.course_id}, status={self.status})>"
