from sqlalchemy import Column, String, JSON, DateTime, Boolean
from sqlalchemy.dialects.postgresql import UUID
from datetime import datetime
import uuid
from trainer_calendar.core.database import Base

class Trainer(Base):
    __tablename__ = "trainers"
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    custom_trainer_id = Column(String, unique=True, nullable=True)  # e.g. "TR-0042"
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    
    # Recurring weekly blocks, 0=Sunday .. 6=Saturday
    blocked_weekdays = Column(JSON, default=list)
    
    is_active = Column(Boolean, default=True)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def __repr__(self):
        return f"<Trainer(id={self.id}, name={self.full_name})>"
