from sqlalchemy import Column, String, Text, Date, DateTime, Enum, Uuid, func
import enum
import uuid
from config.database import Base


class EventStatus(str, enum.Enum):
    upcoming = "upcoming"
    active   = "active"
    ended    = "ended"


class Event(Base):
    __tablename__ = "events"

    id          = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_name  = Column(String(200), nullable=False)
    event_code  = Column(String(50), nullable=False, unique=True)
    start_date  = Column(Date, nullable=False)
    end_date    = Column(Date, nullable=False)
    location    = Column(String(300), nullable=True)
    description = Column(Text, nullable=True)
    status      = Column(
        Enum(EventStatus, name="event_status_enum"),
        nullable=False,
        default=EventStatus.upcoming,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False,
                        server_default=func.now(), onupdate=func.now())
